"""AWS session, client and error handling."""
