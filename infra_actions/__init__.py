"""Infra Actions - Root Package.

Event-triggered AWS Lambda handlers that translate a small JSON event into a
single call against an AWS infrastructure API and relay the result.

Key Components:
    - api: Lambda entry points and the handler classes behind them
    - config: Default configuration, environment overrides and validation
    - domain: Event models, job states and validation errors
    - infrastructure: AWS session/client construction and error translation
    - helpers: Logging setup

Each handler opens a fresh provider session, issues one request and returns.
There are no retries, no polling and no persistent state.
"""

from ._version import __version__

__package_name__ = "infra-actions"
