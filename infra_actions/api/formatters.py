"""
Formatting functions for describe handler output.

This module handles presentation formatting for the describe handlers:
- JSON summaries of provider responses
- ASCII tables of per-instance details for the diagnostic log
"""

import json
from typing import Any, Dict, List


def format_summary(data: Any) -> str:
    """Format a provider response as an indented JSON summary."""
    return json.dumps(data, indent=2, default=str)


def format_instances_table(reservations: List[Dict[str, Any]]) -> str:
    """Format the instances of a describe_instances response as a table."""
    rows = []
    for reservation in reservations:
        for instance in reservation.get("Instances", []):
            rows.append([
                instance.get("InstanceId", "N/A"),
                instance.get("InstanceType", "N/A"),
                str(instance.get("LaunchTime", "N/A")),
                instance.get("PublicIpAddress", "N/A"),
            ])

    if not rows:
        return "No instances found."

    headers = ["Instance ID", "Type", "Launch Time", "Public IP"]
    return _format_table_with_headers(headers, rows)


def format_instance_status_table(statuses: List[Dict[str, Any]]) -> str:
    """Format a describe_instance_status response as a table."""
    if not statuses:
        return "No instances found."

    headers = ["Instance ID", "State", "Instance Status", "System Status"]
    rows = [
        [
            status.get("InstanceId", "N/A"),
            status.get("InstanceState", {}).get("Name", "N/A"),
            status.get("InstanceStatus", {}).get("Status", "N/A"),
            status.get("SystemStatus", {}).get("Status", "N/A"),
        ]
        for status in statuses
    ]
    return _format_table_with_headers(headers, rows)


def _format_table_with_headers(headers: List[str], rows: List[List[str]]) -> str:
    """Format data as ASCII table with headers."""
    all_rows = [headers] + rows
    widths = [max(len(str(row[i])) for row in all_rows) for i in range(len(headers))]

    def format_row(row):
        return "| " + " | ".join(str(row[i]).ljust(widths[i]) for i in range(len(row))) + " |"

    separator = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    lines = [separator, format_row(headers), separator]
    lines.extend(format_row(row) for row in rows)
    lines.append(separator)
    return "\n".join(lines)
