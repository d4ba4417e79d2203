"""
Core Services Package

Pure line status classification and message processing.
"""

from .line_status_service import (
    messages_from_statuses,
    messages_from_disruptions,
    deduplicate_messages,
    determine_worst_severity,
    determine_aggregate_status,
    summarize_line,
    summarize_line_status_response,
)

__all__ = [
    'messages_from_statuses',
    'messages_from_disruptions',
    'deduplicate_messages',
    'determine_worst_severity',
    'determine_aggregate_status',
    'summarize_line',
    'summarize_line_status_response',
]
