"""
Data models for the Tube Times helper.

This module contains the TfL line status structures and the
severity-to-status mapping.
"""

from .tube_data import (
    TubeStatus,
    Disruption,
    LineStatus,
    Line,
    StandardizedMessage,
    LineStatusSummary,
    map_status_severity,
)

__all__ = [
    "TubeStatus",
    "Disruption",
    "LineStatus",
    "Line",
    "StandardizedMessage",
    "LineStatusSummary",
    "map_status_severity",
]
