"""
Core Package

Core services for line status processing.
"""

from .services import summarize_line, summarize_line_status_response

__all__ = [
    'summarize_line',
    'summarize_line_status_response',
]
