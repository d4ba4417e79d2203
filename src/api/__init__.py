"""
API integration for the Tube Times helper.

This module handles communication with the TfL Unified API,
including error handling and response parsing.
"""

__all__ = []
