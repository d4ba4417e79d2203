"""
Tube Times helper

Fetches live TfL arrivals and line status and reshapes them for a
display frontend.

Features:
- Raw stop point arrivals
- Aggregate line status (good, warning, severe)
- Deduplicated disruption messages
"""

__version__ = "2.0.0"
__author__ = "Oliver Ernster"
__description__ = "Tube Times TfL helper"
