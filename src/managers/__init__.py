"""
Managers for the Tube Times helper.

This module contains configuration management and the request
handler that answers display notifications.
"""

from .tube_config import TubeConfig, TubeConfigFactory, ConfigurationError
# Note: TubeTimesHelper not imported here to avoid circular import with tfl_api_manager

__all__ = [
    "TubeConfig",
    "TubeConfigFactory",
    "ConfigurationError",
    # "TubeTimesHelper",  # Import directly when needed to avoid circular import
]
