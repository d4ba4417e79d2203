"""
Version information for Tube Times.
Author: Oliver Ernster

Centralized version management for the helper, including TfL API
provider details used by the HTTP client and configuration defaults.
"""

# Core application information
__version__ = "2.0.0"
__version_info__ = (2, 0, 0)
__app_name__ = "TubeTimes"
__app_display_name__ = "Tube Times - Live TfL Arrivals & Line Status"
__author__ = "Oliver Ernster"
__copyright__ = "© 2025 Oliver Ernster"
__description__ = "Live London Underground arrivals and line status for display frontends"

# Feature information
__features__ = [
    "Live stop point arrivals",
    "Aggregate line status classification",
    "Deduplicated disruption messages",
    "No API key required for basic usage",
]

# TfL API information
__tfl_api_provider__ = "Transport for London Unified API"
__tfl_api_url__ = "https://api.tfl.gov.uk"

# License information
__license__ = "MIT"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_name__} v{__version__}"


def get_user_agent() -> str:
    """Get the User-Agent header sent with API requests."""
    return f"{__app_name__}/{__version__}"


def get_tfl_info() -> dict:
    """Get TfL integration information."""
    return {
        "version": __version__,
        "provider": __tfl_api_provider__,
        "api_url": __tfl_api_url__,
        "features": __features__,
        "api_key_required": False,
    }
