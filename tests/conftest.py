"""
Global pytest configuration and fixtures.
"""

import warnings
import pytest

from src.managers.tube_config import TubeConfig

# Suppress RuntimeWarnings globally at the Python level
warnings.filterwarnings("ignore", category=RuntimeWarning)
warnings.filterwarnings("ignore", message="coroutine 'AsyncMockMixin._execute_mock_call' was never awaited")


def pytest_configure(config):
    """Configure pytest to suppress RuntimeWarnings."""
    warnings.filterwarnings("ignore", category=RuntimeWarning)
    warnings.filterwarnings("ignore", message=".*AsyncMockMixin.*was never awaited.*")


@pytest.fixture(autouse=True)
def suppress_runtime_warnings():
    """Automatically suppress RuntimeWarnings for all tests."""
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", category=RuntimeWarning)
        yield


@pytest.fixture
def test_config():
    """Provide a test configuration."""
    return TubeConfig(
        api_base_url="https://api.tfl.gov.uk",
        stop_point_id="940GZZLUKSX",
        line_id="northern",
    )


@pytest.fixture
def sample_arrivals():
    """Provide a TfL StopPoint arrivals response."""
    return [
        {
            "$type": "Tfl.Api.Presentation.Entities.Prediction, Tfl.Api.Presentation.Entities",
            "id": "-1125407839",
            "operationType": 1,
            "vehicleId": "204",
            "naptanId": "940GZZLUKSX",
            "stationName": "King's Cross St. Pancras Underground Station",
            "lineId": "northern",
            "lineName": "Northern",
            "platformName": "Northbound - Platform 7",
            "direction": "outbound",
            "destinationName": "High Barnet Underground Station",
            "timestamp": "2025-03-01T12:00:00.1234567Z",
            "timeToStation": 120,
            "currentLocation": "At Euston",
            "towards": "High Barnet via Bank",
            "expectedArrival": "2025-03-01T12:02:00Z",
            "timeToLive": "2025-03-01T12:02:00Z",
            "modeName": "tube",
        },
        {
            "$type": "Tfl.Api.Presentation.Entities.Prediction, Tfl.Api.Presentation.Entities",
            "id": "1982561041",
            "operationType": 1,
            "vehicleId": "011",
            "naptanId": "940GZZLUKSX",
            "stationName": "King's Cross St. Pancras Underground Station",
            "lineId": "northern",
            "lineName": "Northern",
            "platformName": "Southbound - Platform 8",
            "direction": "inbound",
            "destinationName": "Morden Underground Station",
            "timestamp": "2025-03-01T12:00:00.1234567Z",
            "timeToStation": 300,
            "currentLocation": "Approaching Angel",
            "towards": "Morden via Bank",
            "expectedArrival": "2025-03-01T12:05:00Z",
            "timeToLive": "2025-03-01T12:05:00Z",
            "modeName": "tube",
        },
    ]


@pytest.fixture
def good_service_response():
    """Provide a Line/Status response for a line with good service."""
    return [
        {
            "$type": "Tfl.Api.Presentation.Entities.Line, Tfl.Api.Presentation.Entities",
            "id": "northern",
            "name": "Northern",
            "modeName": "tube",
            "disruptions": [],
            "lineStatuses": [
                {
                    "$type": "Tfl.Api.Presentation.Entities.LineStatus, Tfl.Api.Presentation.Entities",
                    "id": 0,
                    "statusSeverity": 10,
                    "statusSeverityDescription": "Good Service",
                    "created": "0001-01-01T00:00:00",
                    "validityPeriods": [],
                }
            ],
        }
    ]


@pytest.fixture
def disrupted_response():
    """Provide a Line/Status response with mixed statuses and disruptions."""
    return [
        {
            "id": "northern",
            "name": "Northern",
            "modeName": "tube",
            "disruptions": [
                {
                    "category": "RealTime",
                    "categoryDescription": "RealTime",
                    "description": "Signal failure at Camden Town.",
                },
                {
                    "category": "PlannedWork",
                    "categoryDescription": "PlannedWork",
                    "description": "Minor delays between Camden Town and Edgware.",
                },
            ],
            "lineStatuses": [
                {
                    "lineId": "northern",
                    "statusSeverity": 9,
                    "statusSeverityDescription": "Minor Delays",
                    "reason": "Minor delays between Camden Town and Edgware.",
                    "disruption": {
                        "category": "RealTime",
                        "categoryDescription": "RealTime",
                        "description": "Minor delays between Camden Town and Edgware.",
                    },
                },
                {
                    "lineId": "northern",
                    "statusSeverity": 6,
                    "statusSeverityDescription": "Severe Delays",
                    "reason": "",
                    "disruption": {
                        "category": "RealTime",
                        "categoryDescription": "RealTime",
                        "description": "Severe delays on the Bank branch.",
                    },
                },
            ],
        }
    ]
