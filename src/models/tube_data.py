"""
Tube data models for the Tube Times helper.
Author: Oliver Ernster

This module contains immutable data classes for TfL line status
information and the severity-to-status mapping used by the display.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class TubeStatus(Enum):
    """Aggregate status shown for a line."""
    GOOD = "good"
    WARNING = "warning"
    SEVERE = "severe"


# TfL statusSeverity codes
GOOD_SERVICE_SEVERITY = 10
GOOD_SEVERITIES = frozenset({10, 18, 19})  # Good Service, No Issues, Information
SEVERE_SEVERITIES = frozenset({1, 2, 3, 6, 16, 20})


def map_status_severity(status_severity: int) -> TubeStatus:
    """
    Map a TfL statusSeverity code to a TubeStatus.

    Args:
        status_severity: Numeric severity level (0-20)

    Returns:
        TubeStatus: GOOD, SEVERE, or WARNING for every other code
    """
    if status_severity in GOOD_SEVERITIES:
        return TubeStatus.GOOD

    if status_severity in SEVERE_SEVERITIES:
        return TubeStatus.SEVERE

    # 12 (Exit Only) and 13 (No Step Free Access) are station-specific
    return TubeStatus.WARNING


def _text(value: Any) -> str:
    """Coerce an optional JSON string field to str."""
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class Disruption:
    """Immutable disruption, either top-level on a line or nested in a status."""
    category: str = ""
    category_description: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Disruption":
        """Create a Disruption from a TfL JSON object."""
        if not isinstance(data, dict):
            raise ValueError(f"Invalid disruption entry: {data!r}")
        return cls(
            category=_text(data.get("category")),
            category_description=_text(data.get("categoryDescription")),
            description=_text(data.get("description")),
        )


@dataclass(frozen=True)
class LineStatus:
    """
    Immutable status entry for a line.

    A line carries one or more of these; each has its own severity and
    may reference a nested disruption.
    """
    status_severity: int
    status_severity_description: str = ""
    reason: str = ""
    disruption: Optional[Disruption] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineStatus":
        """Create a LineStatus from a TfL JSON object."""
        if not isinstance(data, dict):
            raise ValueError(f"Invalid line status entry: {data!r}")

        severity = data.get("statusSeverity", 0)
        if isinstance(severity, bool) or not isinstance(severity, int):
            raise ValueError(f"Invalid statusSeverity: {severity!r}")

        nested = data.get("disruption")
        return cls(
            status_severity=severity,
            status_severity_description=_text(data.get("statusSeverityDescription")),
            reason=_text(data.get("reason")),
            disruption=Disruption.from_dict(nested) if nested else None,
        )

    @property
    def tube_status(self) -> TubeStatus:
        """Get this entry's severity as a TubeStatus."""
        return map_status_severity(self.status_severity)

    @property
    def is_good(self) -> bool:
        """Check if this entry reports good service."""
        return self.status_severity in GOOD_SEVERITIES


@dataclass(frozen=True)
class Line:
    """Immutable line entity with its statuses and top-level disruptions."""
    id: str = ""
    name: str = ""
    line_statuses: List[LineStatus] = field(default_factory=list)
    disruptions: List[Disruption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Line":
        """Create a Line from a TfL JSON object."""
        if not isinstance(data, dict):
            raise ValueError(f"Invalid line entry: {data!r}")

        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            line_statuses=[
                LineStatus.from_dict(entry) for entry in data.get("lineStatuses") or []
            ],
            disruptions=[
                Disruption.from_dict(entry) for entry in data.get("disruptions") or []
            ],
        )


@dataclass(frozen=True)
class StandardizedMessage:
    """Unified message built from a line status or a disruption."""
    text: str
    severity: int = 0
    severity_description: str = ""
    category: str = ""
    category_description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Get the display representation."""
        return {
            "text": self.text,
            "severity": self.severity,
            "severityDescription": self.severity_description,
            "category": self.category,
            "categoryDescription": self.category_description,
        }


@dataclass(frozen=True)
class LineStatusSummary:
    """Compact line status handed to the display layer."""
    status: TubeStatus = TubeStatus.GOOD
    status_description: Optional[str] = None
    messages: List[StandardizedMessage] = field(default_factory=list)

    @classmethod
    def default(cls, status: TubeStatus = TubeStatus.GOOD) -> "LineStatusSummary":
        """Create a summary with no description and no messages."""
        return cls(status=status, status_description=None, messages=[])

    @property
    def message_texts(self) -> List[str]:
        """Get the text of each message in order."""
        return [message.text for message in self.messages]

    def to_dict(self) -> Dict[str, Any]:
        """Get the display representation."""
        return {
            "status": self.status.value,
            "statusDescription": self.status_description,
            "messages": [message.to_dict() for message in self.messages],
        }
