"""
Line status service.
Author: Oliver Ernster

Classifies the aggregate severity of a TfL line and merges its status
reasons and disruption descriptions into a deduplicated message list.
"""

import logging
from typing import Any, Dict, Iterable, List

from ...models.tube_data import (
    Disruption,
    GOOD_SERVICE_SEVERITY,
    GOOD_SEVERITIES,
    Line,
    LineStatus,
    LineStatusSummary,
    StandardizedMessage,
    TubeStatus,
    map_status_severity,
)

logger = logging.getLogger(__name__)


def messages_from_statuses(line_statuses: Iterable[LineStatus]) -> List[StandardizedMessage]:
    """
    Build messages from line status entries.

    An entry contributes when it has a reason or a nested disruption with a
    description. The reason takes precedence as the message text.
    """
    messages = []
    for status in line_statuses:
        nested = status.disruption
        nested_description = nested.description if nested else ""
        if not (status.reason or nested_description):
            continue

        messages.append(
            StandardizedMessage(
                text=status.reason or nested_description,
                severity=status.status_severity,
                severity_description=status.status_severity_description,
                category=nested.category if nested else "",
                category_description=nested.category_description if nested else "",
            )
        )
    return messages


def messages_from_disruptions(disruptions: Iterable[Disruption]) -> List[StandardizedMessage]:
    """Build messages from top-level disruptions, which carry no severity."""
    return [
        StandardizedMessage(
            text=disruption.description,
            severity=0,
            severity_description="",
            category=disruption.category,
            category_description=disruption.category_description,
        )
        for disruption in disruptions
        if disruption.description
    ]


def deduplicate_messages(messages: Iterable[StandardizedMessage]) -> List[StandardizedMessage]:
    """Keep the first message for each text, dropping messages without text."""
    unique: Dict[str, StandardizedMessage] = {}
    for message in messages:
        if message.text and message.text not in unique:
            unique[message.text] = message
    return list(unique.values())


def determine_worst_severity(line_statuses: Iterable[LineStatus]) -> int:
    """
    Pick the worst severity across the status entries.

    Good severities are ignored; of the rest the numerically smallest wins.
    Returns GOOD_SERVICE_SEVERITY when every entry is good.
    """
    worst_severity = GOOD_SERVICE_SEVERITY
    for status in line_statuses:
        severity = status.status_severity
        if severity in GOOD_SEVERITIES:
            continue
        if severity < worst_severity or worst_severity == GOOD_SERVICE_SEVERITY:
            worst_severity = severity
    return worst_severity


def determine_aggregate_status(line_statuses: List[LineStatus]) -> TubeStatus:
    """Get the aggregate TubeStatus for a line's status entries."""
    if not line_statuses:
        return TubeStatus.GOOD
    return map_status_severity(determine_worst_severity(line_statuses))


def summarize_line(line: Line) -> LineStatusSummary:
    """
    Build the display summary for a single line.

    Args:
        line: Parsed line entity

    Returns:
        LineStatusSummary: Aggregate status, description and unique messages
    """
    combined_messages = deduplicate_messages(
        messages_from_statuses(line.line_statuses)
        + messages_from_disruptions(line.disruptions)
    )

    status = determine_aggregate_status(line.line_statuses)

    # Description comes from the first entry, not the one that set the status
    status_description = None
    if status != TubeStatus.GOOD:
        status_description = line.line_statuses[0].status_severity_description

    logger.debug(f"Combined messages for {line.id or 'line'}: {combined_messages}")
    logger.debug(f"Tube status for {line.id or 'line'}: {status.value}")

    return LineStatusSummary(
        status=status,
        status_description=status_description,
        messages=combined_messages,
    )


def summarize_line_status_response(data: Any) -> LineStatusSummary:
    """
    Summarize a TfL Line/Status response body.

    Only the first line in the array is considered.

    Raises:
        ValueError: If the body is not an array of line objects
    """
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of lines, got {type(data).__name__}")

    if not data:
        # The API always returns the requested line
        logger.warning("Line status response contained no lines")
        return LineStatusSummary.default(TubeStatus.GOOD)

    return summarize_line(Line.from_dict(data[0]))
