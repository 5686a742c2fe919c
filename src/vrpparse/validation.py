"""Non-fatal checks applied to a structurally valid instance.

None of these checks reject a file: the grammar accepts all of these cases,
so they are reported as `ParseWarning` values and logged.
"""
import logging
from typing import List, Sequence, Tuple

from .config.parameters import Parameters
from .models import NodeRecord, ParseWarning, VehicleSummary, WarningKind

logger = logging.getLogger(__name__)


def check_vehicle_summary(summary: VehicleSummary) -> List[ParseWarning]:
    warnings = []
    if summary.vehicle_count <= 0:
        warnings.append(ParseWarning(
            WarningKind.NON_POSITIVE_VEHICLE_COUNT,
            summary.line,
            f"vehicle count is {summary.vehicle_count}",
        ))
    if summary.capacity <= 0:
        warnings.append(ParseWarning(
            WarningKind.NON_POSITIVE_CAPACITY,
            summary.line,
            f"vehicle capacity is {summary.capacity}",
        ))
    return warnings


def check_row_widths(nodes: Sequence[NodeRecord]) -> List[ParseWarning]:
    """Flag the first row whose width differs from the first row's width."""
    width = nodes[0].field_count
    for node in nodes[1:]:
        if node.field_count != width:
            return [ParseWarning(
                WarningKind.MIXED_ROW_WIDTHS,
                node.line,
                f"node {node.id} has {node.field_count} fields but the first row has {width}",
            )]
    return []


def check_node_ids(nodes: Sequence[NodeRecord]) -> List[ParseWarning]:
    """Flag node ids that do not match their 0-based row position."""
    misplaced = [(i, node) for i, node in enumerate(nodes) if node.id != i]
    if not misplaced:
        return []
    position, node = misplaced[0]
    return [ParseWarning(
        WarningKind.NON_SEQUENTIAL_IDS,
        node.line,
        f"{len(misplaced)} node(s) have ids that differ from their position, "
        f"first is id {node.id} at position {position}",
    )]


def validate(
    summary: VehicleSummary,
    nodes: Sequence[NodeRecord],
    params: Parameters,
) -> Tuple[ParseWarning, ...]:
    """Run all checks enabled in ``params`` and log what they find."""
    warnings = check_vehicle_summary(summary)
    if params.warn_mixed_row_widths:
        warnings.extend(check_row_widths(nodes))
    if params.warn_non_sequential_ids:
        warnings.extend(check_node_ids(nodes))

    for warning in warnings:
        logger.warning(f"Line {warning.line}: {warning.message}")
    return tuple(warnings)
