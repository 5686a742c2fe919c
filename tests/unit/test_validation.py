import logging
import pytest

from vrpparse.config.parameters import Parameters
from vrpparse.models import NodeRecord, VehicleSummary, WarningKind
from vrpparse.validation import (
    check_node_ids,
    check_row_widths,
    check_vehicle_summary,
    validate,
)


def _nodes(*rows):
    return [NodeRecord(*row, line=line) for line, row in enumerate(rows, start=10)]


@pytest.mark.parametrize("vehicles, capacity, kinds", [
    (25, 200, []),
    (0, 200, [WarningKind.NON_POSITIVE_VEHICLE_COUNT]),
    (25, -1, [WarningKind.NON_POSITIVE_CAPACITY]),
    (-3, 0, [WarningKind.NON_POSITIVE_VEHICLE_COUNT, WarningKind.NON_POSITIVE_CAPACITY]),
])
def test_check_vehicle_summary(vehicles, capacity, kinds):
    warnings = check_vehicle_summary(VehicleSummary(vehicles, capacity, 5))
    assert [w.kind for w in warnings] == kinds
    assert all(w.line == 5 for w in warnings)


def test_check_row_widths_reports_first_mismatch():
    nodes = _nodes(
        (0, 0, 0, 0, 0, 100, 0),
        (1, 1, 1, 1, 0, 100, 0),
        (2, 2, 2, 1, 0, 100, 0, 0, 3),
        (3, 3, 3, 1, 0, 100, 0, 2, 0),
    )
    warnings = check_row_widths(nodes)
    assert len(warnings) == 1
    assert warnings[0].kind is WarningKind.MIXED_ROW_WIDTHS
    assert warnings[0].line == 12
    assert check_row_widths(nodes[:2]) == []


def test_check_node_ids():
    assert check_node_ids(_nodes((0, 0, 0, 0, 0, 1, 0), (1, 0, 0, 0, 0, 1, 0))) == []
    warnings = check_node_ids(_nodes((1, 0, 0, 0, 0, 1, 0), (2, 0, 0, 0, 0, 1, 0)))
    assert len(warnings) == 1
    assert warnings[0].kind is WarningKind.NON_SEQUENTIAL_IDS
    assert warnings[0].line == 10
    assert "2 node(s)" in warnings[0].message


def test_validate_respects_parameters_and_logs(caplog):
    summary = VehicleSummary(0, 10, 1)
    nodes = _nodes((5, 0, 0, 0, 0, 1, 0), (6, 0, 0, 0, 0, 1, 0, 0, 0))

    caplog.set_level(logging.WARNING)
    warnings = validate(summary, nodes, Parameters())
    assert {w.kind for w in warnings} == {
        WarningKind.NON_POSITIVE_VEHICLE_COUNT,
        WarningKind.MIXED_ROW_WIDTHS,
        WarningKind.NON_SEQUENTIAL_IDS,
    }
    assert isinstance(warnings, tuple)
    assert sum(rec[0] == 'vrpparse.validation' for rec in caplog.record_tuples) == 3

    quiet = Parameters(warn_mixed_row_widths=False, warn_non_sequential_ids=False)
    warnings = validate(summary, nodes, quiet)
    assert [w.kind for w in warnings] == [WarningKind.NON_POSITIVE_VEHICLE_COUNT]
