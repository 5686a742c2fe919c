import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Set, Tuple


class WarningKind(Enum):
    """Non-fatal findings reported alongside a successful parse."""
    MIXED_ROW_WIDTHS = "mixed_row_widths"
    NON_POSITIVE_VEHICLE_COUNT = "non_positive_vehicle_count"
    NON_POSITIVE_CAPACITY = "non_positive_capacity"
    NON_SEQUENTIAL_IDS = "non_sequential_ids"


class VehicleSummary(NamedTuple):
    """Fleet size and capacity as read from the summary line."""
    vehicle_count: int
    capacity: int
    line: int


@dataclass(frozen=True)
class ParseWarning:
    """A validation finding that does not abort the parse."""
    kind: WarningKind
    line: int
    message: str


@dataclass(frozen=True)
class NodeRecord:
    """One data row: a depot or customer with its time window.

    The pickup/delivery indices only appear on rows of pickup-and-delivery
    instances and are always set together.
    """
    id: int
    x: int
    y: int
    demand: int
    ready_time: int
    due_date: int
    service_time: int
    pickup_index: Optional[int] = None
    delivery_index: Optional[int] = None
    line: int = field(default=0, compare=False, repr=False)

    def __post_init__(self):
        if (self.pickup_index is None) != (self.delivery_index is None):
            raise ValueError(
                f"Node {self.id}: pickup and delivery indices must be given together. "
                f"Got: pickup_index={self.pickup_index}, delivery_index={self.delivery_index}"
            )

    @property
    def field_count(self) -> int:
        return 7 if self.pickup_index is None else 9

    @property
    def pickup_delivery(self) -> Optional[Tuple[int, int]]:
        if self.pickup_index is None:
            return None
        return self.pickup_index, self.delivery_index

    def dist(self, other: 'NodeRecord') -> float:
        """Euclidean distance between two nodes."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Instance:
    """Container for a parsed routing instance."""
    name: Optional[str]
    vehicle_count: int
    capacity: int
    nodes: Tuple[NodeRecord, ...]
    warnings: Tuple[ParseWarning, ...] = ()

    def __post_init__(self):
        if not self.nodes:
            raise ValueError(f"Instance {self.name or '<unnamed>'} must have at least one node")

    @property
    def row_count(self) -> int:
        return len(self.nodes)

    @property
    def is_pdp(self) -> bool:
        """Whether this is a pickup-and-delivery instance (decided by the first row)."""
        return self.nodes[0].pickup_delivery is not None

    @property
    def depot(self) -> NodeRecord:
        return self.nodes[0]

    def customers(self) -> List[NodeRecord]:
        """Return all nodes except the depot row."""
        return list(self.nodes[1:])

    def node_widths(self) -> Set[int]:
        return {node.field_count for node in self.nodes}
