"""Statistics collected during traffic assignment runs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AllOrNothingAssignmentStats:
    """Checksums and running times of an iterative all-or-nothing assignment."""

    num_od_pairs: int
    last_checksum: int = 0
    total_checksum: int = 0
    last_distances: list[int] = field(init=False)
    max_change_in_distances: float = 0.0
    avg_change_in_distances: float = 0.0
    last_customization_time: int = 0
    last_query_time: int = 0
    last_routing_time: int = 0
    total_preprocessing_time: int = 0
    total_customization_time: int = 0
    total_query_time: int = 0
    total_routing_time: int = 0
    num_iterations: int = 0

    def __post_init__(self) -> None:
        self.last_distances = [-1] * self.num_od_pairs

    def start_iteration(self) -> None:
        """Reset the values from the last iteration."""
        self.last_checksum = 0
        self.max_change_in_distances = 0.0
        self.avg_change_in_distances = 0.0

    def finish_iteration(self) -> None:
        """Add the values from the last iteration to the totals."""
        self.last_routing_time = self.last_customization_time + self.last_query_time
        self.total_checksum += self.last_checksum
        self.total_customization_time += self.last_customization_time
        self.total_query_time += self.last_query_time
        self.total_routing_time += self.last_routing_time


@dataclass
class FrankWolfeAssignmentStats:
    """Times and solution quality of a Frank-Wolfe assignment."""

    obj_function_value: float = 0.0
    total_travel_cost: float = 0.0
    last_line_search_time: int = 0
    last_running_time: int = 0
    total_line_search_time: int = 0
    total_running_time: int = 0

    def start_iteration(self) -> None:
        """Reset the values from the last iteration."""
        self.total_travel_cost = 0.0

    def finish_iteration(self) -> None:
        """Add the values from the last iteration to the totals."""
        self.total_line_search_time += self.last_line_search_time
        self.total_running_time += self.last_running_time