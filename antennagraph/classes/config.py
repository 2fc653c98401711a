from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidArgumentError


@dataclass(frozen=True)
class GridConfig:
    """
    Controls how a text map is read and how adjacency weights are assigned.

    Passed explicitly to the facade, the grid loader and the edge store.
    """

    empty_marker: str = "."
    orthogonal_weight: float = 1.0
    diagonal_weight: float = 1.414
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not isinstance(self.empty_marker, str) or len(self.empty_marker) != 1:
            raise InvalidArgumentError(
                f"empty_marker must be a single character, got {self.empty_marker!r}"
            )
        if self.orthogonal_weight <= 0 or self.diagonal_weight <= 0:
            raise InvalidArgumentError("Edge weights must be positive")
