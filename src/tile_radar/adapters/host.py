"""Boundary for the host engine services a radar command reads from and writes to."""

from typing import Protocol


class VariableStore(Protocol):
    """Numbered game variables; two of them hold the current scan center."""

    def get_variable(self, slot: int) -> int:
        """Return the integer stored in ``slot``."""


class MapQueryService(Protocol):
    """Per-cell map reads. Out-of-bounds coordinates return ``OUT_OF_BOUNDS``."""

    def event_id_at(self, x: int, y: int) -> int: ...

    def terrain_tag_at(self, x: int, y: int) -> int: ...

    def tile_id_at(self, x: int, y: int, layer: int) -> int: ...

    def region_id_at(self, x: int, y: int) -> int: ...


class ActionDispatcher(Protocol):
    """Schedules follow-up actions (common events) by id."""

    def reserve_action(self, action_id: int) -> None:
        """Queue one run of ``action_id``; fire-and-forget."""
