from __future__ import annotations

import logging
from dataclasses import dataclass, field


@dataclass(slots=True)
class InMemoryVariableStore:
    """Dict-backed variable store. Unset slots read as 0."""

    values: dict[int, int] = field(default_factory=dict)

    def get_variable(self, slot: int) -> int:
        return self.values.get(slot, 0)

    def set_variable(self, slot: int, value: int) -> None:
        self.values[slot] = value


class RecordingActionDispatcher:
    """Keeps reserved action ids in order; used by the CLI and tests."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.reserved: list[int] = []
        self._logger = logger or logging.getLogger("tile_radar.adapters.memory")

    def reserve_action(self, action_id: int) -> None:
        self.reserved.append(action_id)
        self._logger.info("action_reserved", extra={"action_id": action_id, "pending": len(self.reserved)})
