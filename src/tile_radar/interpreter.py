"""Plugin-command hook: resolve a radar command, scan the map, reserve the follow-up action."""

from __future__ import annotations

import logging
from typing import Sequence

from tile_radar.adapters.host import ActionDispatcher, MapQueryService, VariableStore
from tile_radar.models import Defaults, Match, Query
from tile_radar.resolver import CommandError, lookup_kind, resolve_query
from tile_radar.scanner import scan


class RadarInterpreter:
    """Runs radar commands against host collaborators, one synchronous scan per call."""

    def __init__(
        self,
        defaults: Defaults,
        *,
        variables: VariableStore,
        maps: MapQueryService,
        dispatcher: ActionDispatcher,
        logger: logging.Logger | None = None,
    ) -> None:
        self._defaults = defaults
        self._variables = variables
        self._maps = maps
        self._dispatcher = dispatcher
        self._logger = logger or logging.getLogger("tile_radar.interpreter")

    @property
    def defaults(self) -> Defaults:
        return self._defaults

    def current_center(self) -> tuple[int, int]:
        return (
            self._variables.get_variable(self._defaults.x_variable),
            self._variables.get_variable(self._defaults.y_variable),
        )

    def run_line(self, line: str) -> Match | None:
        """Run a whitespace-separated command line such as ``tileID 1 x x 0``."""
        tokens = line.split()
        if not tokens:
            return None
        return self.plugin_command(tokens[0], tokens[1:])

    def plugin_command(self, command: str, args: Sequence[str]) -> Match | None:
        """Handle one host plugin command; foreign commands are ignored."""
        kind = lookup_kind(command)
        if kind is None:
            self._logger.debug("radar_command_ignored", extra={"command": command})
            return None

        try:
            query = resolve_query(kind, list(args), self._defaults, self.current_center())
        except CommandError as exc:
            self._logger.warning(
                "radar_command_rejected",
                extra={"command": command, "command_args": list(args), "error": str(exc)},
            )
            return None

        return self.execute(query)

    def execute(self, query: Query) -> Match | None:
        """Scan for a resolved query and reserve its action on the first match."""
        self._logger.info(
            "radar_scan_started",
            extra={
                "kind": query.kind.command_name,
                "center": (query.center_x, query.center_y),
                "radius": query.radius,
                "target": query.target_value,
            },
        )
        match = scan(query, self._maps)
        if match is None:
            self._logger.info("radar_no_match", extra={"kind": query.kind.command_name})
            return None

        action_id = self._defaults.actions[query.kind]
        self._logger.info(
            "radar_match",
            extra={
                "kind": query.kind.command_name,
                "coordinate": match.coordinate,
                "observed": match.observed,
                "action_id": action_id,
            },
        )
        self._dispatcher.reserve_action(action_id)
        return match
