"""Turns a plugin command's positional tokens into a fully-resolved radar query."""

from __future__ import annotations

import logging
import re
from typing import Sequence

from tile_radar.models import Defaults, Query, SearchKind

_INT_RE = re.compile(r"[+-]?[0-9]+")

_ALIASES = {
    "eventidless": SearchKind.EVENT_LESS_THAN,
    "terrainid": SearchKind.TERRAIN_TAG_EQUALS,
}
_COMMANDS = {kind.command_name.lower(): kind for kind in SearchKind} | _ALIASES

_BASE_FIELDS = ("target", "x", "y", "radius")
_LAYER_FIELDS = ("target", "x", "y", "layer", "radius")

logger = logging.getLogger("tile_radar.resolver")


class CommandError(ValueError):
    """Raised when a radar command cannot be resolved into a query."""


class TokenParseError(CommandError):
    def __init__(self, field_name: str, token: str) -> None:
        super().__init__(f"Expected an integer for {field_name}, got {token!r}")
        self.field_name = field_name
        self.token = token


class PartialCoordinateError(CommandError):
    """Only one of the X/Y pair was supplied."""


class InvalidRadiusError(CommandError):
    """A negative radius was supplied."""


def lookup_kind(command_name: str) -> SearchKind | None:
    """Map a plugin command name to its search kind; ``None`` for foreign commands."""
    return _COMMANDS.get(command_name.strip().lower())


def field_names(kind: SearchKind) -> tuple[str, ...]:
    return _LAYER_FIELDS if kind.uses_layer else _BASE_FIELDS


def resolve_query(
    kind: SearchKind,
    raw_args: Sequence[str],
    defaults: Defaults,
    current_center: tuple[int, int],
) -> Query:
    """Resolve positional tokens, falling back to defaults for skipped or missing fields.

    Target, layer and radius fall back to ``defaults``; X and Y fall back to
    ``current_center`` and must be overridden together.
    """
    names = field_names(kind)
    if len(raw_args) > len(names):
        logger.debug(
            "radar_extra_tokens_ignored",
            extra={"kind": kind.command_name, "extra_tokens": list(raw_args[len(names) :])},
        )
    supplied = {
        name: _parse_token(name, raw_args[index])
        for index, name in enumerate(names)
        if index < len(raw_args) and raw_args[index] != defaults.placeholder
    }

    has_x, has_y = "x" in supplied, "y" in supplied
    if has_x != has_y:
        given, missing = ("X", "Y") if has_x else ("Y", "X")
        raise PartialCoordinateError(
            f"{kind.command_name}: {given} was supplied without {missing}; "
            "override both coordinates or neither"
        )
    center_x, center_y = (supplied["x"], supplied["y"]) if has_x else current_center

    radius = supplied.get("radius", defaults.radius)
    if radius < 0:
        raise InvalidRadiusError(f"{kind.command_name}: radius must be >= 0, got {radius}")

    return Query(
        kind=kind,
        target_value=supplied.get("target", defaults.targets[kind]),
        center_x=center_x,
        center_y=center_y,
        layer=supplied.get("layer", defaults.layer),
        radius=radius,
    )


def is_integer_token(token: str) -> bool:
    return _INT_RE.fullmatch(token) is not None


def _parse_token(field_name: str, token: str) -> int:
    if not is_integer_token(token):
        raise TokenParseError(field_name, token)
    return int(token)
