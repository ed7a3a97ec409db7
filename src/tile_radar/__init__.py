"""Radar scans over tile maps."""

from .interpreter import RadarInterpreter
from .models import OUT_OF_BOUNDS, CellSample, Defaults, Match, Query, SearchKind
from .resolver import CommandError, PartialCoordinateError, TokenParseError, lookup_kind, resolve_query
from .scanner import neighborhood, scan

__all__ = [
    "OUT_OF_BOUNDS",
    "CellSample",
    "CommandError",
    "Defaults",
    "Match",
    "PartialCoordinateError",
    "Query",
    "RadarInterpreter",
    "SearchKind",
    "TokenParseError",
    "lookup_kind",
    "neighborhood",
    "resolve_query",
    "scan",
]
