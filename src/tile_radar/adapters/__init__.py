"""Host-engine collaborators (variables, map reads, follow-up actions)."""

from .grid_map import GridMap, MapDocument, MapEvent, MapLoadError, load_map
from .host import ActionDispatcher, MapQueryService, VariableStore
from .memory import InMemoryVariableStore, RecordingActionDispatcher

__all__ = [
    "ActionDispatcher",
    "GridMap",
    "InMemoryVariableStore",
    "MapDocument",
    "MapEvent",
    "MapLoadError",
    "MapQueryService",
    "RecordingActionDispatcher",
    "VariableStore",
    "load_map",
]
