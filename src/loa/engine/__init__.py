"""Engine package: search models and the simulation search."""

from loa.engine.search import (
    DEFAULT_MAX_NODES,
    DEFAULT_TURN_BUDGET,
    MOVE_TO_TIME_FACTOR,
    IEngine,
    SearchLimits,
    SearchOutcome,
    SearchResult,
)
from loa.engine.simulation_search import SimulationSearchEngine

DefaultEngine: type[IEngine] = SimulationSearchEngine

__all__ = [
    "DEFAULT_MAX_NODES",
    "DEFAULT_TURN_BUDGET",
    "DefaultEngine",
    "IEngine",
    "MOVE_TO_TIME_FACTOR",
    "SearchLimits",
    "SearchOutcome",
    "SearchResult",
    "SimulationSearchEngine",
]
