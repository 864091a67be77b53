"""Solver algorithms for the tour evolution problem."""

from .genetic import EvolutionEngine, EngineState, RunResult, evolve

__all__ = ["EvolutionEngine", "EngineState", "RunResult", "evolve"]
