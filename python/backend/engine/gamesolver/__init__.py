from backend.engine.gamesolver.node import Node, SearchTree
from backend.engine.gamesolver.solver import DEFAULT_CONFIG, Solver, SolverConfig, Strategy

__all__ = ["DEFAULT_CONFIG", "Node", "SearchTree", "Solver", "SolverConfig", "Strategy"]
