"""Corner slide puzzle solver.

Brute force over the search tree in :mod:`backend.engine.gamesolver.node`:
breadth-first for a shortest sequence, or iterative deepening depth-first
when memory matters more than speed.  Children are seeded from
``Board.moves()`` through ``SearchTree.add_child`` so that every legal
direction of every tile is explored; ``Board.legal_moves()`` keeps only one
direction per tile and cannot reach the goal from the starting layout.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

from backend.engine.gamesolver.node import Node, SearchTree
from backend.models.board import Board, Move

logger = logging.getLogger(__name__)


class Strategy(StrEnum):
    bfs = "bfs"
    dfs = "dfs"


@dataclass(frozen=True)
class SolverConfig:
    """Traversal policy and limits (immutable).

    Attributes:
        strategy: ``bfs`` for breadth-first, ``dfs`` for iterative deepening
        max_depth: Longest move sequence considered
        max_nodes: Upper bound on nodes created by one solve, summed over
            every pass of iterative deepening
    """

    strategy: Strategy = Strategy.bfs
    max_depth: int = 60
    max_nodes: int = 200_000

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}.")
        if self.max_nodes < 1:
            raise ValueError(f"max_nodes must be >= 1, got {self.max_nodes}.")


DEFAULT_CONFIG = SolverConfig()


class _Pass(NamedTuple):
    """Outcome of one depth-limited pass."""

    moves: list[Move] | None
    created: int
    cut_off: bool


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board, config: SolverConfig = DEFAULT_CONFIG) -> list[Move]:
        """Return a move sequence that solves *board*, or ``[]`` if none is found."""
        if board.is_goal():
            return []

        if config.strategy is Strategy.dfs:
            moves = Solver._iterative_deepening(board, config)
        else:
            moves = Solver._breadth_first(board, config)

        if moves is None:
            logger.info("No solution within depth %d for %s", config.max_depth, board)
            return []
        logger.info("Solved %s in %d moves (%s)", board, len(moves), config.strategy.value)
        return moves

    @staticmethod
    def hint(board: Board, config: SolverConfig = DEFAULT_CONFIG) -> Move | None:
        """Return the first move of a solution, or ``None`` if solved / unsolvable."""
        if board.is_goal():
            return None
        moves = Solver.solve(board, config)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board, config: SolverConfig = DEFAULT_CONFIG) -> bool:
        """Return True if *board* can reach a goal arrangement within the limits."""
        return board.is_goal() or bool(Solver.solve(board, config))

    # -- traversal policies ---------------------------------------------------

    @staticmethod
    def _breadth_first(board: Board, config: SolverConfig) -> list[Move] | None:
        tree = SearchTree()
        root = tree.add_root(board)
        visited: set[Node] = {tree[root]}
        frontier: deque[int] = deque([root])

        while frontier:
            handle = frontier.popleft()
            if tree.depth(handle) >= config.max_depth:
                continue

            for move in tree[handle].state.moves():
                child = tree.add_child(handle, move)
                node = tree[child]
                if node in visited:
                    continue
                if node.state.is_goal():
                    return tree.path(child)
                visited.add(node)
                frontier.append(child)

            if len(tree) >= config.max_nodes:
                logger.warning("Breadth-first search stopped after %d nodes", len(tree))
                return None

        logger.debug("Breadth-first search exhausted %d states", len(visited))
        return None

    @staticmethod
    def _iterative_deepening(board: Board, config: SolverConfig) -> list[Move] | None:
        budget = config.max_nodes
        for limit in range(1, config.max_depth + 1):
            result = Solver._depth_limited(board, limit, budget)
            if result.moves is not None:
                return result.moves

            budget -= result.created
            if budget <= 0:
                logger.warning(
                    "Iterative deepening stopped at depth limit %d after %d nodes",
                    limit, config.max_nodes,
                )
                return None
            if not result.cut_off:
                # Nothing reached the limit, so deeper passes would repeat this one.
                logger.debug("All reachable states lie within depth %d", limit)
                return None
        return None

    @staticmethod
    def _depth_limited(board: Board, limit: int, budget: int) -> _Pass:
        tree = SearchTree()
        root = tree.add_root(board)
        shallowest: dict[Board, int] = {board: 0}
        stack: list[tuple[int, Iterator[Move]]] = [(root, iter(board.moves()))]
        cut_off = False

        while stack:
            handle, successors = stack[-1]
            move = next(successors, None)
            if move is None:
                stack.pop()
                continue

            if len(tree) - 1 >= budget:
                return _Pass(None, len(tree) - 1, cut_off)

            depth = len(stack)
            child = tree.add_child(handle, move)
            state = tree[child].state
            if shallowest.get(state, depth + 1) <= depth:
                continue
            shallowest[state] = depth

            if state.is_goal():
                return _Pass(tree.path(child), len(tree) - 1, cut_off)
            if depth == limit:
                cut_off = True
                continue
            stack.append((child, iter(state.moves())))

        logger.debug("Depth limit %d exhausted after %d nodes", limit, len(tree))
        return _Pass(None, len(tree) - 1, cut_off)
