"""Search tree over board states.

Nodes live in a :class:`SearchTree` arena and refer to their parent by an
integer handle.  Each node captures the legal moves of its board when it is
created and hands them out one at a time through
:meth:`SearchTree.next_child`, so a driver can expand the tree lazily and
backtrack simply by moving on to another handle.  Solvers that need every
successor, not just one direction per tile, seed children explicitly with
:meth:`SearchTree.add_child`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from backend.models.board import Board, Move, Tile
from backend.models.coordinate import Direction

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """A board snapshot plus the moves still to be tried from it.

    Two nodes are equal when their boards are equal; the parent handle and
    the move that produced the node play no part, which makes nodes usable
    as visited-set keys.
    """

    state: Board
    parent: int | None = None
    move: Move | None = None
    pending: dict[Tile, Direction] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.pending = self.state.legal_moves()

    @property
    def direction(self) -> Direction | None:
        return self.move.direction if self.move is not None else None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def has_next_child(self) -> bool:
        return bool(self.pending)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.state == other.state

    def __hash__(self) -> int:
        return hash(self.state)

    def __str__(self) -> str:
        if self.move is None:
            return str(self.state)
        return f"{self.move.direction.value} {self.state}"


class SearchTree:
    """Arena of :class:`Node` objects addressed by integer handles."""

    def __init__(self) -> None:
        self._nodes: list[Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, handle: int) -> Node:
        return self._nodes[handle]

    # -- construction ---------------------------------------------------------

    def add_root(self, state: Board) -> int:
        return self._add(Node(state))

    def add_child(self, handle: int, move: Move) -> int:
        """Apply *move* to the board at *handle* and store the result as its child.

        Unlike :meth:`next_child` this accepts any legal move, including the
        directions ``legal_moves()`` drops.  Raises ``IllegalMoveError``
        when *move* does not apply.
        """
        state = self._nodes[handle].state.apply(move)
        return self._add(Node(state, parent=handle, move=move))

    def _add(self, node: Node) -> int:
        self._nodes.append(node)
        return len(self._nodes) - 1

    # -- expansion ------------------------------------------------------------

    def has_next_child(self, handle: int) -> bool:
        return self._nodes[handle].has_next_child()

    def next_child(self, handle: int) -> int | None:
        """Expand one pending move of *handle* and return the child's handle.

        Pending moves are consumed in ascending tile order.  Returns ``None``
        when nothing is pending, or when the popped move no longer applies to
        the node's board; in that case the caller may simply ask again.
        """
        node = self._nodes[handle]
        if not node.pending:
            return None

        tile = next(iter(node.pending))
        direction = node.pending.pop(tile)

        if not node.state.can_move(tile, direction):
            logger.debug("Discarding stale move %s %s at node %d", tile.name, direction.value, handle)
            return None

        child = Node(
            node.state.move(tile, direction),
            parent=handle,
            move=Move(tile, direction),
        )
        return self._add(child)

    # -- path reconstruction --------------------------------------------------

    def parent(self, handle: int) -> int | None:
        return self._nodes[handle].parent

    def depth(self, handle: int) -> int:
        depth = 0
        current = self._nodes[handle].parent
        while current is not None:
            depth += 1
            current = self._nodes[current].parent
        return depth

    def path(self, handle: int) -> list[Move]:
        """Return the moves leading from the root to *handle*."""
        moves: list[Move] = []
        current: int | None = handle
        while current is not None:
            node = self._nodes[current]
            if node.move is not None:
                moves.append(node.move)
            current = node.parent
        moves.reverse()
        return moves
