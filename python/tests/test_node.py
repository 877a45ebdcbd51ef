"""Search tree tests — lazy expansion, draining, equality and paths."""

from __future__ import annotations

import pytest

from backend.engine.gamesolver.node import Node, SearchTree
from backend.models.board import Board, IllegalMoveError, Move, Tile
from backend.models.coordinate import Coordinate, Direction

STATE4 = Board.from_pairs([(0, 0), (0, 2), (0, 4), (2, 0), (2, 3)])
NEAR_GOAL = Board.from_pairs([(1, 1), (0, 0), (0, 2), (2, 0), (2, 3)])


def test_root_captures_legal_moves() -> None:
    tree = SearchTree()
    root = tree.add_root(Board())
    node = tree[root]

    assert node.pending == {Tile.SQUARE: Direction.DOWN, Tile.BOTTOMRIGHT: Direction.RIGHT}
    assert node.parent is None
    assert node.move is None
    assert node.direction is None
    assert node.is_root
    assert tree.has_next_child(root)


@pytest.mark.parametrize(
    "board",
    [Board(), STATE4, NEAR_GOAL],
    ids=["start", "state4", "near-goal"],
)
def test_node_drains_exactly_its_pending_moves(board: Board) -> None:
    tree = SearchTree()
    root = tree.add_root(board)
    k = len(board.legal_moves())

    children = [tree.next_child(root) for _ in range(k)]

    assert all(child is not None for child in children)
    assert not tree.has_next_child(root)
    assert tree.next_child(root) is None
    assert len(tree) == k + 1


def test_children_follow_ascending_tile_order() -> None:
    tree = SearchTree()
    root = tree.add_root(Board())

    first = tree.next_child(root)
    second = tree.next_child(root)
    assert first is not None and second is not None

    assert tree[first].move == Move(Tile.SQUARE, Direction.DOWN)
    assert tree[first].state.position(Tile.SQUARE) == Coordinate(1, 4)
    assert tree[first].parent == root
    assert tree[second].move == Move(Tile.BOTTOMRIGHT, Direction.RIGHT)
    assert tree[second].direction is Direction.RIGHT


def test_expansion_leaves_parent_state_alone() -> None:
    tree = SearchTree()
    root = tree.add_root(Board())
    tree.next_child(root)
    assert tree[root].state == Board()


def test_stale_pending_move_yields_nothing_once() -> None:
    tree = SearchTree()
    root = tree.add_root(Board())
    tree[root].pending = {
        Tile.TOPLEFT: Direction.UP,
        Tile.BOTTOMRIGHT: Direction.RIGHT,
    }

    assert tree.next_child(root) is None
    child = tree.next_child(root)
    assert child is not None
    assert tree[child].move == Move(Tile.BOTTOMRIGHT, Direction.RIGHT)
    assert not tree.has_next_child(root)


def test_nodes_compare_by_state_only() -> None:
    moved = Board().move(Tile.SQUARE, Direction.DOWN)
    a = Node(Board())
    b = Node(Board(), parent=3, move=Move(Tile.SQUARE, Direction.UP))
    c = Node(moved)

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_path_and_depth() -> None:
    tree = SearchTree()
    root = tree.add_root(Board())
    child = tree.next_child(root)
    assert child is not None
    # Only the square can move from here, and it keeps sliding down.
    assert tree[child].pending == {Tile.SQUARE: Direction.DOWN}
    grandchild = tree.next_child(child)
    assert grandchild is not None

    assert tree.path(grandchild) == [
        Move(Tile.SQUARE, Direction.DOWN),
        Move(Tile.SQUARE, Direction.DOWN),
    ]
    assert tree.depth(grandchild) == 2
    assert tree.depth(root) == 0
    assert tree.path(root) == []
    assert tree.parent(grandchild) == child
    assert tree[grandchild].state.position(Tile.SQUARE) == Coordinate(2, 4)


def test_str_shows_direction() -> None:
    tree = SearchTree()
    root = tree.add_root(Board())
    child = tree.next_child(root)
    assert child is not None
    assert str(tree[root]) == str(Board())
    assert str(tree[child]).startswith("down [")


def test_add_child_reaches_directions_legal_moves_drops() -> None:
    tree = SearchTree()
    root = tree.add_root(STATE4)
    assert tree[root].pending[Tile.BOTTOMRIGHT] is Direction.LEFT

    child = tree.add_child(root, Move(Tile.BOTTOMRIGHT, Direction.UP))

    assert tree.parent(child) == root
    assert tree.path(child) == [Move(Tile.BOTTOMRIGHT, Direction.UP)]
    assert tree[child].state == STATE4.move(Tile.BOTTOMRIGHT, Direction.UP)
    # Seeding a child leaves the lazy queue untouched.
    assert tree[root].pending == STATE4.legal_moves()


def test_add_child_rejects_illegal_move() -> None:
    tree = SearchTree()
    root = tree.add_root(Board())
    with pytest.raises(IllegalMoveError):
        tree.add_child(root, Move(Tile.TOPLEFT, Direction.UP))
    assert len(tree) == 1
