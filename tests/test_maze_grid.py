import pytest

from mazegen.maze import Direction, Grid, InvalidDimensions, NotAdjacent
from mazegen.maze.tiles import ALL_WALLS
from tests.maze_test_utils import adjacent_pairs


@pytest.mark.parametrize("w,h", [(2, 5), (5, 2), (0, 0), (101, 10), (10, 101), (-3, 3)])
def test_invalid_dimensions_rejected(w, h):
    with pytest.raises(InvalidDimensions) as exc:
        Grid(w, h)
    assert exc.value.width == w and exc.value.height == h


@pytest.mark.parametrize("w,h", [(3.0, 3), (True, 5), ("5", 5)])
def test_non_integer_dimensions_rejected(w, h):
    with pytest.raises(InvalidDimensions):
        Grid(w, h)


@pytest.mark.parametrize("w,h", [(3, 3), (100, 100), (3, 100), (100, 3)])
def test_boundary_sizes_accepted_and_fully_walled(w, h):
    g = Grid(w, h)
    assert len(g) == w * h
    assert all(t.walls == ALL_WALLS and not t.room for t in g)


def test_neighbors_counts_and_directions():
    g = Grid(4, 3)
    # corner
    assert sorted(g.neighbors(0)) == [(1, Direction.EAST), (4, Direction.SOUTH)]
    # top edge
    assert len(g.neighbors(1)) == 3
    # interior
    n5 = dict((d, i) for i, d in g.neighbors(5))
    assert n5 == {Direction.NORTH: 1, Direction.EAST: 6, Direction.SOUTH: 9, Direction.WEST: 4}
    # bottom-right corner
    assert sorted(i for i, _ in g.neighbors(11)) == [7, 10]


def test_row_wrap_is_not_adjacent():
    g = Grid(4, 3)
    # index 3 ends row 0, index 4 starts row 1
    with pytest.raises(NotAdjacent):
        g.open(3, 4)
    with pytest.raises(NotAdjacent):
        g.is_open(4, 3)


@pytest.mark.parametrize("a,b", [(0, 0), (0, 2), (0, 5), (5, 0)])
def test_non_adjacent_pairs_raise(a, b):
    g = Grid(4, 3)
    with pytest.raises(NotAdjacent) as exc:
        g.open(a, b)
    assert (exc.value.a, exc.value.b) == (a, b)


def test_open_clears_facing_bits_on_both_tiles():
    g = Grid(3, 3)
    g.open(4, 5)
    assert not g[4].has_wall(Direction.EAST)
    assert not g[5].has_wall(Direction.WEST)
    assert g[4].walls == ALL_WALLS & ~int(Direction.EAST)
    g.open(4, 1)
    assert not g[4].has_wall(Direction.NORTH)
    assert not g[1].has_wall(Direction.SOUTH)
    # reopening is a no-op
    before = g.wall_masks()
    g.open(5, 4)
    assert g.wall_masks() == before


def test_is_open_symmetric_after_mixed_opens():
    g = Grid(5, 4)
    for a, b in [(0, 1), (1, 6), (6, 7), (12, 17), (18, 13)]:
        g.open(a, b)
    for a, b in adjacent_pairs(g):
        assert g.is_open(a, b) == g.is_open(b, a)


def test_out_of_range_index():
    g = Grid(3, 3)
    with pytest.raises(IndexError):
        g.tile(9)
    with pytest.raises(IndexError):
        g.neighbors(-1)
    with pytest.raises(IndexError):
        g.index_of(3, 0)


def test_coords_roundtrip_and_boundary():
    g = Grid(5, 4)
    assert g.coords(13) == (3, 2)
    assert g.index_of(3, 2) == 13
    assert g.is_boundary(0) and g.is_boundary(4) and g.is_boundary(19)
    assert not g.is_boundary(6)
    assert g.start_index == 2 * 5 + 2


def test_open_edge_count_and_open_neighbors():
    g = Grid(3, 3)
    assert g.open_edge_count() == 0
    g.open(0, 1)
    g.open(1, 4)
    assert g.open_edge_count() == 2
    assert sorted(g.open_neighbors(1)) == [0, 4]


def test_copy_is_independent():
    g = Grid(3, 3)
    c = g.copy()
    c.open(0, 1)
    assert g[0].walls == ALL_WALLS
    assert c[0].walls != ALL_WALLS
