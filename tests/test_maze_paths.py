import pytest

from mazegen.maze import Grid, NotInTree, SortedTree, Tree, TreeEntry, build_path_tree
from tests.maze_test_utils import adjacent_pairs, bfs


def open_all(w, h):
    g = Grid(w, h)
    for a, b in adjacent_pairs(g):
        g.open(a, b)
    return g


def test_tree_append_and_search():
    t = Tree()
    t.append(7, None, 0)
    t.append(3, 7, 1)
    assert len(t) == 2
    assert t.root == TreeEntry(7, None, 0)
    assert t.search(3).parent == 7
    assert t.search(99) is None


def test_open_grid_distances_are_manhattan():
    g = open_all(5, 4)
    exit_index = 2
    tree = build_path_tree(g, exit_index)
    assert len(tree) == 20
    st = SortedTree.from_tree(tree)
    for i in range(20):
        x, y = i % 5, i // 5
        assert st.distance(i) == abs(x - 2) + y


def test_discovery_order_nondecreasing_and_root_first():
    g = open_all(6, 6)
    tree = build_path_tree(g, 35)
    entries = list(tree)
    assert entries[0] == TreeEntry(35, None, 0)
    dists = [e.distance for e in entries]
    assert dists == sorted(dists)
    assert len({e.index for e in entries}) == 36


def test_sorted_tree_is_sorted_and_same_entries():
    g = open_all(4, 4)
    tree = build_path_tree(g, 5)
    st = SortedTree.from_tree(tree)
    keys = [e.index for e in st]
    assert keys == sorted(keys)
    assert set(st) == set(tree)
    assert st.root == tree.root
    assert not hasattr(st, "append")


def test_parents_are_open_neighbors_one_step_closer():
    g = open_all(7, 5)
    st = SortedTree.from_tree(build_path_tree(g, 0))
    for e in st:
        if e.parent is None:
            assert e.index == 0
            continue
        assert g.is_open(e.index, e.parent)
        assert st.distance(e.parent) == e.distance - 1


def test_unreachable_tiles_absent():
    g = Grid(3, 3)
    # Only a corridor along the top row; the rest stays sealed.
    g.open(0, 1)
    g.open(1, 2)
    st = SortedTree.from_tree(build_path_tree(g, 0))
    assert len(st) == 3
    assert 4 not in st
    with pytest.raises(NotInTree) as exc:
        st.lookup(4)
    assert exc.value.index == 4


@pytest.mark.parametrize("index", [-1, 9, 10_000])
def test_out_of_range_lookup_not_in_tree(index):
    g = open_all(3, 3)
    st = SortedTree.from_tree(build_path_tree(g, 4))
    with pytest.raises(NotInTree):
        st.lookup(index)
    assert index not in st


def test_cycle_picks_shortest_route():
    # A ring of 8 tiles around a sealed center: two routes, the tree must
    # use the shorter one.
    g = Grid(3, 3)
    ring = [0, 1, 2, 5, 8, 7, 6, 3]
    for a, b in zip(ring, ring[1:] + ring[:1]):
        g.open(a, b)
    st = SortedTree.from_tree(build_path_tree(g, 0))
    assert st.distance(8) == 4
    assert st.distance(3) == 1
    assert st.distance(2) == 2
    assert 4 not in st
    ref = bfs(g, 0)
    assert {e.index: e.distance for e in st} == ref


def test_path_to_root():
    g = open_all(4, 3)
    st = SortedTree.from_tree(build_path_tree(g, 0))
    path = st.path_to_root(11)
    assert path[0] == 11 and path[-1] == 0
    assert len(path) - 1 == st.distance(11)
    assert st.path_to_root(0) == [0]
    assert st.max_distance() == 5
