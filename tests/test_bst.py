import pytest

from ftkit.bst import BinarySearchTree


def numeric(a, b):
    return (a > b) - (a < b)


def by_key(a, b):
    return numeric(a[0], b[0])


@pytest.fixture
def tree():
    return BinarySearchTree(numeric, [5, 3, 8, 1, 4])


def test_infix_is_sorted(tree):
    assert list(tree.iter_infix()) == [1, 3, 4, 5, 8]
    assert list(tree) == sorted([5, 3, 8, 1, 4])


def test_prefix_order(tree):
    assert list(tree.iter_prefix()) == [5, 3, 1, 4, 8]


def test_suffix_order(tree):
    assert list(tree.iter_suffix()) == [1, 4, 3, 8, 5]


def test_level_count(tree):
    assert tree.level_count() == 2


def test_single_node_has_level_zero():
    assert BinarySearchTree(numeric, [7]).level_count() == 0


def test_level_count_of_empty_tree_raises():
    with pytest.raises(ValueError):
        BinarySearchTree(numeric).level_count()


def test_len_counts_pushed_items(tree):
    assert len(tree) == 5
    tree.push(6)
    assert len(tree) == 6
    assert 6 in list(tree)


def test_find_returns_stored_item():
    first = (2, "first")
    second = (2, "second")
    items = [(1, "a"), first, (3, "c"), second]
    found_tree = BinarySearchTree(by_key, items)
    assert found_tree.find((3, None)) == (3, "c")
    assert found_tree.find((9, None)) is None


def test_equal_items_go_left():
    first = (1, "first")
    second = (1, "second")
    dup_tree = BinarySearchTree(by_key, [first, second])
    assert list(dup_tree.iter_infix()) == [second, first]
    assert dup_tree.find((1, None)) is second


def test_find_in_empty_tree():
    assert BinarySearchTree(numeric).find(1) is None


def test_empty_tree_iterates_nothing():
    empty = BinarySearchTree(numeric)
    assert list(empty.iter_prefix()) == []
    assert list(empty.iter_infix()) == []
    assert list(empty.iter_suffix()) == []
    assert not empty


def test_clear_deletes_in_suffix_order(tree):
    expected = list(tree.iter_suffix())
    deleted = []
    tree.clear(deleted.append)
    assert deleted == expected
    assert len(tree) == 0
    assert list(tree) == []


def test_clear_without_delete_empties(tree):
    tree.clear()
    assert not tree
    tree.push(10)
    assert list(tree) == [10]


def test_degenerate_tree_does_not_recurse():
    items = list(range(3000))
    chain = BinarySearchTree(numeric, items)
    assert list(chain.iter_infix()) == items
    assert list(chain.iter_prefix()) == items
    assert list(chain.iter_suffix()) == items[::-1]
    assert chain.level_count() == len(chain) - 1


def test_infix_matches_sorted_for_many_values():
    values = [17, 4, 29, 4, 11, 0, 23, 8, 17, 2]
    many = BinarySearchTree(numeric, values)
    assert list(many) == sorted(values)
    assert len(many) == len(values)