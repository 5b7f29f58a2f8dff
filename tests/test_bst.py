import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.bst import BinarySearchTree, main

SAMPLE = [50, 30, 70, 20, 40]


@given(values=st.lists(st.integers(min_value=-500, max_value=500), max_size=80))
def test_inorder_is_sorted_unique(values):
    tree = BinarySearchTree(values)
    assert list(tree.inorder()) == sorted(set(values))
    assert len(tree) == len(set(values))


@given(values=st.lists(st.integers(), min_size=1, max_size=60))
def test_root_is_first_preorder_and_last_postorder(values):
    tree = BinarySearchTree(values)
    assert next(tree.preorder()) == values[0]
    assert list(tree.postorder())[-1] == values[0]


@given(values=st.lists(st.integers(), max_size=60))
def test_traversals_visit_same_values(values):
    tree = BinarySearchTree(values)
    expected = sorted(set(values))
    assert sorted(tree.preorder()) == expected
    assert sorted(tree.postorder()) == expected


def test_known_preorder_and_postorder():
    tree = BinarySearchTree(SAMPLE)
    assert list(tree.preorder()) == [50, 30, 20, 40, 70]
    assert list(tree.postorder()) == [20, 40, 30, 70, 50]


def test_duplicate_insert_is_ignored():
    tree = BinarySearchTree(SAMPLE)
    assert tree.insert(30) is False
    assert tree.insert(35) is True
    assert len(tree) == len(SAMPLE) + 1


def test_find():
    tree = BinarySearchTree(SAMPLE)
    assert tree.find(40).data == 40
    assert tree.find(45) is None
    assert 70 in tree
    assert 71 not in tree


def test_children():
    tree = BinarySearchTree(SAMPLE)
    assert tree.children(50) == (30, 70)
    assert tree.children(70) == (None, None)
    with pytest.raises(KeyError):
        tree.children(99)


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.root is None
    assert list(tree.inorder()) == []
    assert list(tree.postorder()) == []
    assert tree.find(1) is None


def test_degenerate_tree_traverses_without_recursion_limit():
    values = list(range(5000))
    tree = BinarySearchTree(values)
    assert list(tree) == values
    assert list(tree.postorder()) == values[::-1]


def test_main_session(monkeypatch, capsys):
    script = "1\n50\n1\n30\n1\n70\n3\n4\n50\n4\n30\n4\n99\n2\n1\n9\n5\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Root of the tree is: 50" in out
    assert "Left child of 50 is 30" in out
    assert "Right child of 50 is 70" in out
    assert "Left child of 30 does not exist." in out
    assert "Node not found." in out
    assert "Traversal result: 30 50 70" in out
    assert "Invalid choice. Try again." in out
    assert out.rstrip().endswith("Exiting program.")


def test_main_empty_tree(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n2\n7\n5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Tree is empty." in out
    assert "Traversal result: Invalid traversal choice." in out