import random

import pytest

from algokit.bintree import AVLTree, BinaryTree


def keys(pairs):
    return [key for _, key in pairs]


@pytest.fixture
def sample_tree():
    tree = BinaryTree()
    tree.add("c", 20)
    tree.add("a", 33)
    tree.add("k", 12)
    tree.add("o", 77)
    tree.add("a", 553)
    tree.add("f", 22)
    return tree


def test_inorder_is_key_order(sample_tree):
    assert list(sample_tree.inorder()) == [
        ("k", 12), ("c", 20), ("f", 22), ("a", 33), ("o", 77), ("a", 553)
    ]


def test_preorder_and_postorder(sample_tree):
    assert keys(sample_tree.preorder()) == [20, 12, 33, 22, 77, 553]
    assert keys(sample_tree.postorder()) == [12, 22, 553, 77, 33, 20]


def test_deletion_sequence(sample_tree):
    sample_tree.delete(22)
    assert keys(sample_tree.inorder()) == [12, 20, 33, 77, 553]
    sample_tree.delete(33)
    assert keys(sample_tree.inorder()) == [12, 20, 77, 553]
    sample_tree.delete(12)
    assert keys(sample_tree.inorder()) == [20, 77, 553]
    sample_tree.delete(20)
    assert keys(sample_tree.inorder()) == [77, 553]
    assert len(sample_tree) == 2
    assert sample_tree.is_valid()


def test_delete_missing_key(sample_tree):
    with pytest.raises(KeyError):
        sample_tree.delete(999)
    assert len(sample_tree) == 6


def test_delete_from_empty_tree():
    with pytest.raises(KeyError):
        BinaryTree().delete(1)


def test_duplicate_keys():
    tree = BinaryTree()
    tree.add("x", 5)
    tree.add("y", 5)
    assert len(tree) == 2
    tree.delete(5)
    assert len(tree) == 1
    assert keys(tree.inorder()) == [5]


def test_random_operations_keep_invariants():
    rng = random.Random(11)
    tree = BinaryTree()
    present = []
    for _ in range(200):
        key = rng.randrange(100)
        tree.add(key * 2, key)
        present.append(key)
    for key in rng.sample(present, 120):
        tree.delete(key)
        present.remove(key)
        assert tree.is_valid()
    assert keys(tree.inorder()) == sorted(present)
    assert len(tree) == len(present)
    assert all(item == key * 2 for item, key in tree.inorder())


def test_is_valid_detects_corruption(sample_tree):
    assert sample_tree.is_valid()
    sample_tree.root.left.key = 100
    assert not sample_tree.is_valid()


def test_empty_tree_traversals():
    tree = BinaryTree()
    assert list(tree.inorder()) == []
    assert list(tree.preorder()) == []
    assert tree.is_valid()
    assert len(tree) == 0


def test_avl_tree_behaves_as_search_tree():
    tree = AVLTree()
    for key in [4, 2, 6, 1, 3]:
        tree.add(chr(ord("a") + key), key)
    tree.delete(2)
    assert keys(tree.inorder()) == [1, 3, 4, 6]
    assert tree.is_valid()