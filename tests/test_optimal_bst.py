import pytest

from algokit.optimal_bst import optimal_bst

KEYS = ["A", "B", "C", "D"]
PROBS = [0.1, 0.2, 0.3, 0.4]


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.key] + _inorder(node.right)


def _depths(node, depth=1):
    if node is None:
        return {}
    found = {node.key: depth}
    found.update(_depths(node.left, depth + 1))
    found.update(_depths(node.right, depth + 1))
    return found


def test_tree_holds_keys_in_order():
    tree = optimal_bst(KEYS, PROBS).build_tree()
    assert _inorder(tree) == KEYS


@pytest.mark.parametrize(
    "probs",
    [PROBS, [0.4, 0.3, 0.2, 0.1], [0.25, 0.25, 0.25, 0.25], [0.05, 0.6, 0.05, 0.3]],
)
def test_cost_matches_tree_depths(probs):
    result = optimal_bst(KEYS, probs)
    depths = _depths(result.build_tree())
    expected = sum(p * depths[key] for key, p in zip(KEYS, probs))
    assert result.cost == pytest.approx(expected)


def test_cost_not_worse_than_chain():
    result = optimal_bst(KEYS, PROBS)
    chain = sum(p * (position + 1) for position, p in enumerate(PROBS))
    assert result.cost <= chain + 1e-12
    assert result.cost >= sum(PROBS) - 1e-12


def test_single_key():
    result = optimal_bst(["X"], [0.7])
    assert result.cost == pytest.approx(0.7)
    tree = result.build_tree()
    assert (tree.key, tree.left, tree.right) == ("X", None, None)


def test_diagonal_holds_own_probability():
    result = optimal_bst(KEYS, PROBS)
    for index, p in enumerate(PROBS):
        assert result.cost_table[index][index] == pytest.approx(p)
        assert result.root_table[index][index] == index


def test_roots_lie_inside_their_range():
    result = optimal_bst(KEYS, PROBS)
    for i in range(len(KEYS)):
        for j in range(i, len(KEYS)):
            assert i <= result.root_table[i][j] <= j


def test_dominant_key_becomes_root():
    tree = optimal_bst(KEYS, [0.01, 0.01, 0.97, 0.01]).build_tree()
    assert tree.key == "C"


def test_empty_input():
    result = optimal_bst([], [])
    assert result.cost == 0.0
    assert result.build_tree() is None


def test_length_mismatch():
    with pytest.raises(ValueError):
        optimal_bst(KEYS, [0.5, 0.5])


def test_negative_probability():
    with pytest.raises(ValueError):
        optimal_bst(["A", "B"], [0.5, -0.1])