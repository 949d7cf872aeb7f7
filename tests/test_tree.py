import io

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from redtree.tree import Color, EmptyTreeError, InsertOutcome, LLRBTree


def _llrb_violations(root):
    problems = []

    def walk(node, low, high):
        if node is None:
            return 1
        if low is not None and not node.key > low:
            problems.append(f"order violated at {node.key!r}")
        if high is not None and not node.key < high:
            problems.append(f"order violated at {node.key!r}")
        if node.right is not None and node.right.color is Color.RED:
            problems.append(f"red right link at {node.key!r}")
        if node.color is Color.RED and node.left is not None and node.left.color is Color.RED:
            problems.append(f"two reds in a row at {node.key!r}")
        left_height = walk(node.left, low, node.key)
        right_height = walk(node.right, node.key, high)
        if left_height != right_height:
            problems.append(f"black height differs at {node.key!r}")
        return left_height + (1 if node.color is Color.BLACK else 0)

    if root is not None and root.color is not Color.BLACK:
        problems.append("root is red")
    walk(root, None, None)
    return problems


def _inorder_keys(node):
    if node is None:
        return []
    return _inorder_keys(node.left) + [node.key] + _inorder_keys(node.right)


def test_new_tree_is_empty():
    tree = LLRBTree()
    assert tree.is_empty()
    assert len(tree) == 0
    assert list(tree.preorder()) == []


def test_insert_outcomes():
    tree = LLRBTree()
    assert tree.insert("key", "one") == (InsertOutcome.INSERTED, None)
    assert tree.insert("key", "one") == (InsertOutcome.UNCHANGED, None)
    assert tree.insert("key", "two") == (InsertOutcome.REPLACED, "one")
    assert tree.search("key") == "two"
    assert len(tree) == 1


def test_operations_on_empty_tree_raise():
    tree = LLRBTree()
    with pytest.raises(EmptyTreeError):
        tree.delete("a")
    with pytest.raises(EmptyTreeError):
        tree.search("a")
    with pytest.raises(EmptyTreeError):
        tree.successor("a")


def test_missing_key_raises_key_error():
    tree = LLRBTree()
    tree.insert("a", "x")
    with pytest.raises(KeyError):
        tree.search("b")
    with pytest.raises(KeyError):
        tree.delete("b")
    assert dict(tree.preorder()) == {"a": "x"}
    assert len(tree) == 1


def test_delete_last_key_empties_tree():
    tree = LLRBTree()
    tree.insert("a", "x")
    tree.delete("a")
    assert tree.is_empty()
    assert "a" not in tree


def test_successor_is_strictly_greater():
    tree = LLRBTree()
    for key in ("a", "c", "e"):
        tree.insert(key, key.upper())
    assert tree.successor("a") == "c"
    assert tree.successor("b") == "c"
    assert tree.successor("") == "a"
    with pytest.raises(KeyError):
        tree.successor("e")


def test_contains_and_clear():
    tree = LLRBTree()
    tree.insert("a", "1")
    tree.insert("b", "2")
    assert "a" in tree
    assert "z" not in tree
    tree.clear()
    assert tree.is_empty()
    assert len(tree) == 0
    assert "a" not in tree


def test_preorder_of_balanced_three():
    tree = LLRBTree()
    for key in ("b", "a", "c"):
        tree.insert(key, key * 2)
    assert [key for key, _ in tree.preorder()] == ["b", "a", "c"]
    assert all(node.color is Color.BLACK for node in (tree.root, tree.root.left, tree.root.right))


def test_to_dot_with_both_children():
    tree = LLRBTree()
    for key in ("b", "a", "c"):
        tree.insert(key, "i")
    expected = (
        "digraph LLRB{\n"
        "\tnode [fontcolor=white, style=filled];\n"
        '\t"b" [fillcolor=black];\n'
        '\t"b" -> "a" [label="left"];\n'
        '\t"a" [fillcolor=black];\n'
        '\t"b" -> "c" [label="right"];\n'
        '\t"c" [fillcolor=black];\n'
        "}"
    )
    assert tree.to_dot() == expected


def test_to_dot_marks_missing_right_child():
    tree = LLRBTree()
    tree.insert("a", "i")
    tree.insert("b", "i")
    expected = (
        "digraph LLRB{\n"
        "\tnode [fontcolor=white, style=filled];\n"
        '\t"b" [fillcolor=black];\n'
        '\t"b" -> "a" [label="left"];\n'
        "\t1 [style=invis];\n"
        '\t"b" -> 1 [style=invis];\n'
        '\t"a" [fillcolor=red];\n'
        "}"
    )
    assert tree.to_dot() == expected


def test_pretty_lines_indent_by_depth():
    tree = LLRBTree()
    tree.insert("a", "i")
    tree.insert("b", "i")
    assert list(tree.pretty_lines()) == ["", '"b", "black"', "", '     "a", "red"']


def test_write_records_round_trip():
    tree = LLRBTree()
    data = {"k1": "v1", "k2": "v2", "k0": "v0", "zz": "last"}
    for key, info in data.items():
        tree.insert(key, info)
    stream = io.StringIO()
    tree.write_records(stream)
    lines = stream.getvalue().splitlines()
    assert len(lines) == 2 * len(data)
    restored = LLRBTree()
    for key, info in zip(lines[::2], lines[1::2]):
        restored.insert(key, info)
    assert dict(restored.preorder()) == data
    assert lines[0] == tree.root.key


def test_ascending_inserts_and_deletes_keep_balance():
    tree = LLRBTree()
    keys = [f"{n:04d}" for n in range(200)]
    for key in keys:
        tree.insert(key, key)
        assert _llrb_violations(tree.root) == []
    for key in keys:
        tree.delete(key)
        assert _llrb_violations(tree.root) == []
        assert key not in tree
    assert tree.is_empty()


keys_strategy = st.lists(st.text(min_size=1, max_size=5), max_size=60)


@settings(max_examples=80)
@given(keys_strategy)
def test_inserts_match_dict_and_keep_invariants(keys):
    tree = LLRBTree()
    model = {}
    for index, key in enumerate(keys):
        tree.insert(key, str(index))
        model[key] = str(index)
    assert _llrb_violations(tree.root) == []
    assert _inorder_keys(tree.root) == sorted(model)
    assert dict(tree.preorder()) == model
    assert len(tree) == len(model)


@settings(max_examples=80)
@given(keys_strategy, st.data())
def test_deletes_match_dict_and_keep_invariants(keys, data):
    tree = LLRBTree()
    model = {}
    for key in keys:
        tree.insert(key, key)
        model[key] = key
    doomed = data.draw(st.lists(st.sampled_from(sorted(model)), unique=True) if model else st.just([]))
    for key in doomed:
        tree.delete(key)
        del model[key]
        assert _llrb_violations(tree.root) == []
    assert _inorder_keys(tree.root) == sorted(model)
    assert len(tree) == len(model)


@settings(max_examples=80)
@given(st.lists(st.text(min_size=1, max_size=4), min_size=1, max_size=40), st.text(max_size=4))
def test_successor_matches_sorted_keys(keys, probe):
    tree = LLRBTree()
    for key in keys:
        tree.insert(key, key)
    greater = sorted(key for key in set(keys) if key > probe)
    if greater:
        assert tree.successor(probe) == greater[0]
    else:
        with pytest.raises(KeyError):
            tree.successor(probe)