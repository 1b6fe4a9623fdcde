"""Tests for binary tree serialization and deserialization.

Includes malformed-input cases: decoding must fail loudly rather than
return a truncated tree.
"""

import json
import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treealgos import (
    BinaryTree,
    BinaryTreeNode,
    CodecConfig,
    ConfigurationError,
    DecodeError,
    EncodeError,
    TreeStructureError,
)
from treealgos import codec
from treealgos.testing import (
    binary_chain,
    binary_from_level_order,
    path_sum_tree,
    random_binary_tree,
    sample_binary_tree,
)


def test_sample_tree_tokens():
    tree = sample_binary_tree()
    assert tree.to_tokens() == [1, 2, None, None, 3, None, None]


def test_sample_tree_text():
    text = BinaryTree.serialize(sample_binary_tree())
    assert text == "[1,2,null,null,3,null,null]"
    # The default format is a JSON array
    assert json.loads(text) == [1, 2, None, None, 3, None, None]


def test_sample_tree_decodes_to_same_shape():
    tree = BinaryTree.deserialize("[1,2,null,null,3,null,null]")
    root = tree.root
    assert root.value == 1
    assert root.left.value == 2 and root.left.is_leaf()
    assert root.right.value == 3 and root.right.is_leaf()
    assert tree == sample_binary_tree()


def test_empty_tree():
    assert BinaryTree().to_tokens() == [None]
    assert BinaryTree.serialize(BinaryTree()) == "[null]"
    decoded = BinaryTree.deserialize("[null]")
    assert decoded.root is None
    assert decoded == BinaryTree()


def test_one_sided_children_keep_their_side():
    tree = binary_from_level_order([1, None, 2, 3])
    text = BinaryTree.serialize(tree)
    assert text == "[1,null,2,3,null,null,null]"
    decoded = BinaryTree.deserialize(text)
    assert decoded.root.left is None
    assert decoded.root.right.left.value == 3
    assert decoded == tree


def test_whitespace_tolerated():
    tree = BinaryTree.deserialize(" [ 1 , 2 , null , null , 3 , null , null ] ")
    assert tree == sample_binary_tree()


def test_negative_and_float_values():
    tree = binary_from_level_order([-1.5, 0, 2e-3])
    text = BinaryTree.serialize(tree)
    decoded = BinaryTree.deserialize(text)
    assert decoded.to_tokens() == [-1.5, 0, None, None, 0.002, None, None]
    assert isinstance(decoded.root.left.value, int)


@pytest.mark.parametrize("seed", range(15))
def test_round_trip_random(seed):
    tree = random_binary_tree(size=seed * 4, seed=seed)
    assert BinaryTree.deserialize(BinaryTree.serialize(tree)) == tree


def test_round_trip_preserves_queries():
    tree = path_sum_tree()
    decoded = BinaryTree.deserialize(BinaryTree.serialize(tree))
    assert decoded.max_sum() == 42
    assert decoded.min_depth() == tree.min_depth()
    assert decoded.max_depth() == tree.max_depth()


def test_round_trip_deep_chain():
    tree = binary_chain(3000, side='left')
    decoded = BinaryTree.deserialize(BinaryTree.serialize(tree))
    assert decoded.max_depth() == 3000
    assert decoded == tree


def test_tree_equality():
    assert sample_binary_tree() == sample_binary_tree()
    assert sample_binary_tree() != path_sum_tree()
    mirrored = BinaryTree(BinaryTreeNode(1, BinaryTreeNode(3), BinaryTreeNode(2)))
    assert sample_binary_tree() != mirrored
    # Same values, different shape
    left_only = BinaryTree(BinaryTreeNode(1, BinaryTreeNode(2)))
    right_only = BinaryTree(BinaryTreeNode(1, None, BinaryTreeNode(2)))
    assert left_only != right_only


class TestCompactFormat:

    def test_serialize(self):
        text = BinaryTree.serialize(sample_binary_tree(), CodecConfig.compact())
        assert text == "1,2,#,#,3,#,#"

    def test_round_trip(self):
        config = CodecConfig.compact()
        tree = random_binary_tree(size=20, seed=4)
        assert BinaryTree.deserialize(BinaryTree.serialize(tree, config), config) == tree

    def test_empty_tree(self):
        config = CodecConfig.compact()
        assert BinaryTree.serialize(BinaryTree(), config) == "#"
        assert BinaryTree.deserialize("#", config).root is None

    def test_custom_format(self):
        config = CodecConfig(sentinel="~", separator=";", open_bracket="(", close_bracket=")")
        text = BinaryTree.serialize(sample_binary_tree(), config)
        assert text == "(1;2;~;~;3;~;~)"
        assert BinaryTree.deserialize(text, config) == sample_binary_tree()


class TestMalformedInput:

    @pytest.mark.parametrize("data", [
        "[1,2,null,null,3,null]",       # right subtree of 3 missing
        "[1]",                          # both children missing
        "[1,null]",
    ])
    def test_too_few_tokens(self, data):
        with pytest.raises(DecodeError):
            BinaryTree.deserialize(data)

    @pytest.mark.parametrize("data", [
        "[1,null,null,4]",
        "[null,null]",
        "[1,2,null,null,3,null,null,null]",
    ])
    def test_trailing_tokens(self, data):
        with pytest.raises(DecodeError):
            BinaryTree.deserialize(data)

    @pytest.mark.parametrize("data", [
        "[]",
        "",
        "   ",
    ])
    def test_no_tokens(self, data):
        with pytest.raises(DecodeError):
            BinaryTree.deserialize(data)

    @pytest.mark.parametrize("data", [
        "1,null,null",                  # missing brackets
        "[1,null,null",
        "1,null,null]",
        "[",
    ])
    def test_bad_brackets(self, data):
        with pytest.raises(DecodeError):
            BinaryTree.deserialize(data)

    @pytest.mark.parametrize("data", [
        "[1,x,null]",
        "[1,,null,null]",
        "[None,null,null]",
        "[1,nan,null,null,null]",
        "[1,inf,null,null,null]",
        "[1_0,null,null]",              # underscore digit grouping
        "[+1,null,null]",
        "[\u0661,null,null]",           # non-ASCII digit
        "[1.,null,null]",
        "[.5,null,null]",
        "[1e999,null,null]",
    ])
    def test_bad_tokens(self, data):
        with pytest.raises(DecodeError):
            BinaryTree.deserialize(data)

    def test_not_a_string(self):
        with pytest.raises(DecodeError):
            BinaryTree.deserialize([1, None, None])

    def test_decode_error_is_value_error(self):
        with pytest.raises(ValueError):
            BinaryTree.deserialize("[1]")

    def test_error_reports_position(self):
        with pytest.raises(DecodeError) as excinfo:
            codec.decode_tokens([1, None, None, 4])
        assert excinfo.value.position == 3


class TestEncodeErrors:

    @pytest.mark.parametrize("value", ["1", None, True, float("nan"), float("inf"), [1]])
    def test_unencodable_values(self, value):
        tree = BinaryTree(BinaryTreeNode(value))
        with pytest.raises(EncodeError):
            BinaryTree.serialize(tree)

    def test_shared_subtree(self):
        shared = BinaryTreeNode(2)
        tree = BinaryTree(BinaryTreeNode(1, shared, shared))
        with pytest.raises(TreeStructureError):
            BinaryTree.serialize(tree)

    def test_invalid_config(self):
        config = CodecConfig(sentinel="0")
        with pytest.raises(ConfigurationError):
            BinaryTree.serialize(sample_binary_tree(), config)
        with pytest.raises(ConfigurationError):
            BinaryTree.deserialize("[0]", config)


def test_decode_logs_token_count(caplog):
    with caplog.at_level(logging.DEBUG, logger="treealgos"):
        BinaryTree.deserialize("[1,2,null,null,3,null,null]")
    assert "Decoding 7 token(s)" in caplog.text


@pytest.mark.parametrize("separator", ["-", ".", "5", "e", "_", "+"])
def test_numeric_separator_rejected(separator):
    config = CodecConfig(sentinel="#", separator=separator)
    tree = BinaryTree(BinaryTreeNode(-1, BinaryTreeNode(2.5), BinaryTreeNode(15)))
    with pytest.raises(ConfigurationError):
        BinaryTree.serialize(tree, config)


@pytest.mark.parametrize("open_bracket, close_bracket", [("1", "2"), ("<-", ">"), ("(", "e)")])
def test_numeric_bracket_rejected(open_bracket, close_bracket):
    config = CodecConfig(open_bracket=open_bracket, close_bracket=close_bracket)
    with pytest.raises(ConfigurationError):
        BinaryTree.serialize(sample_binary_tree(), config)


@pytest.mark.parametrize("text, expected", [
    ("[-7,null,null]", -7),
    ("[1e+20,null,null]", 1e+20),
    ("[1.5e-05,null,null]", 1.5e-05),
    ("[-0.25,null,null]", -0.25),
])
def test_number_tokens_accepted(text, expected):
    assert BinaryTree.deserialize(text).root.value == expected


def test_float_repr_round_trip():
    tree = binary_from_level_order([1e20, -3.0, 1.5e-05, 123456789012345678901234567890])
    assert BinaryTree.deserialize(BinaryTree.serialize(tree)) == tree


def test_equality_with_non_finite_values():
    nan = float("nan")
    left = BinaryTree(BinaryTreeNode(1, BinaryTreeNode(float("inf"))))
    right = BinaryTree(BinaryTreeNode(1, BinaryTreeNode(float("inf"))))
    assert left == right
    assert BinaryTree(BinaryTreeNode(nan)) != BinaryTree(BinaryTreeNode(1))
    assert (BinaryTree(BinaryTreeNode("a")) == BinaryTree(BinaryTreeNode("a"))) is True


def test_none_value_differs_from_absent_child():
    assert BinaryTree(BinaryTreeNode(None)) != BinaryTree()
