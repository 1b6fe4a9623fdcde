"""Pre-order token codec for binary trees.

A binary tree is encoded as the pre-order sequence of its node values with
a sentinel (None in token form) wherever a child is absent:

    1            tokens: [1, 2, None, None, 3, None, None]
   / \\          text:   [1,2,null,null,3,null,null]
  2   3

The empty tree encodes as a single sentinel. Token lists are turned into
text by format_tokens() and back by parse_tokens(), both governed by a
CodecConfig. Decoding rejects anything that is not exactly one complete
pre-order encoding.
"""

import logging
import math
import re
from typing import Any, Callable, List, Optional, Tuple

from .config import CodecConfig
from .core.node import BinaryTreeNode, Number
from .errors import ConfigurationError, DecodeError, EncodeError, TreeStructureError

logger = logging.getLogger(__name__)

Token = Optional[Number]

# Exactly what repr() produces for finite ints and floats, ASCII digits only
NUMBER_TOKEN = re.compile(
    r"-?[0-9]+(?P<fraction>\.[0-9]+)?(?P<exponent>[eE][+-]?[0-9]+)?"
)


def _check_config(config: Optional[CodecConfig]) -> CodecConfig:
    if config is None:
        return CodecConfig()
    errors = config.validate()
    if errors:
        raise ConfigurationError(f"Invalid codec configuration: {'; '.join(errors)}")
    return config


def _check_value(value) -> Number:
    # bool is an int subclass but has no numeric token
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise EncodeError(f"Cannot encode node value {value!r}: not an int or float")
    if isinstance(value, float) and not math.isfinite(value):
        raise EncodeError(f"Cannot encode node value {value!r}: not finite")
    return value


def _walk_pre_order(root: Optional[BinaryTreeNode], convert: Callable[[Any], Any]) -> List[Any]:
    """Pre-order values passed through ``convert``, None for each absent child."""
    tokens: List[Any] = []
    stack: List[Optional[BinaryTreeNode]] = [root]
    visited = set()

    while stack:
        node = stack.pop()
        if node is None:
            tokens.append(None)
            continue

        if id(node) in visited:
            raise TreeStructureError(node)
        visited.add(id(node))

        tokens.append(convert(node.value))
        # Right pushed first so the left subtree is emitted first
        stack.append(node.right)
        stack.append(node.left)

    return tokens


def encode_tokens(root: Optional[BinaryTreeNode]) -> List[Token]:
    """Encode a (sub)tree as its pre-order token list.

    Args:
        root: Root node, or None for the empty tree

    Returns:
        Pre-order values with None marking each absent child

    Raises:
        EncodeError: If a node value is not a finite int or float
        TreeStructureError: If a node is reachable twice
    """
    return _walk_pre_order(root, _check_value)


def shape_of(root: Optional[BinaryTreeNode]) -> List[Optional[tuple]]:
    """Pre-order shape of a (sub)tree without checking values.

    Each present node becomes a 1-tuple holding its value, so a node whose
    value is None stays distinct from an absent child.
    """
    return _walk_pre_order(root, lambda value: (value,))


def decode_tokens(tokens: List[Token]) -> Optional[BinaryTreeNode]:
    """Rebuild a tree from its pre-order token list.

    The position in the token list is an explicit cursor. Pending child
    slots sit on a stack with the right slot beneath the left one, so a left
    subtree (including all of its sentinels) is consumed completely before
    the right subtree starts.

    Args:
        tokens: Pre-order values with None marking absent children

    Returns:
        Root node, or None if the tokens encode the empty tree

    Raises:
        DecodeError: If the tokens are not exactly one complete encoding
    """
    if not tokens:
        raise DecodeError("Empty token sequence; the empty tree encodes as a single sentinel")

    first = tokens[0]
    cursor = 1
    if first is None:
        root = None
        pending: List[Tuple[BinaryTreeNode, str]] = []
    else:
        root = BinaryTreeNode(first)
        pending = [(root, 'right'), (root, 'left')]

    while pending:
        parent, side = pending.pop()
        if cursor >= len(tokens):
            raise DecodeError(
                f"Token sequence ended early; {len(pending) + 1} child slot(s) unfilled",
                position=cursor,
            )

        token = tokens[cursor]
        cursor += 1
        if token is None:
            continue

        child = BinaryTreeNode(token)
        setattr(parent, side, child)
        pending.append((child, 'right'))
        pending.append((child, 'left'))

    if cursor != len(tokens):
        raise DecodeError(
            f"{len(tokens) - cursor} trailing token(s) after a complete tree",
            position=cursor,
        )

    return root


def _format_token(token: Token, config: CodecConfig) -> str:
    if token is None:
        return config.sentinel
    return repr(token)


def _parse_token(text: str, position: int, config: CodecConfig) -> Token:
    if text == config.sentinel.strip():
        return None
    match = NUMBER_TOKEN.fullmatch(text)
    if match is None:
        raise DecodeError(f"Unrecognized token {text!r}", position=position)
    if match.group('fraction') is None and match.group('exponent') is None:
        return int(text)
    value = float(text)
    if not math.isfinite(value):
        raise DecodeError(f"Non-finite number {text!r}", position=position)
    return value


def format_tokens(tokens: List[Token], config: Optional[CodecConfig] = None) -> str:
    """Render a token list as text.

    Args:
        tokens: Token list as produced by encode_tokens()
        config: Text format (default: JSON array with ``null``)

    Returns:
        Serialized string, e.g. ``[1,2,null,null,3,null,null]``
    """
    config = _check_config(config)
    body = config.separator.join(_format_token(token, config) for token in tokens)
    return f"{config.open_bracket}{body}{config.close_bracket}"


def parse_tokens(data: str, config: Optional[CodecConfig] = None) -> List[Token]:
    """Split serialized text back into a token list.

    Whitespace around tokens and brackets is ignored.

    Args:
        data: Text produced by format_tokens() with the same config
        config: Text format (default: JSON array with ``null``)

    Returns:
        Token list (numbers and None)

    Raises:
        DecodeError: On missing brackets or unrecognized tokens
    """
    config = _check_config(config)
    if not isinstance(data, str):
        raise DecodeError(f"Expected a string, got {type(data).__name__}")

    body = data.strip()
    if config.bracketed:
        if not (body.startswith(config.open_bracket) and body.endswith(config.close_bracket)) \
                or len(body) < len(config.open_bracket) + len(config.close_bracket):
            raise DecodeError(
                f"Expected data wrapped in {config.open_bracket}{config.close_bracket}"
            )
        body = body[len(config.open_bracket):len(body) - len(config.close_bracket)].strip()

    if not body:
        return []

    return [
        _parse_token(piece.strip(), position, config)
        for position, piece in enumerate(body.split(config.separator))
    ]


def serialize(root: Optional[BinaryTreeNode], config: Optional[CodecConfig] = None) -> str:
    """Encode a tree rooted at ``root`` straight to text."""
    tokens = encode_tokens(root)
    logger.debug("Encoded %d token(s)", len(tokens))
    return format_tokens(tokens, config)


def deserialize(data: str, config: Optional[CodecConfig] = None) -> Optional[BinaryTreeNode]:
    """Decode text produced by serialize() back into a root node (or None)."""
    tokens = parse_tokens(data, config)
    logger.debug("Decoding %d token(s)", len(tokens))
    return decode_tokens(tokens)
