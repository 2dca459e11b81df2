"""Deterministic node keys.

A node key is the serialization of every node field in sorted field order:
the position is written as ``pos:{row,col}`` and auxiliary values as
``name:value`` using ``str(value)``. Fields are joined with ``;``, so

    Node.at(3, 4, dir=Direction.EAST)  ->  "dir:east;pos:{3,4}"
"""

import re
from typing import Hashable

from gridpath.core.data_models import Node, Position
from gridpath.core.exceptions import MalformedNodeKey

_POS_PATTERN = re.compile(r"pos:\{(-?\d+),(-?\d+)\}")


def position_key(pos: Position) -> str:
    """Serialize a position as ``pos:{row,col}``."""
    return f"pos:{{{pos[0]},{pos[1]}}}"


def node_key(node: Node) -> str:
    """Canonical string key for a node."""
    fields = [('pos', position_key(node.pos))]
    fields.extend((name, f"{name}:{value}") for name, value in node.state)
    fields.sort(key=lambda item: item[0])
    return ';'.join(text for _, text in fields)


def position_from_key(key: Hashable) -> Position:
    """Decode the position embedded in a node key.

    Raises:
        MalformedNodeKey: If the key holds no ``pos:{row,col}`` segment
    """
    if not isinstance(key, str):
        raise MalformedNodeKey(f"Node key must be a string, got {type(key).__name__}")
    match = _POS_PATTERN.search(key)
    if match is None:
        raise MalformedNodeKey(f"No position in node key: {key!r}")
    return Position(int(match.group(1)), int(match.group(2)))


def position_key_from_node_key(key: Hashable) -> str:
    """Position part of a node key, e.g. ``"dir:east;pos:{1,2}"`` -> ``"pos:{1,2}"``."""
    return position_key(position_from_key(key))
