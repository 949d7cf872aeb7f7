"""Left-leaning red-black tree keyed by strings, with string payloads."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, TextIO


class Color(Enum):
    """Colour of a node."""

    BLACK = "black"
    RED = "red"

    @property
    def flipped(self) -> "Color":
        return Color.BLACK if self is Color.RED else Color.RED


@dataclass(slots=True)
class Node:
    """A tree node; missing children are ``None``."""

    key: str
    info: str
    color: Color = Color.RED
    left: Optional["Node"] = None
    right: Optional["Node"] = None


class InsertOutcome(Enum):
    """What an insertion did to the tree."""

    INSERTED = "inserted"
    UNCHANGED = "unchanged"
    REPLACED = "replaced"


class EmptyTreeError(KeyError):
    """Raised when an operation needs a non-empty tree."""

    def __init__(self, message: str = "tree is empty") -> None:
        super().__init__(message)


def _is_red(node: Optional[Node]) -> bool:
    return node is not None and node.color is Color.RED


def _rotate_left(node: Node) -> Node:
    child = node.right
    node.right = child.left
    child.left = node
    child.color = node.color
    node.color = Color.RED
    return child


def _rotate_right(node: Node) -> Node:
    child = node.left
    node.left = child.right
    child.right = node
    child.color = node.color
    node.color = Color.RED
    return child


def _flip_colors(node: Node) -> None:
    node.color = node.color.flipped
    node.left.color = node.left.color.flipped
    node.right.color = node.right.color.flipped


def _fix_up(node: Node) -> Node:
    if _is_red(node.right):
        node = _rotate_left(node)
    if _is_red(node.left) and _is_red(node.left.left):
        node = _rotate_right(node)
    if _is_red(node.left) and _is_red(node.right):
        _flip_colors(node)
    return node


def _move_red_left(node: Node) -> Node:
    _flip_colors(node)
    if _is_red(node.right.left):
        node.right = _rotate_right(node.right)
        node = _rotate_left(node)
        _flip_colors(node)
    return node


def _move_red_right(node: Node) -> Node:
    _flip_colors(node)
    if _is_red(node.left.left):
        node = _rotate_right(node)
        _flip_colors(node)
    return node


def _find_min(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _remove_min(node: Node) -> Optional[Node]:
    if node.left is None:
        return None
    if not _is_red(node.left) and not _is_red(node.left.left):
        node = _move_red_left(node)
    node.left = _remove_min(node.left)
    return _fix_up(node)


class LLRBTree:
    """An ordered map from string keys to string information."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def is_empty(self) -> bool:
        return self.root is None

    def clear(self) -> None:
        self.root = None
        self._size = 0

    def _find(self, key: str) -> Optional[Node]:
        node = self.root
        while node is not None:
            if node.key == key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def insert(self, key: str, info: str) -> tuple[InsertOutcome, Optional[str]]:
        """Insert or update ``key``.

        Returns the outcome and, when the information was replaced, the old one.
        """
        outcome = InsertOutcome.INSERTED
        previous: Optional[str] = None

        def insert_at(node: Optional[Node]) -> Node:
            nonlocal outcome, previous
            if node is None:
                return Node(key, info)
            if key > node.key:
                node.right = insert_at(node.right)
            elif key < node.key:
                node.left = insert_at(node.left)
            elif node.info == info:
                outcome = InsertOutcome.UNCHANGED
            else:
                outcome = InsertOutcome.REPLACED
                previous, node.info = node.info, info

            if _is_red(node.right) and not _is_red(node.left):
                node = _rotate_left(node)
            if _is_red(node.left) and _is_red(node.left.left):
                node = _rotate_right(node)
            if _is_red(node.left) and _is_red(node.right):
                _flip_colors(node)
            return node

        self.root = insert_at(self.root)
        self.root.color = Color.BLACK
        if outcome is InsertOutcome.INSERTED:
            self._size += 1
        return outcome, previous

    def delete(self, key: str) -> None:
        """Remove ``key``; raise EmptyTreeError or KeyError if impossible."""
        if self.is_empty():
            raise EmptyTreeError()
        if self._find(key) is None:
            raise KeyError(key)
        self.root = self._delete(self.root, key)
        if self.root is not None:
            self.root.color = Color.BLACK
        self._size -= 1

    def _delete(self, node: Optional[Node], key: str) -> Optional[Node]:
        if node is None:
            return None
        if key < node.key:
            if node.left is not None and not _is_red(node.left) and not _is_red(node.left.left):
                node = _move_red_left(node)
            node.left = self._delete(node.left, key)
            return _fix_up(node)

        if _is_red(node.left):
            node = _rotate_right(node)
        if node.right is None and key == node.key:
            return None
        if node.right is not None and not _is_red(node.right) and not _is_red(node.right.left):
            node = _move_red_right(node)
        if key == node.key:
            smallest = _find_min(node.right)
            node.key, node.info = smallest.key, smallest.info
            node.right = _remove_min(node.right)
        else:
            node.right = self._delete(node.right, key)
        return _fix_up(node)

    def search(self, key: str) -> str:
        """Return the information stored under ``key``."""
        if self.is_empty():
            raise EmptyTreeError()
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.info

    def successor(self, key: str) -> str:
        """Return the smallest stored key strictly greater than ``key``."""
        if self.is_empty():
            raise EmptyTreeError()
        node = self.root
        best: Optional[Node] = None
        while node is not None:
            if key < node.key:
                best = node
                node = node.left
            else:
                node = node.right
        if best is None:
            raise KeyError(key)
        return best.key

    def preorder(self) -> Iterator[tuple[str, str]]:
        """Yield ``(key, info)`` pairs: node, then left subtree, then right."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.key, node.info
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def pretty_lines(self) -> Iterator[str]:
        """Yield the lines of a sideways drawing, right subtree on top."""

        def walk(node: Optional[Node], depth: int) -> Iterator[str]:
            if node is None:
                return
            yield from walk(node.right, depth + 1)
            yield ""
            yield f'{" " * (5 * depth)}"{node.key}", "{node.color.value}"'
            yield from walk(node.left, depth + 1)

        yield from walk(self.root, 0)

    def to_dot(self) -> str:
        """Render the tree as a Graphviz digraph."""
        lines = ["digraph LLRB{", "\tnode [fontcolor=white, style=filled];"]
        counter = 0

        def invisible(node: Node) -> None:
            lines.append(f"\t{counter} [style=invis];")
            lines.append(f'\t"{node.key}" -> {counter} [style=invis];')

        def walk(node: Node) -> None:
            nonlocal counter
            counter += 1
            lines.append(f'\t"{node.key}" [fillcolor={node.color.value}];')
            if node.left is not None:
                lines.append(f'\t"{node.key}" -> "{node.left.key}" [label="left"];')
                if node.right is None:
                    invisible(node)
                walk(node.left)
            if node.right is not None:
                if node.left is None:
                    invisible(node)
                lines.append(f'\t"{node.key}" -> "{node.right.key}" [label="right"];')
                walk(node.right)

        if self.root is not None:
            walk(self.root)
        return "\n".join(lines) + "\n}"

    def write_records(self, stream: TextIO) -> None:
        """Write each key and its information on separate lines, in pre-order."""
        for key, info in self.preorder():
            stream.write(f"{key}\n{info}\n")