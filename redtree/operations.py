"""File input/output, word indexing, random trees and timing helpers."""

from __future__ import annotations

import os
import random
import re
import string
from dataclasses import dataclass
from time import process_time
from typing import Iterable, Iterator, Optional, Sequence, TextIO, Union

from redtree.tree import EmptyTreeError, InsertOutcome, LLRBTree

PathLike = Union[str, "os.PathLike[str]"]

DELIMITERS = frozenset(",./!? :;'=+-@#$%^&*()[]{}`“”’…\t\"")

DEFAULT_SIZES = (
    50000, 70000, 90000, 110000, 130000, 150000,
    200000, 300000, 400000, 500000, 650000, 800000, 1000000, 1200000,
    1400000, 1600000, 1800000, 2000000,
)

_WORD = re.compile("[^" + "".join(re.escape(c) for c in sorted(DELIMITERS)) + "]+")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ALPHABETS = (string.ascii_uppercase, string.ascii_lowercase, string.digits)


@dataclass(frozen=True)
class OperationTimes:
    """Average CPU seconds spent inserting, searching and deleting."""

    size: int
    insert: float
    search: float
    delete: float


@dataclass(frozen=True)
class SuccessorTime:
    """Average CPU seconds spent on successor searches."""

    size: int
    seconds: float


def read_line(stream: TextIO) -> Optional[str]:
    """Read one newline-terminated line without its newline.

    Returns ``""`` for a blank line and ``None`` at the end of the stream;
    a final line that lacks a newline counts as the end of the stream.
    """
    line = stream.readline()
    if not line.endswith("\n"):
        return None
    return line[:-1]


def save_records(tree: LLRBTree, path: PathLike) -> None:
    """Write the tree's records to ``path``, key and information on separate lines."""
    if tree.is_empty():
        raise EmptyTreeError()
    with open(path, "w", encoding="utf-8") as stream:
        tree.write_records(stream)


def read_records(tree: LLRBTree, path: PathLike) -> int:
    """Replace the tree's contents with the records in ``path``.

    Reading stops at the end of the file or at the first blank line.
    Returns the number of key/information pairs read.
    """
    tree.clear()
    count = 0
    with open(path, encoding="utf-8") as stream:
        while True:
            key = read_line(stream)
            if not key:
                break
            info = read_line(stream)
            if not info:
                break
            tree.insert(key, info)
            count += 1
    return count


def save_dot(tree: LLRBTree, path: PathLike) -> None:
    """Write the tree as a Graphviz digraph to ``path``."""
    if tree.is_empty():
        raise EmptyTreeError()
    with open(path, "w", encoding="utf-8") as stream:
        stream.write(tree.to_dot())


def tokenize(text: str) -> list[tuple[str, int]]:
    """Split ``text`` into words with their offsets; ASCII capitals are lowered."""
    return [(match.group().translate(_ASCII_LOWER), match.start()) for match in _WORD.finditer(text)]


def format_location(filename: str, line_number: int, offset: int) -> str:
    """Describe where a word occurs: ``<file>:<line>:<offset>``."""
    return f"<{filename}>:<{line_number}>:<{offset}>"


def index_words(tree: LLRBTree, path: PathLike) -> int:
    """Fill the tree with the first occurrence of every word in ``path``.

    Returns the number of distinct words stored.
    """
    tree.clear()
    filename = os.fspath(path)
    count = 0
    with open(path, encoding="utf-8") as stream:
        line_number = 1
        while (line := read_line(stream)) is not None:
            for word, offset in tokenize(line):
                if word not in tree:
                    tree.insert(word, format_location(filename, line_number, offset))
                    count += 1
            line_number += 1
    return count


def _rng(rng: Optional[random.Random]) -> random.Random:
    return random.Random() if rng is None else rng


def random_string(length: int, rng: Optional[random.Random] = None) -> str:
    """Return a string of upper-case letters, lower-case letters and digits."""
    rng = _rng(rng)
    return "".join(rng.choice(_ALPHABETS[rng.randrange(3)]) for _ in range(length))


def random_lengths(count: int, rng: Optional[random.Random] = None) -> list[int]:
    """Return ``count`` string lengths between 2 and 8."""
    rng = _rng(rng)
    return [2 + rng.randrange(7) for _ in range(count)]


def random_strings(lengths: Iterable[int], rng: Optional[random.Random] = None) -> list[str]:
    """Return one random string for each length."""
    rng = _rng(rng)
    return [random_string(length, rng) for length in lengths]


def generate_tree(tree: LLRBTree, count: int, rng: Optional[random.Random] = None) -> None:
    """Replace the tree's contents with ``count`` random insertions."""
    rng = _rng(rng)
    tree.clear()
    for _ in range(count):
        key = random_string(2 + rng.randrange(7), rng)
        info = random_string(1 + rng.randrange(5), rng)
        tree.insert(key, info)


def _check_repeats(repeats: int) -> None:
    if repeats < 1:
        raise ValueError("repeats must be positive")


def time_operations(
    tree: LLRBTree,
    size: int,
    count: int,
    repeats: int,
    rng: Optional[random.Random] = None,
) -> OperationTimes:
    """Time ``count`` insertions, searches and deletions on a random tree of ``size``."""
    _check_repeats(repeats)
    rng = _rng(rng)
    insert_total = search_total = delete_total = 0.0
    for _ in range(repeats):
        generate_tree(tree, size, rng)
        lengths = random_lengths(count, rng)
        keys = random_strings(lengths, rng)
        infos = random_strings(lengths, rng)

        start = process_time()
        kept = []
        for key, info in zip(keys, infos):
            outcome, _ = tree.insert(key, info)
            if outcome is not InsertOutcome.REPLACED:
                kept.append(key)
        insert_total += process_time() - start

        start = process_time()
        for key in kept:
            try:
                tree.search(key)
            except KeyError:
                pass
        search_total += process_time() - start

        start = process_time()
        for key in kept:
            try:
                tree.delete(key)
            except KeyError:
                pass
        delete_total += process_time() - start

    return OperationTimes(
        size=size,
        insert=insert_total / repeats,
        search=search_total / repeats,
        delete=delete_total / repeats,
    )


def time_successor(
    tree: LLRBTree,
    size: int,
    count: int,
    repeats: int,
    rng: Optional[random.Random] = None,
) -> SuccessorTime:
    """Time ``count`` successor searches on a random tree of ``size``."""
    _check_repeats(repeats)
    rng = _rng(rng)
    total = 0.0
    for _ in range(repeats):
        generate_tree(tree, size, rng)
        keys = random_strings(random_lengths(count, rng), rng)
        for key in keys:
            start = process_time()
            try:
                tree.successor(key)
            except KeyError:
                pass
            total += process_time() - start
    return SuccessorTime(size=size, seconds=total / repeats)


def benchmark_operations(
    tree: LLRBTree,
    count: int,
    repeats: int,
    rng: Optional[random.Random] = None,
    sizes: Sequence[int] = DEFAULT_SIZES,
) -> Iterator[OperationTimes]:
    """Yield the operation timings for each tree size in turn."""
    rng = _rng(rng)
    for size in sizes:
        yield time_operations(tree, size, count, repeats, rng)


def benchmark_successor(
    tree: LLRBTree,
    count: int,
    repeats: int,
    rng: Optional[random.Random] = None,
    sizes: Sequence[int] = DEFAULT_SIZES,
) -> Iterator[SuccessorTime]:
    """Yield the successor-search timings for each tree size in turn."""
    rng = _rng(rng)
    for size in sizes:
        yield time_successor(tree, size, count, repeats, rng)