# redtree

A left-leaning red-black tree that maps string keys to string information,
with an interactive console for working with it, plain-text save and load,
Graphviz export, a word indexer for text files and timing tools for the
tree's operations.

## Installation

```
pip install .
```

Installing with the `test` extra (`pip install .[test]`) brings in pytest
and hypothesis to run the test suite.

## Using the tree

```python
from redtree.tree import LLRBTree, InsertOutcome

tree = LLRBTree()
outcome, previous = tree.insert("apple", "red fruit")
# outcome is InsertOutcome.INSERTED, previous is None
outcome, previous = tree.insert("apple", "green fruit")
# outcome is InsertOutcome.REPLACED, previous == "red fruit"
tree.search("apple")            # -> "green fruit"
tree.successor("apple")         # smallest stored key greater than "apple"
"apple" in tree                 # -> True
len(tree)                       # -> 1

for key, info in tree.preorder():
    print(key, info)

print("\n".join(tree.pretty_lines()))   # sideways picture with colours
print(tree.to_dot())                    # Graphviz description

tree.delete("apple")
```

`LLRBTree.insert` returns a pair: an `InsertOutcome` and, when the
information under an existing key was replaced, the old information
(otherwise `None`). Inserting an existing key with the same information
changes nothing and reports `InsertOutcome.UNCHANGED`.

Keys are compared as Python strings. `search`, `successor` and `delete`
raise `EmptyTreeError` on an empty tree and `KeyError` when there is no
matching key (`EmptyTreeError` is itself a `KeyError`). `clear()` empties
the tree, `is_empty()` tells whether it is empty, and
`write_records(stream)` writes each key and its information on lines of
their own, in pre-order. Nodes are `Node` dataclasses coloured with the
`Color` enum.

## Files, indexing and timing

`redtree.operations` holds the work done on whole files and on random data:

- `save_records(tree, path)` writes the tree's records to a file;
  `read_records(tree, path)` clears the tree and loads such a file back,
  stopping at the end of the file or at the first blank line, and returns
  the number of records read. `read_line(stream)` reads one
  newline-terminated line; a last line without a newline is not read.
- `save_dot(tree, path)` writes the Graphviz picture of the tree.
  Both saving functions raise `EmptyTreeError` for an empty tree.
- `index_words(tree, path)` clears the tree and stores every distinct word
  of a text file, with ASCII capitals lowered, against the place it first
  appears, written by `format_location` as `<file>:<line>:<offset>`.
  `tokenize(text)` gives the words of one line with their offsets.
- `random_string`, `random_lengths`, `random_strings` and `generate_tree`
  make random keys and fill a tree with them; each takes an optional
  `random.Random` for repeatable results.
- `time_operations` and `time_successor` measure average CPU time of
  insertions, searches and deletions, or of successor searches, on a random
  tree of a given size and return `OperationTimes` or `SuccessorTime`;
  `benchmark_operations` and `benchmark_successor` yield those results for a
  series of sizes (by default from 50 000 up to 2 000 000 nodes).

## The console

```
redtree
```

starts a numbered menu (its texts are in Russian): insert, delete,
pre-order listing, tree picture, Graphviz export to `test.dot` in the
current directory, search, successor search, saving and loading a text
file, generating a random tree, the two timing runs and indexing a text
file. Enter `0` to leave (exit status 0); end of input leaves as well
(exit status 1). The same menu can be driven from code through
`redtree.cli.Dialogue`, given a tree and text streams to read and write.