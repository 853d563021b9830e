# utilkit

A collection of small, dependency-free utilities for Python 3.10 and later:
three-way comparison helpers, string checks and formatting, linked lists,
a queue, two kinds of hash table, a binary search tree, a general tree, a
directed graph, fixed-type arrays with binary and text I/O, date validation
and helpers for reading input from a prompt.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `utilkit.compare` | `compare_int`, `compare_str`, `compare_str_ignore_case`, `compare_identity` |
| `utilkit.arrays` | `index_of`, `insertion_sort` |
| `utilkit.stats` | `larger`, `smaller` |
| `utilkit.hashing` | `djb2_hash` |
| `utilkit.string_checks` | `is_alpha`, `is_digit`, `is_int`, `is_double`, `has_suffix` |
| `utilkit.string_funcs` | `split`, `add_padding`, `align`, `Alignment`, `trim`, `trim_front`, `trim_end`, `to_upper`, `to_lower`, `remove_newline`, `case_format` |
| `utilkit.linked_list` | `LinkedList` |
| `utilkit.linked_queue` | `LinkedQueue` |
| `utilkit.doubly_linked_list` | `DoublyLinkedList`, `DoublyLinkedNode` |
| `utilkit.kv_list` | `KeyValueList` |
| `utilkit.chained_hashtable` | `ChainedHashTable` |
| `utilkit.robinhood_hashtable` | `RobinHoodHashTable`, `TableFullError` |
| `utilkit.binary_tree` | `BinaryTree`, `BinaryTreeNode`, `AddResult` |
| `utilkit.tree` | `TreeNode` |
| `utilkit.graph` | `Graph`, `Vertex`, `VertexState` |
| `utilkit.typed_array` | `TypedArray` |
| `utilkit.typed_array_io` | `read_binary`, `write_binary`, `write_text` |
| `utilkit.date` | `Date`, `is_leap_year`, `is_valid_date` |
| `utilkit.prompts` | `read_value`, `read_full_line`, `read_line`, `open_from_prompt` and the errors `FilePromptError`, `NoFileNameError`, `WrongSuffixError`, `FileOpenError` |

## Compare functions

Many functions and containers take a `compare(a, b)` callable following the
three-way convention: negative when `a` comes first, zero when the two match,
positive when `a` comes after `b`.

- `compare_int(a, b)` returns `a - b`.
- `compare_str` and `compare_str_ignore_case` return -1, 0 or 1; the second
  lower-cases both strings first.
- `compare_identity(a, b)` returns `id(a) - id(b)`, so it is zero only for the
  very same object.

```python
from utilkit.compare import compare_int
from utilkit.arrays import insertion_sort, index_of

values = [5, 2, 9, 1]
insertion_sort(values, compare_int)
assert values == [1, 2, 5, 9]
assert index_of(5, values, compare_int) == 2
assert index_of(7, values, compare_int) == -1
```

`insertion_sort` sorts in place and swaps neighbours while
`compare(earlier, later) >= 0`. `index_of` calls `compare(value, item)` and
returns -1 when nothing matches; passing `None` as the sequence raises
`TypeError`.

`larger(a, b)` returns `a` only when `a > b`, otherwise `b`; `smaller(a, b)`
returns `a` only when `a < b`, otherwise `b`.

## Hashing

`djb2_hash(text)` returns the 64-bit djb2 hash (start at 5381, then
`hash * 33 + c` for each character). Strings are hashed as UTF-8; bytes are
taken as signed characters, and hashing stops at the first zero byte. Any
other type raises `TypeError`. It is the default hash function of both hash
tables.

## Strings

`utilkit.string_checks` works on ASCII characters:

- `is_alpha` and `is_digit` are true for non-empty strings of ASCII letters or
  of the digits 0-9.
- `is_int` allows one leading minus sign before the digits.
- `is_double` allows a leading minus sign and at most one decimal point, which
  may come first or last (`".5"` and `"5."` pass); at least one digit is needed.
- `has_suffix(text, suffix)` is `text.endswith(suffix)`.

Non-string arguments raise `TypeError`.

`utilkit.string_funcs`:

```python
from utilkit.string_funcs import Alignment, add_padding, align, split, trim, case_format

assert split("a,,b;c", 5, ",;") == ["a", "b", "c"]
assert add_padding("x", None, 2, 1, ".") == "..x."
assert align("hi", 8, Alignment.CENTER, "*") == "***hi***"
assert align("hi", 5, "r") == "   hi"
assert trim("--name--", "-") == "name"
assert case_format("hELLO") == "Hello"
```

- `split(text, count, delimiters)` returns at most `count` non-empty pieces;
  any character of `delimiters` separates pieces and runs of them count as one.
  A `count` below 1 raises `ValueError`.
- `add_padding(text, width, front, back, fill=" ")` cuts the result to `width`
  characters; a `width` of `None` means no limit.
- `align(text, width, mode=Alignment.LEFT, fill=" ")` accepts an `Alignment`
  or its value `"l"`, `"r"`, `"c"`; when centring, an odd padding character goes
  at the end.
- `trim`, `trim_front` and `trim_end` strip one character (default a space);
  `fill` and `char` must be single characters.
- `to_upper`, `to_lower` and `case_format` change ASCII letters only;
  `remove_newline` removes one trailing `"\n"`.

## Lists and queues

```python
from utilkit.compare import compare_int
from utilkit.linked_list import LinkedList
from utilkit.linked_queue import LinkedQueue

numbers = LinkedList([3, 1])
numbers.insert_sorted(2, compare_int)
assert list(numbers) == [2, 3, 1]
numbers.push(0)
assert numbers.pop() == 0
assert numbers.indices_of(3, compare_int) == [1]

queue = LinkedQueue([1, 2])
queue.enqueue(3)
assert queue.dequeue() == 1
```

`LinkedList` supports `push`/`pop` at the head, `append`, `insert_at`,
`insert_sorted`, `remove_at`, `clear`, indexing, `find`, `find_all`,
`index_of` and `indices_of`. Indices run from 0 to `len - 1`; negative or
out-of-range indices raise `IndexError`, and `insert_at` only takes an
existing position (use `append` to add at the end). `pop` on an empty list
and `LinkedQueue.dequeue` on an empty queue raise `IndexError`.

`DoublyLinkedList` hands out `DoublyLinkedNode` objects: `add_head`,
`add_tail`, `insert_before(node, data)` (a `node` of `None` adds at the tail)
and `insert_sorted` return the new node, `remove(node)` returns its data, and
`node_at(index)` walks from whichever end is nearer. `head` and `tail` give
the end nodes, `nodes()` yields every node. Using a node from another list
raises `ValueError`.

`KeyValueList` holds `(key, data)` pairs in which keys may repeat. Lookups
take `compare(stored_key, key)` and default to equality: `find` returns the
first match's data or `None`, `find_all` and `values` return lists, `count`
counts matches, `remove` returns the data or raises `KeyError`, and
`remove_head` returns the first pair.

## Hash tables

```python
from utilkit.chained_hashtable import ChainedHashTable
from utilkit.robinhood_hashtable import RobinHoodHashTable

chained = ChainedHashTable(16)
chained.add("apple", 1)
chained.add("apple", 2)
assert chained.find_all("apple") == [2, 1]

robin = RobinHoodHashTable(4, max_load=0.75)
for n, word in enumerate(["a", "b", "c", "d"]):
    robin.add(word, n)
assert robin.find("c") == 2
assert robin.bucket_count == 8
```

`ChainedHashTable(bucket_count, hash_func=djb2_hash)` keeps a `KeyValueList`
per bucket. `add(key, data)` puts the pair first in its bucket; with a
`compare` it goes before the first stored key for which
`compare(stored, key) >= 0`. `chain_length(key)` reports the size of the
bucket a key hashes to, whether or not the key is in it.

`RobinHoodHashTable(bucket_count, max_load=0.0, hash_func=djb2_hash)` stores
pairs in one bucket array with Robin Hood probing. When the load reaches
`max_load`, `add` doubles the bucket count first. With `max_load` of 0,
rehashing is off and adding to a full table raises `TableFullError`.
`rehash(new_count)` raises `ValueError` unless `new_count` exceeds the current
bucket count times the load limit. `remove` raises `KeyError` for a missing
key; `clear` keeps the bucket count.

## Trees

```python
from utilkit.binary_tree import AddResult, BinaryTree
from utilkit.tree import TreeNode

tree = BinaryTree()
for value in [5, 3, 8, 3]:
    tree.add(value)
assert tree.add(8) is AddResult.REPEATED
assert list(tree) == [3, 5, 8]
assert list(tree.pre_order()) == [5, 3, 8]
assert len(tree) == 3

root = TreeNode("root")
first = root.add_child("first")
root.add_child("second")
first.add_child("leaf")
assert [data for data, _ in root.pre_order()] == ["root", "second", "first", "leaf"]
assert [node.data for node in root.deepest_nodes()] == ["leaf"]
```

`BinaryTree(compare)` orders by `compare(stored, new)` (natural order by
default). Adding an equal value increments the existing node's `count`
instead of adding a node, so `len` counts distinct values. `find` returns the
stored data or `None`; `in_order`, `pre_order` and `post_order` are
generators, and iterating the tree is in order.

`TreeNode` keeps its children newest first. `pre_order`, `in_order` and
`post_order` yield `(data, depth)` pairs starting at the given depth;
`find(key, compare=None)` searches depth first; `deepest_nodes` returns the
nodes at the greatest depth.

## Graphs

```python
from utilkit.graph import Graph, VertexState

graph = Graph()
a = graph.add("a")
b = graph.add("b")
c = graph.add("c")
a.connect(b)
b.connect(c)
assert list(a.breadth_first()) == ["a", "b", "c"]
assert list(a.breadth_first(1)) == ["a", "b"]
assert list(graph) == ["c", "b", "a"]
```

Edges are directed. `Vertex.connect`, `disconnect` (which raises `ValueError`
when there is no edge) and `is_connected` manage them; `adjacent()` yields the
data of the targets, newest edge first. `breadth_first(max_level=-1)` walks at
most `max_level` edges deep, or without limit when negative, and resets the
vertices' `state` and `level` when the walk ends. A vertex marked with
`VertexState.SKIP` (for example via `set_adjacent_state`) is walked through
but not reported. `Graph.remove(vertex)` drops the vertex and all its edges
and returns its data; `Graph.find` returns a `Vertex` or `None`.

## Typed arrays

```python
import io
from utilkit.typed_array import TypedArray
from utilkit.typed_array_io import read_binary, write_binary, write_text

digits = TypedArray("i", [4, 2, 7])
digits.insertion_sort()
assert list(digits) == [2, 4, 7]
assert digits.to_int() == 247

buffer = io.BytesIO()
write_binary(digits, buffer)
buffer.seek(0)
assert read_binary(buffer) == digits

text = io.StringIO()
write_text(digits, "%d", ", ", text)
assert text.getvalue() == "2, 4, 7"
```

`TypedArray(typecode, items)` uses the typecodes of the standard `array`
module. `to_int` reads integer items as decimal digits and raises `TypeError`
for non-integer arrays; `from_bytes` and `to_bytes` convert to and from the
machine representation.

`write_binary` writes a 24-byte header (typecode, item size and length, in
native byte order) followed by the items. `read_binary` raises `EOFError` at a
clean end of input and `ValueError` for a truncated or inconsistent record; a
header with an empty typecode is read as signed integers of the recorded item
size. `write_text` formats each item with `fmt % item`.

## Dates

```python
from utilkit.date import Date, is_leap_year

assert Date(29, 2, 2024).is_valid(1900, 2100)
assert not Date(29, 2, 1900).is_valid(1800, 2100)
assert not is_leap_year(2100)
```

## Prompts

`read_value(prompt, parse=str, max_len=256, stream=None, out=None)` writes the
prompt, reads at most `max_len - 1` characters of a line and returns `parse`
applied to the first word; a blank line raises `ValueError`, end of input
`EOFError`. `read_full_line` returns the line with its newline, `read_line`
without it. `stream` and `out` default to standard input and output.

`open_from_prompt(mode="r", suffix="", prompt="", max_len=256, cwd=None, ...)`
reads a file name, checks its suffix and opens it (relative to `cwd` when
given). It raises `NoFileNameError`, `WrongSuffixError` or `FileOpenError`,
all subclasses of `FilePromptError`.

## What it does not do

utilkit is a library only: it installs no command-line program. The hash
tables and containers live in memory; apart from `typed_array_io`, nothing is
written to disk.