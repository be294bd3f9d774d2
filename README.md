# ldnkit

Small data structures and helpers: a numeric `Vector`, integer arrays and
matrices, single-line strings, a binary tree and a singly linked list. Each
one reads from text streams and reads and writes simple
whitespace-separated text files. The package depends only on the standard
library.

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

### `ldnkit.errors`

This module defines the exception hierarchy. `LdnError` is the base class.
Its subclasses are:

- `MathError`, which carries a `value`.
- `ZeroDivision`, which is also a `ZeroDivisionError`. Its value is always 0.
- `NegativeRoot`, which is also a `ValueError`. It stores the absolute value
  it is given.
- `InvalidIndex`, which is also an `IndexError`.
- `NullPointer`, which is also a `ValueError`.
- `FileError`, which carries a `path`.

`str()` of an error gives a title line, then the message. Math errors add the
value, and `FileError` adds the path.

The module also has these guard functions. Each one returns its argument when
the argument is valid:

- `check_division(denominator)` raises `ZeroDivision` when the denominator is 0.
- `check_root(value)` raises `NegativeRoot` for a negative value. The value it
  carries is the square root of `abs(value)`.
- `check_index(index, size)` raises `InvalidIndex` unless `0 <= index < size`.
  Negative indices are rejected.
- `check_pointer(pointer)` raises `NullPointer` for `None`.

`open_file(path, mode="r")` opens a file. Text modes use UTF-8. It raises
`FileError` when the file cannot be opened.

### `ldnkit.vector`

`Vector(size)` is a numeric vector whose elements all start at zero. A
negative size raises `ValueError`.

- Access: `v[i]`, `v[i] = x`, `get(index)` and `set(element, index)`. All of
  these check the index and raise `InvalidIndex` when it is out of range. A
  vector also supports `len()` and iteration.
- Input: `scan(stream)` fills every element from whitespace-separated numbers
  in a text stream.
- Files: `load(path)` reads a file that holds the size and then the elements.
  `save(path)` writes the size and then one element per line.
- Display: `format()` returns a numbered listing of the elements.
- Editing: `resize(newsize)` truncates the vector or pads it with zeros.
  `swap(i, j)` exchanges two elements, `sort()` sorts them, `reverse()`
  reverses their order, and `scale(scalar)` multiplies every element.
- Queries: `is_null()`, `count(element)`, `is_sorted()`, `norm()` and
  `is_normalized()`. `is_normalized()` uses a tolerance of 1e-6.
- `normalize()` scales the vector to unit length. It raises `ZeroDivision`
  for a null vector.

### `ldnkit.vector_ops`

- `vector_equal(v1, v2)`: true when both vectors have the same size and the
  same elements.
- `vector_sum(v1, v2)`: returns a new `Vector` that holds the element-wise sum.
- `scalar_product(v1, v2)`: the dot product.
- `orthogonal(v1, v2)`: true when the dot product is zero.
- `orthonormal(v1, v2)`: true when both vectors have unit length and are
  orthogonal.

`vector_sum` and `scalar_product` raise `ValueError` when the sizes differ.

### `ldnkit.arrays`

Functions for lists of integers:

- `swap(items, i, j)` exchanges two elements. It checks both indices.
- `read_array(stream, size)` reads `size` integers from a text stream.
- `format_array(values)` returns the elements numbered and tab-separated.
- `load_array(path)` reads a file that holds the count and then the elements.
- `save_array(values, path)` writes the count on one line and then the
  elements separated by spaces.
- `bubble_sort(values)` sorts the list in place.

### `ldnkit.matrix`

Integer matrices are lists of rows.

- `read_matrix(stream, rows, cols)` reads the elements from a text stream.
- `format_matrix(matrix)` returns a listing with each cell labelled by its
  row and column.
- `load_matrix(path)` reads a file that holds the row and column counts and
  then the elements.
- `save_matrix(matrix, path)` writes the dimensions and then each row.
- `bubble_sort_matrix(matrix)` sorts all elements in place, in row-major
  order.

Rows of unequal length raise `ValueError`.

### `ldnkit.strings`

`MAX_LENGTH` is 999.

- `read_string(stream)` reads one line, keeping its newline and up to
  `MAX_LENGTH - 1` characters. It raises `EOFError` at the end of the stream.
- `format_string(text)` describes the text. When the text is `None` it
  reports that the string is empty.
- `load_string(path)` returns the first line of a file without its newline.
- `save_string(text, path)` writes the text as it is. It raises `NullPointer`
  when the text is `None`.

### `ldnkit.tree`

`Leaf(number, depth=0, father=0, child=0)` is a node of a binary tree. Each
leaf has at most `MAX_CHILDREN` (2) children.

- `add_child(number)` attaches a new child and returns it.
- Iterating over a leaf yields that leaf and then its subtree, depth first.
- `label` gives the leaf's position as `depth.index`.

`read_tree(stream)` builds a tree from integers. For each leaf it reads the
number and then the child count, and it reads children depth first. Negative
numbers, and child counts outside 0..2, are skipped and read again.

`format_tree(root)` returns an indented drawing of the tree. When the root is
`None` it returns `"Empty Tree!\n"`.

### `ldnkit.linked_list`

`Node(number, position, next=None)` is a node. `swap_nodes(a, b)` exchanges
the number and position of two nodes and leaves their links as they are.

`LinkedList()` is a singly linked list of nodes. Positions start at 1.

- `append(number)` adds a node at the end and returns it.
- `read_node(stream)` appends the first non-negative integer read from a
  text stream.
- A list supports iteration over its nodes and `len()`.
- `format()` returns a listing of the nodes.
- `LinkedList.from_file(path)` reads a file that holds the count and then the
  numbers.
- `save(path)` writes a listing of the nodes to a file.
- `sort()` is a bubble sort by number. Each node keeps its original position
  with its number. Sorting an empty list raises `ValueError`.
- `remove(position)` removes a node and returns its number. The positions of
  the nodes after it are each lowered by one. When the list is empty or the
  position is not found, it raises `InvalidIndex`.

## Example

```python
from ldnkit.vector import Vector
from ldnkit.vector_ops import scalar_product, orthogonal

a = Vector(2)
a[0] = 1.0
b = Vector(2)
b[1] = 1.0

print(scalar_product(a, b))  # 0.0
print(orthogonal(a, b))      # True

a.save("a.txt")              # writes the size, then one element per line
```

## Errors

- An invalid index raises `InvalidIndex`.
- A file that cannot be opened raises `FileError`.
- Dividing by a zero norm raises `ZeroDivision`.

These errors are subclasses of `LdnError`. Some other errors are ordinary
built-in exceptions:

- Malformed or short input, and mismatched sizes, raise `ValueError`.
- Running out of input in `read_string`, `read_tree` and
  `LinkedList.read_node` raises `EOFError`.

## What this package does not do

The package has no command-line program and no interactive prompts.
Functions that read input take a text stream, such as `sys.stdin`. Display
functions return strings, and the caller decides whether to print them.
`Vector` has no arithmetic operators. Combine vectors with the functions in
`ldnkit.vector_ops`.