# algonotes

Small, readable implementations of classic algorithms and data structures,
written for study. Each module covers one topic. There are no dependencies
beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
algonotes
```

prints `Hello World!` and exits with status 0. It takes no options apart
from `--help`.

## Modules

### `algonotes.carray`

Functions that treat a plain list of integers as a simple array. Functions
that change an array work in place. Functions that combine arrays return a
new list.

- `append(values, x, capacity=None)` appends `x` unless the list already
  holds `capacity` items.
- `insert(values, index, x)`, `delete(values, index)` and
  `set_item(values, index, x)` ignore indices that are out of range.
- `get(values, index)` returns `-1` for an out-of-range index.
- `reverse`, and `rearrange`, which moves negative values to the front and
  non-negative values to the back.
- `total`, `average`, and `is_sorted`.
- `maximum` and `minimum` raise `ValueError` on an empty list.
- Functions for sorted input: `merge`, `union_sorted` (keeps one copy of a
  shared item), `intersection_sorted` and `difference_sorted`.
- `display(values, file=None)` writes each value followed by a space, then
  a newline. It writes to standard output unless given a file.

### `algonotes.fixed_array`

`Array(size)` is an integer array that holds at most `size` items.
`append` and `insert` do nothing once the array is full. It supports
`len()` and iteration, and has the same operations as methods: `append`,
`insert`, `delete`, `get`, `set`, `reverse`, `rearrange`, `sum`,
`average`, `max`, `min`, `is_sorted` and `display`.

`merge`, `union_sorted`, `intersection_sorted` and `difference_sorted`
return new `Array` objects.

### `algonotes.binarysearch`

- `binary_search(values, key)` returns the index of `key` or `-1`.
- `binary_search_recursive(values, low, high, key)` searches the inclusive
  range `low..high`.

### `algonotes.linearsearch`

- `linear_search(values, key)` returns the index of `key` or `-1`.
- `linear_search_swap(values, key)` also swaps the found item one place
  towards the front.
- `linear_search_head(values, key)` also moves the found item to the front.

Both of these return the index at which the item was found.

### `algonotes.strings`

- `is_anagram(first, second)` and `is_palindrome(text)` return `False`
  when given `None`.
- `reverse_string(text)` returns the text reversed.
- `duplicates_in_string(text)` returns a bit mask with bit `ord(c) - ord('a')`
  set for every character that appears more than once. It raises
  `ValueError` for a character that does not fit in a 64-bit mask.
- `string_permutations(text)` and `string_permutations_swap(text)` are
  generators. Each yields every arrangement of the characters, the second
  in the order produced by swapping in place.

### `algonotes.numbers`

- `factorial_recursive`, which raises `ValueError` for negative `n`, and
  `factorial_iterative`.
- `fibonacci_recursive`, `fibonacci_iterative` and `fibonacci_memoized`.
- `fizz_buzz(n)`.
- `power_recursive(n, p)` and `power_optimized(n, p)`. The second uses
  repeated squaring. Both raise `ValueError` for a negative exponent.
- `sum_of_n_recursive`, `sum_of_n_formula` and `sum_of_n_iterative`.
- `ncr(n, r)`, which raises `ValueError` unless `0 <= r <= n`.
- `nested_recursion(n)`, the "McCarthy 91" function.
- `reverse_int(n)`, which reverses the digits and keeps the sign.

### `algonotes.traces`

Each of these generators yields the values that a recursion shape visits:

- `head_recursion(n)` gives `1..n` in ascending order.
- `tail_recursion(n)` gives `n..1` in descending order.
- `tree_recursion(n)` visits `n`, then recurses twice on `n - 1`.
- `indirect_recursion(n)` alternates between subtracting one and halving.

### `algonotes.linkedlist`

`LinkedList` is a singly linked list. It has `add(data)`, which appends at
the tail, `len()`, iteration, `sum()` and `display(file=None)`.

### `algonotes.matrix`

- `Matrix(dimension)` is a dense square matrix with 1-based `get(i, j)`
  and `set(i, j, x)`. Positions outside the matrix raise `IndexError`.
- `DiagonalMatrix` stores only its diagonal.
- `LowerTriangularMatrix` stores only the entries on and below the
  diagonal.

In both compact kinds, writes outside the stored region are ignored and
reads there return `0`. `str()` and `display()` give rows of entries, each
entry followed by a space.

`SparseMatrix(m, n, num)` holds `SparseElement(i, j, x)` entries with
0-based indices:

- `read(text)` parses `num` whitespace-separated "row column value"
  triples. It raises `ValueError` if there are too few.
- `+` merges two matrices whose entries are sorted by row and column.
  Matrices of different shapes give an empty `0 x 0` matrix.
- `str()` renders the full grid.

### `algonotes.polynomial`

`Polynomial(terms)` is built from `PolynomialTerm(coeff, exp)` values in
descending exponent order. `add` (or `+`) merges two polynomials, adding
the coefficients of equal exponents. `str()` renders the polynomial, for
example `1x^2 + 2x^1 + 3`. `display(file=None)` writes it with a newline.

## Examples

```python
from algonotes.binarysearch import binary_search
from algonotes.numbers import fizz_buzz, ncr
from algonotes.polynomial import Polynomial, PolynomialTerm

binary_search([1, 2, 3], 3)        # 2
binary_search([1, 2, 3], 4)        # -1
fizz_buzz(15)                      # "FizzBuzz"
ncr(6, 3)                          # 20

p = Polynomial([PolynomialTerm(1, 2), PolynomialTerm(2, 1), PolynomialTerm(3, 0)])
print(p + p)                       # 2x^2 + 4x^1 + 6
```

```python
from algonotes.matrix import SparseMatrix

a = SparseMatrix(3, 3, 3).read("0 0 1\n1 1 2\n2 2 3\n")
str(a)                             # "1 0 0 \n0 2 0 \n0 0 3 \n"
```