# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and only these operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb` | swap the top two elements of `a` / `b` |
| `pa`, `pb` | move the top of `b` onto `a` / the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a` / `b` / both upwards: the top goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate `a` / `b` / both downwards: the bottom goes to the top |

It prints, one per line, the operations that sort stack `a` in ascending
order, the first argument being the top of the stack.

## Installation

```
pip install .
```

## Command line

```
pushswap 3 2 1
pushswap "4 67 3 87 23"
```

Arguments may be passed separately or together in one quoted string, the
values separated by spaces. Every value must consist of digits (and a minus
sign) and fit in a signed 32-bit integer, and no value may appear twice.
Invalid input writes `Error` (or `Singletons error` for a repeated value) to
standard error and exits with status 1. Running the command with no
arguments also exits with status 1.

Input that is already sorted produces no output. Otherwise the values are
first replaced by their ranks (0 for the smallest); up to six values are then
sorted with a short insertion strategy, larger inputs with a binary radix
sort. When the resulting stack is sorted, the text `lets go` is written after
the operations, without a trailing newline.

## Library use

```python
from pushswap.stacks import Stacks
from pushswap.algorithms import normalize, little_sort, radix_sort

ops = []
stacks = Stacks(normalize([5, 1, 4, 2, 3, 9, 0]), emit=ops.append)
radix_sort(stacks)
print(ops)
print(stacks.a)
```

`Stacks` holds the two stacks as lists (`a` and `b`, top first) and reports
every operation name to `emit`; by default each name is written to standard
output on its own line. The plain list operations `push`, `swap`, `rotate`
and `reverse_rotate` are in `pushswap.stacks` as well.

`pushswap.algorithms` provides `normalize`, `small_sort_a`, `small_sort_b`,
`little_sort`, `radix_sort` and `sort`.

`pushswap.parsing` validates and parses arguments (`parse`, `is_int`,
`check_args`, `check_unique`, `atol`) and raises `PushSwapError` when the
input is invalid. `pushswap.piles` holds helpers such as `is_sorted`,
`is_reverse_sorted`, `get_min`, `get_max`, `seek_max_index`, `bubble_sort`
and `pile_quantile`. `pushswap.debug` renders a pile as text
(`format_pile`, `format_bits`, `format_pile_bits`,
`format_pile_unsigned_bits`).

The package also ships small helper modules:

- `pushswap.chars`: character tests, case mapping, `atoi` and `itoa`
- `pushswap.strings`: searching, comparing, joining, splitting and trimming
- `pushswap.memory`: byte-buffer helpers on `bytearray` and `memoryview`
- `pushswap.linked`: a singly linked list (`LinkedList`, `Node`)
- `pushswap.output`: writing characters, strings and numbers to a stream
- `pushswap.printf`: a small `printf` / `format_printf` supporting the
  `c s p d i u x X %` conversions

## Tests

```
pip install ".[test]"
pytest
```