# balternary

Fixed-width balanced ternary integers.

Every position (a *trit*) holds one of three values: `-` (−1), `0` or `+` (+1).
A `Number` has a fixed width that is chosen when it is made. Trits that do not fit are dropped, and shorter inputs are padded with zeros. Arithmetic wraps within that width: a carry out of the highest position is lost.

## Installation

```
pip install .
```

## Trits

`balternary.trit` provides the `Trit` enum (`NEG`, `ZERO`, `POS`) and `SumResult`, a frozen dataclass that holds the `result` and `carry` trits of an addition.

```python
from balternary.trit import Trit

Trit.from_char("+")                          # Trit.POS
Trit.POS.negate()                            # Trit.NEG
Trit.POS.add(Trit.POS)                       # SumResult(result=-, carry=+)
Trit.POS.add_with_carry(Trit.POS, Trit.NEG)  # SumResult(result=+, carry=0)
str(Trit.NEG)                                # "-"
```

Trits are ordered `NEG < ZERO < POS`. Both `str()` and `repr()` of a trit give its symbol.
`Trit.from_char` raises `ValueError` for anything other than `-`, `0` or `+`.

## Numbers

`balternary.number` provides `Number` and `number_sum`. Strings are written with the most significant trit first:

```python
from balternary.number import Number, number_sum
from balternary.trit import Trit

a = Number.from_str("+0--", 8)   # 23
b = Number.from_str("++-0", 8)   # 33

int(a + b)      # 56
int(a - b)      # -10
int(a * b)      # 759
int(b // a)     # 1; integer division rounds towards zero
str(a)          # "0000+0-- (23)"
repr(a)         # "Number.from_str('0000+0--', 8)"

n = Number.from_str("-0+", 8)    # -8
n << 2          # a new number shifted left by two trits (times 9)
-n              # negation swaps every + and -
n.inc()         # adds one in place
n.dec()         # subtracts one in place
n += Trit.POS   # adds a single trit in place, like n.add_trit(Trit.POS)

int(number_sum(8, [a, b, a]))    # 79
```

Other ways to make a number:

- `Number(width)` or `Number.zero(width)` gives zero.
- `Number(width, trits)` takes exactly `width` trits, most significant first.
- `Number.from_rev_iter(width, trits)` takes trits least significant first, dropping any beyond the width.

`width` and `trits` are read-only properties, and `copy()` gives an independent copy. The in-place operators `+=`, `-=`, `*=`, `//=` and `<<=` change the number itself.

Numbers of the same width compare by value, and numbers can be used as dictionary keys. Numbers of different widths are never equal. Ordering them, or doing arithmetic on them together, raises `ValueError`.
Dividing by zero raises `ZeroDivisionError`, and a negative shift count raises `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```