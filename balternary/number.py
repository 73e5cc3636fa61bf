"""Fixed-width balanced-ternary integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice

from balternary.trit import Trit

__all__ = ["Number", "number_sum"]


class Number:
    """A balanced-ternary integer held in a fixed number of trits.

    Trits are stored most significant first. Arithmetic wraps silently:
    any carry out of the highest position is lost.
    """

    __slots__ = ("_width", "_trits")

    def __init__(self, width: int, trits: Iterable[Trit] | None = None) -> None:
        if width < 0:
            raise ValueError(f"width must not be negative, got {width}")
        self._width = width
        if trits is None:
            self._trits = [Trit.ZERO] * width
            return
        digits = list(trits)
        if len(digits) != width:
            raise ValueError(f"expected {width} trits, got {len(digits)}")
        if not all(isinstance(t, Trit) for t in digits):
            raise TypeError("trits must all be Trit values")
        self._trits = digits

    @classmethod
    def zero(cls, width: int) -> Number:
        """The number zero at the given width."""
        return cls(width)

    @classmethod
    def from_rev_iter(cls, width: int, source: Iterable[Trit]) -> Number:
        """Build a number from trits given least significant first.

        Trits beyond the width are dropped; missing high trits are zero.
        """
        low_first = list(islice(source, width))
        low_first.extend([Trit.ZERO] * (width - len(low_first)))
        return cls(width, reversed(low_first))

    @classmethod
    def from_str(cls, encoded: str, width: int) -> Number:
        """Parse a string of '-', '0' and '+' written most significant first."""
        return cls.from_rev_iter(width, (Trit.from_char(c) for c in reversed(encoded)))

    @property
    def width(self) -> int:
        """The number of trits held."""
        return self._width

    @property
    def trits(self) -> tuple[Trit, ...]:
        """The trits, most significant first."""
        return tuple(self._trits)

    def copy(self) -> Number:
        """An independent copy of this number."""
        return Number(self._width, self._trits)

    def add_trit(self, trit: Trit) -> None:
        """Add a single trit at the lowest position, in place."""
        carry = trit
        low_first = []
        for current in reversed(self._trits):
            if carry is Trit.ZERO:
                low_first.append(current)
                continue
            step = current.add(carry)
            low_first.append(step.result)
            carry = step.carry
        low_first.reverse()
        self._trits = low_first

    def inc(self) -> None:
        """Add one, in place."""
        self.add_trit(Trit.POS)

    def dec(self) -> None:
        """Subtract one, in place."""
        self.add_trit(Trit.NEG)

    def _check_width(self, other: Number) -> None:
        if other._width != self._width:
            raise ValueError(
                f"width mismatch: {self._width} and {other._width}"
            )

    def _sum_trits(self, other: Number) -> list[Trit]:
        self._check_width(other)
        carry = Trit.ZERO
        low_first = []
        for lhs, rhs in zip(reversed(self._trits), reversed(other._trits)):
            step = lhs.add_with_carry(rhs, carry)
            low_first.append(step.result)
            carry = step.carry
        low_first.reverse()
        return low_first

    def __neg__(self) -> Number:
        return Number(self._width, (t.negate() for t in self._trits))

    def _shifted_trits(self, positions: int) -> list[Trit]:
        if positions < 0:
            raise ValueError("shift count must not be negative")
        if positions >= self._width:
            return [Trit.ZERO] * self._width
        return self._trits[positions:] + [Trit.ZERO] * positions

    def __lshift__(self, positions: int) -> Number:
        if not isinstance(positions, int):
            return NotImplemented
        return Number(self._width, self._shifted_trits(positions))

    def __ilshift__(self, positions: int) -> Number:
        if not isinstance(positions, int):
            return NotImplemented
        self._trits = self._shifted_trits(positions)
        return self

    def __add__(self, other: Number) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        return Number(self._width, self._sum_trits(other))

    def __iadd__(self, other: Number | Trit) -> Number:
        if isinstance(other, Trit):
            self.add_trit(other)
            return self
        if not isinstance(other, Number):
            return NotImplemented
        self._trits = self._sum_trits(other)
        return self

    def __sub__(self, other: Number) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        return self + -other

    def __isub__(self, other: Number) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        self._trits = self._sum_trits(-other)
        return self

    def _shifts(self) -> Iterator[Number]:
        current = self
        while True:
            yield current
            current = current << 1

    def __mul__(self, other: Number) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        self._check_width(other)
        partials = (
            -shifted if digit is Trit.NEG else shifted
            for digit, shifted in zip(reversed(self._trits), other._shifts())
            if digit is not Trit.ZERO
        )
        return number_sum(self._width, partials)

    def __imul__(self, other: Number) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        self._trits = (self * other)._trits
        return self

    def __floordiv__(self, divisor: Number) -> Number:
        """Integer division rounding toward zero."""
        if not isinstance(divisor, Number):
            return NotImplemented
        self._check_width(divisor)
        zero = Number.zero(self._width)
        if divisor == zero:
            raise ZeroDivisionError("Attempt to divide by zero")

        numerator_negative = self < zero
        remainder = -self if numerator_negative else self.copy()
        divisor_negative = divisor < zero
        abs_divisor = -divisor if divisor_negative else divisor

        quotient = Number.zero(self._width)
        while remainder >= abs_divisor:
            remainder -= abs_divisor
            quotient.inc()

        return -quotient if numerator_negative != divisor_negative else quotient

    def __ifloordiv__(self, divisor: Number) -> Number:
        if not isinstance(divisor, Number):
            return NotImplemented
        self._trits = (self // divisor)._trits
        return self

    def __int__(self) -> int:
        return sum(t.value * 3**idx for idx, t in enumerate(reversed(self._trits)))

    def __str__(self) -> str:
        return "".join(str(t) for t in self._trits) + f" ({int(self)})"

    def __repr__(self) -> str:
        digits = "".join(str(t) for t in self._trits)
        return f"Number.from_str({digits!r}, {self._width})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._width == other._width and self._trits == other._trits

    def __hash__(self) -> int:
        return hash((self._width, tuple(self._trits)))

    def _key(self, other: Number) -> tuple[tuple[int, ...], tuple[int, ...]]:
        self._check_width(other)
        return (
            tuple(t.value for t in self._trits),
            tuple(t.value for t in other._trits),
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        mine, theirs = self._key(other)
        return mine < theirs

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        mine, theirs = self._key(other)
        return mine <= theirs

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        mine, theirs = self._key(other)
        return mine > theirs

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        mine, theirs = self._key(other)
        return mine >= theirs


def number_sum(width: int, numbers: Iterable[Number]) -> Number:
    """Add up numbers of the given width, starting from zero."""
    total = Number.zero(width)
    for number in numbers:
        total += number
    return total