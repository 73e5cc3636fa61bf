"""Single balanced-ternary digits and their addition rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["SumResult", "Trit"]

_SYMBOLS = {"-": -1, "0": 0, "+": 1}


class Trit(Enum):
    """A balanced-ternary digit: negative, zero or positive."""

    NEG = -1
    ZERO = 0
    POS = 1

    @classmethod
    def from_char(cls, encoded: str) -> Trit:
        """Parse one of the characters '-', '0' or '+'."""
        try:
            return cls(_SYMBOLS[encoded])
        except (KeyError, TypeError):
            raise ValueError(f"Fail to parse invalid trit {encoded}") from None

    def negate(self) -> Trit:
        """Return the opposite trit; zero is its own negation."""
        return Trit(-self.value)

    def add(self, rhs: Trit) -> SumResult:
        """Add two trits, giving the result trit and the carry."""
        if rhs is Trit.ZERO:
            return SumResult(self, Trit.ZERO)
        if self is Trit.ZERO:
            return SumResult(rhs, Trit.ZERO)
        if self is rhs:
            return SumResult(self.negate(), self)
        return SumResult(Trit.ZERO, Trit.ZERO)

    def add_with_carry(self, rhs: Trit, carry: Trit) -> SumResult:
        """Add three trits, giving the result trit and the carry."""
        if self is Trit.ZERO:
            return rhs.add(carry)
        if rhs is Trit.ZERO:
            return self.add(carry)
        if carry is Trit.ZERO:
            return self.add(rhs)
        # Any two that cancel leave the third as the result.
        if self.negate() is rhs:
            return SumResult(carry, Trit.ZERO)
        if self.negate() is carry:
            return SumResult(rhs, Trit.ZERO)
        if rhs.negate() is carry:
            return SumResult(self, Trit.ZERO)
        # All three are equal.
        return SumResult(Trit.ZERO, self)

    def __str__(self) -> str:
        return {-1: "-", 0: "0", 1: "+"}[self.value]

    def __repr__(self) -> str:
        return str(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Trit):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Trit):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Trit):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Trit):
            return NotImplemented
        return self.value >= other.value


@dataclass(frozen=True)
class SumResult:
    """The outcome of adding trits: the digit kept and the digit carried."""

    result: Trit
    carry: Trit