"""Accumulators fed one token character at a time by the scanning loop.

Each accumulator starts at its zero value, so a scan that hits end-of-input
before any token character yields "", 0 or 0.0.

Numeric parsing is deliberately lenient:
  - '-' only counts as a sign when it is the first token character
  - any character that is not a digit (or the first '.', for floats) is
    skipped and accumulation continues
  - a token with no digits parses as zero
"""

from dataclasses import dataclass, field


def _digit(c: str) -> int:
    """Value of an ASCII decimal digit, or -1."""
    if "0" <= c <= "9":
        return ord(c) - 48
    return -1


@dataclass(slots=True)
class TokenAccumulator:
    chars: list[str] = field(default_factory=list)

    def feed(self, c: str) -> None:
        self.chars.append(c)

    def result(self) -> str:
        return "".join(self.chars)


@dataclass(slots=True)
class IntAccumulator:
    value: int = 0
    negative: bool = False
    seen_first: bool = False

    def feed(self, c: str) -> None:
        if not self.seen_first:
            self.negative = c == "-"
            self.seen_first = True
        d = _digit(c)
        if d >= 0:
            self.value = self.value * 10 + d

    def result(self) -> int:
        return -self.value if self.negative else self.value


@dataclass(slots=True)
class FloatAccumulator:
    """Folds "3.14" into 3 + 1*0.1 + 4*0.01 without building a string."""
    value: float = 0.0
    negative: bool = False
    seen_first: bool = False
    in_fraction: bool = False
    fraction_weight: float = 0.0

    def feed(self, c: str) -> None:
        if not self.seen_first:
            self.negative = c == "-"
            self.seen_first = True
        if c == "." and not self.in_fraction:
            self.in_fraction = True
            self.fraction_weight = 0.1
            return
        d = _digit(c)
        if d < 0:
            return
        if self.in_fraction:
            self.value += d * self.fraction_weight
            self.fraction_weight /= 10.0
        else:
            self.value = self.value * 10 + d

    def result(self) -> float:
        return -self.value if self.negative else self.value
