from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

T = TypeVar('T')


@dataclass(order=True, frozen=True)
class Span(Generic[T]):
    """
    A closed interval [a, b] over any totally ordered element type.

    Endpoints are always stored with a <= b; reversed input is swapped.
    The endpoints are read-only, merge() is the only way to move them.
    The generated ordering compares (a, b) lexicographically, which is the
    order every set-level algorithm sorts by.

    Element types without a total order (float NaN, sets) give unspecified
    results.
    """

    a: T
    b: T

    def __post_init__(self) -> None:
        if self.a > self.b:
            low, high = self.b, self.a
            self._set(low, high)

    def _set(self, low: T, high: T) -> None:
        object.__setattr__(self, 'a', low)
        object.__setattr__(self, 'b', high)

    @classmethod
    def zero(cls, kind: Callable[[], T] = int) -> 'Span[T]':
        """The default span, with both endpoints set to kind()."""
        value = kind()
        return cls(value, value)

    @classmethod
    def of(cls, value: 'Span[T] | Sequence[T]') -> 'Span[T]':
        """
        Builds a new span from a span or a (low, high) pair.
        Spans are copied, never shared.
        """
        if isinstance(value, Span):
            return cls(value.a, value.b)
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise TypeError(f"Invalid span value: {value!r}. Must be Span or a (low, high) pair.")
        if len(value) != 2:
            raise TypeError(f"Span pairs must have exactly 2 endpoints: {value!r}")
        low, high = value
        return cls(low, high)

    def copy(self) -> 'Span[T]':
        return type(self)(self.a, self.b)

    def intersects(self, other: 'Span[T]') -> bool:
        """
        Do the spans overlap? Touching endpoints count.

        Me:        [-----]
        Span:         [----]
        """
        return self.b >= other.a and self.a <= other.b

    def contains(self, other: 'Span[T]') -> bool:
        """
        Does this span completely contain the other one?

        Me:        [-------------------]
        Span:         [----]
        """
        return self.a <= other.a and self.b >= other.b

    def covers(self, value: T) -> bool:
        return self.a <= value <= self.b

    def equals(self, other: 'Span[T]') -> bool:
        return self.a == other.a and self.b == other.b

    def merge(self, other: 'Span[T]') -> bool:
        """
        Widens this span to cover the other one, in place.

        Me:        [-----]
        Span:         [----]
        Result:    [-------]

        Spans that do not intersect are left alone. Returns whether the
        merge happened.
        """
        if not self.intersects(other):
            return False
        self._set(min(self.a, other.a), max(self.b, other.b))
        return True

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore

    def __str__(self) -> str:
        return f"({self.a},{self.b})"
