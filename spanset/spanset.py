"""
Sets of spans and the algebra over them.

A SpanSet keeps its spans in insertion order, duplicates and overlaps
included. Every set-level operation sorts a private copy, scans it once and
returns a new SpanSet, so the receiver is only ever changed by sort() and
append().
"""

from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator, List, Sequence, Tuple, TypeVar, Union
import logging

from spanset.span import Span


T = TypeVar('T')

SpanLike = Union[Span[T], Sequence[T]]


class ScanMode(Enum):
    # Stop at the first miss that follows a run of hits in sorted order.
    # Only complete when hits are contiguous in start order.
    EARLY_STOP = 'early-stop'
    # Test every span.
    FULL = 'full'


class SpanSet(Generic[T]):
    def __init__(self, values: Iterable[SpanLike[T]] = ()) -> None:
        """
        Copies each span or (low, high) pair into the set, in the given
        order. Nothing is sorted or deduplicated.
        """
        self._spans: List[Span[T]] = [Span.of(value) for value in values]

    @classmethod
    def _wrap(cls, spans: List[Span[T]]) -> 'SpanSet[T]':
        # Takes ownership of a list that nothing else references.
        result = cls()
        result._spans = spans
        return result

    @property
    def spans(self) -> Tuple[Span[T], ...]:
        return tuple(span.copy() for span in self._spans)

    def empty(self) -> bool:
        return not self._spans

    def length(self) -> int:
        return len(self._spans)

    def append(self, span: SpanLike[T]) -> None:
        self._spans.append(Span.of(span))

    def sort(self) -> None:
        self._spans.sort()

    def copy(self) -> 'SpanSet[T]':
        return self._wrap([span.copy() for span in self._spans])

    def sorted_copy(self) -> 'SpanSet[T]':
        result = self.copy()
        result.sort()
        return result

    def _scan(
        self,
        matches: Callable[[Span[T]], bool],
        scan: ScanMode,
    ) -> 'SpanSet[T]':
        found: List[Span[T]] = []
        for span in self.sorted_copy()._spans:
            if matches(span):
                found.append(span)
            elif found and scan is ScanMode.EARLY_STOP:
                break
        return self._wrap(found)

    def contained_in(
        self,
        boundary: Span[T],
        scan: ScanMode = ScanMode.EARLY_STOP,
    ) -> 'SpanSet[T]':
        """
        Returns, sorted, the spans of this set that lie inside boundary.

        With ScanMode.EARLY_STOP only the first contiguous run of contained
        spans (in sorted order) is returned: the scan ends at the first span
        that is not contained once a contained one has been seen. Sets where
        a long span sorts between two short contained ones lose the spans
        after the gap. Pass ScanMode.FULL to test every span.
        """
        result = self._scan(boundary.contains, scan)
        logging.debug(f"contained_in {boundary} ({scan.value}): {self.length()} -> {result.length()} spans")
        return result

    def intersected_in(
        self,
        boundary: Span[T],
        scan: ScanMode = ScanMode.EARLY_STOP,
    ) -> 'SpanSet[T]':
        """
        Returns, sorted, the spans of this set that intersect boundary.

        Same scan contract as contained_in(): the early-stop scan can miss
        spans when a short non-intersecting span sorts between intersecting
        ones.
        """
        result = self._scan(boundary.intersects, scan)
        logging.debug(f"intersected_in {boundary} ({scan.value}): {self.length()} -> {result.length()} spans")
        return result

    def merge_spans(self, other: 'SpanSet[T] | None' = None) -> 'SpanSet[T]':
        """
        Returns the minimal sorted set of disjoint spans covering the same
        points as this set and other together. O(n log n).
        """
        combined = [span.copy() for span in self._spans]
        if other is not None:
            combined.extend(span.copy() for span in other._spans)
        combined.sort()

        merged: List[Span[T]] = []
        if combined:
            current = combined[0]
            for span in combined[1:]:
                if not current.merge(span):
                    merged.append(current)
                    current = span
            merged.append(current)

        logging.debug(f"merge_spans: {len(combined)} -> {len(merged)} spans")
        return self._wrap(merged)

    def __add__(self, other: 'SpanSet[T]') -> 'SpanSet[T]':
        if not isinstance(other, SpanSet):
            return NotImplemented
        return self.merge_spans(other)

    def is_identical_to(self, other: 'SpanSet[T]') -> bool:
        """Same spans at the same positions."""
        if self.length() != other.length():
            return False
        return all(mine.equals(theirs) for mine, theirs in zip(self._spans, other._spans))

    def is_equal_to(self, other: 'SpanSet[T]') -> bool:
        """Same spans in any order. Duplicates still count."""
        return self.sorted_copy().is_identical_to(other.sorted_copy())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SpanSet):
            return NotImplemented
        return self.is_identical_to(other)

    __hash__ = None  # type: ignore

    def __len__(self) -> int:
        return len(self._spans)

    def __iter__(self) -> Iterator[Span[T]]:
        # Copies, so merging a span from the outside leaves the set alone.
        return (span.copy() for span in self._spans)

    def __getitem__(self, index: int) -> Span[T]:
        return self._spans[index].copy()

    def __contains__(self, value: Any) -> bool:
        """Checks if a point lies within any span of the set."""
        return any(span.covers(value) for span in self._spans)

    def to_string(self, separator: str = ' ') -> str:
        return separator.join(str(span) for span in self._spans)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        pairs = ', '.join(f"({span.a!r}, {span.b!r})" for span in self._spans)
        return f"SpanSet([{pairs}])"
