from typing import Iterable, List, TypeVar

from spanset.span import Span
from spanset.spanset import SpanLike, SpanSet

T = TypeVar('T')


def fixed_point_merge(values: Iterable[SpanLike[T]]) -> SpanSet[T]:
    """
    Merges spans pairwise until no two intersect. O(n^2) per pass, slow
    but obviously correct; used to check SpanSet.merge_spans.
    """
    pending: List[Span[T]] = [Span.of(value) for value in values]

    changed = True
    while changed:
        changed = False
        for i in range(len(pending)):
            for j in range(i + 1, len(pending)):
                if pending[i].merge(pending[j]):
                    del pending[j]
                    changed = True
                    break
            if changed:
                break

    return SpanSet(sorted(pending))
