import re
from typing import List

from spanset.span import Span

_PAIR_RE = re.compile(r'^\s*\(?\s*([^,()]+?)\s*,\s*([^,()]+?)\s*\)?\s*$')


def parse_number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"Invalid endpoint: {text!r}. Must be an integer or a float.") from None


def parse_span(text: str) -> Span:
    """Reads a `low,high` command line argument, parentheses optional."""
    match = _PAIR_RE.match(text)
    if not match:
        raise ValueError(f"Invalid pair: {text!r}. Expected low,high")
    low, high = match.groups()
    return Span(parse_number(low), parse_number(high))


def parse_spans(texts: List[str]) -> List[Span]:
    return [parse_span(text) for text in texts]
