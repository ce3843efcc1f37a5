from typing import List

from spanset.config import Config
from spanset.messages import info, warning
from spanset.spanset import ScanMode, SpanSet
from spanset.tasks.pairs import parse_span, parse_spans


def filter_spans(kind: str, boundary: str, pairs: List[str], scan: ScanMode, config: Config) -> SpanSet:
    spans = SpanSet(parse_spans(pairs))
    bounds = parse_span(boundary)

    match kind:
        case 'contained':
            result = spans.contained_in(bounds, scan)
            complete = spans.contained_in(bounds, ScanMode.FULL)
        case 'intersected':
            result = spans.intersected_in(bounds, scan)
            complete = spans.intersected_in(bounds, ScanMode.FULL)
        case _:
            raise ValueError(f"Unknown filter: {kind}")

    info(f"{result.length()} of {spans.length()} spans {kind} in {bounds} ({scan.value} scan)")
    if result.length() != complete.length():
        warning(f"early-stop scan skipped {complete.length() - result.length()} matching spans, use --full to include them")
    print(result.to_string(config.separator))
    return result
