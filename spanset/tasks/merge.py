from typing import List

from spanset.config import Config
from spanset.messages import info
from spanset.spanset import SpanSet
from spanset.tasks.pairs import parse_spans


def merge(pairs: List[str], config: Config) -> SpanSet:
    spans = SpanSet(parse_spans(pairs))
    result = spans.merge_spans()
    info(f"{spans.length()} spans merged into {result.length()}")
    print(result.to_string(config.separator))
    return result
