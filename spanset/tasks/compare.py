from typing import List

from spanset.config import Config
from spanset.messages import error, success
from spanset.spanset import SpanSet
from spanset.tasks.pairs import parse_spans


def compare(left: List[str], right: List[str], config: Config) -> bool:
    a = SpanSet(parse_spans(left))
    b = SpanSet(parse_spans(right))

    identical = a.is_identical_to(b)
    equal = a.is_equal_to(b)

    report = success if identical else error
    report(f"identical: {a.to_string(config.separator)} | {b.to_string(config.separator)}")
    report = success if equal else error
    report(f"equal: {a.sorted_copy().to_string(config.separator)} | {b.sorted_copy().to_string(config.separator)}")
    return equal
