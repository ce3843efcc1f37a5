from spanset.config import Config
from spanset.messages import info
from spanset.span import Span
from spanset.spanset import SpanSet


def demo(config: Config) -> None:
    span_a = Span(100, 200)
    span_b = Span(1000, 2000)
    first = SpanSet([span_a, span_b])
    second = SpanSet([(10, 20), (100, 200), (1000, 3000)])

    print(first.to_string(config.separator))
    print(second.to_string(config.separator))

    info(f"merged: {first.merge_spans(second).to_string(config.separator)}")
    info(f"overlapping: {SpanSet([(100, 200), (150, 300)]).merge_spans().to_string(config.separator)}")
    info(f"touching: {SpanSet([(1, 5), (5, 10)]).merge_spans().to_string(config.separator)}")
