"""
Annotate one span from several worker threads and report it to the log.

Run with: python examples/fanout_workers.py
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from opentracing_basic import (
    LoggingReporter,
    Reference,
    Span,
    SpanContext,
    SpanFinisher,
    SpanState,
    TimeUnit,
    TraceContext,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def main():
    finisher = SpanFinisher(LoggingReporter())

    request = SpanContext(TraceContext.new_root(), baggage={"tenant": "acme"})
    state = SpanState(
        SpanContext(request.trace_context.new_child(), baggage=request.baggage_items()),
        "resize_images",
        TimeUnit.MICROSECONDS,
        finisher.now(),
        references=[Reference.child_of(request)],
    )
    span = Span(state, finisher)

    def resize(index: int):
        span.set_tag(f"image.{index}.status", "ok")
        span.log_kv({"event": "resized", "image": index})

    with span:
        with ThreadPoolExecutor(max_workers=4) as executor:
            list(executor.map(resize, range(8)))

    record = state.to_record()
    print(f"{record.operation_name}: {len(record.tags)} tags, {len(record.logs)} logs, "
          f"{record.duration_ms:.3f} ms")


if __name__ == "__main__":
    main()
