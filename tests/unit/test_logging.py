import logging

from infrastructure.observability import clear_item_context, make_run_tag, set_log_context
from infrastructure.observability.logging import ContextInjectFilter


def _record() -> logging.LogRecord:
    return logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)


def test_run_tag_is_stable_and_short() -> None:
    assert make_run_tag("20260101_000000") == make_run_tag("20260101_000000")
    assert len(make_run_tag("20260101_000000")) == 8


def test_filter_injects_run_and_item() -> None:
    set_log_context(run_id_full="run-1", item=7)
    record = _record()
    ContextInjectFilter().filter(record)
    assert record.run == make_run_tag("run-1")
    assert record.item == "007"

    clear_item_context()
    record = _record()
    ContextInjectFilter().filter(record)
    assert record.item == "-"
