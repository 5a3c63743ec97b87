import logging

from halson import wrap_resource
from halson.core.logging import LogfmtFormatter, setup_logging
from halson.core.observability import log_event


def test_log_event_drops_reserved_fields(caplog):
    caplog.set_level(logging.INFO, logger="halson.events")
    log_event("custom", rel="self", count=2, name="collides")
    record = next(r for r in caplog.records if r.getMessage() == "custom")
    assert record.rel == "self"
    assert record.count == 2
    assert record.name == "halson.events"


def test_remove_logs_debug_record(caplog):
    caplog.set_level(logging.DEBUG, logger="halson.core.resource")
    res = wrap_resource({"_links": {"item": [{"href": "/a"}, {"href": "/b"}]}})
    res.remove_links("item", lambda link, *_: link.href == "/a")
    record = next(r for r in caplog.records if r.getMessage() == "hal.remove")
    assert record.op == "remove_links"
    assert record.rel == "item"
    assert record.count == 1


def test_logfmt_formatter_renders_extras():
    record = logging.LogRecord(
        name="halson.events",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="builder.rejected",
        args=(),
        exc_info=None,
    )
    record.rel = "curies"
    record.reason = "Curie must be named"
    line = LogfmtFormatter().format(record)
    assert line.startswith("level=info logger=halson.events event=builder.rejected")
    assert "rel=curies" in line
    assert 'reason="Curie must be named"' in line


def test_setup_logging_replaces_handlers():
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging("debug")
        setup_logging("warning", "plain")
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        assert not isinstance(root.handlers[0].formatter, LogfmtFormatter)
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
