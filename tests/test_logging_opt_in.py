import logging

from driftpatch import apply_diff
from driftpatch._logging import NoopLogger, resolve_logger


def test_resolve_logger_default_noop():
    lg = resolve_logger()
    assert isinstance(lg, NoopLogger)
    # Should not raise:
    lg.debug("hello %s", "there")
    lg.warning("world")
    assert not lg.isEnabledFor(logging.CRITICAL)


def test_resolve_logger_enabled_creates_named_logger(caplog):
    with caplog.at_level(logging.INFO):
        lg = resolve_logger(enabled=True, name="driftpatch.test")
        lg.info("test message")
    assert lg.name == "driftpatch.test"
    assert any("test message" in rec.message for rec in caplog.records)


def test_resolve_logger_enabled_defaults_to_package_name():
    lg = resolve_logger(enabled=True)
    assert lg.name == "driftpatch"


def test_resolve_logger_uses_passed_logger():
    custom = logging.getLogger("x")
    assert resolve_logger(logger=custom, enabled=False) is custom


def test_apply_diff_is_silent_by_default(caplog):
    diff = "<<<<<<< SEARCH\nb\n=======\nB\n>>>>>>> REPLACE"
    with caplog.at_level(logging.DEBUG):
        apply_diff("a\nb\n", diff)
    assert not [r for r in caplog.records if r.name.startswith("driftpatch")]


def test_apply_diff_logs_when_enabled(caplog):
    diff = "<<<<<<< SEARCH\nb\n=======\nB\n>>>>>>> REPLACE"
    with caplog.at_level(logging.DEBUG):
        apply_diff("a\nb\n", diff, log=True)
    messages = [r.getMessage() for r in caplog.records if r.name.startswith("driftpatch")]
    assert any("parsed 1 replacement block" in m for m in messages)
    assert any("applied 1 of 1" in m for m in messages)


def test_apply_diff_logs_to_passed_logger(caplog):
    custom = logging.getLogger("caller.patching")
    diff = "<<<<<<< SEARCH\nmissing\n=======\nx\n>>>>>>> REPLACE"
    with caplog.at_level(logging.DEBUG, logger="caller.patching"):
        apply_diff("a\nb\n", diff, logger=custom)
    assert any(
        r.name == "caller.patching" and "not applied" in r.getMessage()
        for r in caplog.records
    )
