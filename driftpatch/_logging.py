"""
Opt-in logging for driftpatch.

Library code asks for a logger and gets something it can always call:

    from driftpatch._logging import resolve_logger

    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    log.debug("block %d located at %d", i, idx)

Nothing is emitted unless the caller passes a logger or sets ``log=True``.
The package never prints and never configures handlers on the root logger.
"""
from __future__ import annotations

import logging

DEFAULT_LOGGER_NAME = "driftpatch"


class NoopLogger:
    """Swallows every logging call."""

    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug

    def isEnabledFor(self, level: int) -> bool:  # noqa: N802 - mirrors logging.Logger
        return False


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Pick the logger a call should write to.

    An explicit ``logger`` always wins. With ``enabled`` set, a named logger
    under the ``driftpatch`` namespace is returned with ``level`` applied and
    propagation left on so records reach the root handlers (and pytest's
    caplog). Otherwise a :class:`NoopLogger` is returned.
    """
    if logger is not None:
        return logger
    if not enabled:
        return NoopLogger()
    lg = logging.getLogger(name or DEFAULT_LOGGER_NAME)
    lg.setLevel(level)
    lg.propagate = True
    return lg
