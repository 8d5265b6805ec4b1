"""
Last-error channel shared by the native Sybase layer and the wrappers.

The native layer records diagnostics into a :class:`LastError` slot, either
directly through :meth:`LastError.record` or by logging through the
``sybsafe.native`` logger once :func:`install_handler` has been called.
Wrappers clear the slot before every native call and read it back when the
call fails.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Protocol

NATIVE_LOGGER_NAME = "sybsafe.native"


class LastErrorRecord(NamedTuple):
    message: str
    type: int


class LastErrorSource(Protocol):
    def clear(self) -> None:
        ...

    def get_last(self) -> LastErrorRecord | None:
        ...


class LastError:
    """
    Single-slot storage for the most recent native diagnostic.

    Not thread safe, callers should not share native links between threads.
    """

    def __init__(self) -> None:
        self._record: LastErrorRecord | None = None

    def record(self, message: str, type: int = logging.WARNING) -> None:
        self._record = LastErrorRecord(message, type)

    def clear(self) -> None:
        self._record = None

    def get_last(self) -> LastErrorRecord | None:
        return self._record

    @property
    def message(self) -> str:
        if self._record is None:
            return ""
        return self._record.message

    def __repr__(self) -> str:
        return f"LastError({self._record!r})"


class LastErrorHandler(logging.Handler):
    """
    Logging handler which stores every emitted record into a :class:`LastError` slot
    """

    def __init__(self, slot: LastError, level: int = logging.WARNING):
        super().__init__(level)
        self.slot = slot

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
        except Exception:
            self.handleError(record)
            return
        self.slot.record(message, record.levelno)


def install_handler(
    slot: LastError,
    logger_name: str = NATIVE_LOGGER_NAME,
    level: int = logging.WARNING,
) -> LastErrorHandler:
    """
    Attach a :class:`LastErrorHandler` feeding `slot` to the given logger.

    Repeated calls for the same slot and logger return the handler installed
    by the first call.

    :param slot: Slot which will receive log records
    :param logger_name: Name of the logger used by the native layer
    :param level: Minimum level of records which are captured
    :returns: Installed handler
    """
    native_logger = logging.getLogger(logger_name)
    for handler in native_logger.handlers:
        if isinstance(handler, LastErrorHandler) and handler.slot is slot:
            return handler
    handler = LastErrorHandler(slot, level)
    native_logger.addHandler(handler)
    if native_logger.level == logging.NOTSET or native_logger.level > level:
        native_logger.setLevel(level)
    return handler


#: Process-wide default slot
last_error = LastError()
