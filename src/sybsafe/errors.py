"""
.. module:: errors
   :platform: Unix, Windows, MacOSX
   :synopsis: Exception classes raised by the wrappers
"""
from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from sybsafe.last_error import LastErrorSource


class Error(Exception):
    """
    Base class for all error classes
    """

    pass


class InterfaceError(Error):
    """
    This error is raised when the native Sybase layer is missing or incomplete
    """

    pass


class SybaseError(Error):
    """
    This error is raised when a native Sybase function returns its failure value.

    The message is whatever the native layer last recorded in the last-error
    channel at the time of the failure.
    """

    def __init__(self, msg: str, type: int | None = None):
        super().__init__(msg)
        self.msg = msg
        self.type = type

    @classmethod
    def from_last_error(cls, source: LastErrorSource) -> SybaseError:
        last = source.get_last()
        if last is None:
            return cls("An error occurred")
        return cls(last.message, last.type)

    def __str__(self) -> str:
        return self.msg


NativeCallFailed = SybaseError
