"""
Native Sybase layer interface and lookup
"""
from __future__ import annotations

import importlib
import logging
import os
from typing import Any, Callable, Protocol

from sybsafe.errors import InterfaceError

logger = logging.getLogger("sybsafe")

#: Environment variable holding import path of the native module
NATIVE_MODULE_ENV = "SYBSAFE_NATIVE_MODULE"

#: Called with message number, severity, state, line number and description
MessageHandler = Callable[[int, int, int, int, str], Any]


class NativeSybase(Protocol):
    """
    Functions which the native layer has to provide.

    Every function returns False on failure and records a diagnostic
    into the last-error channel.
    """

    def sybase_close(self, link_identifier: Any = ..., /) -> bool:
        ...

    def sybase_connect(
        self,
        servername: str = ...,
        username: str = ...,
        password: str = ...,
        charset: str = ...,
        appname: str = ...,
        new: bool = ...,
        /,
    ) -> Any:
        ...

    def sybase_data_seek(self, result_identifier: Any, row_number: int, /) -> bool:
        ...

    def sybase_field_seek(self, result: Any, field_offset: int, /) -> bool:
        ...

    def sybase_free_result(self, result: Any, /) -> bool:
        ...

    def sybase_pconnect(
        self,
        servername: str = ...,
        username: str = ...,
        password: str = ...,
        charset: str = ...,
        appname: str = ...,
        /,
    ) -> Any:
        ...

    def sybase_query(self, query: str, link_identifier: Any = ..., /) -> Any:
        ...

    def sybase_select_db(self, database_name: str, link_identifier: Any = ..., /) -> bool:
        ...

    def sybase_set_message_handler(
        self, handler: MessageHandler, link_identifier: Any = ..., /
    ) -> bool:
        ...

    def sybase_unbuffered_query(
        self, query: str, link_identifier: Any, store_result: bool = ..., /
    ) -> Any:
        ...


def load_native(module_name: str | None = None) -> Any:
    """
    Import native Sybase module.

    :param module_name: Dotted module path, if not given value of
      SYBSAFE_NATIVE_MODULE environment variable is used
    :returns: Imported module
    """
    if not module_name:
        module_name = os.environ.get(NATIVE_MODULE_ENV)
    if not module_name:
        raise InterfaceError(
            f"Native Sybase module is not configured, set {NATIVE_MODULE_ENV} or call sybsafe.configure()"
        )
    logger.debug("Loading native Sybase module %s", module_name)
    try:
        return importlib.import_module(module_name)
    except ImportError as e:
        raise InterfaceError(
            f"Cannot import native Sybase module {module_name}: {e}"
        ) from e
