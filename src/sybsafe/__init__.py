"""Error-checked wrappers around the native Sybase client functions"""
from __future__ import annotations

import logging
from typing import Any

from . import adapter  # noqa: F401
from . import last_error  # noqa: F401
from .adapter import CheckedFunction, invoke, unset  # noqa: F401
from .api import SybaseApi, checked_functions  # noqa: F401
from .errors import Error, InterfaceError, NativeCallFailed, SybaseError  # noqa: F401
from .last_error import (  # noqa: F401
    LastError,
    LastErrorHandler,
    LastErrorRecord,
    LastErrorSource,
    install_handler,
)
from .native import NATIVE_MODULE_ENV, MessageHandler, NativeSybase, load_native  # noqa: F401

logger = logging.getLogger("sybsafe")

__version__ = "1.0.0"

#: Module may be shared, but not connections
threadsafety = 1

_api: SybaseApi | None = None


def configure(native: Any = None, last_error: LastErrorSource | None = None) -> SybaseApi:
    """
    Replace the API used by module-level functions.

    :param native: Native Sybase layer, if None it is loaded from
      SYBSAFE_NATIVE_MODULE on first call
    :param last_error: Last-error channel, defaults to the process-wide slot
    :returns: New default API
    """
    global _api
    _api = SybaseApi(native=native, last_error=last_error)
    return _api


def get_api() -> SybaseApi:
    global _api
    if _api is None:
        _api = SybaseApi()
    return _api


def sybase_close(link_identifier: Any = unset) -> None:
    get_api().sybase_close(link_identifier)


def sybase_connect(
    servername: Any = unset,
    username: Any = unset,
    password: Any = unset,
    charset: Any = unset,
    appname: Any = unset,
    new: Any = unset,
) -> Any:
    return get_api().sybase_connect(servername, username, password, charset, appname, new)


def sybase_data_seek(result_identifier: Any, row_number: int) -> None:
    get_api().sybase_data_seek(result_identifier, row_number)


def sybase_field_seek(result: Any, field_offset: int) -> None:
    get_api().sybase_field_seek(result, field_offset)


def sybase_free_result(result: Any) -> None:
    get_api().sybase_free_result(result)


def sybase_pconnect(
    servername: Any = unset,
    username: Any = unset,
    password: Any = unset,
    charset: Any = unset,
    appname: Any = unset,
) -> Any:
    return get_api().sybase_pconnect(servername, username, password, charset, appname)


def sybase_query(query: str, link_identifier: Any = unset) -> Any:
    return get_api().sybase_query(query, link_identifier)


def sybase_select_db(database_name: str, link_identifier: Any = unset) -> None:
    get_api().sybase_select_db(database_name, link_identifier)


def sybase_set_message_handler(handler: MessageHandler, link_identifier: Any = unset) -> None:
    get_api().sybase_set_message_handler(handler, link_identifier)


def sybase_unbuffered_query(query: str, link_identifier: Any, store_result: Any = unset) -> Any:
    return get_api().sybase_unbuffered_query(query, link_identifier, store_result)

