"""
Error-checked Sybase client functions
"""
from __future__ import annotations

import logging
from typing import Any

from sybsafe import last_error as last_error_mod
from sybsafe.adapter import CheckedFunction, unset
from sybsafe.last_error import LastErrorSource
from sybsafe.native import MessageHandler, load_native

logger = logging.getLogger("sybsafe")

_close = CheckedFunction("sybase_close", ("link_identifier",), returns_value=False)
_connect = CheckedFunction(
    "sybase_connect",
    ("servername", "username", "password", "charset", "appname", "new"),
)
_data_seek = CheckedFunction(
    "sybase_data_seek", ("result_identifier", "row_number"), returns_value=False
)
_field_seek = CheckedFunction(
    "sybase_field_seek", ("result", "field_offset"), returns_value=False
)
_free_result = CheckedFunction("sybase_free_result", ("result",), returns_value=False)
_pconnect = CheckedFunction(
    "sybase_pconnect",
    ("servername", "username", "password", "charset", "appname"),
)
_query = CheckedFunction("sybase_query", ("query", "link_identifier"))
_select_db = CheckedFunction(
    "sybase_select_db", ("database_name", "link_identifier"), returns_value=False
)
_set_message_handler = CheckedFunction(
    "sybase_set_message_handler", ("handler", "link_identifier"), returns_value=False
)
_unbuffered_query = CheckedFunction(
    "sybase_unbuffered_query", ("query", "link_identifier", "store_result")
)

#: All wrapped functions, keyed by native name
checked_functions = {
    f.name: f
    for f in (
        _close,
        _connect,
        _data_seek,
        _field_seek,
        _free_result,
        _pconnect,
        _query,
        _select_db,
        _set_message_handler,
        _unbuffered_query,
    )
}


class SybaseApi:
    """
    Set of error-checked wrappers bound to a native Sybase layer.

    Each method raises :class:`~sybsafe.errors.SybaseError` when the native
    function reports failure. Optional parameters which are left
    :data:`~sybsafe.adapter.unset` are not passed to the native function at all,
    so the native default applies.

    :param native: Object exposing native ``sybase_*`` functions, if not given
      module configured by SYBSAFE_NATIVE_MODULE is loaded on first call
    :param last_error: Last-error channel used by the native layer, defaults
      to the process-wide slot
    """

    def __init__(self, native: Any = None, last_error: LastErrorSource | None = None):
        self._native = native
        if last_error is None:
            last_error = last_error_mod.last_error
        self.last_error = last_error

    @property
    def native(self) -> Any:
        if self._native is None:
            self._native = load_native()
        return self._native

    def _call(self, func: CheckedFunction, *args: Any) -> Any:
        return func(self.native, self.last_error, *args)

    def sybase_close(self, link_identifier: Any = unset) -> None:
        """
        Closes the link to a Sybase database.

        Persistent links opened by :meth:`sybase_pconnect` are not closed.

        :param link_identifier: Link to close, if not given the last opened
          link is assumed
        """
        self._call(_close, link_identifier)

    def sybase_connect(
        self,
        servername: str | Any = unset,
        username: str | Any = unset,
        password: str | Any = unset,
        charset: str | Any = unset,
        appname: str | Any = unset,
        new: bool | Any = unset,
    ) -> Any:
        """
        Opens a connection to a Sybase server.

        :param servername: Server name as defined in the interfaces file
        :param username: Sybase user name
        :param password: Password of the user
        :param charset: Character set of the connection
        :param appname: Application name reported to the server
        :param new: Open new link even if a link with the same
          arguments is already open
        :returns: Link identifier
        """
        return self._call(_connect, servername, username, password, charset, appname, new)

    def sybase_data_seek(self, result_identifier: Any, row_number: int) -> None:
        """
        Moves internal row pointer of the result, next fetch returns row `row_number`
        """
        self._call(_data_seek, result_identifier, row_number)

    def sybase_field_seek(self, result: Any, field_offset: int) -> None:
        """
        Seeks to the specified field offset
        """
        self._call(_field_seek, result, field_offset)

    def sybase_free_result(self, result: Any) -> None:
        self._call(_free_result, result)

    def sybase_pconnect(
        self,
        servername: str | Any = unset,
        username: str | Any = unset,
        password: str | Any = unset,
        charset: str | Any = unset,
        appname: str | Any = unset,
    ) -> Any:
        """
        Opens a persistent connection to a Sybase server.

        Works like :meth:`sybase_connect`, except that an already open
        persistent link with the same host, user name and password is reused,
        and the link is not closed by :meth:`sybase_close`.

        :returns: Persistent link identifier
        """
        return self._call(_pconnect, servername, username, password, charset, appname)

    def sybase_query(self, query: str, link_identifier: Any = unset) -> Any:
        """
        Sends a query to the active database of the link.

        :param query: SQL text
        :param link_identifier: Link to use, if not given the last opened link
          is assumed
        :returns: Result identifier, or True if the query succeeded
          but did not return any columns
        """
        return self._call(_query, query, link_identifier)

    def sybase_select_db(self, database_name: str, link_identifier: Any = unset) -> None:
        """
        Sets the active database of the link, subsequent queries run against it
        """
        self._call(_select_db, database_name, link_identifier)

    def sybase_set_message_handler(
        self, handler: MessageHandler, link_identifier: Any = unset
    ) -> None:
        """
        Sets a function which handles messages generated by the server.

        :param handler: Called with message number, severity, state,
          line number and description
        :param link_identifier: Link to set handler for, if not given
          the last opened link is assumed
        """
        self._call(_set_message_handler, handler, link_identifier)

    def sybase_unbuffered_query(
        self, query: str, link_identifier: Any, store_result: bool | Any = unset
    ) -> Any:
        """
        Sends a query without reading whole result set into memory.

        Rows are read from the server as they are fetched.

        :param query: SQL text
        :param link_identifier: Link to use
        :param store_result: Pass False to avoid keeping result sets in memory
        :returns: Result identifier
        """
        return self._call(_unbuffered_query, query, link_identifier, store_result)

    def __repr__(self) -> str:
        return f"SybaseApi(native={self._native!r})"
