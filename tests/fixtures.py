import logging

import pytest

import sybsafe
from sybsafe.last_error import LastError, NATIVE_LOGGER_NAME

native_logger = logging.getLogger(NATIVE_LOGGER_NAME)


class FakeNative(object):
    """
    Records arguments of every native call and returns scripted results.

    Result for a function can be a plain value or a callable which receives
    call arguments.
    """

    def __init__(self, results=None):
        self.calls = []
        self.results = dict(results or {})

    def _call(self, name, args):
        self.calls.append((name, args))
        res = self.results.get(name, True)
        if callable(res):
            return res(*args)
        return res

    def sybase_close(self, *args):
        return self._call("sybase_close", args)

    def sybase_connect(self, *args):
        return self._call("sybase_connect", args)

    def sybase_data_seek(self, *args):
        return self._call("sybase_data_seek", args)

    def sybase_field_seek(self, *args):
        return self._call("sybase_field_seek", args)

    def sybase_free_result(self, *args):
        return self._call("sybase_free_result", args)

    def sybase_pconnect(self, *args):
        return self._call("sybase_pconnect", args)

    def sybase_query(self, *args):
        return self._call("sybase_query", args)

    def sybase_select_db(self, *args):
        return self._call("sybase_select_db", args)

    def sybase_set_message_handler(self, *args):
        return self._call("sybase_set_message_handler", args)

    def sybase_unbuffered_query(self, *args):
        return self._call("sybase_unbuffered_query", args)


def failing(slot, message):
    """
    Native function stub which records `message` and returns False
    """

    def fn(*args):
        slot.record(message)
        return False

    return fn


@pytest.fixture
def slot():
    return LastError()


@pytest.fixture
def native():
    return FakeNative()


@pytest.fixture
def api(native, slot):
    return sybsafe.SybaseApi(native=native, last_error=slot)


@pytest.fixture
def default_api(native, slot):
    """
    Configures module-level functions to use fake native layer
    """
    saved = sybsafe._api
    yield sybsafe.configure(native=native, last_error=slot)
    sybsafe._api = saved
