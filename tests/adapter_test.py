import pytest

from sybsafe import InterfaceError, SybaseError
from sybsafe.adapter import CheckedFunction, invoke, matches_sentinel, trim_unset, unset
from fixtures import FakeNative, failing, slot, native  # noqa: F401


def test_trim_unset():
    assert trim_unset(()) == ()
    assert trim_unset((unset, unset)) == ()
    assert trim_unset(("a", unset, unset)) == ("a",)
    assert trim_unset(("a", "b", "c")) == ("a", "b", "c")
    # None is a value, only unset marker is elided
    assert trim_unset(("a", None, unset)) == ("a", None)


def test_trim_unset_rejects_gap():
    with pytest.raises(TypeError) as ex:
        trim_unset(("a", unset, "c"))
    assert "position 1" in str(ex.value)

    with pytest.raises(TypeError) as ex:
        trim_unset(("a", unset, "c"), ("query", "link_identifier", "store_result"))
    assert "'link_identifier'" in str(ex.value)


def test_unset_repr():
    assert repr(unset) == "unset"
    assert not unset


@pytest.mark.parametrize(
    "result,expected",
    [
        (False, True),
        (0, False),
        (0.0, False),
        ("", False),
        (None, False),
        ([], False),
        (True, False),
    ],
)
def test_matches_sentinel_is_strict(result, expected):
    assert matches_sentinel(result, False) is expected


def test_matches_sentinel_other_sentinels():
    assert matches_sentinel(None, None)
    assert matches_sentinel(-1, -1)
    assert not matches_sentinel(-1.0, -1)
    assert not matches_sentinel(False, 0)


def test_invoke_returns_native_value_unchanged(slot):
    value = object()
    calls = []

    def native_fn(*args):
        calls.append(args)
        return value

    assert invoke(native_fn, ("select 1", unset), False, slot) is value
    assert calls == [("select 1",)]


def test_invoke_raises_on_sentinel(slot):
    with pytest.raises(SybaseError) as ex:
        invoke(failing(slot, "Sybase: Server message: bad syntax"), ("x",), False, slot)
    assert str(ex.value) == "Sybase: Server message: bad syntax"
    assert ex.value.msg == "Sybase: Server message: bad syntax"


def test_invoke_without_recorded_error(slot):
    with pytest.raises(SybaseError) as ex:
        invoke(lambda *args: False, (), False, slot)
    assert ex.value.msg == "An error occurred"
    assert ex.value.type is None


def test_invoke_clears_stale_error(slot):
    slot.record("stale message")
    seen = []

    def native_fn(*args):
        seen.append(slot.get_last())
        return 1

    assert invoke(native_fn, (), False, slot) == 1
    assert seen == [None]

    # failure without new diagnostic should not pick up stale message
    slot.record("stale message")
    with pytest.raises(SybaseError) as ex:
        invoke(lambda: False, (), False, slot)
    assert "stale" not in ex.value.msg


def test_invoke_gap_does_not_touch_native(slot):
    slot.record("previous")
    calls = []
    with pytest.raises(TypeError):
        invoke(lambda *args: calls.append(args), (unset, 1), False, slot)
    assert calls == []
    assert slot.message == "previous"


def test_invoke_native_exception_propagates(slot):
    def native_fn():
        raise ValueError("boom")

    with pytest.raises(ValueError):
        invoke(native_fn, (), False, slot)


def test_checked_function_missing_native(slot):
    fn = CheckedFunction("sybase_query", ("query", "link_identifier"))
    with pytest.raises(InterfaceError):
        fn(object(), slot, "select 1")


def test_checked_function_too_many_args(native, slot):
    fn = CheckedFunction("sybase_free_result", ("result",))
    with pytest.raises(TypeError):
        fn(native, slot, 1, 2)
    assert native.calls == []


def test_checked_function_void(native, slot):
    native.results["sybase_free_result"] = 1
    fn = CheckedFunction("sybase_free_result", ("result",), returns_value=False)
    assert fn(native, slot, "res") is None
    assert native.calls == [("sybase_free_result", ("res",))]


def test_checked_function_custom_sentinel(native, slot):
    native.results["sybase_query"] = -1
    fn = CheckedFunction("sybase_query", ("query",), sentinel=-1)
    with pytest.raises(SybaseError):
        fn(native, slot, "select 1")
    native.results["sybase_query"] = False
    assert fn(native, slot, "select 1") is False
