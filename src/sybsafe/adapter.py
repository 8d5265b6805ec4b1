"""
Checked call adapter.

Every wrapper in this package is an instance of the same pattern: elide
unset trailing arguments, clear the last-error slot, call the native function
and turn its failure sentinel into :class:`~sybsafe.errors.SybaseError`.
"""
from __future__ import annotations

import logging
import typing
from typing import Any, Callable, Sequence

from sybsafe.errors import InterfaceError, SybaseError

if typing.TYPE_CHECKING:
    from sybsafe.last_error import LastErrorSource

logger = logging.getLogger("sybsafe")


class _Unset:
    def __repr__(self) -> str:
        return "unset"

    def __bool__(self) -> bool:
        return False


#: Marks an optional argument which caller did not supply
unset = _Unset()


def trim_unset(args: Sequence[Any], params: Sequence[str] | None = None) -> tuple[Any, ...]:
    """
    Drop trailing unset arguments.

    Raises TypeError if an unset argument is followed by a supplied one,
    arguments can only be omitted from the end.

    :param args: Full ordered argument list
    :param params: Optional parameter names, used in the error message
    :returns: Shortest argument tuple which preserves supplied values
    """
    end = len(args)
    while end > 0 and args[end - 1] is unset:
        end -= 1
    trimmed = tuple(args[:end])
    for pos, value in enumerate(trimmed):
        if value is unset:
            if params is not None and pos < len(params):
                name = repr(params[pos])
            else:
                name = f"at position {pos}"
            raise TypeError(
                f"argument {name} was omitted but a later argument was supplied"
            )
    return trimmed


def matches_sentinel(result: Any, sentinel: Any) -> bool:
    """
    Strict comparison, both type and value must match
    """
    return type(result) is type(sentinel) and result == sentinel


def invoke(
    native_fn: Callable[..., Any],
    args: Sequence[Any],
    sentinel: Any,
    last_error: LastErrorSource,
    name: str | None = None,
) -> Any:
    """
    Call native function and translate its failure sentinel into an exception.

    :param native_fn: Native callable
    :param args: Ordered arguments, trailing ones may be :data:`unset`
    :param sentinel: Value returned by `native_fn` on failure
    :param last_error: Source of the failure message
    :param name: Name used for logging, defaults to the callable's name
    :returns: Native result, unchanged
    """
    call_args = trim_unset(args)
    if name is None:
        name = getattr(native_fn, "__name__", repr(native_fn))
    last_error.clear()
    logger.debug("Calling %s with %d argument(s)", name, len(call_args))
    result = native_fn(*call_args)
    if matches_sentinel(result, sentinel):
        error = SybaseError.from_last_error(last_error)
        logger.debug("%s failed: %s", name, error.msg)
        raise error
    return result


class CheckedFunction:
    """
    Describes one wrapped native function.

    :param name: Name of the native function
    :param params: Ordered parameter names of the native function
    :param sentinel: Value which native function returns on failure
    :param returns_value: If False, successful calls return None
    """

    def __init__(
        self,
        name: str,
        params: Sequence[str],
        sentinel: Any = False,
        returns_value: bool = True,
    ):
        self.name = name
        self.params = tuple(params)
        self.sentinel = sentinel
        self.returns_value = returns_value

    def resolve(self, native: Any) -> Callable[..., Any]:
        try:
            return getattr(native, self.name)
        except AttributeError:
            raise InterfaceError(
                f"Native Sybase layer {native!r} does not provide {self.name}"
            ) from None

    def __call__(self, native: Any, last_error: LastErrorSource, *args: Any) -> Any:
        if len(args) > len(self.params):
            raise TypeError(
                f"{self.name} takes at most {len(self.params)} arguments ({len(args)} given)"
            )
        call_args = trim_unset(args, self.params)
        result = invoke(
            self.resolve(native),
            call_args,
            self.sentinel,
            last_error,
            name=self.name,
        )
        if self.returns_value:
            return result
        return None

    def __repr__(self) -> str:
        return f"CheckedFunction({self.name}({', '.join(self.params)}))"
