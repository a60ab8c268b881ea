from inspect import iscoroutinefunction
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    NamedTuple,
    NoReturn,
    Tuple,
    Type,
    TypeVar,
    Union,
    cast,
)

from lamb._tools._logging import get_logger, logfmt_str_escape
from lamb._tools._validation import validate_errors

if TYPE_CHECKING:  # pragma: no cover
    from typing_extensions import ParamSpec

    P = ParamSpec("P")

R = TypeVar("R")

Catchable = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


class Failure(NamedTuple):
    """
    The exception raised by a contained callable, returned in place of its result.

    Args:
        exception (``BaseException``): The exact exception object that was raised.
    """

    exception: BaseException

    def reraise(self) -> NoReturn:
        """
        Raise the held exception object as is.
        """
        raise self.exception


def _get_name(obj: Any) -> str:
    return getattr(obj, "__name__", obj.__class__.__name__)


def _log_failure(func: Callable[..., Any], exception: BaseException) -> None:
    get_logger().debug(
        "contained=%s error=%s",
        logfmt_str_escape(_get_name(func)),
        logfmt_str_escape(repr(exception)),
    )


class _Contained(Generic[R]):
    __slots__ = ("func", "catching")

    def __init__(self, func: Callable[..., R], catching: Catchable) -> None:
        self.func = func
        self.catching = catching

    def __call__(self, *args: Any, **kwargs: Any) -> Union[R, Failure]:
        try:
            return self.func(*args, **kwargs)
        except self.catching as e:
            _log_failure(self.func, e)
            return Failure(e)

    def __repr__(self) -> str:
        return f"contain({_get_name(self.func)})"


def contain(
    func: "Callable[P, R]", catching: Catchable = Exception
) -> "Callable[P, Union[R, Failure]]":
    """
    Wrap ``func`` so that the exceptions it raises are returned as a ``Failure`` instead of being raised.

    Exceptions that are not instances of ``catching`` are raised untouched.

    .. code-block:: python

        parse = contain(int, catching=ValueError)

        assert parse("42") == 42
        assert isinstance(parse("foo"), Failure)

    Args:
        func (``Callable[P, R]``): The callable to wrap, sync or async.
        catching (``type[BaseException] | tuple[type[BaseException], ...]``, optional): The exception type(s) to return as a ``Failure``. (default: ``Exception``)

    Returns:
        ``Callable[P, R | Failure]``: The wrapped callable. Coroutine function if ``func`` is one, or is an object with an async ``__call__``.
    """
    validate_errors(catching, name="catching")
    if iscoroutinefunction(func) or iscoroutinefunction(
        getattr(func, "__call__", None)
    ):

        async def acontained(*args: Any, **kwargs: Any) -> Union[R, Failure]:
            try:
                return await func(*args, **kwargs)
            except catching as e:
                _log_failure(func, e)
                return Failure(e)

        acontained.__name__ = f"contain({_get_name(func)})"
        return cast("Callable[P, Union[R, Failure]]", acontained)
    return _Contained(func, catching)
