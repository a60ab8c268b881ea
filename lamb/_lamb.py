from typing import TYPE_CHECKING, Callable, TypeVar

if TYPE_CHECKING:  # pragma: no cover
    from typing_extensions import ParamSpec

    P = ParamSpec("P")

R = TypeVar("R")


def hold(func: "Callable[P, R]") -> "Callable[P, R]":
    """
    Hold a callable for later invocation. The callable is returned as is.

    .. code-block:: python

        supplier: Supplier[str] = hold(lambda: "cached")

        assert supplier() == "cached"

    Args:
        func (``Callable[P, R]``): The callable to hold, of any arity, sync or async.

    Returns:
        ``Callable[P, R]``: ``func`` itself.
    """
    return func


def invoke(func: "Callable[P, R]", *args: "P.args", **kwargs: "P.kwargs") -> R:
    """
    Call ``func`` right away with the given arguments and return its result.

    Whatever ``func`` raises reaches the caller untouched: same exception object, same traceback.

    .. code-block:: python

        assert invoke(lambda: "Hello") == "Hello"

        assert invoke(lambda x: x * 2, 21) == 42

        assert invoke(lambda x, y: x + y, "Hello, ", "World") == "Hello, World"

    Args:
        func (``Callable[P, R]``): The callable to call. For a coroutine function the coroutine is returned, to be awaited.
        *args: Positional arguments for ``func``.
        **kwargs: Keyword arguments for ``func``.

    Returns:
        ``R``: The result of ``func``.
    """
    return func(*args, **kwargs)
