from typing import Any


def _is_exception_type(obj: Any) -> bool:
    return isinstance(obj, type) and issubclass(obj, BaseException)


def validate_errors(errors: Any, *, name: str) -> None:
    if _is_exception_type(errors):
        return
    if (
        isinstance(errors, tuple)
        and errors
        and all(map(_is_exception_type, errors))
    ):
        return
    raise TypeError(
        f"`{name}` must be an exception type or a tuple of exception types but got {repr(errors)}"
    )
