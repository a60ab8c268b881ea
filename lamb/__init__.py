from lamb._lamb import hold, invoke
from lamb._tools._error import Failure, contain
from lamb._types import (
    AsyncFunction,
    Consumer,
    Consumer2,
    Consumer3,
    Consumer4,
    Consumer5,
    Function,
    Function2,
    Function3,
    Function4,
    Function5,
    Runnable,
    Supplier,
)

hold.__module__ = __name__
invoke.__module__ = __name__
contain.__module__ = __name__
Failure.__module__ = __name__

__all__ = [
    "hold",
    "invoke",
    "contain",
    "Failure",
    "Runnable",
    "Supplier",
    "Consumer",
    "Consumer2",
    "Consumer3",
    "Consumer4",
    "Consumer5",
    "Function",
    "Function2",
    "Function3",
    "Function4",
    "Function5",
    "AsyncFunction",
]

__version__ = "1.0.0"
