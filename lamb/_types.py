from typing import Any, Callable, Coroutine, TypeVar

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")
T5 = TypeVar("T5")
R = TypeVar("R")

# fmt: off
Runnable = Callable[[], None]
Supplier = Callable[[], R]

Consumer = Callable[[T], None]
Consumer2 = Callable[[T1, T2], None]
Consumer3 = Callable[[T1, T2, T3], None]
Consumer4 = Callable[[T1, T2, T3, T4], None]
Consumer5 = Callable[[T1, T2, T3, T4, T5], None]

Function = Callable[[T], R]
Function2 = Callable[[T1, T2], R]
Function3 = Callable[[T1, T2, T3], R]
Function4 = Callable[[T1, T2, T3, T4], R]
Function5 = Callable[[T1, T2, T3, T4, T5], R]
# fmt: on

AsyncFunction = Callable[[T], Coroutine[Any, Any, R]]
