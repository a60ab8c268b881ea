"""
Test utilities for lamb tests.
"""

from tests.utils.data import MAX_ARITY, TestError
from tests.utils.functions import (
    Recorder,
    add,
    async_add,
    async_identity,
    async_throw,
    identity,
    throw,
)

__all__ = [
    "MAX_ARITY",
    "TestError",
    "Recorder",
    "add",
    "async_add",
    "async_identity",
    "async_throw",
    "identity",
    "throw",
]
