from lamb import Failure, Function2, Supplier, contain, hold, invoke


class Refused(Exception): ...


def test_invoke_example() -> None:
    value: str = invoke(lambda: "Hello")
    doubled: int = invoke(lambda x: x * 2, 21)

    assert value == "Hello"
    assert doubled == 42


def test_invoke_exception_example() -> None:
    refused = Refused("nope")

    def refuse() -> None:
        raise refused

    try:
        invoke(refuse)
    except Refused as e:
        assert e is refused
    else:
        raise AssertionError("`refuse` should have raised")


def test_hold_example() -> None:
    supplier: Supplier[str] = hold(lambda: "cached")
    result: str = supplier()

    join: Function2[str, str, str] = hold(lambda x, y: x + y)
    joined: str = join("Hello, ", "World")

    assert result == "cached"
    assert joined == "Hello, World"


def test_contain_example() -> None:
    parse = contain(int, catching=ValueError)

    assert parse("42") == 42
    failure = parse("foo")
    assert isinstance(failure, Failure)
    assert isinstance(failure.exception, ValueError)
