import pytest

from nmode.errors import ErrorHandler, NMODEError


def test_write_accumulates():
    handler = ErrorHandler()
    handler.write("a").write(1).write("b")
    assert handler.message() == "a1b"


def test_push_raises_accumulated_message():
    handler = ErrorHandler()
    handler.write("prefix: ")
    with pytest.raises(NMODEError) as info:
        handler.push("bad value")
    assert str(info.value) == "prefix: bad value"


def test_push_formats_arguments():
    handler = ErrorHandler()
    with pytest.raises(NMODEError) as info:
        handler.push("value %d of %s", 3, "x")
    assert str(info.value) == "value 3 of x"


def test_push_without_message():
    handler = ErrorHandler()
    handler.write("only this")
    with pytest.raises(NMODEError, match="only this"):
        handler.push()


def test_push_clears_buffer():
    handler = ErrorHandler()
    with pytest.raises(NMODEError):
        handler.push("first")
    assert handler.message() == ""


def test_instance_is_shared():
    ErrorHandler.instance().write("shared text")
    assert ErrorHandler.instance().message().endswith("shared text")
    with pytest.raises(NMODEError) as info:
        ErrorHandler.instance().push()
    assert str(info.value).endswith("shared text")
    assert ErrorHandler.instance().message() == ""