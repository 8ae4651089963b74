from pyrsistent import pmap

from lazyscalar.lang.exception import EmptySequenceError, ScalarError


def test_scalar_error():
    e = ScalarError("something went wrong")
    assert "something went wrong" == e.message
    assert pmap() == e.data
    assert "something went wrong" == str(e)


def test_scalar_error_with_data():
    e = ScalarError("bad input", {"index": 3})
    assert pmap({"index": 3}) == e.data
    assert "bad input {'index': 3}" == str(e)
    assert (
        "lazyscalar.lang.exception.ScalarError('bad input', {'index': 3})" == repr(e)
    )


def test_empty_sequence_error():
    e = EmptySequenceError("empty", pmap({"fn": "lower"}))
    assert isinstance(e, ScalarError)
    assert isinstance(e, ValueError)
    assert "lower" == e.data["fn"]
    assert (
        "lazyscalar.lang.exception.EmptySequenceError('empty', {'fn': 'lower'})"
        == repr(e)
    )
