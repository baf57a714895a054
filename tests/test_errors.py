import pytest

from mcdata.errors import (
    DataError,
    DataIOError,
    InvalidEncodingError,
    JsonError,
    NotFoundError,
)


@pytest.mark.parametrize(
    ("error", "prefix", "detail"),
    [
        (DataIOError(OSError("disk")), "IO Error: ", "disk"),
        (JsonError("bad"), "JSON Error: ", "bad"),
        (NotFoundError("stone"), "Object ", "stone"),
        (InvalidEncodingError("blocks"), "Invalid encoding of file ", "blocks"),
    ],
)
def test_every_error_is_a_data_error(error, prefix, detail):
    with pytest.raises(DataError) as info:
        raise error
    assert info.value is error
    message = str(info.value)
    assert message.startswith(prefix)
    assert detail in message


def test_not_found_message_and_name():
    error = NotFoundError("1.18.1")
    assert error.name == "1.18.1"
    assert str(error) == "Object 1.18.1 not found"


def test_invalid_encoding_message_and_filename():
    error = InvalidEncodingError("dataPaths.json")
    assert error.filename == "dataPaths.json"
    assert str(error) == "Invalid encoding of file dataPaths.json"


def test_io_error_keeps_cause():
    cause = OSError("device busy")
    error = DataIOError(cause)
    assert error.cause is cause
    assert str(error).startswith("IO Error: ")
    assert "device busy" in str(error)


def test_json_error_keeps_message():
    error = JsonError("missing field `id`")
    assert error.message == "missing field `id`"
    assert str(error).startswith("JSON Error: ")
    assert str(error).endswith("missing field `id`")


def test_specific_errors_are_distinct():
    error = NotFoundError("zombie")
    assert not isinstance(error, JsonError)
    assert not isinstance(error, InvalidEncodingError)
    assert not isinstance(error, DataIOError)
    assert error.name == "zombie"
    assert str(error) == "Object zombie not found"