import pytest

from solong.errors import MapError, SoLongError, format_error


def test_format_error_wraps_message():
    assert format_error("Empty map.") == "Error\nEmpty map.\n"


def test_format_error_accepts_exception():
    error = MapError("map too big lol")
    assert format_error(error) == "Error\nmap too big lol\n"


def test_error_keeps_message():
    error = SoLongError("File does not exist.")
    assert str(error) == "File does not exist."
    assert error.message == "File does not exist."


def test_map_error_is_caught_as_base_error():
    error = MapError("invalid path.")
    with pytest.raises(SoLongError) as info:
        raise error
    assert info.value.message == "invalid path."
    assert format_error(info.value) == "Error\ninvalid path.\n"


def test_format_error_starts_with_header_and_ends_with_newline():
    text = format_error("Invalid character in map.")
    assert text.startswith("Error\n")
    assert text.endswith("\n")
    assert text.count("\n") == 2