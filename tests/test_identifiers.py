import pytest

from ytjfetch.errors import FormatError
from ytjfetch.identifiers import is_valid, validate


def test_validate_returns_identifier_unchanged() -> None:
    assert validate("1234567-8") == "1234567-8"


@pytest.mark.parametrize(
    "value",
    [
        "",
        "12345678",
        "123456-7",
        "12345678-9",
        "1234567-89",
        "1234567_8",
        " 1234567-8",
        "1234567-8 ",
        "1234567-8\n",
        "FI12345678",
        "abcdefg-h",
        "１２３４５６７-８",
    ],
)
def test_validate_rejects_malformed(value: str) -> None:
    with pytest.raises(FormatError) as exc_info:
        validate(value)

    assert exc_info.value.identifier == value
    assert repr(value) in str(exc_info.value)


def test_is_valid() -> None:
    assert is_valid("0112038-9")
    assert not is_valid("0112038-")
