"""
Testing guess parsing: each bad input maps to its own error class.
"""

import pytest

from mastermind.errors import (
    EmptyInputError,
    GuessValidationError,
    InvalidCharacterError,
    NotNumericError,
    OutOfRangeError,
    WrongLengthError,
)
from mastermind.validation import parse_guess


def test_parse_valid_guess():
    assert parse_guess("1234") == [1,2,3,4]
    assert parse_guess("6611") == [6,6,1,1]

@pytest.mark.parametrize(
    "raw, error",
    [
        ("", EmptyInputError),
        (None, EmptyInputError),
        ("123", WrongLengthError),
        ("12345", WrongLengthError),
        ("+123", InvalidCharacterError),
        ("12-3", InvalidCharacterError),
        ("12a4", NotNumericError),
        ("12 4", NotNumericError),
        ("12²4", NotNumericError),
        ("1237", OutOfRangeError),
        ("0123", OutOfRangeError),
    ],
)
def test_parse_rejects_with_distinct_kind(raw, error):
    with pytest.raises(error) as excinfo:
        parse_guess(raw)
    assert isinstance(excinfo.value, GuessValidationError)
    assert excinfo.value.raw == raw

def test_error_kinds_are_distinct():
    kinds = {
        EmptyInputError.kind,
        WrongLengthError.kind,
        InvalidCharacterError.kind,
        NotNumericError.kind,
        OutOfRangeError.kind,
    }
    assert len(kinds) == 5

def test_checks_run_in_order():
    # wrong length is reported before the sign character
    with pytest.raises(WrongLengthError):
        parse_guess("-12")
    # sign character is reported before the letter
    with pytest.raises(InvalidCharacterError):
        parse_guess("a-12")
    # letter is reported before the out-of-range digit
    with pytest.raises(NotNumericError):
        parse_guess("9a12")

def test_parse_respects_configured_shape():
    assert parse_guess("09", length=2, lo=0, hi=9) == [0,9]
    with pytest.raises(OutOfRangeError):
        parse_guess("333", length=3, lo=1, hi=2)

def test_error_keeps_the_raw_input():
    error = WrongLengthError("too short", "12")
    assert error.raw == "12"
    assert str(error) == "too short"
    assert EmptyInputError("nothing").raw is None
