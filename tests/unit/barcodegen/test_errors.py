import pytest

from eanupc.barcodegen.errors import (
    EncodeError,
    InvalidCharacterError,
    InvalidCheckDigitError,
    InvalidDataError,
    WrongLengthError,
)
from eanupc.model.enums import ErrorKind, Symbology


class TestEncodeError:
    def test_attributes(self) -> None:
        err = WrongLengthError("Input too long", code=283, symbology=Symbology.EANX, context={"length": 20})
        assert err.message == "Input too long"
        assert err.code == 283
        assert err.symbology is Symbology.EANX
        assert err.context == {"length": 20}
        assert err.kind is ErrorKind.WRONG_LENGTH
        assert err.errtxt == "283: Input too long"

    def test_str(self) -> None:
        err = InvalidDataError("Invalid ISBN", code=279, symbology=Symbology.ISBNX, context={"prefix": "977"})
        assert str(err) == "InvalidDataError: 279: Invalid ISBN [symbology=isbnx] (prefix=977)"

    def test_str_minimal(self) -> None:
        err = InvalidCharacterError("Invalid characters in data", code=284)
        assert str(err) == "InvalidCharacterError: 284: Invalid characters in data"
        assert err.context == {}

    def test_repr(self) -> None:
        err = InvalidCheckDigitError("Invalid check digit", code=270)
        assert repr(err) == (
            "InvalidCheckDigitError(message='Invalid check digit', code=270, "
            "symbology=None, context={})"
        )

    def test_code_is_keyword_only(self) -> None:
        with pytest.raises(TypeError):
            EncodeError("message", 270)  # type: ignore[misc]

    @pytest.mark.parametrize(
        "cls,kind",
        [
            (InvalidCharacterError, ErrorKind.INVALID_CHARACTER),
            (WrongLengthError, ErrorKind.WRONG_LENGTH),
            (InvalidCheckDigitError, ErrorKind.INVALID_CHECK_DIGIT),
            (InvalidDataError, ErrorKind.INVALID_DATA),
        ],
    )
    def test_hierarchy(self, cls: type, kind: ErrorKind) -> None:
        assert issubclass(cls, EncodeError)
        assert cls.kind is kind
        with pytest.raises(EncodeError):
            raise cls("failure", code=290)

