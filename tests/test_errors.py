"""Exception taxonomy and message formatting."""

from mathdocx.errors import (InvariantViolation, MathConversionError, NestingDepthError, ParseError,
                             UnsupportedConstructError)


class TestParseError:
    def test_message_only(self) -> None:
        err = ParseError("Unmatched '{'")
        assert str(err) == "Unmatched '{'"
        assert err.position is None

    def test_with_position(self) -> None:
        err = ParseError("Unmatched '{'", 7)
        assert str(err) == "Unmatched '{' (at offset 7)"

    def test_is_conversion_error(self) -> None:
        assert isinstance(ParseError('x'), MathConversionError)


class TestNestingDepthError:
    def test_message_is_bounded(self) -> None:
        err = NestingDepthError(64, 10_000)
        assert err.max_depth == 64
        assert '64' in str(err)
        assert isinstance(err, ParseError)


class TestUnsupportedConstructError:
    def test_names_construct(self) -> None:
        err = UnsupportedConstructError('\\foo', 3)
        assert err.construct == '\\foo'
        assert str(err) == "Unsupported construct '\\foo' at offset 3"
        assert isinstance(err, MathConversionError)


class TestInvariantViolation:
    def test_is_not_a_conversion_error(self) -> None:
        assert not issubclass(InvariantViolation, MathConversionError)
        assert issubclass(InvariantViolation, RuntimeError)
