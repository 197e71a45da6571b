"""
Unit tests for the strkit Template Formatter.
"""

import sys

import pytest

from strkit.engine.args import ArgumentList
from strkit.engine.formatter import (
    Placeholder,
    PlaceholderKind,
    TemplateFormatter,
    parse_index,
    printf,
    sformat,
    try_sformat,
)
from strkit.utils.errors import (
    ErrorCode,
    FormatError,
    IndexOutOfRange,
    IndexOutOfRangeError,
    PrintfFormatError,
    StrayClosingBrace,
    StrayClosingBraceError,
    StyleConflict,
    StyleConflictError,
    UnterminatedPlaceholder,
    UnterminatedPlaceholderError,
)
from strkit.utils.result import Err, Ok


class TestLiteralText:
    """Tests for templates without substitutions."""

    def test_empty_template(self, fmt):
        """Empty template expands to empty string."""
        assert fmt("") == ""

    def test_plain_text(self, fmt):
        """Text without braces passes through."""
        assert fmt("hello world") == "hello world"

    def test_escaped_braces(self, fmt):
        """Doubled braces produce single literal braces."""
        assert fmt("{{}}") == "{}"
        assert fmt("a{{b}}c") == "a{b}c"

    def test_escaped_braces_do_not_consume_arguments(self, fmt):
        """Escaped braces are not placeholders."""
        assert fmt("{{{}}}", 7) == "{7}"


class TestAutoNumbering:
    """Tests for {} placeholders."""

    def test_left_to_right(self, fmt):
        """Arguments are consumed strictly in order."""
        assert fmt("{}-{}", 1, 2) == "1-2"

    def test_unused_arguments_allowed(self, fmt):
        """Extra arguments are ignored."""
        assert fmt("{}", "a", "b") == "a"

    def test_index_out_of_range(self, fmt):
        """Running out of arguments raises IndexOutOfRange."""
        with pytest.raises(IndexOutOfRange):
            fmt("{}")

    def test_out_of_range_after_some_substitutions(self, fmt):
        """The error is raised at the first placeholder without an argument."""
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            fmt("{} {} {}", 1, 2)
        assert exc_info.value.index == 2
        assert exc_info.value.arg_count == 2
        assert exc_info.value.location.offset == 6


class TestManualNumbering:
    """Tests for {N} placeholders."""

    def test_in_order(self, fmt):
        """Explicit indices select arguments."""
        assert fmt("{0}-{1}", 1, 2) == "1-2"

    def test_reversed(self, fmt):
        """Indices may appear in any order."""
        assert fmt("{1}-{0}", 1, 2) == "2-1"

    def test_repeated_index(self, fmt):
        """The same argument can be used several times."""
        assert fmt("{0}{0}{0}", "ab") == "ababab"

    def test_plus_sign(self, fmt):
        """A leading plus sign is part of a valid integer literal."""
        assert fmt("{+1}", "a", "b") == "b"

    def test_index_out_of_range(self, fmt):
        """An index past the end raises IndexOutOfRange."""
        with pytest.raises(IndexOutOfRange):
            fmt("{2}", 1, 2)

    def test_negative_index_out_of_range(self, fmt):
        """A negative index is an integer but never in range."""
        with pytest.raises(IndexOutOfRangeError):
            fmt("{-1}", 1, 2)

    def test_huge_index_out_of_range(self, fmt):
        """An index with thousands of digits is out of range, not a conversion failure."""
        with pytest.raises(IndexOutOfRangeError):
            fmt("{" + "1" * 5000 + "}", "a")

    def test_huge_zero_padded_index(self, fmt):
        """Leading zeros do not count toward the index length."""
        assert fmt("{" + "0" * 5000 + "1}", "a", "b") == "b"


class TestStyleLock:
    """Tests for mixing numbering styles."""

    def test_auto_then_manual(self, fmt):
        """Manual index after automatic numbering is rejected."""
        with pytest.raises(StyleConflict):
            fmt("{}{0}", 1, 2)

    def test_manual_then_auto(self, fmt):
        """Automatic numbering after a manual index is rejected."""
        with pytest.raises(StyleConflictError):
            fmt("{0}{}", 1, 2)

    def test_conflict_is_a_format_error(self, fmt):
        """Style conflicts share the FormatError base and carry a code."""
        with pytest.raises(FormatError) as exc_info:
            fmt("{}{1}", 1, 2)
        assert exc_info.value.code == ErrorCode.F0101

    def test_passthrough_does_not_lock(self, fmt):
        """Non-numeric bodies do not choose a numbering style."""
        assert fmt("{x}{}{y}{}", 1, 2) == "{x}1{y}2"
        assert fmt("{x}{0}{y}{0}", 1) == "{x}1{y}1"


class TestPassthrough:
    """Tests for non-numeric placeholder bodies."""

    def test_word_body(self, fmt):
        """A word body is echoed back with its braces."""
        assert fmt("{abc}") == "{abc}"

    def test_passthrough_does_not_consume(self, fmt):
        """Passthrough does not advance the automatic index."""
        assert fmt("{name}={}", 5) == "{name}=5"

    def test_whitespace_body(self, fmt):
        """Whitespace is not an integer literal."""
        assert fmt("{ 0 }", 1) == "{ 0 }"

    def test_format_spec_body(self, fmt):
        """Format specs are not supported and pass through."""
        assert fmt("{0:>5}", 1) == "{0:>5}"

    def test_nested_open_brace(self, fmt):
        """The body runs to the first closing brace."""
        assert fmt("{a{b}") == "{a{b}"


class TestMalformedTemplates:
    """Tests for structural errors."""

    def test_unterminated(self, fmt):
        """An open brace without a close raises UnterminatedPlaceholder."""
        with pytest.raises(UnterminatedPlaceholder):
            fmt("abc{0", 1)

    def test_trailing_open_brace(self, fmt):
        """A lone open brace at the end is unterminated."""
        with pytest.raises(UnterminatedPlaceholderError) as exc_info:
            fmt("abc{")
        assert exc_info.value.location.offset == 3

    def test_stray_closing_brace(self, fmt):
        """A lone closing brace raises StrayClosingBrace."""
        with pytest.raises(StrayClosingBrace):
            fmt("a}b")

    def test_stray_closing_brace_location(self, fmt):
        """The error points at the offending brace."""
        with pytest.raises(StrayClosingBraceError) as exc_info:
            fmt("{}}", 1)
        assert exc_info.value.location.column == 3
        assert "^" in str(exc_info.value)

    def test_errors_reported_left_to_right(self, fmt):
        """The first problem in the template wins."""
        with pytest.raises(IndexOutOfRangeError):
            fmt("{} }")


class TestArgumentConversion:
    """Tests for argument text conversion."""

    def test_integers_and_floats(self, fmt):
        """Numbers use their canonical decimal text."""
        assert fmt("{} {} {}", 42, -7, 1.5) == "42 -7 1.5"

    def test_text(self, fmt):
        """Strings are inserted unchanged."""
        assert fmt("<{}>", "x y") == "<x y>"

    def test_bool_rejected(self, fmt):
        """Booleans are not valid arguments."""
        with pytest.raises(TypeError):
            fmt("{}", True)


class TestParse:
    """Tests for TemplateFormatter.parse."""

    def test_segments(self, parse_template):
        """Parsing yields literal runs and placeholders in order."""
        segments = parse_template("a{}b{{")
        assert segments[0] == "a"
        assert isinstance(segments[1], Placeholder)
        assert segments[1].kind == PlaceholderKind.AUTO_INDEXED
        assert segments[1].index == 0
        assert segments[2] == "b"
        assert segments[3].kind == PlaceholderKind.LITERAL
        assert segments[3].text == "{"

    def test_manual_and_passthrough(self, parse_template):
        """Manual and passthrough placeholders record index and text."""
        manual, passthrough = parse_template("{3}{x}")
        assert manual.kind == PlaceholderKind.MANUAL_INDEXED
        assert manual.index == 3
        assert passthrough.kind == PlaceholderKind.PASSTHROUGH
        assert passthrough.text == "{x}"

    def test_parse_checks_style(self, parse_template):
        """Parsing alone detects numbering conflicts."""
        with pytest.raises(StyleConflictError):
            parse_template("{0}{}")

    def test_formatter_reusable(self):
        """A formatter can be expanded more than once."""
        formatter = TemplateFormatter("{}+{}")
        assert formatter.format(ArgumentList.of(1, 2)) == "1+2"
        assert formatter.format(ArgumentList.of("a", "b")) == "a+b"


class TestParseIndex:
    """Tests for integer literal detection."""

    @pytest.mark.parametrize(
        "body,expected",
        [("0", 0), ("12", 12), ("+3", 3), ("-1", -1), ("007", 7)],
    )
    def test_integers(self, body, expected):
        """Signed ASCII digit strings parse to their value."""
        assert parse_index(body) == expected

    @pytest.mark.parametrize("body", ["", "+", "-", "1a", " 1", "1.0", "١"])
    def test_not_integers(self, body):
        """Anything else is not an index."""
        assert parse_index(body) is None

    def test_huge_literals_clamped(self):
        """Over-long literals clamp to the largest index instead of converting."""
        assert parse_index("1" * 5000) == sys.maxsize
        assert parse_index("-" + "1" * 5000) == -sys.maxsize


class TestConvenienceFunctions:
    """Tests for sformat, try_sformat and printf."""

    def test_sformat(self):
        """sformat takes arguments positionally."""
        assert sformat("{}-{}", 1, 2) == "1-2"

    def test_try_sformat_ok(self):
        """A valid template gives Ok."""
        result = try_sformat("{1}{0}", "a", "b")
        assert result == Ok("ba")
        assert result.is_ok()

    def test_try_sformat_err(self):
        """A bad template gives Err carrying the error."""
        result = try_sformat("{}{0}", 1)
        assert isinstance(result, Err)
        assert isinstance(result.error, StyleConflictError)
        assert result.unwrap_or("fallback") == "fallback"

    def test_try_sformat_huge_index(self):
        """A huge manual index comes back as Err instead of raising."""
        result = try_sformat("{" + "9" * 5000 + "}", "a")
        assert isinstance(result, Err)
        assert isinstance(result.error, IndexOutOfRangeError)

    def test_err_unwrap_raises(self):
        """Unwrapping an Err raises the carried error."""
        with pytest.raises(IndexOutOfRangeError):
            try_sformat("{}").unwrap()

    def test_printf(self):
        """printf supports %-style conversions."""
        assert printf("%d-%s-%.2f", 1, "x", 2.5) == "1-x-2.50"

    def test_printf_mismatch(self):
        """Too few arguments raise PrintfFormatError."""
        with pytest.raises(PrintfFormatError):
            printf("%d %d", 1)
