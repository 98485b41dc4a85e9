"""Formatter tests — sprintf token handling and strict arity, html_encode."""

import pytest

from ulogger.core.errors import FormatError
from ulogger.core.format_strings import html_encode, sprintf


def test_percent_literal_and_arguments():
    assert sprintf("%d%% of %s", 50, "total") == "50% of total"


def test_percent_literal_consumes_no_argument():
    assert sprintf("100%%") == "100%"


def test_tokens_match_left_to_right():
    # "%%" wins over "%d" at the second position
    assert sprintf("%s%%d", "x") == "x%d"


def test_template_without_tokens():
    assert sprintf("plain text") == "plain text"


def test_missing_argument_fails():
    with pytest.raises(FormatError, match="Missing argument for format specifier %s"):
        sprintf("%s")


def test_unused_argument_fails():
    with pytest.raises(FormatError, match="Unused argument"):
        sprintf("%s", "a", "b")


@pytest.mark.parametrize("value", ["abc", True, None, float("nan"), [1]])
def test_d_rejects_non_numeric(value):
    with pytest.raises(FormatError, match="Wrong format specifier %d"):
        sprintf("%d", value)


def test_d_substitutes_raw_value():
    assert sprintf("%d", "12") == "12"
    assert sprintf("%d", 2.5) == "2.5"
    assert sprintf("%d", 7) == "7"
    assert sprintf("%d", " 3 ") == " 3 "


@pytest.mark.parametrize("text", ["-1.5e3", ".5", "+7", "Infinity"])
def test_d_accepts_numeric_text(text):
    assert sprintf("%d", text) == text


def test_d_rejects_number_with_trailing_text():
    with pytest.raises(FormatError):
        sprintf("%d", "12abc")


def test_integral_floats_drop_trailing_zero():
    assert sprintf("%s points", 3.0) == "3 points"


def test_s_accepts_any_value():
    assert sprintf("%s/%s", None, True) == "None/True"


def test_html_encode_fixed_rules():
    assert (
        html_encode("<a href=\"x\">Tom & 'Jerry'</a>")
        == "&lt;a href=&quot;x&quot;&gt;Tom &amp; &#39;Jerry&#39;&lt;/a&gt;"
    )


def test_html_encode_escapes_ampersand_first():
    assert html_encode("&lt;") == "&amp;lt;"
