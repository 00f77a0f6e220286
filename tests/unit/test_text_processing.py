"""Unit tests for text normalization helpers."""

import pytest

from sidebyside.utils.text_processing import is_blank, normalize_indentation, slugify


SAMPLES = [
    "",
    "\n",
    "   \n\t\n",
    "\n    foo\n    bar",
    "\n    foo\n\n\n    bar\n  ",
    "\n  def f():\n      return 1\n",
    "\n\ta\n\t\tb\n",
    "\n\t a\n  b\n",
    "foo\n    bar",
    "\n\n\n  spaced\n\n\n",
    "\n  a\n      \n  b",
]


class TestNormalizeIndentation:
    """Tests for normalize_indentation()."""

    @pytest.mark.unit
    def test_strips_common_prefix(self):
        assert normalize_indentation("\n".join(["", "    foo", "    bar"])) == "foo\nbar"

    @pytest.mark.unit
    def test_keeps_relative_indentation(self):
        text = "\n      def f():\n          return 1\n    "
        assert normalize_indentation(text) == "def f():\n    return 1"

    @pytest.mark.unit
    def test_interior_blank_lines_preserved(self):
        text = "\n  a\n\n\n  b\n"
        assert normalize_indentation(text) == "a\n\n\nb"

    @pytest.mark.unit
    def test_blank_lines_do_not_shrink_prefix(self):
        """Empty and short whitespace-only lines are ignored when computing the prefix."""
        text = "\n    foo\n\n  \n    bar"
        assert normalize_indentation(text) == "foo\n\n\nbar"

    @pytest.mark.unit
    def test_whitespace_line_longer_than_prefix_keeps_remainder(self):
        assert normalize_indentation("\n  a\n      \n  b") == "a\n    \nb"

    @pytest.mark.unit
    def test_boundary_blank_lines_trimmed(self):
        assert normalize_indentation("\n\n  x\n\n   \n") == "x"

    @pytest.mark.unit
    def test_closing_indentation_line_trimmed(self):
        """Literals commonly end with the indentation of the closing delimiter."""
        assert normalize_indentation("\n    a=1\n  ") == "a=1"

    @pytest.mark.unit
    def test_crlf_line_endings(self):
        assert normalize_indentation("\r\n    a\r\n\r\n      b\r\n") == "a\n\n  b"

    @pytest.mark.unit
    def test_tabs_not_expanded(self):
        assert normalize_indentation("\n\ta\n\t\tb\n") == "a\n\tb"

    @pytest.mark.unit
    def test_mixed_tabs_and_spaces_under_strip(self):
        assert normalize_indentation("\n\t a\n  b\n") == "\t a\n  b"

    @pytest.mark.unit
    def test_partial_common_prefix(self):
        assert normalize_indentation("\n\t  a\n\t\tb\n") == "  a\n\tb"

    @pytest.mark.unit
    def test_first_line_with_content_blocks_dedent(self):
        assert normalize_indentation("foo\n    bar") == "foo\n    bar"

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", "\n", "   ", "\n  \n\t\n"])
    def test_blank_input_normalizes_to_empty(self, text):
        assert normalize_indentation(text) == ""

    @pytest.mark.unit
    def test_none_normalizes_to_empty(self):
        assert normalize_indentation(None) == ""

    @pytest.mark.unit
    def test_non_string_is_coerced(self):
        assert normalize_indentation(42) == "42"

    @pytest.mark.unit
    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        once = normalize_indentation(text)
        assert normalize_indentation(once) == once


@pytest.mark.unit
def test_slugify():
    assert slugify("State & Props") == "state-props"
    assert slugify("  List rendering ") == "list-rendering"
    assert slugify("!!!") == "section"


@pytest.mark.unit
def test_is_blank():
    assert is_blank(None)
    assert is_blank(" \n\t")
    assert not is_blank(" x ")
