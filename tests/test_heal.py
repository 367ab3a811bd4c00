"""Tests for heal(), the streaming remediator."""

import pytest

from streammark import heal


class TestHealClosers:
    """Each unterminated marker on the last line gets its closer."""

    def test_bold(self) -> None:
        assert heal("This is **bold") == "This is **bold**"

    def test_bold_underscore(self) -> None:
        assert heal("This is __bold") == "This is __bold__"

    def test_inline_code(self) -> None:
        assert heal("Use `code") == "Use `code`"

    def test_strikethrough(self) -> None:
        assert heal("This is ~~deleted") == "This is ~~deleted~~"

    def test_link_target(self) -> None:
        assert heal("See [docs](https://exa") == "See [docs](https://exa)"

    def test_inline_math(self) -> None:
        assert heal("where $x^2") == "where $x^2$"

    def test_math_block(self) -> None:
        assert heal("$$\nx^2") == "$$\nx^2$$"

    def test_multiple_closers_in_fixed_order(self) -> None:
        """Closers are appended bold, code, strikethrough, link, math."""
        assert heal("**a `b ~~c") == "**a `b ~~c**`~~"

    def test_later_bold_opener_closed_first(self) -> None:
        assert heal("__a **b") == "__a **b**__"
        assert heal("**a __b") == "**a __b__**"


class TestHealNoOp:
    """Complete or unhealable text is returned unchanged."""

    def test_empty(self) -> None:
        assert heal("") == ""

    def test_complete_text(self) -> None:
        assert heal("This is **bold** text") == "This is **bold** text"

    def test_plain_text(self) -> None:
        assert heal("Hello world") == "Hello world"

    def test_bare_link_label_left_alone(self) -> None:
        """Without a ]( the target is unknown; nothing is appended."""
        assert heal("See [docs") == "See [docs"

    def test_closed_link(self) -> None:
        assert heal("See [docs](https://example.com)") == "See [docs](https://example.com)"

    def test_triple_run_not_counted_as_bold(self) -> None:
        assert heal("***x***") == "***x***"

    def test_double_dollar_not_inline_math(self) -> None:
        assert heal("cost $$ here") == "cost $$ here"


class TestHealCodeFences:
    """Fence parity across the whole text gates all inline healing."""

    def test_open_fence_returns_input_unmodified(self) -> None:
        assert heal("```\nlet x = **5") == "```\nlet x = **5"

    def test_open_fence_keeps_trailing_space(self) -> None:
        assert heal("```py\nx = 1 ") == "```py\nx = 1 "

    def test_closed_fence_heals_following_line(self) -> None:
        assert heal("```\ncode\n```\nNow **bold") == "```\ncode\n```\nNow **bold**"

    def test_closing_fence_line_not_treated_as_code_span(self) -> None:
        assert heal("```\ncode\n```") == "```\ncode\n```"

    def test_language_fence_counts(self) -> None:
        assert heal("```python\nx = `y") == "```python\nx = `y"

    def test_any_line_starting_with_backticks_counts(self) -> None:
        """Lines the scanner rejects as fences still count toward parity."""
        assert heal("```js```\n**a") == "```js```\n**a"
        assert heal("```a`b\nx = `y") == "```a`b\nx = `y"

    def test_two_fence_markers_heal_again(self) -> None:
        assert heal("```js```\n```\n**a") == "```js```\n```\n**a**"


class TestHealOnlyLastLine:
    """Earlier lines are never modified."""

    def test_unclosed_bold_on_earlier_line_ignored(self) -> None:
        assert heal("**open\nclosed line") == "**open\nclosed line"

    def test_last_line_healed(self) -> None:
        assert heal("first line\nsecond **bold") == "first line\nsecond **bold**"


class TestHealTrailingSpace:
    """A single trailing space is dropped; two or more mean a hard break."""

    def test_single_space_removed(self) -> None:
        assert heal("Hello ") == "Hello"

    def test_single_space_removed_before_closing(self) -> None:
        assert heal("This is **bold ") == "This is **bold**"

    def test_double_space_kept(self) -> None:
        assert heal("Hello  ") == "Hello  "


@pytest.mark.parametrize(
    "text",
    [
        "# Title",
        "- item",
        "| a | b |",
        "plain words only",
        "[a](b) and **c** and `d`",
    ],
)
def test_heal_is_identity_on_complete_lines(text: str) -> None:
    assert heal(text) == text
