"""Tests for inline formatting (format_inline and its phases)."""

import pytest

from streammark import ParseConfig, TokenKind, format_inline
from streammark.parsing.inline import (
    InlineMatch,
    collect_matches,
    merge_punctuation,
    resolve_overlaps,
)
from streammark.tokens import Token, text_token


def _kinds(tokens: tuple[Token, ...]) -> list[str]:
    return [t.kind.value for t in tokens]


class TestSpanFamilies:
    """One span between two text gaps, for every family."""

    @pytest.mark.parametrize(
        ("markup", "kind", "content"),
        [
            ("*italic*", TokenKind.ITALIC, "italic"),
            ("_italic_", TokenKind.ITALIC, "italic"),
            ("**bold**", TokenKind.BOLD, "bold"),
            ("__bold__", TokenKind.BOLD, "bold"),
            ("***bold-italic***", TokenKind.BOLD_ITALIC, "bold-italic"),
            ("___bold-italic___", TokenKind.BOLD_ITALIC, "bold-italic"),
            ("`console.log()`", TokenKind.CODE_INLINE, "console.log()"),
            ("~~deleted~~", TokenKind.STRIKETHROUGH, "deleted"),
            ("$e^x$", TokenKind.MATH_INLINE, "e^x"),
        ],
    )
    def test_span_between_text(self, markup: str, kind: TokenKind, content: str) -> None:
        tokens = format_inline(f"This is {markup} text")

        assert len(tokens) == 3
        assert tokens[0] == text_token("This is ")
        assert tokens[1].kind is kind
        assert tokens[1].raw == markup
        assert tokens[1].content == content
        assert tokens[2] == text_token(" text")

    def test_link(self) -> None:
        tokens = format_inline("Go to [home](https://example.com) now")

        assert _kinds(tokens) == ["text", "link", "text"]
        assert tokens[1].content == "home"
        assert tokens[1].url == "https://example.com"

    def test_image(self) -> None:
        tokens = format_inline("Look ![a cat](cat.png) here")

        assert _kinds(tokens) == ["text", "image", "text"]
        assert tokens[1].content == "a cat"
        assert tokens[1].url == "cat.png"

    def test_link_label_is_not_formatted(self) -> None:
        tokens = format_inline("[**bold** label](u)")

        assert len(tokens) == 1
        assert tokens[0].kind is TokenKind.LINK
        assert tokens[0].content == "**bold** label"
        assert tokens[0].children == ()


class TestEdgeInputs:
    """Empty, short, and trigger-free input."""

    def test_empty_string(self) -> None:
        assert format_inline("") == ()

    def test_plain_text(self) -> None:
        tokens = format_inline("Just plain text")
        assert tokens == (text_token("Just plain text"),)

    def test_short_text_fast_path(self) -> None:
        assert format_inline("*a") == (text_token("*a"),)

    def test_unmatched_markers_stay_literal(self) -> None:
        assert format_inline("a ** b") == (text_token("a ** b"),)

    def test_bare_link_label(self) -> None:
        assert format_inline("see [label") == (text_token("see [label"),)

    def test_double_dollar_not_inline_math(self) -> None:
        assert _kinds(format_inline("$$x$$")) == ["text"]


class TestOverlapResolution:
    """Earliest start wins; ties go to the higher-precedence family."""

    def test_code_hides_bold_inside(self) -> None:
        tokens = format_inline("`**not bold**`")
        assert _kinds(tokens) == ["code-inline"]
        assert tokens[0].content == "**not bold**"

    def test_bold_italic_beats_bold_at_same_start(self) -> None:
        tokens = format_inline("***x***")
        assert _kinds(tokens) == ["bold-italic"]

    def test_image_beats_link(self) -> None:
        tokens = format_inline("![alt](img.png)")
        assert _kinds(tokens) == ["image"]

    def test_adjacent_spans(self) -> None:
        tokens = format_inline("**a**`b`")
        assert _kinds(tokens) == ["bold", "code-inline"]

    def test_resolve_overlaps_prefers_first_collected_on_tie(self) -> None:
        first = InlineMatch(0, 5, TokenKind.BOLD, "a")
        second = InlineMatch(0, 5, TokenKind.ITALIC, "a")
        assert resolve_overlaps([first, second]) == [first]

    def test_resolve_overlaps_keeps_disjoint(self) -> None:
        a = InlineMatch(4, 6, TokenKind.CODE_INLINE, "x")
        b = InlineMatch(0, 3, TokenKind.BOLD, "y")
        c = InlineMatch(2, 5, TokenKind.ITALIC, "z")
        assert resolve_overlaps([a, b, c]) == [b, a]


class TestPunctuationMerge:
    """Trailing punctuation is absorbed into preceding spans."""

    def test_link_absorbs_comma_and_space(self) -> None:
        tokens = format_inline(
            "Visit [streamdown.ai](https://streamdown.ai), designed for streaming"
        )

        assert len(tokens) == 3
        assert tokens[0] == text_token("Visit ")
        assert tokens[1].kind is TokenKind.LINK
        assert tokens[1].content == "streamdown.ai, "
        assert tokens[1].url == "https://streamdown.ai"
        assert tokens[2].raw == "designed for streaming"
        assert tokens[2].content == "designed for streaming"

    def test_period_at_end_drops_empty_text(self) -> None:
        tokens = format_inline("Check out [example](https://example.com).")

        assert len(tokens) == 2
        assert tokens[1].content == "example."

    def test_punctuation_run(self) -> None:
        tokens = format_inline("See [link](https://example.com)!?")
        assert tokens[-1].kind is TokenKind.LINK
        assert tokens[-1].content == "link!?"

    def test_bold_absorbs(self) -> None:
        tokens = format_inline("This is **important**, please note")

        assert tokens[1].kind is TokenKind.BOLD
        assert tokens[1].content == "important, "
        assert tokens[2] == text_token("please note")

    def test_no_punctuation_no_change(self) -> None:
        tokens = format_inline("Visit [site](https://site.com) and more")

        assert tokens[1].content == "site"
        assert tokens[2] == text_token(" and more")

    def test_no_space_after_punctuation(self) -> None:
        tokens = format_inline("Visit [site](https://site.com),no space")

        assert tokens[1].content == "site,"
        assert tokens[2] == text_token("no space")

    def test_ellipsis(self) -> None:
        tokens = format_inline("wait *what*… ok")
        assert tokens[1].content == "what… "

    def test_code_does_not_absorb(self) -> None:
        tokens = format_inline("run `ls`, then")
        assert _kinds(tokens) == ["text", "code-inline", "text"]
        assert tokens[2].content == ", then"

    def test_raw_grows_with_content(self) -> None:
        tokens = format_inline("a **b**. c")
        assert tokens[1].raw == "**b**. "
        assert "".join(t.raw for t in tokens) == "a **b**. c"

    def test_merge_disabled(self) -> None:
        tokens = format_inline("a **b**, c", ParseConfig(merge_punctuation=False))
        assert tokens[1].content == "b"
        assert tokens[2] == text_token(", c")

    def test_merge_punctuation_directly(self) -> None:
        bold = Token(kind=TokenKind.BOLD, raw="**x**", content="x")
        merged = merge_punctuation([bold, text_token("; y")])
        assert merged[0].content == "x; "
        assert merged[1] == text_token("y")


class TestFeatureSwitches:
    """Disabled families fall through to literal text."""

    def test_strikethrough_disabled(self) -> None:
        tokens = format_inline("a ~~b~~ c", ParseConfig(strikethrough_enabled=False))
        assert tokens == (text_token("a ~~b~~ c"),)

    def test_math_disabled(self) -> None:
        tokens = format_inline("cost $5$ each", ParseConfig(math_enabled=False))
        assert tokens == (text_token("cost $5$ each"),)

    def test_collect_matches_respects_config(self) -> None:
        matches = collect_matches("~~a~~ $b$", ParseConfig(strikethrough_enabled=False))
        assert [m.kind for m in matches] == [TokenKind.MATH_INLINE]


class TestRawCoverage:
    """Raw extents of the token sequence reproduce the input."""

    @pytest.mark.parametrize(
        "text",
        [
            "**a** *b* ***c*** ~~d~~ `e` [f](g) ![h](i) $j$",
            "*a**b*",
            "__x_ y_",
            "[a](b), [c](d). end",
            "~~~~",
            "``",
            "a*b*c",
        ],
    )
    def test_raw_concatenation_equals_input(self, text: str) -> None:
        assert "".join(t.raw for t in format_inline(text)) == text
