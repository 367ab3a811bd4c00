"""Tests for ContextVar-based parse configuration.

Validates thread isolation, context manager behavior, and that parse()
reads the active config.
"""

from threading import Thread

import pytest

from streammark import (
    ParseConfig,
    TokenKind,
    get_parse_config,
    parse,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)


@pytest.fixture(autouse=True)
def _default_config():
    reset_parse_config()
    yield
    reset_parse_config()


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Default config has every feature enabled."""
        config = ParseConfig()
        assert config.tables_enabled is True
        assert config.math_enabled is True
        assert config.strikethrough_enabled is True
        assert config.task_lists_enabled is True
        assert config.mermaid_enabled is True
        assert config.merge_punctuation is True

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.tables_enabled = False  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"math_enabled": False, "theme": "dark"})
        assert config == ParseConfig(math_enabled=False)


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_set_and_reset(self) -> None:
        custom = ParseConfig(tables_enabled=False)
        set_parse_config(custom)
        assert get_parse_config() is custom

        reset_parse_config()
        assert get_parse_config() == ParseConfig()

    def test_context_manager_restores(self) -> None:
        outer = get_parse_config()
        with parse_config_context(ParseConfig(math_enabled=False)):
            assert get_parse_config().math_enabled is False
        assert get_parse_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        outer = get_parse_config()
        with pytest.raises(RuntimeError), parse_config_context(ParseConfig(math_enabled=False)):
            raise RuntimeError("boom")
        assert get_parse_config() is outer


class TestConfigAffectsParse:
    """parse() honors the active context config."""

    def test_tables_disabled(self) -> None:
        with parse_config_context(ParseConfig(tables_enabled=False)):
            result = parse("| a | b |\n|---|---|", False)
        assert [t.kind for t in result.tokens] == [TokenKind.PARAGRAPH, TokenKind.PARAGRAPH]

    def test_strikethrough_disabled(self) -> None:
        with parse_config_context(ParseConfig(strikethrough_enabled=False)):
            (para,) = parse("a ~~b~~", False).tokens
        assert [c.kind for c in para.children] == [TokenKind.TEXT]


class TestThreadIsolation:
    """Each thread sees its own config."""

    def test_threads_do_not_share_config(self) -> None:
        seen: dict[str, bool] = {}

        def worker(name: str, enabled: bool) -> None:
            set_parse_config(ParseConfig(tables_enabled=enabled))
            result = parse("| a |\n|---|", False)
            seen[name] = result.tokens[0].kind is TokenKind.TABLE

        threads = [
            Thread(target=worker, args=("on", True)),
            Thread(target=worker, args=("off", False)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert seen == {"on": True, "off": False}
        assert get_parse_config() == ParseConfig()
