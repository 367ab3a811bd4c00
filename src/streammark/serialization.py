"""Token serialization: JSON round-trip for streammark token trees.

Converts Token and ParsedMarkdown to/from JSON-compatible dicts. Useful for:
- Shipping token trees to a renderer in another process (webview, worker)
- Persisting parses alongside a chat transcript
- Debugging and inspection

Wire format:
    {"kind": "link", "raw": "[a](u)", "content": "a",
     "children": [], "metadata": {"url": "u"}}

Metadata keys are camelCase (isHeader, isIncomplete, ...) so the output
can be consumed directly by JavaScript renderers. Fields that hold their
default value are still written; output is deterministic (sorted keys)
for cache-key stability.

Example:
    from streammark import parse
    from streammark.serialization import to_json, from_json

    result = parse("# Hello **World**")
    restored = from_json(to_json(result))
    assert result == restored

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from streammark.errors import SerializationError
from streammark.tokens import (
    CodeBlockMeta,
    LinkMeta,
    ListItemMeta,
    MathBlockMeta,
    ParsedMarkdown,
    TableCellMeta,
    TableRowMeta,
    Token,
    TokenKind,
    TokenMeta,
)

# Metadata class per token kind, used to reconstruct typed metadata
_META_TYPES: dict[TokenKind, type] = {
    TokenKind.CODE_BLOCK: CodeBlockMeta,
    TokenKind.MERMAID: CodeBlockMeta,
    TokenKind.MATH_BLOCK: MathBlockMeta,
    TokenKind.LINK: LinkMeta,
    TokenKind.IMAGE: LinkMeta,
    TokenKind.LIST_ITEM: ListItemMeta,
    TokenKind.TABLE_ROW: TableRowMeta,
    TokenKind.TABLE_CELL: TableCellMeta,
}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# Python field name <-> wire key, e.g. is_incomplete <-> isIncomplete
_WIRE_KEYS: dict[type, dict[str, str]] = {
    meta_cls: {f.name: _camel(f.name) for f in fields(meta_cls)}
    for meta_cls in set(_META_TYPES.values())
}


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token (and its children) to a JSON-compatible dict.

    Args:
        token: Any streammark token.

    Returns:
        Dict with kind, raw, content, children, and metadata (or None).

    """
    return {
        "kind": token.kind.value,
        "raw": token.raw,
        "content": token.content,
        "children": [to_dict(child) for child in token.children],
        "metadata": _meta_to_dict(token.metadata),
    }


def _meta_to_dict(meta: TokenMeta | None) -> dict[str, Any] | None:
    if meta is None:
        return None
    keys = _WIRE_KEYS[type(meta)]
    return {wire: getattr(meta, name) for name, wire in keys.items()}


def from_dict(data: dict[str, Any], *, _path: str = "") -> Token:
    """Reconstruct a typed token from a dict.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        Token with typed metadata and tuple children.

    Raises:
        SerializationError: If a field is missing, the kind is unknown, or
            metadata does not fit the kind.

    """
    if not isinstance(data, dict):
        raise SerializationError(f"Expected object, got {type(data).__name__}", _path or None)

    missing = [key for key in ("kind", "raw", "content") if key not in data]
    if missing:
        raise SerializationError(f"Missing field(s): {', '.join(missing)}", _path or None)

    try:
        kind = TokenKind(data["kind"])
    except ValueError:
        raise SerializationError(f"Unknown token kind: {data['kind']!r}", _path or None) from None

    prefix = f"{_path}." if _path else ""
    children = tuple(
        from_dict(child, _path=f"{prefix}children.{i}")
        for i, child in enumerate(data.get("children") or ())
    )

    return Token(
        kind=kind,
        raw=data["raw"],
        content=data["content"],
        children=children,
        metadata=_meta_from_dict(kind, data.get("metadata"), f"{prefix}metadata"),
    )


def _meta_from_dict(kind: TokenKind, data: Any, path: str) -> TokenMeta | None:
    if data is None:
        return None
    meta_cls = _META_TYPES.get(kind)
    if meta_cls is None:
        raise SerializationError(f"Token kind {kind.value!r} takes no metadata", path)
    if not isinstance(data, dict):
        raise SerializationError(f"Expected object, got {type(data).__name__}", path)

    keys = _WIRE_KEYS[meta_cls]
    kwargs = {name: data[wire] for name, wire in keys.items() if wire in data}
    try:
        return meta_cls(**kwargs)
    except TypeError as e:
        # LinkMeta requires url
        raise SerializationError(str(e), path) from e


def to_json(result: ParsedMarkdown, *, indent: int | None = None) -> str:
    """Serialize a parse result to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        result: ParsedMarkdown to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    payload = {
        "isComplete": result.is_complete,
        "tokens": [to_dict(token) for token in result.tokens],
    }
    return json.dumps(payload, sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> ParsedMarkdown:
    """Deserialize a parse result from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        ParsedMarkdown with typed tokens.

    Raises:
        SerializationError: If the JSON is invalid or doesn't represent a
            parse result.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e.msg}") from e

    if not isinstance(raw, dict) or "tokens" not in raw or "isComplete" not in raw:
        raise SerializationError("Expected object with 'tokens' and 'isComplete'")
    if not isinstance(raw["tokens"], list):
        raise SerializationError("Expected list", "tokens")

    tokens = tuple(from_dict(item, _path=f"tokens.{i}") for i, item in enumerate(raw["tokens"]))
    return ParsedMarkdown(tokens=tokens, is_complete=bool(raw["isComplete"]))


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
