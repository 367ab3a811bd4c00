"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large markdown document (~60KB)."""
    sections = []
    for i in range(100):
        sections.append(f"""
# Section {i}

This is paragraph {i} with **bold**, *italic*, and `code`, plus $x_{i}$.

- List item 1
- [x] Done item
- [ ] Open item

```python
def function_{i}():
    return {i}
```

| Column A | Column B |
|:---------|---------:|
| Cell {i} | Data {i} |

> This is a blockquote in section {i}.

Here is a [link](https://example.com/{i}), and more text.

---
""")
    return "\n".join(sections)


@pytest.fixture
def llm_reply() -> str:
    """A typical assistant reply, short enough to re-parse per chunk."""
    return """Here's how to **stream** markdown safely:

1. Accumulate the full text so far
2. Call `parse(text)` on every chunk
3. Render the tokens, showing a caret while `is_complete` is false

```python
for chunk in stream:
    text += chunk
    render(parse(text))
```

See [the docs](https://example.com/docs), or ask for *more* detail."""


@pytest.fixture
def stream_prefixes(llm_reply: str) -> list[str]:
    """Every prefix of the reply at 4-character steps, as a model emits it."""
    return [llm_reply[:end] for end in range(4, len(llm_reply) + 4, 4)]
