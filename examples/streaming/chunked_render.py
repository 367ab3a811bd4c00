"""Simulate an LLM stream: re-parse per chunk, memoizing finished blocks."""

from streammark import DictParseCache, parse, split_into_blocks

reply = (
    "# Plan\n\n"
    "First, **install** the package, then run `pytest`.\n\n"
    "```bash\npip install streammark\n```\n\n"
    "Done, see [the docs](https://example.com)."
)

cache = DictParseCache()
for end in range(8, len(reply) + 8, 8):
    text = reply[:end]
    blocks = [parse(block, cache=cache) for block in split_into_blocks(text)]
    caret = "" if all(b.is_complete for b in blocks) else " ▍"
    kinds = [t.kind.value for b in blocks for t in b.tokens]
    print(f"{len(text):3d} chars -> {kinds}{caret}")

print("Cached block parses:", len(cache))
