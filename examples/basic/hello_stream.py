"""Parse a half-written reply: unterminated markup is healed, not shown raw."""

from streammark import parse

result = parse("Streaming is **easy")
print(result.tokens[0].children)
print("Complete:", result.is_complete)
