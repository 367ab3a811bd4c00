"""Ship tokens to a JS renderer: JSON round-trip with camelCase metadata."""

from streammark import parse
from streammark.serialization import from_json, to_json

result = parse("| Name | Done |\n|:-----|:----:|\n| docs | yes |\n\n```py\nprint(1)")

json_str = to_json(result, indent=2)
restored = from_json(json_str)

print(json_str)
print("Original == restored:", result == restored)
