"""Thread-safe: parse 1000 replies in parallel, each with its own config."""

from concurrent.futures import ThreadPoolExecutor

from streammark import ParseConfig, parse, parse_config_context

replies = [f"Reply {i}: ~~old~~ **new** [ref](https://example.com/{i})." for i in range(1000)]


def parse_plain(text: str):
    with parse_config_context(ParseConfig(strikethrough_enabled=False)):
        return parse(text, False)


with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(parse_plain, replies))

print(f"Parsed {len(results)} replies in parallel")
print("First reply spans:", [t.kind.value for t in results[0].tokens[0].children])
