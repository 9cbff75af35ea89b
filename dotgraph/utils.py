import re
from decimal import Decimal
from typing import Union

# The keywords node, edge, graph, digraph, subgraph and strict are
# case-independent in the DOT language, so identifiers matching any of
# them must always be quoted.
KEYWORDS = frozenset(("node", "edge", "graph", "digraph", "subgraph", "strict"))

_PLAIN_ID = re.compile(r"[A-Za-z0-9_]+")

_FINAL_ODD_BACKSLASHES = re.compile(r"(?<!\\)(?:\\{2})*\\$")


def escape(text: str) -> str:
    """Quote a DOT identifier or attribute value if it needs it.

    Plain alphanumeric/underscore strings that are not keywords are returned
    as they are, anything else is wrapped in double quotes with the inner
    quotes backslash-escaped. A trailing lone backslash is doubled so that it
    does not escape the closing quote.
    """
    if _PLAIN_ID.fullmatch(text) and text.lower() not in KEYWORDS:
        return text
    escaped = text.replace('"', '\\"')
    if _FINAL_ODD_BACKSLASHES.search(escaped):
        escaped += "\\"
    return f'"{escaped}"'


def format_number(value: Union[int, float]) -> str:
    """Format a number without exponent and without trailing zeros."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def indent(text: str, spaces: int) -> str:
    """Prefix every line of text, embedded newlines included, with spaces."""
    prefix = " " * spaces
    return "\n".join(prefix + line for line in text.split("\n"))
