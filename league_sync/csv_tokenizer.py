"""Line-level CSV helpers for published sheet exports.

The exports are loosely structured, so these helpers never raise: a line that
is not well-formed CSV still produces a best-effort list of fields.
"""

import re
from typing import List

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> List[str]:
    return _LINE_BREAK.split(text)


def parse_csv_line(line: str) -> List[str]:
    """Split one line on commas, keeping commas inside double quotes.

    Quote characters only toggle the quoted state and are never emitted, so a
    quote cannot be escaped inside a field. An unterminated quote is tolerated:
    the remainder of the line becomes the last field.
    """
    result: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            result.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    result.append("".join(current).strip())
    return result


def split_fields(line: str) -> List[str]:
    """Plain comma split with each field trimmed; quotes are not interpreted."""
    return [field.strip() for field in line.split(",")]
