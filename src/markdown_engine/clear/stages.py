"""Individual syntax-stripping stages for clear-formatting.

Each stage is a pure ``str -> str`` function. Emphasis and line patterns are
confined to a single line, an emphasis body never runs past another marker
run of its own kind, and fence bodies are matched lazily, so no pattern
rescans the rest of a line for every opener it meets. Escaped characters stay
parked as private-use sentinels from ``unescape`` until ``normalize_whitespace``.
"""

from __future__ import annotations

import re
from typing import List, Optional

FENCE = re.compile(
    r"^[ \t]*(?P<fence>`{3,}|~{3,})[^\n]*\n(?P<body>.*?)^[ \t]*(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)
INLINE_CODE = re.compile(r"(?P<ticks>`+)(?P<body>[^`\n](?:.*?[^`\n])?)(?P=ticks)(?!`)")
IMAGE_INLINE = re.compile(r"!\[(?P<alt>[^\]\n]*)\]\([^)\n]*\)")
IMAGE_REF = re.compile(r"!\[(?P<alt>[^\]\n]*)\]\[[^\]\n]*\]")
LINK_INLINE = re.compile(r"\[(?!\^)(?P<text>[^\]\n]+)\]\([^)\n]*\)")
LINK_REF = re.compile(r"\[(?!\^)(?P<text>[^\]\n]+)\]\[[^\]\n]*\]")
LINK_DEFINITION = re.compile(r"^[ \t]{0,3}\[(?!\^)[^\]\n]+\]:[ \t]*\S[^\n]*(?:\n|$)", re.MULTILINE)
FOOTNOTE_DEFINITION = re.compile(
    r"^\[\^[^\]\n]+\]:[^\n]*(?:\n[ \t]+[^\n]*)*(?:\n|$)", re.MULTILINE
)
FOOTNOTE_REF = re.compile(r"\[\^[^\]\n]+\]")
FOOTNOTE_INLINE = re.compile(r"\^\[[^\]\n]*\]")

_OPEN = r"(?<!\\)"
_CLOSE = r"(?<=\S)(?<!\\)"
STRONG_EMPHASIS = (
    re.compile(
        _OPEN + r"\*\*\*(?=\S)(?P<body>(?:[^*\n]|\*(?!\*\*))+?)" + _CLOSE + r"\*\*\*"
    ),
    re.compile(
        _OPEN
        + r"(?<!\w)___(?=\S)(?P<body>(?:[^_\n]|_(?!__))+?)"
        + _CLOSE
        + r"___(?!\w)"
    ),
)
STRONG = (
    re.compile(_OPEN + r"\*\*(?=\S)(?P<body>(?:[^*\n]|\*(?!\*))+?)" + _CLOSE + r"\*\*"),
    re.compile(
        _OPEN + r"(?<!\w)__(?=\S)(?P<body>(?:[^_\n]|_(?!_))+?)" + _CLOSE + r"__(?!\w)"
    ),
)
EMPHASIS = (
    re.compile(_OPEN + r"\*(?=[^\s*])(?P<body>[^*\n]*?)" + _CLOSE + r"\*"),
    re.compile(_OPEN + r"(?<!\w)_(?=[^\s_])(?P<body>[^_\n]*?)" + _CLOSE + r"_(?!\w)"),
)
STRIKE = re.compile(_OPEN + r"~~(?P<body>(?:[^~\n]|~(?!~))+?)" + _OPEN + r"~~")

ESCAPABLE = "\\`*_{}[]()#+-.!|~<>"
ESCAPE = re.compile(r"\\(?P<char>[" + re.escape(ESCAPABLE) + r"])")
# Private-use stand-ins for escaped characters.
_SENTINEL_BASE = 0xE000
_TO_SENTINEL = {char: chr(_SENTINEL_BASE + ord(char)) for char in ESCAPABLE}
_FROM_SENTINEL = str.maketrans({mark: char for char, mark in _TO_SENTINEL.items()})

AUTOLINK = re.compile(r"<(?P<url>(?:https?|ftp|mailto):[^>\s]+)>")
HTML_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
HTML_PAIR = re.compile(r"<(?P<tag>[A-Za-z][\w-]*)(?:\s[^<>]*)?>(?P<body>[^<]*?)</(?P=tag)\s*>")
HTML_TAG = re.compile(r"</?[A-Za-z][\w-]*(?:\s[^<>]*)?/?>")

HEADING_PREFIX = re.compile(r"^[ \t]{0,3}#{1,6}(?:[ \t]+|$)")
HEADING_CLOSING = re.compile(r"[ \t]+#+[ \t]*$")
QUOTE_PREFIX = re.compile(r"^[ \t]*(?:>[ \t]?)+")
TASK_PREFIX = re.compile(r"^[ \t]*[-*+][ \t]+\[[ xX]\][ \t]+")
BULLET_PREFIX = re.compile(r"^[ \t]*[-*+][ \t]+")
ORDERED_PREFIX = re.compile(r"^[ \t]*\d+[.)][ \t]+")
HORIZONTAL_RULE = re.compile(r"^[ \t]{0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*$")
SETEXT_UNDERLINE = re.compile(r"^[ \t]{0,3}(?:=+|-+)[ \t]*$")
BLANK_RUN = re.compile(r"\n{3,}")

TABLE_SEPARATOR_CHARS = frozenset("-|: \t")


def strip_fenced_code(text: str) -> str:
    def _body(match: "re.Match[str]") -> str:
        body = match.group("body")
        return body[:-1] if body.endswith("\n") else body

    return FENCE.sub(_body, text)


def strip_inline_code(text: str) -> str:
    return INLINE_CODE.sub(lambda match: match.group("body"), text)


def strip_images(text: str) -> str:
    text = IMAGE_INLINE.sub(lambda match: match.group("alt"), text)
    return IMAGE_REF.sub(lambda match: match.group("alt"), text)


def strip_links(text: str) -> str:
    text = LINK_INLINE.sub(lambda match: match.group("text"), text)
    return LINK_REF.sub(lambda match: match.group("text"), text)


def drop_link_definitions(text: str) -> str:
    return LINK_DEFINITION.sub("", text)


def drop_footnotes(text: str) -> str:
    text = FOOTNOTE_DEFINITION.sub("", text)
    text = FOOTNOTE_REF.sub("", text)
    return FOOTNOTE_INLINE.sub("", text)


def strip_emphasis(text: str) -> str:
    # Widest markers first so ``***x***`` is not split into ``*`` + ``**x**``.
    for group in (STRONG_EMPHASIS, STRONG, EMPHASIS):
        for pattern in group:
            text = pattern.sub(lambda match: match.group("body"), text)
    return text


def strip_strikethrough(text: str) -> str:
    return STRIKE.sub(lambda match: match.group("body"), text)


def unescape(text: str) -> str:
    """Park escaped characters as sentinels; ``normalize_whitespace`` restores them."""

    return ESCAPE.sub(lambda match: _TO_SENTINEL[match.group("char")], text)


def restore_escapes(text: str) -> str:
    return text.translate(_FROM_SENTINEL)


def strip_html(text: str) -> str:
    text = HTML_COMMENT.sub("", text)
    text = AUTOLINK.sub(lambda match: match.group("url"), text)
    # Innermost pairs first; each pass peels one nesting level.
    while True:
        stripped = HTML_PAIR.sub(lambda match: match.group("body"), text)
        if stripped == text:
            break
        text = stripped
    return HTML_TAG.sub("", text)


def _is_table_row(line: str) -> bool:
    stripped = line.strip()
    return "|" in stripped and (stripped.startswith("|") or stripped.endswith("|"))


def _is_table_separator(line: str) -> bool:
    stripped = line.strip()
    return (
        bool(stripped)
        and set(stripped) <= TABLE_SEPARATOR_CHARS
        and "-" in stripped
        and "|" in stripped
    )


def _is_prose(line: Optional[str]) -> bool:
    return bool(line and line.strip()) and not _is_table_row(line or "")


def strip_line_markers(text: str) -> str:
    source = text.split("\n")
    result: List[str] = []
    for index, line in enumerate(source):
        previous = source[index - 1] if index else None
        if SETEXT_UNDERLINE.match(line) and _is_prose(previous):
            result.append("")
            continue
        if HORIZONTAL_RULE.match(line):
            result.append("")
            continue
        line = QUOTE_PREFIX.sub("", line)
        if HEADING_PREFIX.match(line):
            line = HEADING_CLOSING.sub("", HEADING_PREFIX.sub("", line))
        for pattern in (TASK_PREFIX, BULLET_PREFIX, ORDERED_PREFIX):
            if pattern.match(line):
                line = pattern.sub("", line, count=1)
                break
        result.append(line)
    return "\n".join(result)


def flatten_tables(text: str) -> str:
    lines: List[str] = []
    for line in text.split("\n"):
        if _is_table_separator(line):
            lines.append("")
        elif _is_table_row(line):
            cells = [cell.strip() for cell in line.strip().strip("|").split("|")]
            lines.append("  ".join(cell for cell in cells if cell))
        else:
            lines.append(line)
    return "\n".join(lines)


def normalize_whitespace(text: str) -> str:
    lines = [line.rstrip() for line in text.split("\n")]
    return restore_escapes(BLANK_RUN.sub("\n\n", "\n".join(lines)).strip())


__all__ = [
    "drop_footnotes",
    "drop_link_definitions",
    "flatten_tables",
    "normalize_whitespace",
    "restore_escapes",
    "strip_emphasis",
    "strip_fenced_code",
    "strip_html",
    "strip_images",
    "strip_inline_code",
    "strip_line_markers",
    "strip_links",
    "strip_strikethrough",
    "unescape",
]
