"""Format identifiers and the static descriptors attached to them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FormatKind(str, Enum):
    """How a format is anchored in the buffer."""

    INLINE = "inline"
    LINE = "line"
    BLOCK = "block"


class FormatId(str, Enum):
    """Closed set of formats the engine can apply or detect."""

    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    STRIKETHROUGH = "strikethrough"
    SUBSCRIPT = "subscript"
    SUPERSCRIPT = "superscript"
    HIGHLIGHT = "highlight"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    PARAGRAPH = "paragraph"
    QUOTE = "quote"
    LIST = "list"
    ORDERED_LIST = "orderedList"
    TASK = "task"
    HR = "hr"
    TABLE = "table"
    CODE_BLOCK = "codeBlock"
    FOOTNOTE = "footnote"

    @property
    def heading_level(self) -> int:
        """1-6 for ``h1``..``h6``, 0 for everything else."""

        if self in HEADINGS:
            return int(self.value[1])
        return 0


HEADINGS = frozenset(
    {FormatId.H1, FormatId.H2, FormatId.H3, FormatId.H4, FormatId.H5, FormatId.H6}
)

# Line-level states reported by the detector; at most one applies per line.
LINE_STYLES = HEADINGS | {
    FormatId.PARAGRAPH,
    FormatId.QUOTE,
    FormatId.LIST,
    FormatId.ORDERED_LIST,
    FormatId.TASK,
}


class UnknownFormatError(RuntimeError):
    """Raised when a caller asks for a format the catalog does not define."""

    def __init__(self, format_id: object) -> None:
        super().__init__(f"Unknown format '{format_id}'")
        self.format_id = format_id


@dataclass(frozen=True, slots=True)
class FormatSpec:
    """Syntax descriptor for a single format."""

    id: FormatId
    kind: FormatKind
    prefix: str = ""
    suffix: str = ""
    placeholder: str = ""
    alternate_prefix: str | None = None
    alternate_suffix: str | None = None

    def __post_init__(self) -> None:
        if self.kind is FormatKind.INLINE and not (self.prefix and self.suffix):
            raise ValueError(f"Inline format '{self.id.value}' needs both markers")
        if (self.alternate_prefix is None) != (self.alternate_suffix is None):
            raise ValueError("alternate markers must be given as a pair")

    @property
    def is_line_prefix(self) -> bool:
        return self.kind is FormatKind.LINE

    @property
    def markers(self) -> tuple[tuple[str, str], ...]:
        """Primary marker pair followed by the alternate pair, if any."""

        pairs = [(self.prefix, self.suffix)]
        if self.alternate_prefix is not None and self.alternate_suffix is not None:
            pairs.append((self.alternate_prefix, self.alternate_suffix))
        return tuple(pairs)


__all__ = [
    "FormatId",
    "FormatKind",
    "FormatSpec",
    "HEADINGS",
    "LINE_STYLES",
    "UnknownFormatError",
]
