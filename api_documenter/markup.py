"""Abstract markup elements produced by the documenter.

The documenter only builds these; a page sink decides how they render.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MarkupText:
    content: str
    bold: bool = False
    italics: bool = False


@dataclass(frozen=True)
class MarkupCode:
    """An inline code span."""

    code: str
    language: str = ""


@dataclass(frozen=True)
class MarkupCodeBox:
    """A verbatim code block."""

    code: str
    language: str = ""


@dataclass(frozen=True)
class MarkupParagraph:
    pass


@dataclass(frozen=True)
class MarkupHeading1:
    text: str


@dataclass(frozen=True)
class MarkupApiLink:
    """A link to another generated page, by page id."""

    elements: tuple["MarkupBasicElement", ...]
    target: str


@dataclass(frozen=True)
class MarkupWebLink:
    elements: tuple["MarkupBasicElement", ...]
    target_url: str


@dataclass(frozen=True)
class MarkupNoteBox:
    elements: tuple["MarkupBasicElement", ...]


MarkupBasicElement = (
    MarkupText | MarkupCode | MarkupParagraph | MarkupApiLink | MarkupWebLink
)


@dataclass(frozen=True)
class MarkupTableCell:
    elements: tuple[MarkupBasicElement, ...] = ()


@dataclass(frozen=True)
class MarkupTableRow:
    cells: tuple[MarkupTableCell, ...]


@dataclass
class MarkupTable:
    """A table with a header row; rows are appended while a page is built."""

    header: MarkupTableRow
    rows: list[MarkupTableRow] = field(default_factory=list)


MarkupStructuredElement = (
    MarkupBasicElement | MarkupCodeBox | MarkupHeading1 | MarkupNoteBox | MarkupTable
)


@dataclass
class MarkupPage:
    """One generated page: identity, breadcrumb trail and body elements."""

    title: str
    doc_id: str
    breadcrumb: list[MarkupBasicElement] = field(default_factory=list)
    elements: list[MarkupStructuredElement] = field(default_factory=list)
