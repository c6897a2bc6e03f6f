"""Construction helpers for markup elements and pages."""

import logging
from collections.abc import Iterable
from typing import Any

from api_documenter.documentation_node import reference_for_names
from api_documenter.markup import (
    MarkupApiLink,
    MarkupBasicElement,
    MarkupCode,
    MarkupCodeBox,
    MarkupHeading1,
    MarkupNoteBox,
    MarkupPage,
    MarkupParagraph,
    MarkupTable,
    MarkupTableCell,
    MarkupTableRow,
    MarkupText,
    MarkupWebLink,
)
from api_documenter.rendering_helpers import get_unscoped_package_name

logger = logging.getLogger(__name__)

PARAGRAPH = MarkupParagraph()


def create_page(title: str, doc_id: str) -> MarkupPage:
    """Create an empty page shell."""
    return MarkupPage(title=title, doc_id=doc_id)


def create_text_elements(
    text: str, *, bold: bool = False, italics: bool = False
) -> list[MarkupText]:
    """Create a text run; empty text yields no elements."""
    if not text:
        return []
    return [MarkupText(content=text, bold=bold, italics=italics)]


def create_code(code: str, language: str = "") -> MarkupCode:
    return MarkupCode(code=code, language=language)


def create_code_box(code: str, language: str = "") -> MarkupCodeBox:
    return MarkupCodeBox(code=code, language=language)


def create_heading1(text: str) -> MarkupHeading1:
    return MarkupHeading1(text=text)


def create_api_link(
    elements: Iterable[MarkupBasicElement], target: str
) -> MarkupApiLink:
    """Create a link to the page whose id is ``target``."""
    return MarkupApiLink(elements=tuple(elements), target=target)


def create_api_link_from_text(text: str, target: str) -> MarkupApiLink:
    return create_api_link(create_text_elements(text), target)


def create_web_link_from_text(text: str, target_url: str) -> MarkupWebLink:
    return MarkupWebLink(
        elements=tuple(create_text_elements(text)), target_url=target_url
    )


def create_note_box_from_text(text: str) -> MarkupNoteBox:
    return MarkupNoteBox(elements=tuple(create_text_elements(text)))


def create_table_row(cells: Iterable[Iterable[MarkupBasicElement]]) -> MarkupTableRow:
    return MarkupTableRow(cells=tuple(MarkupTableCell(tuple(c)) for c in cells))


def create_table(headers: Iterable[Iterable[MarkupBasicElement]]) -> MarkupTable:
    """Create a table with the given header cells and no rows."""
    return MarkupTable(header=create_table_row(headers))


def _code_link_target(el: dict[str, Any]) -> str:
    names = [get_unscoped_package_name(str(el.get("packageName") or ""))]
    names.extend(str(el[k]) for k in ("exportName", "memberName") if el.get(k))
    return reference_for_names([n for n in names if n])


def render_doc_elements(doc_elements: Any) -> list[MarkupBasicElement]:
    """Convert rich-text doc elements from an API description into markup.

    A bare string is treated as a single text run. Unrecognized elements are
    dropped.
    """
    if not doc_elements:
        return []
    if isinstance(doc_elements, str):
        return list(create_text_elements(doc_elements))

    result: list[MarkupBasicElement] = []
    for el in doc_elements:
        if isinstance(el, str):
            result.extend(create_text_elements(el))
            continue
        if not isinstance(el, dict):
            continue
        kind = el.get("kind")
        if kind == "textDocElement":
            result.extend(create_text_elements(str(el.get("value") or "")))
        elif kind == "paragraphDocElement":
            result.append(PARAGRAPH)
        elif kind == "linkDocElement":
            value = str(el.get("value") or "")
            if el.get("referenceType") == "href":
                url = str(el.get("targetUrl") or "")
                result.append(create_web_link_from_text(value or url, url))
            else:
                target = _code_link_target(el)
                text = value or str(el.get("memberName") or el.get("exportName") or "")
                result.append(create_api_link_from_text(text, target))
        else:
            logger.debug("Skipping unsupported doc element: %s", kind)
    return result
