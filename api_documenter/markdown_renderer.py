"""Page sink that renders markup pages to Markdown files."""

import json
import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from api_documenter.load_config import load_config
from api_documenter.markup import (
    MarkupApiLink,
    MarkupCode,
    MarkupCodeBox,
    MarkupHeading1,
    MarkupNoteBox,
    MarkupPage,
    MarkupParagraph,
    MarkupStructuredElement,
    MarkupTable,
    MarkupTableRow,
    MarkupText,
    MarkupWebLink,
)
from api_documenter.md_codeblock import md_code_span, md_codeblock
from api_documenter.md_table import md_table

logger = logging.getLogger(__name__)

_EXTRA_BLANK_LINES_RE = re.compile(r"\n{3,}")


class MarkdownPageRenderer:
    """Writes every page to ``<output_folder>/<page id><extension>``."""

    def __init__(
        self, output_folder: str | Path, config: dict[str, Any] | None = None
    ) -> None:
        self.output_folder = Path(output_folder)
        config = config if config is not None else load_config()
        self._extension: str = config["output"]["file_extension"]
        self._front_matter: bool = bool(config["output"]["front_matter"])
        self.written: list[Path] = []

    @property
    def output_file_extension(self) -> str:
        return self._extension

    def delete_output_files(self) -> None:
        """Delete generated files of our extension; other files are kept."""
        self.output_folder.mkdir(parents=True, exist_ok=True)
        for f in sorted(self.output_folder.glob(f"*{self._extension}")):
            if f.is_file():
                f.unlink()

    def output_file_for_page(self, page: MarkupPage) -> Path:
        return self.output_folder / f"{page.doc_id}{self._extension}"

    def write_page(self, page: MarkupPage) -> None:
        out_file = self.output_file_for_page(page)
        logger.debug("Writing %s", out_file)
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(self.render_page(page), encoding="utf-8")
        self.written.append(out_file)

    # -----------------------------
    # Rendering
    # -----------------------------

    def render_page(self, page: MarkupPage) -> str:
        """Render a page to Markdown text."""
        parts: list[str] = []
        if self._front_matter:
            # JSON string literals are valid YAML double-quoted scalars.
            parts += [
                "---",
                f"id: {json.dumps(page.doc_id)}",
                f"title: {json.dumps(page.title)}",
                "---",
                "",
            ]
        if page.breadcrumb:
            parts += [self._render_inline(page.breadcrumb), ""]
        parts += [f"# {page.title}", ""]
        parts.append(self._render_blocks(page.elements))

        md = "\n".join(parts)
        return _EXTRA_BLANK_LINES_RE.sub("\n\n", md).rstrip() + "\n"

    def _render_blocks(self, elements: Iterable[MarkupStructuredElement]) -> str:
        out: list[str] = []
        for el in elements:
            if isinstance(el, MarkupHeading1):
                out.append(f"\n\n## {el.text}\n\n")
            elif isinstance(el, MarkupCodeBox):
                out.append(f"\n\n{md_codeblock(el.language, el.code)}\n\n")
            elif isinstance(el, MarkupNoteBox):
                note = self._render_inline(el.elements)
                quoted = "\n".join(f"> {line}" for line in note.splitlines())
                out.append(f"\n\n{quoted}\n\n")
            elif isinstance(el, MarkupTable):
                out.append(f"\n\n{self._render_table(el)}\n\n")
            else:
                out.append(self._render_inline([el]))
        return "".join(out)

    def _render_table(self, table: MarkupTable) -> str:
        return md_table(
            self._render_row(table.header),
            [self._render_row(r) for r in table.rows],
        )

    def _render_row(self, row: MarkupTableRow) -> list[str]:
        return [self._render_inline(cell.elements) for cell in row.cells]

    def _render_inline(self, elements: Iterable[Any]) -> str:
        out: list[str] = []
        for el in elements:
            if isinstance(el, MarkupText):
                out.append(_styled(el))
            elif isinstance(el, MarkupCode):
                out.append(md_code_span(el.code))
            elif isinstance(el, MarkupParagraph):
                out.append("\n\n")
            elif isinstance(el, MarkupApiLink):
                target = f"./{el.target}{self._extension}"
                out.append(f"[{self._render_inline(el.elements)}]({target})")
            elif isinstance(el, MarkupWebLink):
                out.append(f"[{self._render_inline(el.elements)}]({el.target_url})")
            else:
                logger.debug("No inline rendering for %s", type(el).__name__)
        return "".join(out)


def _styled(text: MarkupText) -> str:
    content = text.content
    if not content.strip():
        return content
    if text.italics:
        content = f"_{content}_"
    if text.bold:
        content = f"**{content}**"
    return content
