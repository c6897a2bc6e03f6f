"""Tests for the Markdown page sink."""

from pathlib import Path

import yaml

from api_documenter import markup_builder as mb
from api_documenter.load_config import load_config
from api_documenter.markdown_renderer import MarkdownPageRenderer
from api_documenter.markup import MarkupPage


def sample_page() -> MarkupPage:
    page = mb.create_page("Widget class", "demo.widget")
    page.breadcrumb.append(mb.create_web_link_from_text("Home", "./index"))
    page.breadcrumb.extend(mb.create_text_elements(" > "))
    page.breadcrumb.append(mb.create_api_link_from_text("demo", "demo"))

    page.elements.append(mb.create_note_box_from_text("Preview only."))
    page.elements.extend(mb.create_text_elements("A widget."))
    page.elements.append(mb.PARAGRAPH)
    page.elements.extend(mb.create_text_elements("Signature:", bold=True))
    page.elements.append(mb.create_code_box("class Widget", "javascript"))

    table = mb.create_table(
        [mb.create_text_elements("Method"), mb.create_text_elements("Description")]
    )
    table.rows.append(
        mb.create_table_row(
            [
                [
                    mb.create_api_link(
                        [mb.create_code("render()")], "demo.widget.render"
                    )
                ],
                mb.create_text_elements("(BETA)", bold=True, italics=True)
                + mb.create_text_elements(" Renders it."),
            ]
        )
    )
    page.elements.append(mb.create_heading1("Methods"))
    page.elements.append(table)
    return page


def test_render_page_layout(tmp_path: Path) -> None:
    """Verify front matter, breadcrumb, title and body rendering."""
    renderer = MarkdownPageRenderer(tmp_path)
    md = renderer.render_page(sample_page())

    assert md == (
        "---\n"
        'id: "demo.widget"\n'
        'title: "Widget class"\n'
        "---\n"
        "\n"
        "[Home](./index) > [demo](./demo.md)\n"
        "\n"
        "# Widget class\n"
        "\n"
        "> Preview only.\n"
        "\n"
        "A widget.\n"
        "\n"
        "**Signature:**\n"
        "\n"
        "```javascript\n"
        "class Widget\n"
        "```\n"
        "\n"
        "## Methods\n"
        "\n"
        "| Method | Description |\n"
        "| --- | --- |\n"
        "| [`render()`](./demo.widget.render.md) | **_(BETA)_** Renders it. |\n"
    )


def test_render_page_without_front_matter(tmp_path: Path) -> None:
    """Verify front matter can be switched off."""
    config = load_config()
    config["output"]["front_matter"] = False
    renderer = MarkdownPageRenderer(tmp_path, config)
    md = renderer.render_page(mb.create_page("demo package", "demo"))
    assert md == "# demo package\n"


def test_write_page(tmp_path: Path) -> None:
    """Verify pages are written under their id."""
    renderer = MarkdownPageRenderer(tmp_path)
    renderer.write_page(sample_page())
    out = tmp_path / "demo.widget.md"
    assert out.exists()
    assert renderer.written == [out]
    assert "# Widget class" in out.read_text(encoding="utf-8")


def test_custom_extension(tmp_path: Path) -> None:
    """Verify the configured extension is used for files and links."""
    config = load_config()
    config["output"]["file_extension"] = ".markdown"
    renderer = MarkdownPageRenderer(tmp_path, config)
    assert renderer.output_file_extension == ".markdown"
    renderer.write_page(sample_page())
    content = (tmp_path / "demo.widget.markdown").read_text(encoding="utf-8")
    assert "(./demo.markdown)" in content


def test_delete_output_files(tmp_path: Path) -> None:
    """Verify only generated files of our extension are deleted."""
    out = tmp_path / "out"
    out.mkdir()
    (out / "stale.md").write_text("old", encoding="utf-8")
    (out / "keep.txt").write_text("keep", encoding="utf-8")
    (out / "nested").mkdir()
    (out / "nested" / "inner.md").write_text("inner", encoding="utf-8")

    MarkdownPageRenderer(out).delete_output_files()

    assert not (out / "stale.md").exists()
    assert (out / "keep.txt").exists()
    assert (out / "nested" / "inner.md").exists()


def test_delete_output_files_creates_folder(tmp_path: Path) -> None:
    """Verify a missing output folder is created."""
    out = tmp_path / "new" / "docs"
    MarkdownPageRenderer(out).delete_output_files()
    assert out.is_dir()


def test_front_matter_is_valid_yaml(tmp_path: Path) -> None:
    """Verify titles with YAML syntax survive in the front matter."""
    renderer = MarkdownPageRenderer(tmp_path)
    page = mb.create_page('@acme/demo: "quoted" package', "demo")
    md = renderer.render_page(page)
    front_matter = md.split("---\n")[1]
    assert yaml.safe_load(front_matter) == {
        "id": "demo",
        "title": '@acme/demo: "quoted" package',
    }
