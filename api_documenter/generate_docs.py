"""Convert *.api.json API descriptions to cross-linked Markdown pages.

Every *.api.json file under the input directory is loaded as one package. Each
package, class, interface, function, enum, property and method gets its own
page in the output directory, linked together through breadcrumbs and
summary tables.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from api_documenter.documentation_node import reference_for_names
from api_documenter.documenter import Documenter
from api_documenter.errors import LoadError
from api_documenter.load_config import load_config
from api_documenter.markdown_renderer import MarkdownPageRenderer
from api_documenter.rendering_helpers import get_unscoped_package_name

API_JSON_SUFFIX = ".api.json"


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    api_files = sorted(args.input_dir.rglob(f"*{API_JSON_SUFFIX}"))
    if not api_files:
        msg = f"No {API_JSON_SUFFIX} files found under: {args.input_dir}"
        raise SystemExit(msg)

    config = load_config(args.config)
    documenter = Documenter(config)
    for f in api_files:
        try:
            documenter.load_api_json_file(f)
        except LoadError as e:
            raise SystemExit(str(e)) from e

    out_root = args.out_dir.resolve()
    renderer = MarkdownPageRenderer(out_root, config)
    written = documenter.write_docs(renderer)

    if args.home_page:
        package_names = [f.package_name for f in documenter.api_json_files]
        _write_home_page(out_root, package_names, config)
        written += 1

    print(f"Generated {written} Markdown pages into: {out_root}")
    return 0


def _write_home_page(
    out_root: Path, package_names: list[str], config: dict[str, Any]
) -> None:
    """Generate the page the breadcrumb's Home link points at."""
    ext = config["output"]["file_extension"]
    home = [
        f"# {config['home_link']['text']}",
        "",
        "API reference for the following packages:",
        "",
    ]
    for name in package_names:
        doc_id = reference_for_names([get_unscoped_package_name(name)])
        home.append(f"- [{name}](./{doc_id}{ext})")
    home.append("")
    (out_root / f"index{ext}").write_text("\n".join(home), encoding="utf-8")


def main() -> int:
    """Run the generation process."""
    ap = argparse.ArgumentParser(
        description="Generate Markdown API reference pages from *.api.json files.",
    )
    ap.add_argument(
        "input_dir",
        type=Path,
        help="Directory containing *.api.json API description files",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for the generated pages",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--home-page",
        action="store_true",
        help="Generate an index page listing every package",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log every page as it is written",
    )
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
