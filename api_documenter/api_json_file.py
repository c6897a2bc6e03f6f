"""Logic for loading *.api.json API description files."""

import json
from dataclasses import dataclass
from pathlib import Path

from api_documenter.api_model import MalformedItem, PackageItem, parse_package
from api_documenter.errors import LoadError


@dataclass(frozen=True)
class ApiJsonFile:
    """A loaded API description: the package name plus its parsed tree."""

    package_name: str
    doc_package: PackageItem
    path: Path

    @classmethod
    def load_from_file(cls, path: str | Path) -> "ApiJsonFile":
        """Load and parse an API description."""
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(path, str(e)) from e
        try:
            doc = json.loads(raw)
        except json.JSONDecodeError as e:
            raise LoadError(path, f"malformed content ({e})") from e

        if not isinstance(doc, dict):
            raise LoadError(path, "top level is not an object")
        if doc.get("kind") != "package":
            raise LoadError(path, f"expected kind 'package', got {doc.get('kind')!r}")
        if not doc.get("name"):
            raise LoadError(path, "package has no name")

        try:
            doc_package = parse_package(doc)
        except MalformedItem as e:
            raise LoadError(path, str(e)) from e
        return cls(package_name=doc_package.name, doc_package=doc_package, path=path)
