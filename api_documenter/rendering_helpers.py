"""Small naming helpers shared by the page generators."""

from api_documenter.api_model import FunctionItem, MethodItem


def get_unscoped_package_name(package_name: str) -> str:
    """Strip an npm-style scope: "@scope/name" -> "name"."""
    if package_name.startswith("@") and "/" in package_name:
        return package_name.split("/", 1)[1]
    return package_name


def get_concise_signature(name: str, item: MethodItem | FunctionItem) -> str:
    """Name plus parameter names, without types: render(a, b)."""
    return f"{name}({', '.join(item.parameters)})"
