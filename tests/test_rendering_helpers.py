"""Tests for naming helpers."""

from api_documenter.api_model import ApiParameter, FunctionItem, MethodItem
from api_documenter.rendering_helpers import (
    get_concise_signature,
    get_unscoped_package_name,
)


def test_get_unscoped_package_name() -> None:
    """Verify npm scopes are stripped."""
    assert get_unscoped_package_name("@acme/demo") == "demo"
    assert get_unscoped_package_name("demo") == "demo"
    assert get_unscoped_package_name("@acme") == "@acme"


def test_get_concise_signature() -> None:
    """Verify concise signatures list parameter names without types."""
    method = MethodItem(
        signature="move(x: number, y: number): void",
        parameters={
            "x": ApiParameter(name="x", type="number"),
            "y": ApiParameter(name="y", type="number"),
        },
    )
    assert get_concise_signature("move", method) == "move(x, y)"
    assert get_concise_signature("run", FunctionItem()) == "run()"
