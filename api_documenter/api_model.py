"""Data models for the API description consumed by the documenter.

An API description is a tree: one package whose exports are classes,
interfaces, functions and enums, where classes and interfaces in turn carry
properties and methods. Every recognized ``kind`` tag maps to exactly one
dataclass below; anything else becomes an ``UnknownItem`` that the
generators skip.
"""

from dataclasses import dataclass, field
from typing import Any

# Rich text is kept as the raw list of doc elements (or a bare string);
# markup_builder.render_doc_elements turns it into markup.
DocElements = list[Any] | str


@dataclass(frozen=True)
class ApiParameter:
    """A function or method parameter."""

    name: str
    type: str | None = None
    description: DocElements = field(default_factory=list)


@dataclass(frozen=True)
class ApiReturnValue:
    """Return descriptor of a function or method."""

    type: str
    description: DocElements = field(default_factory=list)


@dataclass(frozen=True)
class ApiEnumValue:
    """One member of an enumeration."""

    name: str
    value: Any = None
    summary: DocElements = field(default_factory=list)

    @property
    def has_value(self) -> bool:
        """True when the literal is present; a value of 0 still counts."""
        return self.value is not None and self.value != ""


@dataclass(frozen=True)
class ApiItem:
    """Fields shared by every documentable entity."""

    summary: DocElements = field(default_factory=list)
    remarks: DocElements = field(default_factory=list)
    is_beta: bool = False


@dataclass(frozen=True)
class PropertyItem(ApiItem):
    type: str = ""
    access_modifier: str | None = None


@dataclass(frozen=True)
class MethodItem(ApiItem):
    signature: str = ""
    parameters: dict[str, ApiParameter] = field(default_factory=dict)
    return_value: ApiReturnValue | None = None
    access_modifier: str | None = None


@dataclass(frozen=True)
class FunctionItem(ApiItem):
    signature: str = ""
    parameters: dict[str, ApiParameter] = field(default_factory=dict)
    return_value: ApiReturnValue | None = None


@dataclass(frozen=True)
class ClassItem(ApiItem):
    members: dict[str, "ApiMember"] = field(default_factory=dict)


@dataclass(frozen=True)
class InterfaceItem(ApiItem):
    members: dict[str, "ApiMember"] = field(default_factory=dict)


@dataclass(frozen=True)
class EnumItem(ApiItem):
    values: dict[str, ApiEnumValue] = field(default_factory=dict)


@dataclass(frozen=True)
class UnknownItem(ApiItem):
    """An entity whose kind tag is not recognized."""

    kind: str = ""


@dataclass(frozen=True)
class PackageItem(ApiItem):
    name: str = ""
    exports: dict[str, "ApiExport"] = field(default_factory=dict)


ApiMember = PropertyItem | MethodItem | UnknownItem
ApiExport = ClassItem | InterfaceItem | FunctionItem | EnumItem | UnknownItem


class MalformedItem(ValueError):
    """Raised when part of an API description has the wrong shape."""


def _mapping(raw: dict[str, Any], key: str, where: str) -> dict[str, Any]:
    """Return ``raw[key]`` as a mapping; absent or null means empty."""
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"{where}: '{key}' must be an object, got {type(value).__name__}"
        raise MalformedItem(msg)
    return value


def _entry(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        msg = f"{where} must be an object, got {type(value).__name__}"
        raise MalformedItem(msg)
    return value


def _common(raw: dict[str, Any]) -> dict[str, Any]:
    return {
        "summary": raw.get("summary") or [],
        "remarks": raw.get("remarks") or [],
        "is_beta": bool(raw.get("isBeta")),
    }


def _parse_parameters(raw: dict[str, Any], where: str) -> dict[str, ApiParameter]:
    params: dict[str, ApiParameter] = {}
    for pname, p in _mapping(raw, "parameters", where).items():
        p = _entry(p, f"{where}: parameter {pname}")
        params[str(pname)] = ApiParameter(
            name=str(pname),
            type=p.get("type") or None,
            description=p.get("description") or [],
        )
    return params


def _parse_return_value(raw: dict[str, Any], where: str) -> ApiReturnValue | None:
    ret = raw.get("returnValue")
    if ret is None:
        return None
    ret = _entry(ret, f"{where}: returnValue")
    return ApiReturnValue(
        type=str(ret.get("type") or ""),
        description=ret.get("description") or [],
    )


def _parse_enum_values(raw: dict[str, Any], where: str) -> dict[str, ApiEnumValue]:
    values: dict[str, ApiEnumValue] = {}
    for vname, v in _mapping(raw, "values", where).items():
        v = _entry(v, f"{where}: value {vname}")
        values[str(vname)] = ApiEnumValue(
            name=str(vname),
            value=v.get("value"),
            summary=v.get("summary") or [],
        )
    return values


def parse_member(raw: dict[str, Any], where: str = "member") -> ApiMember:
    """Parse a class or interface member."""
    kind = str(raw.get("kind") or "")
    if kind == "property":
        return PropertyItem(
            **_common(raw),
            type=str(raw.get("type") or ""),
            access_modifier=raw.get("accessModifier") or None,
        )
    if kind == "method":
        return MethodItem(
            **_common(raw),
            signature=str(raw.get("signature") or ""),
            parameters=_parse_parameters(raw, where),
            return_value=_parse_return_value(raw, where),
            access_modifier=raw.get("accessModifier") or None,
        )
    return UnknownItem(**_common(raw), kind=kind)


def _parse_members(raw: dict[str, Any], where: str) -> dict[str, ApiMember]:
    return {
        str(name): parse_member(_entry(m, f"{where}.{name}"), f"{where}.{name}")
        for name, m in _mapping(raw, "members", where).items()
    }


def parse_export(raw: dict[str, Any], where: str = "export") -> ApiExport:
    """Parse a package export."""
    kind = str(raw.get("kind") or "")
    if kind == "class":
        return ClassItem(**_common(raw), members=_parse_members(raw, where))
    if kind == "interface":
        return InterfaceItem(**_common(raw), members=_parse_members(raw, where))
    if kind == "function":
        return FunctionItem(
            **_common(raw),
            signature=str(raw.get("signature") or ""),
            parameters=_parse_parameters(raw, where),
            return_value=_parse_return_value(raw, where),
        )
    if kind == "enum":
        return EnumItem(**_common(raw), values=_parse_enum_values(raw, where))
    return UnknownItem(**_common(raw), kind=kind)


def parse_package(raw: dict[str, Any]) -> PackageItem:
    """Parse the top-level package object of an API description.

    Raises MalformedItem when a collection is not an object.
    """
    name = str(raw.get("name") or "")
    return PackageItem(
        **_common(raw),
        name=name,
        exports={
            str(ename): parse_export(_entry(e, f"export {ename}"), str(ename))
            for ename, e in _mapping(raw, "exports", name).items()
        },
    )
