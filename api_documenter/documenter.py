"""Generate cross-linked documentation pages from loaded API descriptions.

``Documenter.write_docs`` walks every loaded package depth first. Each entity
gets a node in a shared ``NodeArena`` (its page id), one page handed to the
sink, and one summary row that the generator returns to its caller. The
caller owns the listing tables and fills them from those returned rows.
"""

import logging
from pathlib import Path
from typing import Any

from api_documenter import markup_builder as mb
from api_documenter.api_json_file import ApiJsonFile
from api_documenter.api_model import (
    ApiItem,
    ClassItem,
    EnumItem,
    FunctionItem,
    InterfaceItem,
    MethodItem,
    PropertyItem,
)
from api_documenter.documentation_node import (
    DocumentationNode,
    NodeArena,
    get_reference,
)
from api_documenter.load_config import load_config
from api_documenter.markup import (
    MarkupBasicElement,
    MarkupCode,
    MarkupPage,
    MarkupTable,
    MarkupTableRow,
)
from api_documenter.page_sink import PageSink
from api_documenter.rendering_helpers import (
    get_concise_signature,
    get_unscoped_package_name,
)

logger = logging.getLogger(__name__)

BETA_WARNING = (
    "This API is provided as a preview for developers and may change"
    " based on feedback that we receive.  Do not use this API in a"
    " production environment."
)


class Documenter:
    """Reads API descriptions and writes one page per documentable entity."""

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        self._config = config if config is not None else load_config()
        self._language: str = self._config["code_language"]
        self._api_json_files: list[ApiJsonFile] = []
        # Valid only for the duration of write_docs.
        self._arena = NodeArena()
        self._pages_written = 0

    @property
    def api_json_files(self) -> list[ApiJsonFile]:
        return list(self._api_json_files)

    def load_api_json_file(self, path: str | Path) -> None:
        """Queue an API description; raises LoadError when it is malformed."""
        self._api_json_files.append(ApiJsonFile.load_from_file(path))

    def write_docs(self, renderer: PageSink) -> int:
        """Generate every page and hand it to ``renderer``.

        Returns the number of pages written.
        """
        logger.info("Deleting old *%s files...", renderer.output_file_extension)
        renderer.delete_output_files()

        self._arena = NodeArena()
        self._pages_written = 0
        for api_json_file in self._api_json_files:
            self._write_package_page(api_json_file, renderer)
        return self._pages_written

    # -----------------------------
    # Shared pieces
    # -----------------------------

    def _code(self, code: str) -> MarkupCode:
        return mb.create_code(code, self._language)

    def _link_cell(
        self, text: str, node: DocumentationNode
    ) -> list[MarkupBasicElement]:
        return [mb.create_api_link([self._code(text)], get_reference(node))]

    def _finish_page(self, page: MarkupPage, renderer: PageSink) -> None:
        renderer.write_page(page)
        self._pages_written += 1

    def _new_page(self, title: str, node: DocumentationNode) -> MarkupPage:
        page = mb.create_page(title, get_reference(node))
        self._write_breadcrumb(page, node)
        return page

    def _write_breadcrumb(self, page: MarkupPage, node: DocumentationNode) -> None:
        home = self._config["home_link"]
        page.breadcrumb.append(
            mb.create_web_link_from_text(home["text"], home["target"])
        )
        for ancestor in self._arena.ancestors(node):
            page.breadcrumb.extend(mb.create_text_elements(" > "))
            page.breadcrumb.append(
                mb.create_api_link_from_text(ancestor.name, get_reference(ancestor))
            )

    def _write_beta_warning(self, page: MarkupPage, item: ApiItem) -> None:
        if item.is_beta:
            page.elements.append(mb.create_note_box_from_text(BETA_WARNING))

    def _write_remarks(self, page: MarkupPage, item: ApiItem) -> None:
        if item.remarks:
            page.elements.append(mb.create_heading1("Remarks"))
            page.elements.extend(mb.render_doc_elements(item.remarks))

    def _write_signature(self, page: MarkupPage, signature: str) -> None:
        page.elements.append(mb.PARAGRAPH)
        page.elements.extend(mb.create_text_elements("Signature:", bold=True))
        page.elements.append(mb.create_code_box(signature, self._language))

    @staticmethod
    def _append_table(page: MarkupPage, heading: str, table: MarkupTable) -> None:
        if table.rows:
            page.elements.append(mb.create_heading1(heading))
            page.elements.append(table)

    @staticmethod
    def _headers(*names: str) -> list[list[MarkupBasicElement]]:
        return [list(mb.create_text_elements(n)) for n in names]

    # -----------------------------
    # GENERATE PAGE: PACKAGE
    # -----------------------------

    def _write_package_page(
        self, api_json_file: ApiJsonFile, renderer: PageSink
    ) -> None:
        logger.info("Writing %s package", api_json_file.package_name)

        unscoped_name = get_unscoped_package_name(api_json_file.package_name)
        doc_package = api_json_file.doc_package
        package_node = self._arena.create_node(doc_package, unscoped_name)

        page = self._new_page(f"{unscoped_name} package", package_node)
        page.elements.extend(mb.render_doc_elements(doc_package.summary))

        classes_table = mb.create_table(self._headers("Class", "Description"))
        interfaces_table = mb.create_table(self._headers("Interface", "Description"))
        functions_table = mb.create_table(
            self._headers("Function", "Returns", "Description")
        )
        enumerations_table = mb.create_table(
            self._headers("Enumeration", "Description")
        )

        for export_name, item in doc_package.exports.items():
            if isinstance(item, ClassItem):
                node = self._arena.create_node(item, export_name, package_node)
                classes_table.rows.append(self._write_class_page(item, node, renderer))
            elif isinstance(item, InterfaceItem):
                node = self._arena.create_node(item, export_name, package_node)
                interfaces_table.rows.append(
                    self._write_interface_page(item, node, renderer)
                )
            elif isinstance(item, FunctionItem):
                node = self._arena.create_node(item, export_name, package_node)
                functions_table.rows.append(
                    self._write_function_page(item, node, renderer)
                )
            elif isinstance(item, EnumItem):
                node = self._arena.create_node(item, export_name, package_node)
                enumerations_table.rows.append(
                    self._write_enum_page(item, node, renderer)
                )
            else:
                logger.debug(
                    "Skipping export %s of unknown kind %r",
                    export_name,
                    getattr(item, "kind", type(item).__name__),
                )

        self._write_remarks(page, doc_package)
        self._append_table(page, "Classes", classes_table)
        self._append_table(page, "Interfaces", interfaces_table)
        self._append_table(page, "Functions", functions_table)
        self._append_table(page, "Enumerations", enumerations_table)

        self._finish_page(page, renderer)

    def _export_description(self, item: ApiItem) -> list[MarkupBasicElement]:
        description: list[MarkupBasicElement] = []
        if item.is_beta:
            description.extend(
                mb.create_text_elements("(BETA)", italics=True, bold=True)
            )
            description.extend(mb.create_text_elements(" "))
        description.extend(mb.render_doc_elements(item.summary))
        return description

    # -----------------------------
    # GENERATE PAGE: CLASS / INTERFACE
    # -----------------------------

    def _write_class_page(
        self, item: ClassItem, node: DocumentationNode, renderer: PageSink
    ) -> MarkupTableRow:
        page = self._new_page(f"{node.name} class", node)
        self._write_beta_warning(page, item)
        page.elements.extend(mb.render_doc_elements(item.summary))

        page.elements.append(mb.create_heading1("Constructor"))
        page.elements.extend(
            mb.create_text_elements("Constructs a new instance of the ")
        )
        page.elements.append(mb.create_code(node.name))
        page.elements.extend(mb.create_text_elements(" class"))

        self._write_members(page, item, node, renderer, with_access_modifier=True)
        self._write_remarks(page, item)
        self._finish_page(page, renderer)

        return mb.create_table_row(
            [self._link_cell(node.name, node), self._export_description(item)]
        )

    def _write_interface_page(
        self, item: InterfaceItem, node: DocumentationNode, renderer: PageSink
    ) -> MarkupTableRow:
        page = self._new_page(f"{node.name} interface", node)
        self._write_beta_warning(page, item)
        page.elements.extend(mb.render_doc_elements(item.summary))

        self._write_members(page, item, node, renderer, with_access_modifier=False)
        self._write_remarks(page, item)
        self._finish_page(page, renderer)

        return mb.create_table_row(
            [self._link_cell(node.name, node), self._export_description(item)]
        )

    def _write_members(
        self,
        page: MarkupPage,
        item: ClassItem | InterfaceItem,
        node: DocumentationNode,
        renderer: PageSink,
        *,
        with_access_modifier: bool,
    ) -> None:
        modifier = ["Access Modifier"] if with_access_modifier else []
        properties_table = mb.create_table(
            self._headers("Property", *modifier, "Type", "Description")
        )
        methods_table = mb.create_table(
            self._headers("Method", *modifier, "Returns", "Description")
        )

        for member_name, member in item.members.items():
            if isinstance(member, PropertyItem):
                member_node = self._arena.create_node(member, member_name, node)
                properties_table.rows.append(
                    self._write_property_page(
                        member, member_node, renderer, with_access_modifier
                    )
                )
            elif isinstance(member, MethodItem):
                member_node = self._arena.create_node(member, member_name, node)
                methods_table.rows.append(
                    self._write_method_page(
                        member, member_node, renderer, with_access_modifier
                    )
                )
            else:
                logger.debug(
                    "Skipping member %s.%s of unknown kind %r",
                    node.name,
                    member_name,
                    getattr(member, "kind", type(member).__name__),
                )

        self._append_table(page, "Properties", properties_table)
        self._append_table(page, "Methods", methods_table)

    # -----------------------------
    # GENERATE PAGE: PROPERTY
    # -----------------------------

    def _write_property_page(
        self,
        item: PropertyItem,
        node: DocumentationNode,
        renderer: PageSink,
        with_access_modifier: bool,
    ) -> MarkupTableRow:
        owner = self._arena.parent_of(node)
        full_name = f"{owner.name}.{node.name}" if owner else node.name
        page = self._new_page(f"{full_name} property", node)
        self._write_beta_warning(page, item)
        page.elements.extend(mb.render_doc_elements(item.summary))

        self._write_signature(page, f"{node.name}: {item.type}")
        self._write_remarks(page, item)
        self._finish_page(page, renderer)

        cells = [self._link_cell(node.name, node)]
        if with_access_modifier:
            cells.append(
                [self._code(item.access_modifier)] if item.access_modifier else []
            )
        cells.append([self._code(item.type)] if item.type else [])
        cells.append(mb.render_doc_elements(item.summary))
        return mb.create_table_row(cells)

    # -----------------------------
    # GENERATE PAGE: METHOD / FUNCTION
    # -----------------------------

    def _write_method_page(
        self,
        item: MethodItem,
        node: DocumentationNode,
        renderer: PageSink,
        with_access_modifier: bool,
    ) -> MarkupTableRow:
        owner = self._arena.parent_of(node)
        full_name = f"{owner.name}.{node.name}" if owner else node.name
        page = self._new_page(f"{full_name} method", node)
        self._write_callable_body(page, item, item.signature or node.name)
        self._finish_page(page, renderer)

        cells = [self._link_cell(get_concise_signature(node.name, item), node)]
        if with_access_modifier:
            cells.append(
                [self._code(item.access_modifier)] if item.access_modifier else []
            )
        cells.append(self._returns_cell(item))
        cells.append(mb.render_doc_elements(item.summary))
        return mb.create_table_row(cells)

    def _write_function_page(
        self, item: FunctionItem, node: DocumentationNode, renderer: PageSink
    ) -> MarkupTableRow:
        page = self._new_page(f"{node.name} function", node)
        self._write_callable_body(page, item, item.signature or node.name)
        self._finish_page(page, renderer)

        return mb.create_table_row(
            [
                self._link_cell(node.name, node),
                self._returns_cell(item),
                self._export_description(item),
            ]
        )

    def _returns_cell(
        self, item: MethodItem | FunctionItem
    ) -> list[MarkupBasicElement]:
        if item.return_value and item.return_value.type:
            return [self._code(item.return_value.type)]
        return []

    def _write_callable_body(
        self, page: MarkupPage, item: MethodItem | FunctionItem, signature: str
    ) -> None:
        self._write_beta_warning(page, item)
        page.elements.extend(mb.render_doc_elements(item.summary))
        self._write_signature(page, signature)

        if item.return_value:
            if item.return_value.type:
                page.elements.extend(mb.create_text_elements("Returns:", bold=True))
                page.elements.extend(mb.create_text_elements(" "))
                page.elements.append(self._code(item.return_value.type))
                page.elements.append(mb.PARAGRAPH)
            page.elements.extend(
                mb.render_doc_elements(item.return_value.description)
            )

        self._write_remarks(page, item)

        if item.parameters:
            parameters_table = mb.create_table(
                self._headers("Parameter", "Type", "Description")
            )
            for parameter_name, parameter in item.parameters.items():
                parameters_table.rows.append(
                    mb.create_table_row(
                        [
                            [self._code(parameter_name)],
                            [self._code(parameter.type)] if parameter.type else [],
                            mb.render_doc_elements(parameter.description),
                        ]
                    )
                )
            self._append_table(page, "Parameters", parameters_table)

    # -----------------------------
    # GENERATE PAGE: ENUM
    # -----------------------------

    def _write_enum_page(
        self, item: EnumItem, node: DocumentationNode, renderer: PageSink
    ) -> MarkupTableRow:
        page = self._new_page(f"{node.name} enumeration", node)
        self._write_beta_warning(page, item)
        page.elements.extend(mb.render_doc_elements(item.summary))

        members_table = mb.create_table(
            self._headers("Member", "Value", "Description")
        )
        for member_name, member in item.values.items():
            value: list[MarkupBasicElement] = []
            if member.has_value:
                value.append(mb.create_code(f"= {member.value}"))
            members_table.rows.append(
                mb.create_table_row(
                    [
                        mb.create_text_elements(member_name),
                        value,
                        mb.render_doc_elements(member.summary),
                    ]
                )
            )
        if members_table.rows:
            page.elements.append(members_table)

        self._finish_page(page, renderer)

        return mb.create_table_row(
            [self._link_cell(node.name, node), self._export_description(item)]
        )
