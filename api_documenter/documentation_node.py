"""Identity and navigation nodes for generated pages.

Nodes live in a ``NodeArena`` and point at their parent by arena index, so a
node never holds a live reference to another node. A node's page id is
derived only from its own name and its ancestors' names, which keeps links
identical across runs over the same input.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from api_documenter.api_model import ApiItem, PackageItem
from api_documenter.errors import IdentityConflict

DOC_ID_SEPARATOR = "."


def reference_for_names(names: Sequence[str]) -> str:
    """Build the page id for a chain of names, root first."""
    return DOC_ID_SEPARATOR.join(n.lower() for n in names)


@dataclass(frozen=True)
class DocumentationNode:
    """One documentable entity's position in the navigation tree."""

    index: int
    name: str
    doc_id: str
    parent: int | None
    kind: str


def get_reference(node: DocumentationNode) -> str:
    """Return the id used as the node's page id and as any link target."""
    return node.doc_id


class NodeArena:
    """Owns every node created during one generation run."""

    def __init__(self) -> None:
        self._nodes: list[DocumentationNode] = []
        self._doc_ids: set[str] = set()

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> DocumentationNode:
        return self._nodes[index]

    def create_node(
        self,
        entity: ApiItem,
        name: str,
        parent: DocumentationNode | None = None,
    ) -> DocumentationNode:
        """Create a node for ``entity`` named ``name`` under ``parent``."""
        if not name:
            raise ValueError("A documentation node needs a non-empty name")
        if parent is None and not isinstance(entity, PackageItem):
            raise ValueError(f"Only a package node may be parentless: {name}")
        if parent is not None and (
            parent.index >= len(self._nodes) or self._nodes[parent.index] is not parent
        ):
            raise ValueError(f"Parent node does not belong to this arena: {parent}")

        # The parent's id already encodes the whole ancestor chain.
        doc_id = reference_for_names([parent.doc_id, name] if parent else [name])
        if doc_id in self._doc_ids:
            raise IdentityConflict(doc_id)

        node = DocumentationNode(
            index=len(self._nodes),
            name=name,
            doc_id=doc_id,
            parent=parent.index if parent else None,
            kind=type(entity).__name__,
        )
        self._nodes.append(node)
        self._doc_ids.add(doc_id)
        return node

    def parent_of(self, node: DocumentationNode) -> DocumentationNode | None:
        """Return the parent node, or None for a package node."""
        return None if node.parent is None else self._nodes[node.parent]

    def ancestors(self, node: DocumentationNode) -> list[DocumentationNode]:
        """Return the ancestors of ``node`` from the root down, excluding it."""
        chain: list[DocumentationNode] = []
        current = self.parent_of(node)
        while current is not None:
            chain.append(current)
            current = self.parent_of(current)
        chain.reverse()
        return chain
