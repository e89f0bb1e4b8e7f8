"""Tree builder for the flat, parent-referenced file tree.

The backend delivers the document tree as a flat list where each node names
its parent by id. This module derives the hierarchy from those references,
tracks which directories are expanded, and renders the visible part of the
tree into RenderedNode structures (and from there into rich Trees).
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Set

from loguru import logger
from rich.markup import escape
from rich.tree import Tree

from godocs_client.schemas import TreeNode
from godocs_client.utils import format_bytes

FILE_ICON = "📄"
FOLDER_ICON = "📁"
OPEN_FOLDER_ICON = "📂"


def children_of(nodes: Sequence[TreeNode], parent_id: Optional[str]) -> List[TreeNode]:
    """Return the nodes whose parent is ``parent_id``, in input order.

    Full scan of the list; TreeIndex answers the same question in O(1) per call.
    """
    return [node for node in nodes if node.parent_id == parent_id]


def find_root(nodes: Sequence[TreeNode]) -> Optional[TreeNode]:
    """Return the first node that has no parent within ``nodes``.

    A node is a root when its parent id is missing or does not match any
    node in the list. For the backend's walk order this is always the first
    element, but a reordered response still yields the real root.
    """
    ids = {node.id for node in nodes}
    for node in nodes:
        if node.parent_id is None or node.parent_id not in ids:
            return node
    if nodes:
        logger.warning(f"No root found among {len(nodes)} tree nodes, parent references form a cycle")
    return None


class ExpandState:
    """Set of expanded node ids, owned by a view.

    Independent of fetched data: ids that disappear after a re-fetch stay in
    the set and are simply never looked up.
    """

    def __init__(self, expanded: Iterable[str] = ()):
        self._expanded: Set[str] = set(expanded)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._expanded

    def __len__(self) -> int:
        return len(self._expanded)

    def is_expanded(self, node_id: str) -> bool:
        return node_id in self._expanded

    def toggle(self, node_id: str) -> bool:
        """Flip ``node_id`` and return whether it is now expanded."""
        if node_id in self._expanded:
            self._expanded.discard(node_id)
            return False
        self._expanded.add(node_id)
        return True

    def expand(self, node_id: str) -> None:
        self._expanded.add(node_id)

    def collapse(self, node_id: str) -> None:
        self._expanded.discard(node_id)

    def reset(self) -> None:
        self._expanded.clear()


class TreeIndex:
    """Parent -> children index over one fetched node list.

    Built once per payload in O(n). Sibling order is the input order.
    """

    def __init__(self, nodes: Sequence[TreeNode]):
        self.nodes: List[TreeNode] = list(nodes)
        self._children: Dict[Optional[str], List[TreeNode]] = {}
        self._by_id: Dict[str, TreeNode] = {}

        for node in self.nodes:
            self._children.setdefault(node.parent_id, []).append(node)
            # first occurrence wins for duplicate ids
            self._by_id.setdefault(node.id, node)

        self.root = find_root(self.nodes)

    def children_of(self, parent_id: Optional[str]) -> List[TreeNode]:
        return list(self._children.get(parent_id, ()))

    def get(self, node_id: str) -> Optional[TreeNode]:
        return self._by_id.get(node_id)

    def directory_ids(self) -> List[str]:
        return [node.id for node in self.nodes if node.is_directory]


@dataclass
class RenderedNode:
    """Visible part of one tree node after applying the expand state."""

    id: str
    name: str
    depth: int
    is_directory: bool
    expanded: bool = False
    href: Optional[str] = None
    size_suffix: Optional[str] = None
    children: List["RenderedNode"] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Label as displayed: name followed by the size suffix, if any."""
        return f"{self.name}{self.size_suffix or ''}"

    @property
    def icon(self) -> str:
        if not self.is_directory:
            return FILE_ICON
        return OPEN_FOLDER_ICON if self.expanded else FOLDER_ICON

    @property
    def indent(self) -> int:
        """Left padding in pixels used by the web frontend (20px per level)."""
        return self.depth * 20

    def walk(self) -> Iterable["RenderedNode"]:
        """Yield this node and every rendered descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


class TreeBuilder:
    """Progressive disclosure over one fetched node list."""

    def __init__(self, nodes: Sequence[TreeNode], expand_state: Optional[ExpandState] = None):
        self.index = TreeIndex(nodes)
        self.expand_state = expand_state if expand_state is not None else ExpandState()

    @property
    def root(self) -> Optional[TreeNode]:
        return self.index.root

    def toggle(self, node_id: str) -> bool:
        """Flip a node's expanded state. Changes only what render() reveals."""
        return self.expand_state.toggle(node_id)

    def expand_all(self) -> None:
        for node_id in self.index.directory_ids():
            self.expand_state.expand(node_id)

    def render(self, node: Optional[TreeNode] = None, depth: int = 0) -> Optional[RenderedNode]:
        """Render ``node`` (the root by default) and its expanded descendants.

        Children are rendered only for a directory that is expanded and has at
        least one child. A node already on the current path is skipped, so
        malformed parent references cannot recurse forever.
        """
        if node is None:
            node = self.root
        if node is None:
            return None
        return self._render(node, depth, set())

    def _render(self, node: TreeNode, depth: int, path: Set[str]) -> RenderedNode:
        expanded = node.is_directory and self.expand_state.is_expanded(node.id)

        rendered = RenderedNode(
            id=node.id,
            name=node.name,
            depth=depth,
            is_directory=node.is_directory,
            expanded=expanded,
            href=node.download_url if node.is_file and node.download_url else None,
            size_suffix=f" ({format_bytes(node.size)})" if node.is_file and node.size > 0 else None,
        )

        if not expanded:
            return rendered

        path = path | {node.id}
        for child in self.index.children_of(node.id):
            if child.id in path:
                logger.warning(f"Skipping cyclic tree reference {node.id} -> {child.id}")
                continue
            rendered.children.append(self._render(child, depth + 1, path))
        return rendered


def _label(rendered: RenderedNode) -> str:
    name = escape(rendered.name)
    if rendered.href:
        name = f"[link={rendered.href}]{name}[/link]"
    size = f"[dim]{escape(rendered.size_suffix)}[/dim]" if rendered.size_suffix else ""
    return f"{rendered.icon} {name}{size}"


def to_rich_tree(rendered: RenderedNode) -> Tree:
    """Convert a rendered node into a rich Tree for terminal output."""
    tree = Tree(_label(rendered))
    _add_children(tree, rendered)
    return tree


def _add_children(branch: Tree, rendered: RenderedNode) -> None:
    for child in rendered.children:
        _add_children(branch.add(_label(child)), child)
