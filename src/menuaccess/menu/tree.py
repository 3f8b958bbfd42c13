"""Immutable menu tree model.

Four node kinds, discriminated by ``kind``:

- ``CategoryNode`` — label-only section header with children
- ``GroupNode``    — collapsible container, optionally a route itself
- ``PageNode``     — leaf mapped to a route key
- ``ExternalNode`` — leaf linking to an external URL

Menu nodes are linked to screens through route keys (``"users.list"``),
not URL paths. :class:`MenuTree` validates and indexes a forest of nodes
once, at construction; nodes never reference their parent.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, ClassVar, Iterable, Iterator, Literal, Optional, Union

from ..exceptions import MenuTreeError
from ..permissions.constants import is_valid_permission_key, is_well_formed_route_key


def _freeze(node: Any, **fields: Any) -> None:
    for name, value in fields.items():
        # a bare string would otherwise split into characters
        if isinstance(value, str):
            raise MenuTreeError(
                f"Menu node {node.id!r}: {name} must be a list, not a string",
                node_id=node.id,
                field=name,
            )
        object.__setattr__(node, name, tuple(value or ()))


@dataclass(frozen=True, kw_only=True)
class CategoryNode:
    """Section header. Never a navigation target."""

    kind: ClassVar[Literal["category"]] = "category"

    id: str
    label: str
    children: tuple["MenuNode", ...] = ()
    required_permissions: tuple[str, ...] = ()
    order: int = 0
    hidden: bool = False
    badge: Optional[str] = None

    def __post_init__(self) -> None:
        _freeze(self, children=self.children, required_permissions=self.required_permissions)


@dataclass(frozen=True, kw_only=True)
class GroupNode:
    """Container that may also navigate to ``route_key``."""

    kind: ClassVar[Literal["group"]] = "group"

    id: str
    label: str
    children: tuple["MenuNode", ...] = ()
    route_key: Optional[str] = None
    required_permissions: tuple[str, ...] = ()
    order: int = 0
    hidden: bool = False
    badge: Optional[str] = None

    def __post_init__(self) -> None:
        _freeze(self, children=self.children, required_permissions=self.required_permissions)


@dataclass(frozen=True, kw_only=True)
class PageNode:
    """Leaf mapped to a screen."""

    kind: ClassVar[Literal["page"]] = "page"

    id: str
    label: str
    route_key: str
    required_permissions: tuple[str, ...] = ()
    order: int = 0
    hidden: bool = False
    badge: Optional[str] = None

    def __post_init__(self) -> None:
        _freeze(self, required_permissions=self.required_permissions)


@dataclass(frozen=True, kw_only=True)
class ExternalNode:
    """Leaf linking outside the application."""

    kind: ClassVar[Literal["external"]] = "external"

    id: str
    label: str
    href: str
    target: Optional[str] = None
    required_permissions: tuple[str, ...] = ()
    order: int = 0
    hidden: bool = False
    badge: Optional[str] = None

    def __post_init__(self) -> None:
        _freeze(self, required_permissions=self.required_permissions)


MenuNode = Union[CategoryNode, GroupNode, PageNode, ExternalNode]
CompositeNode = Union[CategoryNode, GroupNode]


def children_of(node: MenuNode) -> tuple[MenuNode, ...]:
    """Children of a composite node; leaves have none."""
    if isinstance(node, (CategoryNode, GroupNode)):
        return node.children
    return ()


def route_key_of(node: MenuNode) -> Optional[str]:
    """Route key a node navigates to, if any."""
    if isinstance(node, (PageNode, GroupNode)):
        return node.route_key
    return None


class MenuTree:
    """Validated, indexed forest of menu nodes.

    Invariants checked at construction (violations raise
    :class:`MenuTreeError`):
    - node ids are unique
    - route keys are unique across the tree and dot-delimited
    - external nodes carry an href
    - required permissions come from the catalog (``validate_permissions``)

    Args:
        roots: Top-level nodes, in display order.
        validate_permissions: Check required permissions against the catalog.
    """

    def __init__(self, roots: Iterable[MenuNode], *, validate_permissions: bool = True) -> None:
        self._roots: tuple[MenuNode, ...] = tuple(roots)
        self._by_id: dict[str, MenuNode] = {}
        self._by_route_key: dict[str, MenuNode] = {}

        for node in self.iter_nodes():
            self._index(node, validate_permissions)

    def _index(self, node: MenuNode, validate_permissions: bool) -> None:
        if not node.id:
            raise MenuTreeError("Menu node without id", label=node.label)
        if node.id in self._by_id:
            raise MenuTreeError(f"Duplicate menu node id: {node.id!r}", node_id=node.id)
        self._by_id[node.id] = node

        if isinstance(node, PageNode) and not node.route_key:
            raise MenuTreeError(f"Page node {node.id!r} has no route key", node_id=node.id)
        if isinstance(node, ExternalNode) and not node.href:
            raise MenuTreeError(f"External node {node.id!r} has no href", node_id=node.id)

        route_key = route_key_of(node)
        if route_key is not None:
            if not is_well_formed_route_key(route_key):
                raise MenuTreeError(f"Malformed route key: {route_key!r}", node_id=node.id)
            if route_key in self._by_route_key:
                raise MenuTreeError(
                    f"Duplicate route key: {route_key!r}",
                    node_id=node.id,
                    other_node_id=self._by_route_key[route_key].id,
                )
            self._by_route_key[route_key] = node

        if validate_permissions:
            unknown = [key for key in node.required_permissions if not is_valid_permission_key(key)]
            if unknown:
                raise MenuTreeError(
                    f"Menu node {node.id!r} requires unknown permissions: {unknown}",
                    node_id=node.id,
                    permissions=unknown,
                )

    # ── Access ──────────────────────────────────────────

    @property
    def roots(self) -> tuple[MenuNode, ...]:
        return self._roots

    def __iter__(self) -> Iterator[MenuNode]:
        return iter(self._roots)

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._by_id

    def get(self, node_id: str) -> Optional[MenuNode]:
        return self._by_id.get(node_id)

    def find_by_route_key(self, route_key: str) -> Optional[MenuNode]:
        return self._by_route_key.get(route_key)

    def iter_nodes(self) -> Iterator[MenuNode]:
        """Depth-first, pre-order, siblings in input order."""
        stack: list[MenuNode] = list(reversed(self._roots))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(children_of(node)))

    def route_keys(self) -> tuple[str, ...]:
        """All route keys in depth-first order."""
        keys = []
        for node in self.iter_nodes():
            route_key = route_key_of(node)
            if route_key is not None:
                keys.append(route_key)
        return tuple(keys)

    # ── Structure ───────────────────────────────────────

    def path_to(self, route_key: str) -> Optional[tuple[MenuNode, ...]]:
        """Nodes from a root down to the node owning ``route_key`` (breadcrumbs)."""

        def search(nodes: tuple[MenuNode, ...], trail: tuple[MenuNode, ...]) -> Optional[tuple[MenuNode, ...]]:
            for node in nodes:
                path = trail + (node,)
                if route_key_of(node) == route_key:
                    return path
                found = search(children_of(node), path)
                if found:
                    return found
            return None

        if route_key not in self._by_route_key:
            return None
        return search(self._roots, ())

    def depth_of(self, node_id: str) -> int:
        """1-based depth of a node; 0 if it is not in the tree."""

        def search(nodes: tuple[MenuNode, ...], depth: int) -> int:
            for node in nodes:
                if node.id == node_id:
                    return depth
                found = search(children_of(node), depth + 1)
                if found:
                    return found
            return 0

        return search(self._roots, 1)

    def max_depth(self) -> int:
        def depth(nodes: tuple[MenuNode, ...]) -> int:
            if not nodes:
                return 0
            return 1 + max(depth(children_of(node)) for node in nodes)

        return depth(self._roots)

    def sorted(self) -> "MenuTree":
        """Copy with siblings ordered by ``order`` (stable for ties)."""

        def sort(nodes: tuple[MenuNode, ...]) -> tuple[MenuNode, ...]:
            result = []
            for node in sorted(nodes, key=lambda n: n.order):
                if isinstance(node, (CategoryNode, GroupNode)):
                    node = replace(node, children=sort(node.children))
                result.append(node)
            return tuple(result)

        return MenuTree(sort(self._roots), validate_permissions=False)


# ── Construction from configuration ──────────────────────

_KIND_ALIASES = {"menu": "group"}


def _order_of(data: dict[str, Any]) -> int:
    order = data.get("order")
    if order is None:
        return 0
    if isinstance(order, bool) or not isinstance(order, int):
        raise MenuTreeError(f"Menu node order must be an integer: {order!r}", node_id=data.get("id", ""))
    return order


def menu_node_from_dict(data: dict[str, Any]) -> MenuNode:
    """Build a node (and its subtree) from a configuration dict.

    Accepts ``type`` (``category`` / ``group`` or ``menu`` / ``page`` /
    ``external``) and snake_case or camelCase field names.
    """
    kind = data.get("type") or data.get("kind")
    kind = _KIND_ALIASES.get(kind, kind)

    common: dict[str, Any] = {
        "id": data.get("id", ""),
        "label": data.get("label", ""),
        "required_permissions": data.get("required_permissions", data.get("requiredPermissions")) or (),
        "order": _order_of(data),
        "hidden": bool(data.get("hidden", False)),
        "badge": data.get("badge"),
    }
    route_key = data.get("route_key", data.get("routeKey"))
    children = tuple(menu_node_from_dict(child) for child in data.get("children") or ())

    if kind == "category":
        return CategoryNode(children=children, **common)
    if kind == "group":
        return GroupNode(children=children, route_key=route_key, **common)
    if kind == "page":
        return PageNode(route_key=route_key or "", **common)
    if kind == "external":
        return ExternalNode(href=data.get("href", ""), target=data.get("target"), **common)
    raise MenuTreeError(f"Unknown menu node type: {kind!r}", node_id=common["id"])


def menu_tree_from_dicts(data: Iterable[dict[str, Any]], *, validate_permissions: bool = True) -> MenuTree:
    """Build and validate a :class:`MenuTree` from configuration dicts."""
    return MenuTree(
        (menu_node_from_dict(item) for item in data),
        validate_permissions=validate_permissions,
    )


__all__ = [
    "CategoryNode",
    "CompositeNode",
    "ExternalNode",
    "GroupNode",
    "MenuNode",
    "MenuTree",
    "PageNode",
    "children_of",
    "menu_node_from_dict",
    "menu_tree_from_dicts",
    "route_key_of",
]
