"""Menu visibility evaluation.

Computes, for every node of a menu tree, whether it should be shown and
whether it is itself a permitted navigation target. Results are returned
as a fresh map on every call; nothing is cached on the nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import AbstractSet, Iterable, Optional, Union

from ..permissions.resolver import has_all
from .tree import CategoryNode, ExternalNode, GroupNode, MenuNode, MenuTree, PageNode


@dataclass(frozen=True)
class NodeVisibility:
    """Evaluation result for one node.

    Attributes:
        visible: Node should be rendered in the menu.
        reachable: Node's own required permissions are satisfied. Only
            meaningful for nodes that are navigation targets.
    """

    visible: bool
    reachable: bool


VisibilityMap = dict[str, NodeVisibility]

TreeLike = Union[MenuTree, Iterable[MenuNode]]


def _roots(tree: TreeLike) -> tuple[MenuNode, ...]:
    if isinstance(tree, MenuTree):
        return tree.roots
    return tuple(tree)


def evaluate(tree: TreeLike, permissions: AbstractSet[str]) -> VisibilityMap:
    """Evaluate visibility and reachability of every node.

    Rules:
    - Page / External: ``reachable = has_all(required)``; ``visible = reachable``
    - Category / Group: ``reachable = has_all(required)``;
      ``visible = reachable or any child visible``

    A container stays visible whenever it leads to something visible, even
    if its own requirements are not met.

    Args:
        tree: A :class:`MenuTree` or a sequence of root nodes.
        permissions: Effective permission set of the principal.

    Returns:
        Map of node id to :class:`NodeVisibility`, in depth-first pre-order
        with sibling order preserved.

    Example::

        visibility = evaluate(DEFAULT_MENU_TREE, resolve(Role.STAFF, Grade.INTERN))
        visibility["page-dashboard-main"].visible  # True
    """
    result: VisibilityMap = {}
    for node in _roots(tree):
        _evaluate_node(node, permissions, result)
    return result


def _evaluate_node(node: MenuNode, permissions: AbstractSet[str], result: VisibilityMap) -> NodeVisibility:
    if isinstance(node, (PageNode, ExternalNode)):
        own = has_all(node.required_permissions, permissions)
        outcome = NodeVisibility(visible=own, reachable=own)
        result[node.id] = outcome
        return outcome

    if isinstance(node, (CategoryNode, GroupNode)):
        own = has_all(node.required_permissions, permissions)
        # Reserve the parent's slot so output stays in pre-order
        result[node.id] = NodeVisibility(visible=own, reachable=own)
        any_child_visible = False
        for child in node.children:
            if _evaluate_node(child, permissions, result).visible:
                any_child_visible = True
        outcome = NodeVisibility(visible=own or any_child_visible, reachable=own)
        result[node.id] = outcome
        return outcome

    raise TypeError(f"Unsupported menu node: {type(node).__name__}")


def filter_menu_tree(
    tree: TreeLike,
    visibility: VisibilityMap,
    *,
    accessible_route_keys: Optional[AbstractSet[str]] = None,
) -> tuple[MenuNode, ...]:
    """Prune a menu tree down to what should be rendered.

    Drops nodes that are invisible or flagged ``hidden``. When
    ``accessible_route_keys`` is given, pages outside it are dropped as
    well. Categories and groups left without children are dropped unless
    the group is itself an accessible route.

    Args:
        tree: The tree that ``visibility`` was computed for.
        visibility: Result of :func:`evaluate`.
        accessible_route_keys: Routes the route guard lets through.

    Returns:
        Pruned root nodes (new node objects; the input is untouched).
    """
    kept = []
    for node in _roots(tree):
        pruned = _filter_node(node, visibility, accessible_route_keys)
        if pruned is not None:
            kept.append(pruned)
    return tuple(kept)


def _filter_node(
    node: MenuNode,
    visibility: VisibilityMap,
    accessible_route_keys: Optional[AbstractSet[str]],
) -> Optional[MenuNode]:
    state = visibility.get(node.id)
    if state is None or not state.visible or node.hidden:
        return None

    if isinstance(node, PageNode):
        if accessible_route_keys is not None and node.route_key not in accessible_route_keys:
            return None
        return node

    if isinstance(node, ExternalNode):
        return node

    if isinstance(node, (CategoryNode, GroupNode)):
        children = tuple(
            child
            for child in (_filter_node(c, visibility, accessible_route_keys) for c in node.children)
            if child is not None
        )
        if children:
            return replace(node, children=children)
        if isinstance(node, GroupNode) and _is_navigable(node, state, accessible_route_keys):
            return replace(node, children=())
        return None

    raise TypeError(f"Unsupported menu node: {type(node).__name__}")


def _is_navigable(
    node: GroupNode,
    state: NodeVisibility,
    accessible_route_keys: Optional[AbstractSet[str]],
) -> bool:
    if not node.route_key or not state.reachable:
        return False
    return accessible_route_keys is None or node.route_key in accessible_route_keys


__all__ = [
    "NodeVisibility",
    "VisibilityMap",
    "evaluate",
    "filter_menu_tree",
]
