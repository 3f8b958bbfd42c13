"""Menu tree model, visibility evaluation and route guarding."""

from .tree import (
    CategoryNode,
    CompositeNode,
    ExternalNode,
    GroupNode,
    MenuNode,
    MenuTree,
    PageNode,
    children_of,
    menu_node_from_dict,
    menu_tree_from_dicts,
    route_key_of,
)
from .visibility import NodeVisibility, VisibilityMap, evaluate, filter_menu_tree
from .guard import RouteAccessGuard
from .defaults import DEFAULT_MENU_CONFIG, DEFAULT_MENU_TREE

__all__ = [
    "CategoryNode",
    "CompositeNode",
    "DEFAULT_MENU_CONFIG",
    "DEFAULT_MENU_TREE",
    "ExternalNode",
    "GroupNode",
    "MenuNode",
    "MenuTree",
    "NodeVisibility",
    "PageNode",
    "RouteAccessGuard",
    "VisibilityMap",
    "children_of",
    "evaluate",
    "filter_menu_tree",
    "menu_node_from_dict",
    "menu_tree_from_dicts",
    "route_key_of",
]
