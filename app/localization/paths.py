"""Dotted path helpers for nested translation trees."""

import copy
from typing import Any, Dict, Optional, Tuple

from localization.models import TranslationTree, is_branch, join_path

SEPARATOR = "."


def flatten(tree: TranslationTree, prefix: Optional[str] = None) -> Dict[str, Any]:
    """Flatten a nested tree into a mapping of dotted path -> leaf.

    Args:
        tree: Nested translation tree.
        prefix: Optional dotted prefix for every produced path.

    Returns:
        Flat dict with one entry per leaf. Empty subtrees produce nothing.
    """
    out: Dict[str, Any] = {}
    for key, value in tree.items():
        path = join_path(prefix, key)
        if is_branch(value):
            out.update(flatten(value, path))
        else:
            out[path] = value
    return out


def traverse(path: str, root: dict, sep: str = SEPARATOR) -> Tuple[dict, str]:
    """Walk a dotted path, creating empty containers for missing segments.

    Args:
        path: Dotted path (e.g., "course.contact-info.link0").
        root: Container to walk. Modified in place.
        sep: Segment separator.

    Returns:
        (parent, key) where parent[key] is the slot the path points at.
    """
    *parents, key = path.split(sep)
    node = root
    for segment in parents:
        child = node.get(segment)
        if not is_branch(child):
            child = node[segment] = {}
        node = child
    return node, key


def gen(path: str, value: Any) -> TranslationTree:
    """Build the smallest nested tree holding value at path."""
    out: TranslationTree = {}
    parent, key = traverse(path, out)
    parent[key] = value
    return out


def lookup(path: str, root: Optional[TranslationTree], sep: str = SEPARATOR) -> Any:
    """Return the node at path without creating anything, or None."""
    node: Any = root
    for segment in path.split(sep):
        if not is_branch(node) or segment not in node:
            return None
        node = node[segment]
    return node


def deep_merge(target: TranslationTree, source: TranslationTree) -> TranslationTree:
    """Merge source into target level by level.

    Leaves in source overwrite, nested trees are unioned. Values taken from
    source are copied so later changes to source never reach target.

    Returns:
        The updated target.
    """
    for key, value in source.items():
        if is_branch(value):
            existing = target.get(key)
            if not is_branch(existing):
                existing = target[key] = {}
            deep_merge(existing, value)
        else:
            target[key] = copy.deepcopy(value)
    return target


def expand(tree: TranslationTree) -> TranslationTree:
    """Turn dotted keys into nested trees.

    {"a.b": "x", "a": {"c": "y"}} becomes {"a": {"b": "x", "c": "y"}}.
    """
    out: TranslationTree = {}
    for path, value in flatten(tree).items():
        deep_merge(out, gen(path, value))
    return out
