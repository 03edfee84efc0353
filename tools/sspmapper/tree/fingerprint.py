"""
Node fingerprints

Locators of the form /tag[i]/tag[i]/... where each index is the node's
1-based position among same-tag siblings. They stay stable across re-parses
of an unmodified document and let tooling map an extracted entity back to
its source element.
"""

import re
from typing import List, Optional

from .navigator import Node

_SEGMENT = re.compile(r"^(?P<tag>[^\[\]]+)(?:\[(?P<index>\d+)\])?$")


def find_element_index(node: Node) -> int:
    """1-based position of node among its parent's children with the same tag

    Siblings are compared by local name only, the same way path segments are
    written and resolved.
    """
    parent = node.parent
    if parent is None:
        return 1

    index = 0
    for sibling in parent.children:
        if sibling.tag == node.tag:
            index += 1
        if sibling is node:
            return index

    # node claims a parent that does not list it
    return 1


def _ancestry(node: Node) -> List[Node]:
    """Nodes from the document root down to node inclusive"""
    chain = []
    current: Optional[Node] = node
    while current is not None:
        chain.append(current)
        current = current.parent
    chain.reverse()
    return chain


def find_xpath(node: Node) -> str:
    """Indexed locator from the document root down to node"""
    return "".join(f"/{step.tag}[{find_element_index(step)}]" for step in _ancestry(node))


def find_xpath_without_index(node: Node) -> str:
    """Locator from the document root down to node, without sibling indices"""
    return "".join(f"/{step.tag}" for step in _ancestry(node))


def components(xpath: str) -> List[str]:
    """Split a locator into its non-empty segments, left to right"""
    if not xpath:
        return []
    return [segment for segment in xpath.split("/") if segment]


def resolve_xpath(root: Node, xpath: str) -> Optional[Node]:
    """Find the node a locator produced by find_xpath points to, or None

    Segments without an index resolve to the first same-tag sibling.
    """
    segments = components(xpath)
    if not segments:
        return None

    current: Optional[Node] = None
    for position, segment in enumerate(segments):
        match = _SEGMENT.match(segment)
        if match is None:
            return None

        tag = match.group("tag")
        index = int(match.group("index") or 1)

        if position == 0:
            if root.tag != tag or index != 1:
                return None
            current = root
            continue

        candidates = list(current.iter_children(tag))
        if index < 1 or index > len(candidates):
            return None
        current = candidates[index - 1]

    return current
