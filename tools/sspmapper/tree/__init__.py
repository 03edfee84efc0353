"""
Tree navigation and fingerprinting for sspmapper

The navigator wraps a parsed OSCAL document in a read-only, parent-linked
node tree; the fingerprint helpers compute sibling-indexed locators for any
node in it.
"""

from .navigator import (
    Node,
    build_tree,
    load_document,
    local_name,
    parse_document,
    remove_tag,
)
from .fingerprint import (
    components,
    find_element_index,
    find_xpath,
    find_xpath_without_index,
    resolve_xpath,
)

__all__ = [
    'Node',
    'build_tree',
    'load_document',
    'local_name',
    'parse_document',
    'remove_tag',
    'components',
    'find_element_index',
    'find_xpath',
    'find_xpath_without_index',
    'resolve_xpath',
]
