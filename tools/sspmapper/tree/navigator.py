"""
Tree navigator

Read-only, namespace-aware view over a parsed XML document. Every node knows
its parent, its ordered attributes and its ordered element children, so the
rest of sspmapper never touches a platform XML engine directly.
"""

import logging
from pathlib import Path
from typing import Iterator, Mapping, Optional, Tuple, Union
from types import MappingProxyType
from xml.etree.ElementTree import Element, ParseError

import defusedxml.ElementTree as DET
from defusedxml import DefusedXmlException

from ..exceptions import DocumentParseError

logger = logging.getLogger(__name__)

DocumentSource = Union["Node", Path, str, bytes]


def local_name(tag: str) -> str:
    """Strip a Clark-notation namespace or a prefix from a tag name"""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    if ":" in tag:
        return tag.split(":", 1)[1]
    return tag


def namespace_of(tag: str) -> str:
    """Return the namespace URI of a Clark-notation tag, or an empty string"""
    if tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return ""


def remove_tag(text: Optional[str]) -> str:
    """Remove every '<' and '>' character, leaving everything else untouched.

    Not a markup stripper: 'a <b> c' becomes 'a b c'. Unbalanced brackets are
    removed the same way, so applying it twice equals applying it once.
    """
    if not text:
        return ""
    return "".join(ch for ch in text if ch not in "<>")


class Node:
    """Read-only XML element with a parent reference"""

    __slots__ = ("_tag", "_namespace", "_attributes", "_children", "_text", "_tail", "_parent")

    def __init__(self, tag: str, namespace: str = "",
                 attributes: Optional[Mapping[str, str]] = None,
                 text: str = "", tail: str = "",
                 parent: Optional["Node"] = None):
        self._tag = tag
        self._namespace = namespace
        self._attributes = MappingProxyType(dict(attributes or {}))
        self._children: Tuple["Node", ...] = ()
        self._text = text
        self._tail = tail
        self._parent = parent

    def __repr__(self) -> str:
        return f"<Node {self.qualified_name} children={len(self._children)}>"

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def qualified_name(self) -> str:
        if self._namespace:
            return f"{{{self._namespace}}}{self._tag}"
        return self._tag

    @property
    def attributes(self) -> Mapping[str, str]:
        return self._attributes

    @property
    def children(self) -> Tuple["Node", ...]:
        return self._children

    @property
    def text(self) -> str:
        return self._text

    @property
    def tail(self) -> str:
        return self._tail

    @property
    def parent(self) -> Optional["Node"]:
        return self._parent

    @property
    def is_root(self) -> bool:
        return self._parent is None

    @property
    def inner_text(self) -> str:
        """Concatenated text of this node and all descendants, in document order"""
        parts = [self._text]
        for child in self._children:
            parts.append(child.inner_text)
            parts.append(child.tail)
        return "".join(parts)

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Attribute value by name; absent attributes return default"""
        return self._attributes.get(name, default)

    def iter_children(self, tag: Optional[str] = None) -> Iterator["Node"]:
        """Direct children in document order, optionally filtered by local name"""
        for child in self._children:
            if tag is None or child.tag == tag:
                yield child

    def find_child(self, tag: str) -> Optional["Node"]:
        """First direct child with the given local name"""
        return next(self.iter_children(tag), None)

    def iter_descendants(self) -> Iterator["Node"]:
        """All descendants (self excluded) in document order"""
        for child in self._children:
            yield child
            yield from child.iter_descendants()

    def find_first(self, tag: str) -> Optional["Node"]:
        """First descendant with the given local name, in document order"""
        for node in self.iter_descendants():
            if node.tag == tag:
                return node
        return None

    def root(self) -> "Node":
        """Walk parent links up to the document root"""
        node = self
        while node._parent is not None:
            node = node._parent
        return node


def build_tree(element: Element, parent: Optional[Node] = None) -> Node:
    """Convert an ElementTree element (and its subtree) into a Node tree"""
    if not isinstance(element.tag, str):
        raise TypeError(f"Not an element node: {element!r}")

    node = Node(
        tag=local_name(element.tag),
        namespace=namespace_of(element.tag),
        attributes=element.attrib,
        text=element.text or "",
        tail=(element.tail or "") if parent is not None else "",
        parent=parent,
    )

    children = []
    for child in element:
        # Comments and processing instructions carry a callable tag
        if not isinstance(child.tag, str):
            if child.tail and children:
                children[-1]._tail += child.tail
            elif child.tail:
                node._text += child.tail
            continue
        children.append(build_tree(child, node))

    node._children = tuple(children)
    return node


def parse_document(content: Union[str, bytes]) -> Node:
    """Parse XML text into a Node tree"""
    if isinstance(content, str):
        content = content.lstrip("\ufeff")

    try:
        element = DET.fromstring(content)
    except (ParseError, DefusedXmlException) as e:
        raise DocumentParseError(f"XML parsing error: {e}") from e

    return build_tree(element)


def _parse_file(file_path: Path) -> Node:
    logger.debug(f"Parsing OSCAL document: {file_path}")
    try:
        tree = DET.parse(str(file_path))
    except (ParseError, DefusedXmlException) as e:
        raise DocumentParseError(f"XML parsing error: {e}", {"file": str(file_path)}) from e

    return build_tree(tree.getroot())


def _names_existing_file(text: str) -> bool:
    """True when text is a single-line name of a file on disk"""
    if "<" in text or "\n" in text:
        return False
    try:
        return Path(text).is_file()
    except (OSError, ValueError):
        # too long for the filesystem, or an embedded NUL
        return False


def load_document(source: DocumentSource) -> Node:
    """Load a Node tree from a path, XML text/bytes, or return an existing Node

    Path objects are always read as files. A string is XML text when it
    starts with markup (after an optional byte order mark) and a file name
    only when it names an existing file; anything else is a parse error.
    """
    if isinstance(source, Node):
        return source.root()

    if isinstance(source, bytes):
        return parse_document(source)

    if isinstance(source, Path):
        if not source.exists():
            raise FileNotFoundError(f"Input file not found: {source}")
        return _parse_file(source)

    text = source.lstrip("\ufeff").lstrip()
    if not text:
        raise DocumentParseError("XML parsing error: empty document")

    if text.startswith("<"):
        return parse_document(text)

    if _names_existing_file(source):
        return _parse_file(Path(source))

    raise DocumentParseError(
        "XML parsing error: input is neither XML text nor an existing file",
        {"input": text[:40]},
    )
