"""
Base extractor class for sspmapper

Provides common node access helpers for all entity extractors.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Iterator, Optional

from ..constants import OSCAL_NAMESPACE
from ..tree.navigator import Node

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """Base class for all node to entity extractors"""

    def __init__(self, namespace: Optional[str] = OSCAL_NAMESPACE):
        self.namespace = namespace or ""

    def _check_node(self, node: Any) -> Node:
        """Reject anything that is not an element node"""
        if not isinstance(node, Node):
            raise TypeError(
                f"{type(self).__name__} expects an element node, got {type(node).__name__}"
            )
        return node

    def recognizes(self, node: Node) -> bool:
        """Children in the document namespace or in no namespace are recognized"""
        return not self.namespace or node.namespace in (self.namespace, "")

    def _children(self, node: Node, tag: Optional[str] = None) -> Iterator[Node]:
        """Recognized direct children, optionally filtered by local name"""
        for child in node.iter_children(tag):
            if self.recognizes(child):
                yield child

    def _child(self, node: Node, tag: str) -> Optional[Node]:
        return next(self._children(node, tag), None)

    def _child_text(self, node: Node, tag: str, default: str = "") -> str:
        """Trimmed text content of the first recognized child with the given name"""
        child = self._child(node, tag)
        if child is None:
            return default
        return child.inner_text.strip()

    def parse_timestamp(self, value: str) -> Optional[datetime]:
        """Parse an OSCAL date-time; unparsable values yield None"""
        if not value:
            return None

        # fromisoformat only accepts a trailing Z from Python 3.11 on
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"

        try:
            return datetime.fromisoformat(text)
        except ValueError:
            logger.debug(f"Unparsable timestamp: {value}")
            return None

    @abstractmethod
    def extract(self, node: Node, *args, **kwargs) -> Any:
        """Build one entity from node"""
        pass
