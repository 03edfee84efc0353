"""
Security control extractor

Converts an implemented-requirement element into a SecurityControl. Children
are scanned once in document order and dispatched by local name; anything
unrecognized is skipped.
"""

import logging
from typing import Callable, Dict, List, Optional

from ..constants import OSCAL_NAMESPACE
from ..models.entities import (
    Parameter,
    Property,
    ResponsibleRole,
    SecurityControl,
    Statement,
)
from ..tree.navigator import Node
from .base_extractor import BaseExtractor

logger = logging.getLogger(__name__)


class SecurityControlExtractor(BaseExtractor):
    """Extractor for implemented-requirement elements"""

    def __init__(self, namespace: Optional[str] = OSCAL_NAMESPACE):
        super().__init__(namespace)
        self._builders: Dict[str, Callable[[Node], object]] = {
            "prop": self._build_property,
            "statement": self._build_statement,
            "set-parameter": self._build_parameter,
            "responsible-role": self._build_responsible_role,
        }

    def extract(self, node: Node, ordinal_index: int = 0) -> Optional[SecurityControl]:
        """Build a SecurityControl, or None when the node has no control-id"""
        node = self._check_node(node)

        control_id = node.get_attribute("control-id")
        if control_id is None:
            logger.debug(f"Skipping {node.tag} without control-id at position {ordinal_index}")
            return None

        collected: Dict[str, List[object]] = {tag: [] for tag in self._builders}
        for child in self._children(node):
            builder = self._builders.get(child.tag)
            if builder is not None:
                collected[child.tag].append(builder(child))

        return SecurityControl(
            control_id=control_id,
            uuid=node.get_attribute("uuid"),
            ordinal_index=ordinal_index,
            properties=tuple(collected["prop"]),
            statements=tuple(collected["statement"]),
            parameters=tuple(collected["set-parameter"]),
            responsible_roles=tuple(collected["responsible-role"]),
        )

    def _build_property(self, node: Node) -> Property:
        return Property(
            name=node.get_attribute("name", ""),
            value=node.get_attribute("value", ""),
        )

    def _build_statement(self, node: Node) -> Statement:
        # Markup inside the description is dropped, its text is kept
        return Statement(
            statement_id=node.get_attribute("statement-id", ""),
            value=self._child_text(node, "description"),
        )

    def _build_parameter(self, node: Node) -> Parameter:
        return Parameter(
            param_id=node.get_attribute("param-id", ""),
            value=self._child_text(node, "value"),
        )

    def _build_responsible_role(self, node: Node) -> ResponsibleRole:
        party_uuids = tuple(
            child.inner_text.strip() for child in self._children(node, "party-uuid")
        )
        return ResponsibleRole(
            name=node.get_attribute("role-id", ""),
            party_uuids=party_uuids,
        )
