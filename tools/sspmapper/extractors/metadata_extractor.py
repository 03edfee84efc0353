"""
Metadata and system-characteristics extractors
"""

import logging

from ..models.entities import Metadata, SystemCharacteristics
from ..tree.navigator import Node
from .base_extractor import BaseExtractor

logger = logging.getLogger(__name__)


class MetadataExtractor(BaseExtractor):
    """Extractor for the document's metadata element"""

    def extract(self, node: Node) -> Metadata:
        node = self._check_node(node)
        last_modified_text = self._child_text(node, "last-modified")

        metadata = Metadata(
            title=self._child_text(node, "title"),
            version=self._child_text(node, "version"),
            oscal_version=self._child_text(node, "oscal-version"),
            last_modified=self.parse_timestamp(last_modified_text),
            last_modified_text=last_modified_text,
        )
        logger.debug(f"Extracted metadata: {metadata.title!r} v{metadata.version}")
        return metadata


class SystemCharacteristicsExtractor(BaseExtractor):
    """Extractor for the document's system-characteristics element"""

    def extract(self, node: Node) -> SystemCharacteristics:
        node = self._check_node(node)

        characteristics = SystemCharacteristics(
            system_name=self._child_text(node, "system-name"),
            system_id=self._child_text(node, "system-id"),
            security_sensitivity_level=self._child_text(node, "security-sensitivity-level"),
        )
        logger.debug(f"Extracted system characteristics: {characteristics.system_name!r}")
        return characteristics
