"""
Extraction orchestrator

Walks the top-level children of an SSP once and dispatches each section to
its extractor. Missing sections leave the corresponding result field as None;
implemented-requirements without a control-id are left out of the result.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from ..constants import OSCAL_NAMESPACE
from ..extractors import (
    MetadataExtractor,
    SecurityControlExtractor,
    SystemCharacteristicsExtractor,
)
from ..models.entities import ExtractionResult, Metadata, SecurityControl, SystemCharacteristics
from ..tree.navigator import DocumentSource, Node, load_document

logger = logging.getLogger(__name__)


class ExtractionOrchestrator:
    """Builds an ExtractionResult from a whole SSP document"""

    def __init__(self, namespace: str = OSCAL_NAMESPACE, max_workers: Optional[int] = None):
        self.namespace = namespace
        self.max_workers = max_workers
        self.metadata_extractor = MetadataExtractor(namespace)
        self.system_extractor = SystemCharacteristicsExtractor(namespace)
        self.control_extractor = SecurityControlExtractor(namespace)

    def extract(self, source: DocumentSource) -> ExtractionResult:
        """Extract metadata, system characteristics and controls from a document

        Raises DocumentParseError only when the input is not parseable XML.
        """
        root = load_document(source)
        logger.info(f"Extracting SSP content from <{root.tag}>")

        metadata: Optional[Metadata] = None
        system_characteristics: Optional[SystemCharacteristics] = None
        requirements: List[Tuple[Node, int]] = []

        for node in root.iter_children():
            if not self.metadata_extractor.recognizes(node):
                continue

            if node.tag == "metadata" and metadata is None:
                metadata = self.metadata_extractor.extract(node)
            elif node.tag == "system-characteristics" and system_characteristics is None:
                system_characteristics = self.system_extractor.extract(node)
            elif node.tag == "control-implementation":
                requirements.extend(self._collect_requirements(node))

        if metadata is None:
            logger.warning("No 'metadata' section found")
        if system_characteristics is None:
            logger.warning("No 'system-characteristics' section found")

        controls = self._extract_controls(requirements)
        logger.info(f"Extracted {len(controls)} security controls from {len(requirements)} requirements")

        return ExtractionResult(
            metadata=metadata,
            system_characteristics=system_characteristics,
            controls=controls,
        )

    def _collect_requirements(self, control_implementation: Node) -> List[Tuple[Node, int]]:
        """implemented-requirement children paired with their position among each other"""
        requirements = []
        position = 0
        for child in control_implementation.iter_children("implemented-requirement"):
            if not self.control_extractor.recognizes(child):
                continue
            requirements.append((child, position))
            position += 1
        return requirements

    def _extract_one(self, item: Tuple[Node, int]) -> Optional[SecurityControl]:
        node, ordinal_index = item
        return self.control_extractor.extract(node, ordinal_index)

    def _extract_controls(self, requirements: List[Tuple[Node, int]]) -> Tuple[SecurityControl, ...]:
        """Extract every requirement, keeping document order"""
        if self.max_workers and self.max_workers > 1 and len(requirements) > 1:
            logger.debug(f"Extracting {len(requirements)} requirements with {self.max_workers} workers")
            # executor.map yields results in submission order
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                extracted = list(executor.map(self._extract_one, requirements))
        else:
            extracted = [self._extract_one(item) for item in requirements]

        return tuple(control for control in extracted if control is not None)
