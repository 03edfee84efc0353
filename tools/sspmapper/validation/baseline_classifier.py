"""
Baseline classifier

Maps the document's security-sensitivity-level to a FedRAMP baseline.
"""

import logging
from enum import Enum

from ..constants import DEFAULT_TEMPLATE_FILE, TEMPLATE_FILES
from ..tree.navigator import DocumentSource, load_document

logger = logging.getLogger(__name__)


class BaselineLevel(Enum):
    UNKNOWN = "Unknown"
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"

    @property
    def template_file(self) -> str:
        """FedRAMP SSP template for this baseline"""
        return TEMPLATE_FILES.get(self.value.lower(), DEFAULT_TEMPLATE_FILE)


class BaselineClassifier:
    """Classifier for the compliance baseline of an SSP"""

    DEFAULT = BaselineLevel.MODERATE

    LEVELS = {
        "low": BaselineLevel.LOW,
        "moderate": BaselineLevel.MODERATE,
        "high": BaselineLevel.HIGH,
    }

    def detect_baseline(self, source: DocumentSource) -> BaselineLevel:
        """Detect the baseline; anything unrecognized falls back to Moderate"""
        try:
            root = load_document(source)
        except Exception as e:
            logger.warning(f"Baseline detection failed, defaulting to {self.DEFAULT.value}: {e}")
            return self.DEFAULT

        node = root.find_first("security-sensitivity-level")
        level = node.inner_text.strip().lower() if node is not None else ""

        baseline = self.LEVELS.get(level)
        if baseline is None:
            logger.debug(f"Unrecognized sensitivity level {level!r}, defaulting to {self.DEFAULT.value}")
            return self.DEFAULT

        logger.info(f"Detected {baseline.value} baseline")
        return baseline
