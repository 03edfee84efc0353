"""
Structural document validator

Checks a parsed SSP for the namespace and the sections sspmapper relies on.
Checks are independent; every finding is accumulated into a single
ValidationResult. No XSD validation is performed.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..constants import OSCAL_NAMESPACE
from ..exceptions import DocumentParseError
from ..tree.navigator import DocumentSource, load_document

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Outcome of a structural validation run"""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.is_valid = False
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


class DocumentValidator:
    """Validator for OSCAL SSP document structure"""

    REQUIRED_SECTIONS = ("metadata", "system-characteristics")
    OPTIONAL_SECTIONS = ("control-implementation",)

    def __init__(self, namespace: str = OSCAL_NAMESPACE):
        self.namespace = namespace

    def validate(self, source: DocumentSource) -> ValidationResult:
        """Validate a document given as path, XML text/bytes or parsed Node"""
        result = ValidationResult()

        try:
            root = load_document(source)
        except DocumentParseError as e:
            logger.error(f"Document could not be parsed: {e}")
            result.add_error(str(e))
            return result

        if root.namespace != self.namespace:
            result.add_error(f"Invalid namespace. Expected {self.namespace}")

        for section in self.REQUIRED_SECTIONS:
            if root.find_first(section) is None:
                result.add_error(f"Missing required '{section}' element")

        for section in self.OPTIONAL_SECTIONS:
            if root.find_first(section) is None:
                result.add_warning(f"No '{section}' element found")

        if result.is_valid:
            logger.info(f"Document validation passed with {len(result.warnings)} warning(s)")
        else:
            for error in result.errors:
                logger.error(f"  {error}")

        return result
