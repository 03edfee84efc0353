"""
Validation and classification for sspmapper

Structural validation of SSP documents, baseline detection from the
security-sensitivity-level, and JSON schema checks of extraction exports.
"""

from .document_validator import DocumentValidator, ValidationResult
from .baseline_classifier import BaselineClassifier, BaselineLevel
from .schema_validator import ExtractionSchemaValidator

__all__ = [
    'DocumentValidator',
    'ValidationResult',
    'BaselineClassifier',
    'BaselineLevel',
    'ExtractionSchemaValidator',
]
