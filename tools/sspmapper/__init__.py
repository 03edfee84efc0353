"""
sspmapper - OSCAL SSP control-implementation extractor

Reads an OSCAL System Security Plan (XML, namespace
http://csrc.nist.gov/ns/oscal/1.0) and produces an immutable model of its
metadata, system characteristics and implemented requirements for
downstream renderers.

Key features:
- Structural validation with separate errors and warnings
- FedRAMP baseline detection from security-sensitivity-level
- Order-preserving control extraction, optionally threaded
- Sibling-indexed node fingerprints for traceability

Architecture:
    XML → Tree Navigator → {Validator, Classifier, Orchestrator} → ExtractionResult → Renderer
"""

__version__ = "1.0.0"
__author__ = "sspmapper contributors"
__license__ = "Apache-2.0"

from .conversion import ConversionService, ExtractionOrchestrator, Renderer
from .validation import BaselineClassifier, BaselineLevel, DocumentValidator

__all__ = [
    'BaselineClassifier',
    'BaselineLevel',
    'ConversionService',
    'DocumentValidator',
    'ExtractionOrchestrator',
    'Renderer',
]
