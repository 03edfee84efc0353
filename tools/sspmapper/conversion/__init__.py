"""
SSP extraction and conversion pipeline
"""

from .orchestrator import ExtractionOrchestrator
from .service import (
    ConversionProgress,
    ConversionResult,
    ConversionService,
    Renderer,
)

__all__ = [
    'ExtractionOrchestrator',
    'ConversionProgress',
    'ConversionResult',
    'ConversionService',
    'Renderer',
]
