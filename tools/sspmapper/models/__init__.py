"""
Entity model for sspmapper
"""

from .entities import (
    ExtractionResult,
    Metadata,
    Parameter,
    Property,
    ResponsibleRole,
    SecurityControl,
    Statement,
    SystemCharacteristics,
)

__all__ = [
    'ExtractionResult',
    'Metadata',
    'Parameter',
    'Property',
    'ResponsibleRole',
    'SecurityControl',
    'Statement',
    'SystemCharacteristics',
]
