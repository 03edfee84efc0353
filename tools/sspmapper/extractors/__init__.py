"""
Entity extractors for sspmapper

Extractors turn a single source node into one immutable entity. They never
raise for missing optional children.
"""

from .base_extractor import BaseExtractor
from .metadata_extractor import MetadataExtractor, SystemCharacteristicsExtractor
from .control_extractor import SecurityControlExtractor

__all__ = [
    'BaseExtractor',
    'MetadataExtractor',
    'SystemCharacteristicsExtractor',
    'SecurityControlExtractor',
]
