"""
Reference data for sspmapper

OSCAL namespace, the Status Vocabulary consumed by renderers when selecting
output-artifact regions, and the baseline template file names.
"""

from types import MappingProxyType
from typing import Mapping, Optional

OSCAL_NAMESPACE = "http://csrc.nist.gov/ns/oscal/1.0"

IMPLEMENTATION_STATUS_PROP = "implementation-status"
CONTROL_ORIGINATION_PROP = "control-origination"

IMPLEMENTATION_STATUS: Mapping[str, int] = MappingProxyType({
    "implemented": 0,
    "partially-implemented": 1,
    "planned": 2,
    "alternative-implementation": 3,
    "not-applicable": 4,
})

CONTROL_ORIGINATION: Mapping[str, int] = MappingProxyType({
    "service-provider-corporate": 5,
    "service-provider-system-specific": 6,
    "service-provider-hybrid": 7,
    "configured-by-customer": 8,
    "provided-by-customer": 9,
    "shared": 10,
    "inherited": 11,
})

STATUS_VOCABULARY: Mapping[str, Mapping[str, int]] = MappingProxyType({
    IMPLEMENTATION_STATUS_PROP: IMPLEMENTATION_STATUS,
    CONTROL_ORIGINATION_PROP: CONTROL_ORIGINATION,
})

# FedRAMP SSP templates keyed by baseline name
TEMPLATE_FILES: Mapping[str, str] = MappingProxyType({
    "low": "FedRAMP-SSP-Low-Baseline-Template.docx",
    "moderate": "FedRAMP-SSP-Moderate-Baseline-Template.docx",
    "high": "FedRAMP-SSP-High-Baseline-Template.docx",
})
DEFAULT_TEMPLATE_FILE = TEMPLATE_FILES["moderate"]


def status_ordinal(prop_name: str, value: str) -> Optional[int]:
    """Look up the ordinal of a recognized status value, None if unrecognized"""
    vocabulary = STATUS_VOCABULARY.get(prop_name)
    if vocabulary is None:
        return None
    return vocabulary.get(value)
