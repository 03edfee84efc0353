"""
Extracted SSP entities

Frozen dataclasses built in a single pass over their source node. Ordered
collections are tuples so source document order is kept and nothing can be
appended after extraction.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..constants import CONTROL_ORIGINATION_PROP, IMPLEMENTATION_STATUS_PROP


@dataclass(frozen=True)
class Property:
    """A prop child of an implemented-requirement"""
    name: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class Statement:
    """A statement child; value is the trimmed text of its description"""
    statement_id: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"statement-id": self.statement_id, "value": self.value}


@dataclass(frozen=True)
class Parameter:
    """A set-parameter child; value is the text of its value child"""
    param_id: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"param-id": self.param_id, "value": self.value}


@dataclass(frozen=True)
class ResponsibleRole:
    """A responsible-role child with its party references in document order"""
    name: str
    party_uuids: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"role-id": self.name, "party-uuids": list(self.party_uuids)}


@dataclass(frozen=True)
class Metadata:
    """Document-level metadata"""
    title: str
    version: str
    oscal_version: str
    last_modified: Optional[datetime] = None
    last_modified_text: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "version": self.version,
            "oscal-version": self.oscal_version,
            "last-modified": self.last_modified_text or (self.last_modified.isoformat() if self.last_modified else ""),
        }


@dataclass(frozen=True)
class SystemCharacteristics:
    """System identification and FIPS-199 sensitivity level"""
    system_name: str
    system_id: str
    security_sensitivity_level: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "system-name": self.system_name,
            "system-id": self.system_id,
            "security-sensitivity-level": self.security_sensitivity_level,
        }


@dataclass(frozen=True)
class SecurityControl:
    """
    One implemented-requirement of the control-implementation section.

    control_id is the exact attribute string from the source document.
    ordinal_index is the requirement's zero-based position among its
    siblings when it was extracted.
    """
    control_id: str
    uuid: Optional[str] = None
    ordinal_index: int = 0
    properties: Tuple[Property, ...] = ()
    statements: Tuple[Statement, ...] = ()
    parameters: Tuple[Parameter, ...] = ()
    responsible_roles: Tuple[ResponsibleRole, ...] = ()

    @property
    def has_multiple_responsible_roles(self) -> bool:
        return len(self.responsible_roles) > 1

    def get_properties(self, name: str) -> Tuple[Property, ...]:
        """All properties with the given name, in document order"""
        return tuple(prop for prop in self.properties if prop.name == name)

    def _first_value(self, name: str) -> Optional[str]:
        for prop in self.properties:
            if prop.name == name:
                return prop.value
        return None

    @property
    def implementation_status(self) -> Optional[str]:
        return self._first_value(IMPLEMENTATION_STATUS_PROP)

    @property
    def control_origination(self) -> Optional[str]:
        return self._first_value(CONTROL_ORIGINATION_PROP)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "control-id": self.control_id,
            "uuid": self.uuid,
            "ordinal-index": self.ordinal_index,
            "props": [prop.to_dict() for prop in self.properties],
            "statements": [stmt.to_dict() for stmt in self.statements],
            "set-parameters": [param.to_dict() for param in self.parameters],
            "responsible-roles": [role.to_dict() for role in self.responsible_roles],
        }


@dataclass(frozen=True)
class ExtractionResult:
    """Everything the orchestrator extracted from one document"""
    metadata: Optional[Metadata] = None
    system_characteristics: Optional[SystemCharacteristics] = None
    controls: Tuple[SecurityControl, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict() if self.metadata else None,
            "system-characteristics": (
                self.system_characteristics.to_dict() if self.system_characteristics else None
            ),
            "controls": [control.to_dict() for control in self.controls],
        }
