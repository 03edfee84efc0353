"""
JSON schema check for extraction exports

The bundled schema describes ExtractionResult.to_dict(); `sspmapper extract
--check-schema` runs the export through it before writing.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
from jsonschema import Draft7Validator

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parent.parent / "schemas"
EXTRACTION_SCHEMA = "extraction_result.json"


class ExtractionSchemaValidator:
    """Checks exported extraction data against the schemas in schema_dir"""

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = Path(schema_dir) if schema_dir else DEFAULT_SCHEMA_DIR
        self.schemas: Dict[str, Dict[str, Any]] = {}
        self._load_schemas()

    def _load_schemas(self) -> None:
        if not self.schema_dir.exists():
            logger.warning(f"Schema directory not found: {self.schema_dir}")
            return

        for schema_file in sorted(self.schema_dir.glob("*.json")):
            try:
                schema = json.loads(schema_file.read_text())
                Draft7Validator.check_schema(schema)
            except (json.JSONDecodeError, jsonschema.SchemaError) as e:
                logger.error(f"Invalid schema {schema_file}: {e}")
                continue
            self.schemas[schema_file.name] = schema

    def errors(self, data: Dict[str, Any], schema_name: str = EXTRACTION_SCHEMA) -> List[str]:
        """Violations of schema_name as "path: message" strings, in document order"""
        if schema_name not in self.schemas:
            return [f"Schema not found: {schema_name}"]

        validator = Draft7Validator(self.schemas[schema_name])
        found = sorted(validator.iter_errors(data), key=lambda error: list(map(str, error.absolute_path)))
        return [
            f"{'/'.join(str(part) for part in error.absolute_path) or '<root>'}: {error.message}"
            for error in found
        ]

    def validate(self, data: Dict[str, Any], schema_name: str = EXTRACTION_SCHEMA) -> bool:
        problems = self.errors(data, schema_name)
        for problem in problems:
            logger.error(f"{schema_name}: {problem}")
        return not problems
