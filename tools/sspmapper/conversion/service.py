"""
Conversion service

Runs the full SSP pipeline: validate, detect the baseline, pick the FedRAMP
template, extract, then hand the result to a Renderer that produces the
output artifact. Renderers are supplied by the caller.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from ..constants import OSCAL_NAMESPACE
from ..models.entities import ExtractionResult
from ..validation import BaselineClassifier, BaselineLevel, DocumentValidator, ValidationResult
from .orchestrator import ExtractionOrchestrator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionProgress:
    percent_complete: int
    message: str = ""


ProgressCallback = Callable[[ConversionProgress], None]


@dataclass(frozen=True)
class ConversionResult:
    success: bool
    output_file_path: Optional[Path] = None
    output_file_name: Optional[str] = None
    error_message: Optional[str] = None
    baseline: BaselineLevel = BaselineLevel.UNKNOWN


class Renderer(ABC):
    """Produces an output artifact from a template and an ExtractionResult"""

    @abstractmethod
    def render(self, template_path: Path, output_path: Path,
               result: ExtractionResult,
               progress: Optional[ProgressCallback] = None) -> None:
        """Write the artifact to output_path"""
        pass


class ConversionService:
    """Pipeline from an OSCAL SSP file to a rendered artifact"""

    def __init__(self, renderer: Renderer, templates_dir: Path, output_dir: Path,
                 namespace: str = OSCAL_NAMESPACE, max_workers: Optional[int] = None):
        self.renderer = renderer
        self.templates_dir = Path(templates_dir)
        self.output_dir = Path(output_dir)
        self.validator = DocumentValidator(namespace)
        self.classifier = BaselineClassifier()
        self.orchestrator = ExtractionOrchestrator(namespace, max_workers=max_workers)

    def validate(self, xml_file_path: Path) -> ValidationResult:
        return self.validator.validate(Path(xml_file_path))

    def detect_baseline(self, xml_file_path: Path) -> BaselineLevel:
        return self.classifier.detect_baseline(Path(xml_file_path))

    def convert(self, xml_file_path: Path,
                progress: Optional[ProgressCallback] = None) -> ConversionResult:
        """Convert an SSP file; failures are returned, never raised"""
        xml_file_path = Path(xml_file_path)

        def report(percent: int, message: str) -> None:
            if progress is not None:
                progress(ConversionProgress(percent, message))

        try:
            report(5, "Starting conversion...")

            validation = self.validate(xml_file_path)
            if not validation.is_valid:
                return ConversionResult(
                    success=False,
                    error_message="; ".join(validation.errors)
                )

            report(10, "XML validation passed")

            baseline = self.detect_baseline(xml_file_path)
            template_file = baseline.template_file
            template_path = self.templates_dir / template_file

            if not template_path.exists():
                return ConversionResult(
                    success=False,
                    error_message=f"Template file not found: {template_file}",
                    baseline=baseline
                )

            report(15, f"Using {baseline.value} baseline template")

            result = self.orchestrator.extract(xml_file_path)

            report(30, f"Parsed {len(result.controls)} security controls")

            timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
            output_file_name = f"SSP-{baseline.value}-{timestamp}.docx"
            output_path = self.output_dir / output_file_name
            self.output_dir.mkdir(parents=True, exist_ok=True)

            self.renderer.render(template_path, output_path, result, progress)

            report(100, "Conversion complete!")
            logger.info(f"Generated: {output_path}")

            return ConversionResult(
                success=True,
                output_file_path=output_path,
                output_file_name=output_file_name,
                baseline=baseline
            )

        except Exception as e:
            logger.exception(f"Error during OSCAL conversion of {xml_file_path}")
            return ConversionResult(success=False, error_message=str(e))
