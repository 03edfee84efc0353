"""
Pytest configuration and shared fixtures for sspmapper tests.

This module provides:
- Sample OSCAL SSP documents
- Temporary SSP files on disk
- A recording Renderer for conversion tests
"""

from pathlib import Path
from typing import List

import pytest

from sspmapper.constants import OSCAL_NAMESPACE
from sspmapper.conversion import Renderer
from sspmapper.tree import parse_document


SAMPLE_SSP = """<?xml version="1.0" encoding="UTF-8"?>
<system-security-plan xmlns="http://csrc.nist.gov/ns/oscal/1.0" uuid="ssp-0001">
    <!-- generated for tests -->
    <metadata>
        <title>Example Cloud Service SSP</title>
        <last-modified>2024-03-01T12:30:00Z</last-modified>
        <version>1.2</version>
        <oscal-version>1.1.2</oscal-version>
    </metadata>
    <import-profile href="#baseline"/>
    <system-characteristics>
        <system-id identifier-type="https://fedramp.gov">F00000000</system-id>
        <system-name>Example Cloud Service</system-name>
        <security-sensitivity-level>High</security-sensitivity-level>
    </system-characteristics>
    <control-implementation>
        <description><p>Control implementations.</p></description>
        <implemented-requirement control-id="ac-1" uuid="req-001">
            <prop name="implementation-status" value="implemented"/>
            <prop name="control-origination" value="service-provider-corporate"/>
            <responsible-role role-id="system-owner">
                <party-uuid>party-001</party-uuid>
                <party-uuid>party-002</party-uuid>
            </responsible-role>
            <statement statement-id="ac-1_smt.a" uuid="stmt-001">
                <description><p>The organization <em>develops</em> an access control policy.</p></description>
            </statement>
        </implemented-requirement>
        <implemented-requirement uuid="req-002">
            <prop name="implementation-status" value="planned"/>
        </implemented-requirement>
        <implemented-requirement control-id="ac-2" uuid="req-003">
            <set-parameter param-id="ac-2_prm_1">
                <value>30 days</value>
            </set-parameter>
            <remarks>Not part of the model.</remarks>
        </implemented-requirement>
    </control-implementation>
</system-security-plan>
"""


@pytest.fixture
def sample_ssp_content() -> str:
    """Complete SSP with three implemented requirements, one without control-id"""
    return SAMPLE_SSP


@pytest.fixture
def sample_ssp_root(sample_ssp_content):
    return parse_document(sample_ssp_content)


@pytest.fixture
def sample_ssp_file(tmp_path, sample_ssp_content) -> Path:
    path = tmp_path / "ssp.xml"
    path.write_text(sample_ssp_content, encoding="utf-8")
    return path


@pytest.fixture
def write_xml(tmp_path):
    """Write an XML string to a temporary file and return its path"""
    def _write(content: str, name: str = "doc.xml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


def requirement_node(body: str, attributes: str = 'control-id="ac-1" uuid="test"'):
    """Parse a standalone implemented-requirement element"""
    xml = (
        f'<implemented-requirement xmlns="{OSCAL_NAMESPACE}" {attributes}>'
        f'{body}'
        f'</implemented-requirement>'
    )
    return parse_document(xml)


class RecordingRenderer(Renderer):
    """Renderer that writes a marker file and remembers what it was given"""

    def __init__(self):
        self.calls: List[tuple] = []

    def render(self, template_path, output_path, result, progress=None):
        self.calls.append((template_path, output_path, result))
        Path(output_path).write_text(f"{len(result.controls)} controls", encoding="utf-8")


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def templates_dir(tmp_path) -> Path:
    """Directory holding empty FedRAMP template files for every baseline"""
    from sspmapper.constants import TEMPLATE_FILES

    directory = tmp_path / "templates"
    directory.mkdir()
    for template in TEMPLATE_FILES.values():
        (directory / template).write_bytes(b"")
    return directory


@pytest.fixture
def make_requirement():
    return requirement_node
