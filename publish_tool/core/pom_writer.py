"""Maven POM rendering for publication metadata"""

import xml.etree.ElementTree as ET
from typing import Optional

from ..constants import (
    DEFAULT_PACKAGING,
    POM_MODEL_VERSION,
    POM_NAMESPACE,
    POM_SCHEMA_LOCATION,
)
from ..models import Coordinates, Metadata

XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"


def _text(parent: ET.Element, tag: str, value: Optional[str]) -> None:
    if value:
        ET.SubElement(parent, tag).text = value


def build_pom(coordinates: Coordinates,
              metadata: Metadata,
              packaging: str = DEFAULT_PACKAGING) -> ET.Element:
    """Build the POM element tree"""
    project = ET.Element("project", {
        "xmlns": POM_NAMESPACE,
        "xmlns:xsi": XSI_NAMESPACE,
        "xsi:schemaLocation": f"{POM_NAMESPACE} {POM_SCHEMA_LOCATION}",
    })

    _text(project, "modelVersion", POM_MODEL_VERSION)
    _text(project, "groupId", coordinates.group)
    _text(project, "artifactId", coordinates.artifact_id)
    _text(project, "version", coordinates.version)
    _text(project, "packaging", packaging)
    _text(project, "name", metadata.display_name)
    _text(project, "description", metadata.description)
    _text(project, "url", metadata.project_url)

    if metadata.license:
        licenses = ET.SubElement(project, "licenses")
        license_ = ET.SubElement(licenses, "license")
        _text(license_, "name", metadata.license.name)
        _text(license_, "url", metadata.license.url)

    if metadata.developers:
        developers = ET.SubElement(project, "developers")
        for developer in metadata.developers:
            node = ET.SubElement(developers, "developer")
            _text(node, "name", developer.name)
            _text(node, "email", developer.email)

    if metadata.scm:
        scm = ET.SubElement(project, "scm")
        _text(scm, "connection", metadata.scm.connection)
        _text(scm, "developerConnection", metadata.scm.developer_connection)
        _text(scm, "url", metadata.scm.url)

    return project


def render_pom(coordinates: Coordinates,
               metadata: Metadata,
               packaging: str = DEFAULT_PACKAGING) -> bytes:
    """
    Render a pom.xml document

    Output depends only on the arguments, so identical inputs always
    render byte-identical documents.

    Args:
        coordinates: Publication coordinates
        metadata: Publication metadata
        packaging: Maven packaging type

    Returns:
        UTF-8 encoded XML
    """
    project = build_pom(coordinates, metadata, packaging)
    ET.indent(project, space="  ")
    body = ET.tostring(project, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'.encode("utf-8")
