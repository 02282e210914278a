"""Render a descriptive pom.xml using lxml.

The document mimics the POM syntax so tools and humans can read the dependency
list, but it is not a buildable Maven project: there is one flat `<dependencies>`
block for the project and all of its subprojects.
"""

from __future__ import annotations

from collections.abc import Sequence

from lxml import etree

from pomgen.models import ClassifiedDependency, ProjectIdentity


XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
PROJECT_OPEN_TAG = (
    '<project xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 '
    'http://maven.apache.org/xsd/maven-4.0.0.xsd" '
    'xmlns="http://maven.apache.org/POM/4.0.0" '
    'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">'
)
MODEL_VERSION = "<modelVersion>4.0.0</modelVersion>"
PROJECT_CLOSE_TAG = "</project>"
INCEPTION_YEAR = "2015"

LICENSE_NAME = "Apache License, Version 2.0"
LICENSE_URL = "https://www.apache.org/licenses/LICENSE-2.0.txt"
LICENSE_DISTRIBUTION = "repo"

DESCRIPTION = (
    "\n"
    "This file was generated using the `pomgen generate` command.\n"
    "This file is not suitable for `maven` build tasks. It only describes the\n"
    "first-level dependencies of all modules and does not describe the project\n"
    "structure per-subproject.\n"
)

NEW_LINE = "\n"


def _serialize(node: etree._Element) -> str:
    return etree.tostring(node, pretty_print=True, encoding="unicode").rstrip(NEW_LINE)


def _text_element(tag: str, text: str, parent: etree._Element | None = None) -> etree._Element:
    node = etree.Element(tag) if parent is None else etree.SubElement(parent, tag)
    # An empty string still renders as a start/end pair rather than a self-closing tag.
    node.text = text
    return node


def describing_comment() -> str:
    """Comment explaining the generated, non-authoritative nature of the file."""
    return _serialize(etree.Comment(DESCRIPTION))


def identity_block(identity: ProjectIdentity) -> str:
    """Group ID, artifact ID and version of the root project."""
    return NEW_LINE.join(
        _serialize(_text_element(tag, value))
        for tag, value in (
            ("groupId", identity.group_id),
            ("artifactId", identity.artifact_id),
            ("version", identity.version),
        )
    )


def inception_year_block() -> str:
    return _serialize(_text_element("inceptionYear", INCEPTION_YEAR))


def licenses_block() -> str:
    """Licence information.

    See https://maven.apache.org/pom.html#Licenses.
    """
    licenses = etree.Element("licenses")
    license_node = etree.SubElement(licenses, "license")
    _text_element("name", LICENSE_NAME, license_node)
    _text_element("url", LICENSE_URL, license_node)
    _text_element("distribution", LICENSE_DISTRIBUTION, license_node)
    return _serialize(licenses)


def dependencies_block(dependencies: Sequence[ClassifiedDependency]) -> str:
    """One `<dependency>` per entry, in the given order.

    `<scope>` is written only when the scope is defined.
    """
    root = etree.Element("dependencies")
    for dep in dependencies:
        node = etree.SubElement(root, "dependency")
        _text_element("groupId", dep.group, node)
        _text_element("artifactId", dep.artifact, node)
        _text_element("version", dep.version, node)
        if dep.has_defined_scope():
            _text_element("scope", dep.scope.value, node)
    return _serialize(root)


def render_pom(identity: ProjectIdentity, dependencies: Sequence[ClassifiedDependency]) -> str:
    """Render the complete pom.xml text.

    Args:
        identity: Coordinates of the root project.
        dependencies: Dependencies, already de-duplicated and ordered.

    Returns:
        The document text; blocks are separated by blank lines.
    """
    blocks = [
        describing_comment(),
        identity_block(identity),
        inception_year_block(),
        licenses_block(),
        dependencies_block(dependencies),
    ]
    lines: list[str] = [XML_DECLARATION, PROJECT_OPEN_TAG, MODEL_VERSION, ""]
    for block in blocks:
        lines.append(block)
        lines.append("")
    lines.append(PROJECT_CLOSE_TAG)
    return NEW_LINE.join(lines) + NEW_LINE
