from __future__ import annotations

import pytest
from lxml import etree
from pydantic import ValidationError

from pomgen.identity import resolve_identity
from pomgen.models import (
    ClassifiedDependency,
    IdentityOverrides,
    Project,
    ProjectIdentity,
    ScopeKind,
)
from pomgen.renderer import render_pom


def _parse(text: str) -> etree._Element:
    return etree.fromstring(text.encode("utf-8"))


def _text(root: etree._Element, xpath_expr: str) -> list[str]:
    return [(n.text or "") for n in root.xpath(xpath_expr)]


IDENTITY = ProjectIdentity(group_id="io.example", artifact_id="app", version="1.0")


def test_header_and_static_blocks() -> None:
    text = render_pom(IDENTITY, [])

    lines = text.splitlines()
    assert lines[0] == '<?xml version="1.0" encoding="UTF-8"?>'
    assert lines[1].startswith("<project ")
    assert 'xmlns="http://maven.apache.org/POM/4.0.0"' in lines[1]
    assert "http://maven.apache.org/xsd/maven-4.0.0.xsd" in lines[1]
    assert lines[2] == "<modelVersion>4.0.0</modelVersion>"
    assert text.rstrip().endswith("</project>")
    assert "not suitable for `maven` build tasks" in text

    root = _parse(text)
    assert etree.QName(root).localname == "project"
    assert _text(root, "/*/*[local-name()='modelVersion']") == ["4.0.0"]
    assert _text(root, "/*/*[local-name()='inceptionYear']") == ["2015"]
    license_path = "/*/*[local-name()='licenses']/*[local-name()='license']"
    assert _text(root, f"{license_path}/*[local-name()='name']") == ["Apache License, Version 2.0"]
    assert _text(root, f"{license_path}/*[local-name()='url']") == [
        "https://www.apache.org/licenses/LICENSE-2.0.txt"
    ]
    assert _text(root, f"{license_path}/*[local-name()='distribution']") == ["repo"]


def test_identity_elements() -> None:
    root = _parse(render_pom(IDENTITY, []))

    assert _text(root, "/*/*[local-name()='groupId']") == ["io.example"]
    assert _text(root, "/*/*[local-name()='artifactId']") == ["app"]
    assert _text(root, "/*/*[local-name()='version']") == ["1.0"]


def test_identity_fallback_applies_only_to_missing_fields() -> None:
    project = Project(group="", name="app", version="1.0")
    identity = resolve_identity(
        project, IdentityOverrides(group_id="io.example", artifact_id="other", version="9")
    )

    root = _parse(render_pom(identity, []))

    assert _text(root, "/*/*[local-name()='groupId']") == ["io.example"]
    assert _text(root, "/*/*[local-name()='artifactId']") == ["app"]
    assert _text(root, "/*/*[local-name()='version']") == ["1.0"]


def test_missing_identity_renders_empty_elements() -> None:
    text = render_pom(resolve_identity(Project()), [])

    assert "<groupId></groupId>" in text
    assert "<artifactId></artifactId>" in text


def test_dependencies_keep_given_order_and_omit_undefined_scope() -> None:
    deps = [
        ClassifiedDependency(group="a", artifact="b", version="1.0", scope=ScopeKind.COMPILE),
        ClassifiedDependency(group="c", artifact="d", version="2.0", scope=ScopeKind.TEST),
        ClassifiedDependency(group="e", artifact="f", version="3.0", scope=ScopeKind.UNDEFINED),
        ClassifiedDependency(group="g", artifact="h", version="4.0", scope=ScopeKind.PROVIDED),
    ]

    root = _parse(render_pom(IDENTITY, deps))
    nodes = root.xpath("/*/*[local-name()='dependencies']/*[local-name()='dependency']")

    rendered = [
        (
            _text(n, "./*[local-name()='groupId']")[0],
            _text(n, "./*[local-name()='artifactId']")[0],
            _text(n, "./*[local-name()='version']")[0],
            _text(n, "./*[local-name()='scope']"),
        )
        for n in nodes
    ]
    assert rendered == [
        ("a", "b", "1.0", ["compile"]),
        ("c", "d", "2.0", ["test"]),
        ("e", "f", "3.0", []),
        ("g", "h", "4.0", ["provided"]),
    ]


def test_special_characters_are_escaped() -> None:
    deps = [ClassifiedDependency(group="a&b", artifact="<x>", version="1", scope=ScopeKind.COMPILE)]

    text = render_pom(IDENTITY, deps)

    assert "a&amp;b" in text
    assert "&lt;x&gt;" in text
    root = _parse(text)
    assert _text(root, "//*[local-name()='dependency']/*[local-name()='groupId']") == ["a&b"]


def test_blocks_are_separated_by_blank_lines() -> None:
    text = render_pom(IDENTITY, [])

    assert "<modelVersion>4.0.0</modelVersion>\n\n<!--" in text
    assert "-->\n\n<groupId>io.example</groupId>\n<artifactId>app</artifactId>\n<version>1.0</version>\n\n" in text
    assert "<inceptionYear>2015</inceptionYear>\n\n<licenses>" in text


def test_rendering_is_deterministic() -> None:
    deps = [ClassifiedDependency(group="a", artifact="b", version="1.0", scope=ScopeKind.COMPILE)]

    assert render_pom(IDENTITY, deps) == render_pom(IDENTITY, deps)


def test_coordinates_incompatible_with_xml_are_rejected() -> None:
    with pytest.raises(ValidationError, match="not allowed in XML"):
        ClassifiedDependency(group="g", artifact="a", version="1\x01", scope=ScopeKind.COMPILE)

    with pytest.raises(ValidationError):
        ProjectIdentity(group_id="io.example\x00", artifact_id="app", version="1.0")
