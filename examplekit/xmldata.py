"""Parsing a document with a fixed head and a free-form data section."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field


@dataclass
class Head:
    name: str = ""
    ip: str = ""


@dataclass
class Variables:
    head: Head = field(default_factory=Head)
    data: dict[str, str] = field(default_factory=dict)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element | None, name: str) -> ET.Element | None:
    if element is None:
        return None
    return next((c for c in element if _local(c.tag) == name), None)


def _text(element: ET.Element | None, name: str) -> str:
    child = _child(element, name)
    return "" if child is None else "".join(child.itertext())


def _flatten(section: ET.Element) -> dict[str, str]:
    """Map each element inside ``section`` to the last trimmed text before its end."""
    result: dict[str, str] = {}
    value = ""

    def visit(element: ET.Element) -> None:
        nonlocal value
        if element.text is not None:
            value = element.text.strip()
        for child in element:
            visit(child)
            result[_local(child.tag)] = value
            if child.tail is not None:
                value = child.tail.strip()

    visit(section)
    return result


def parse_document_xml(text: str) -> Variables:
    """Read ``Head/Name``, ``Head/IP`` and every element under ``Data``."""
    try:
        root = ET.fromstring(text.strip())
    except ET.ParseError as exc:
        raise ValueError(f"malformed XML: {exc}") from exc
    head_element = _child(root, "Head")
    head = Head(name=_text(head_element, "Name"), ip=_text(head_element, "IP"))
    data_element = _child(root, "Data")
    data = _flatten(data_element) if data_element is not None else {}
    return Variables(head=head, data=data)