"""Envelope XML plano <xml><campo>valor</campo>...</xml> da API v2."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any


def to_xml(params: Mapping[str, Any]) -> str:
    """Serializa parâmetros não vazios em <xml>."""
    root = ET.Element("xml")
    for key, value in params.items():
        if value is None or str(value) == "":
            continue
        ET.SubElement(root, key).text = str(value)
    return ET.tostring(root, encoding="unicode")


def from_xml(text: str | bytes) -> dict[str, str]:
    """Decodifica <xml> plano (CDATA incluso) em dict de strings.

    Raises:
        ValueError: XML malformado ou raiz diferente de <xml>
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise ValueError(f"invalid xml: {exc}") from exc
    if root.tag != "xml":
        raise ValueError(f"unexpected xml root: {root.tag}")
    return {child.tag: (child.text or "").strip() for child in root}
