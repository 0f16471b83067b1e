"""Hjelpefunksjoner for å navigere i camt-XML uten namespace-oppslag."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterator, List, Optional, Sequence, Union

Node = Union[ET.Element, ET.ElementTree]

__all__ = [
    "Node",
    "find",
    "filter_nodes",
    "local_name",
    "split_path",
    "text_or_none",
]


def local_name(tag: str) -> str:
    """Returnerer taggnavnet uten ``{namespace}``-prefiks."""

    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def text_or_none(element: Optional[ET.Element]) -> Optional[str]:
    """Returnerer tekstinnholdet hvis elementet finnes og har tekst."""

    if element is None or element.text is None:
        return None
    return element.text.strip() or None


def split_path(path: str) -> List[str]:
    """Deler en sti som ``A/B/C`` i segmenter og avviser tomme segmenter."""

    segments = path.split("/")
    if any(not segment for segment in segments):
        raise ValueError(f"Ugyldig sti: {path!r}")
    return segments


def _element_children(node: Node) -> Iterator[ET.Element]:
    # Et ElementTree oppfører seg som et dokument med rot-elementet som eneste barn.
    if isinstance(node, ET.ElementTree):
        root = node.getroot()
        children: Sequence[ET.Element] = [] if root is None else [root]
    else:
        children = list(node)
    for child in children:
        # Kommentarer og prosesseringsinstruksjoner har ikke streng-tagger.
        if isinstance(child.tag, str):
            yield child


def _matching_children(node: Node, name: str) -> Iterator[ET.Element]:
    for child in _element_children(node):
        if local_name(child.tag) == name:
            yield child


def find(root: Node, path: str) -> Optional[ET.Element]:
    """Finner første treff per segment langs ``path``.

    Hvert segment velger det første direkte barnet med samme lokale navn.
    Det gjøres ingen tilbakesporing: finnes ikke segmentet under det første
    treffet, er resultatet ``None`` selv om et senere søsken ville passet.
    """

    current: Optional[Node] = root
    for segment in split_path(path):
        if current is None:
            return None
        current = next(_matching_children(current, segment), None)
    if current is None or isinstance(current, ET.ElementTree):
        return None
    return current


def filter_nodes(root: Node, path: str) -> List[ET.Element]:
    """Returnerer alle elementer som matcher ``path`` i dokumentrekkefølge."""

    nodes: List[Node] = [root]
    for segment in split_path(path):
        nodes = [
            child for node in nodes for child in _matching_children(node, segment)
        ]
        if not nodes:
            return []
    return [node for node in nodes if isinstance(node, ET.Element)]
