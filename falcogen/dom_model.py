"""Simple DOM model consumed by the Falco.Markup emitter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Literal, Mapping, Optional, Tuple

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction

NodeKind = Literal["document", "element", "text", "script", "other"]

# Strings that carry no renderable content for the DSL.
_INERT_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)


@dataclass
class DomNode:
    kind: NodeKind
    name: str = ""
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List["DomNode"] = field(default_factory=list)
    text: str = ""


def document(children: Iterable[DomNode] = ()) -> DomNode:
    return DomNode(kind="document", children=list(children))


def element(
    name: str,
    attrs: Optional[Mapping[str, str]] = None,
    children: Iterable[DomNode] = (),
) -> DomNode:
    """Build an element node; ``script`` tags get the script kind."""

    kind: NodeKind = "script" if name.lower() == "script" else "element"
    return DomNode(kind=kind, name=name, attrs=dict(attrs or {}), children=list(children))


def text(value: str) -> DomNode:
    return DomNode(kind="text", text=value)


def _tag_attrs(tag: Tag) -> Dict[str, str]:
    attrs: Dict[str, str] = {}
    for name, value in tag.attrs.items():
        if isinstance(value, list):
            value = " ".join(value)
        attrs[name] = "" if value is None else str(value)
    return attrs


def _string_node(item: PageElement) -> DomNode:
    if isinstance(item, _INERT_STRINGS):
        return DomNode(kind="other", text=str(item))
    if isinstance(item, NavigableString):
        return text(str(item))
    return DomNode(kind="other")


def _from_soup(root: Tag, node: DomNode) -> DomNode:
    """Copy the children of ``root`` into ``node`` using an explicit stack."""

    stack: List[Tuple[Tag, DomNode]] = [(root, node)]
    while stack:
        tag, parent = stack.pop()
        for child in tag.contents:
            if isinstance(child, Tag):
                child_node = element(child.name, _tag_attrs(child))
                stack.append((child, child_node))
            else:
                child_node = _string_node(child)
            parent.children.append(child_node)
    return node


def parse_html(html: str, *, body_only: bool = False) -> DomNode:
    """Parse markup with BeautifulSoup and return the document node.

    With ``body_only`` the children of ``<body>`` become the roots when the
    markup has a body; otherwise the whole document is used.
    """

    soup = BeautifulSoup(html, "html.parser", multi_valued_attributes=None)
    root: Tag = soup
    if body_only:
        body = soup.find("body")
        if isinstance(body, Tag):
            root = body
    return _from_soup(root, document())


__all__ = ["DomNode", "NodeKind", "document", "element", "parse_html", "text"]
