"""Emit Falco.Markup source code from a DOM tree.

Every element becomes a constructor call of the form
``_tag [ attributes ] [ children ]``. Void elements drop the child list,
script bodies keep their source readable, and text is emitted through
``_text`` with F# string escaping.
"""

from __future__ import annotations

import re
from typing import Callable, List, Mapping, Optional, Tuple, Union

from .dom_model import DomNode, parse_html
from .models import ConverterOptions

BOOLEAN_ATTRIBUTES = frozenset(
    {
        "allowfullscreen",
        "async",
        "autofocus",
        "autoplay",
        "checked",
        "controls",
        "default",
        "defer",
        "disabled",
        "formnovalidate",
        "hidden",
        "ismap",
        "itemscope",
        "loop",
        "multiple",
        "muted",
        "nomodule",
        "novalidate",
        "open",
        "readonly",
        "required",
        "reversed",
        "selected",
    }
)

VOID_ELEMENTS = frozenset(
    {"link", "meta", "input", "img", "br", "hr", "area", "base", "col", "embed", "source", "track", "wbr"}
)

EVENT_HANDLER_RE = re.compile(r"^on[a-z]+")
HYPHEN_RE = re.compile(r"-+(.?)")


def escape_string(value: str) -> str:
    """Escape a value for use inside a double-quoted F# string literal."""

    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def _escape_script(value: str) -> str:
    return value.replace('"', "'")


def camel_case(name: str) -> str:
    """Turn ``http-equiv`` into ``httpEquiv``; other names pass through."""

    if "-" not in name:
        return name
    return HYPHEN_RE.sub(lambda match: match.group(1).upper(), name)


def map_attributes(attrs: Optional[Mapping[str, str]]) -> List[str]:
    props: List[str] = []
    for name, value in (attrs or {}).items():
        ident = f"_{camel_case(name)}_"
        if name in BOOLEAN_ATTRIBUTES:
            props.append(ident)
        elif EVENT_HANDLER_RE.match(name):
            props.append(f'{ident} "{escape_string(value)}"')
        else:
            props.append(f'{ident} "{escape_string(value)}"')
    return props


def format_attributes(props: List[str]) -> str:
    if not props:
        return "[]"
    return f"[ {'; '.join(props)} ]"


def _format_children(fragments: List[str], depth: int, options: ConverterOptions) -> str:
    fragments = [fragment for fragment in fragments if fragment]
    if not fragments:
        return "[]"
    inner = " " * ((depth + 1) * options.indent_size)
    outer = " " * (depth * options.indent_size)
    lines = "\n".join(inner + fragment for fragment in fragments)
    return f"[\n{lines}\n{outer}]"


def _emit_text(value: str, escape: Callable[[str], str]) -> str:
    stripped = value.strip()
    if not stripped:
        return ""
    return f'_text "{escape(stripped)}"'


def _emit_script(node: DomNode, depth: int, options: ConverterOptions) -> str:
    attrs = format_attributes(map_attributes(node.attrs))
    body = [_emit_text(child.text, _escape_script) for child in node.children if child.kind == "text"]
    return f"_script {attrs} {_format_children(body, depth, options)}"


def _renders(node: DomNode) -> bool:
    if node.kind == "text":
        return bool(node.text.strip())
    return node.kind in ("element", "script")


def emit_node(node: DomNode, depth: int = 0, options: ConverterOptions | None = None) -> str:
    """Return the code for ``node`` and its subtree, or ``""`` if it renders nothing.

    ``depth`` is the number of ancestor elements; the first line of the result
    is unindented and the caller places it. The tree is walked with an explicit
    stack holding either pending nodes or literal text (separators and closing
    brackets), so nesting depth is not limited by the interpreter stack.
    """

    options = options or ConverterOptions()
    parts: List[str] = []
    stack: List[Union[str, Tuple[DomNode, int]]] = [(node, depth)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        current, level = item
        if current.kind == "text":
            parts.append(_emit_text(current.text, escape_string))
            continue
        if current.kind == "script":
            parts.append(_emit_script(current, level, options))
            continue
        if current.kind != "element":
            continue

        head = f"_{current.name} {format_attributes(map_attributes(current.attrs))}"
        if current.name.lower() in VOID_ELEMENTS:
            parts.append(head)
            continue
        children = [child for child in current.children if _renders(child)]
        if not children:
            parts.append(f"{head} []")
            continue

        parts.append(f"{head} [")
        separator = "\n" + " " * ((level + 1) * options.indent_size)
        stack.append("\n" + " " * (level * options.indent_size) + "]")
        for child in reversed(children):
            stack.append((child, level + 1))
            stack.append(separator)
    return "".join(parts)


def emit_document(doc: DomNode, options: ConverterOptions | None = None) -> str:
    options = options or ConverterOptions()
    fragments = [emit_node(child, 0, options) for child in doc.children]
    return "\n".join(fragment for fragment in fragments if fragment)


def convert(html: str, options: ConverterOptions | None = None) -> str:
    """Convert an HTML string into Falco.Markup source code."""

    options = options or ConverterOptions()
    return emit_document(parse_html(html, body_only=options.body_only), options)


__all__ = [
    "BOOLEAN_ATTRIBUTES",
    "VOID_ELEMENTS",
    "camel_case",
    "convert",
    "emit_document",
    "emit_node",
    "escape_string",
    "format_attributes",
    "map_attributes",
]
