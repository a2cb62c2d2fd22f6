"""Serialization of parsed HTML nodes and CSS rules."""

from __future__ import annotations

from typing import Any, Iterable

from .constants import VOID_ELEMENTS


def to_test_format(nodes: Iterable[Any], indent: int = 0) -> str:
    """Render nodes in the html5lib test format (``| `` prefixed lines)."""
    lines: list[str] = []
    for node in nodes:
        lines.extend(_node_to_test_lines(node, indent))
    return "\n".join(lines)


def _node_to_test_lines(node: Any, indent: int) -> list[str]:
    padding = " " * indent
    if node.name == "#text":
        return [f'| {padding}"{node.data}"']
    if node.name == "#comment":
        return [f"| {padding}<!-- {node.data} -->"]

    lines = [f"| {padding}<{node.name}>"]
    # Sorted for canonical output, independent of source order.
    for attr_name, attr_value in sorted(node.attributes.items()):
        lines.append(f'| {padding}  {attr_name}="{attr_value}"')
    for child in node.children:
        lines.extend(_node_to_test_lines(child, indent + 2))
    return lines


def _escape_attr_value(value: str) -> str:
    return value.replace('"', "&quot;")


def serialize_start_tag(name: str, attrs: dict[str, str] | None) -> str:
    parts: list[str] = ["<", name]
    for key, value in (attrs or {}).items():
        if value == "":
            parts.extend([" ", key])
        else:
            parts.extend([" ", key, '="', _escape_attr_value(value), '"'])
    parts.append(">")
    return "".join(parts)


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"


def to_html(nodes: Iterable[Any], indent_size: int = 2, *, pretty: bool = True) -> str:
    """Convert nodes back to markup.

    Text is written as parsed: entities were never decoded, so nothing is
    re-escaped. With ``pretty`` each element starts on its own line, and
    elements holding only text stay on one line.
    """
    parts = [_node_to_html(node, 0, indent_size, pretty) for node in nodes]
    return "\n".join(parts) if pretty else "".join(parts)


def _node_to_html(node: Any, indent: int, indent_size: int, pretty: bool) -> str:
    prefix = " " * (indent * indent_size) if pretty else ""
    name: str = node.name

    if name == "#text":
        text = node.data.strip() if pretty else node.data
        return f"{prefix}{text}"

    if name == "#comment":
        return f"{prefix}<!--{node.data}-->"

    start_tag = serialize_start_tag(name, node.attributes)
    if name.lower() in VOID_ELEMENTS:
        return f"{prefix}{start_tag}"

    children = node.children
    end_tag = serialize_end_tag(name)
    if not children:
        return f"{prefix}{start_tag}{end_tag}"

    if not pretty:
        inner = "".join(_node_to_html(child, 0, indent_size, pretty) for child in children)
        return f"{start_tag}{inner}{end_tag}"

    if all(child.name == "#text" for child in children):
        text = "".join(child.data for child in children).strip()
        return f"{prefix}{start_tag}{text}{end_tag}"

    lines = [f"{prefix}{start_tag}"]
    for child in children:
        lines.append(_node_to_html(child, indent + 1, indent_size, pretty))
    lines.append(f"{prefix}{end_tag}")
    return "\n".join(lines)


def to_css(rules: Iterable[Any], indent_size: int = 2, *, pretty: bool = True) -> str:
    """Convert parsed rules back to a stylesheet."""
    blocks: list[str] = []
    for rule in rules:
        selectors = ", ".join(selector.to_css() for selector in rule.selectors)
        declarations = [f"{name}: {value};" for name, value in rule.declarations.items()]
        if not pretty:
            blocks.append(f"{selectors} {{ {' '.join(declarations)} }}" if declarations else f"{selectors} {{}}")
            continue
        if not declarations:
            blocks.append(f"{selectors} {{\n}}")
            continue
        padding = " " * indent_size
        body = "\n".join(f"{padding}{line}" for line in declarations)
        blocks.append(f"{selectors} {{\n{body}\n}}")
    return "\n\n".join(blocks) if pretty else "\n".join(blocks)
