"""Whitespace-only re-indentation of serialized HTML.

``HtmlBeautifier`` takes the markup string produced by the pipeline and
lays it out one block per line with consistent indentation.  Tags,
attributes and text are never changed -- only the whitespace between them.

Layout rules:

- Text, comments and elements listed in ``inline_tags`` (whose whole
  subtree is inline too) are kept together on one line, with whitespace
  runs collapsed to a single space.
- Every other element is a block.  A block whose children are all inline
  stays on one line; otherwise its children go on their own lines, one
  indent level deeper.
- ``<script>``/``<style>`` bodies are re-indented line by line;
  ``<pre>``/``<textarea>``/``<listing>`` bodies are copied verbatim.
- Blank lines are never emitted.

The tree is walked without recursion, so deeply nested input formats like
any other.
"""

from __future__ import annotations

import re
import textwrap
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

_TOKEN_RE = re.compile(
    r"<!--.*?-->"
    r"|<![^>]*>"
    r"|</[A-Za-z][^>]*>"
    r"""|<[A-Za-z](?:[^>"']|"[^"]*"|'[^']*')*>""",
    re.DOTALL,
)
_TAG_NAME_RE = re.compile(r"</?([A-Za-z][^\s/>]*)")

# ASCII whitespace only: a literal U+00A0 in text is content, not layout.
_WHITESPACE = " \t\n\r\f"
_WHITESPACE_RE = re.compile(r"[ \t\n\r\f]+")

VOID_TAGS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input", "link",
    "meta", "param", "source", "track", "wbr",
})
RAW_TEXT_TAGS = frozenset({"script", "style"})
PREFORMATTED_TAGS = frozenset({"pre", "textarea", "listing"})


@dataclass(frozen=True)
class FormatOptions:
    """Settings the formatter exposes to callers."""

    indent_size: int = 2
    inline_tags: frozenset[str] = frozenset()

    @classmethod
    def create(cls, indent_size: int, inline_tags: Iterable[str]) -> FormatOptions:
        return cls(indent_size, frozenset(tag.lower() for tag in inline_tags))


class MarkupFormatter(Protocol):
    """Anything that can re-indent a markup string."""

    def format(self, markup: str, options: FormatOptions) -> str: ...


@dataclass
class _Node:
    kind: str  # "element", "text", "comment" or "markup"
    text: str = ""
    name: str = ""
    end: str | None = None
    raw: str | None = None
    children: list[_Node] = field(default_factory=list)
    inline: bool = False


def _tag_name(token: str) -> str:
    match = _TAG_NAME_RE.match(token)
    return match.group(1).lower() if match else ""


def _close_open_element(stack: list[_Node], name: str, token: str) -> bool:
    """Close the innermost open element called *name*, if any."""
    for index in range(len(stack) - 1, 0, -1):
        if stack[index].name == name:
            stack[index].end = token
            del stack[index:]
            return True
    return False


def parse_markup(markup: str) -> _Node:
    """Build a lenient node tree from *markup*.

    Unmatched end tags are kept as opaque markup; elements left open at the
    end of input simply have no end tag.
    """
    root = _Node("element")
    stack = [root]
    pos = 0
    while pos < len(markup):
        match = _TOKEN_RE.search(markup, pos)
        if match is None:
            stack[-1].children.append(_Node("text", markup[pos:]))
            break
        if match.start() > pos:
            stack[-1].children.append(_Node("text", markup[pos:match.start()]))
        token = match.group()
        pos = match.end()

        if token.startswith("<!--"):
            stack[-1].children.append(_Node("comment", token))
        elif token.startswith("<!"):
            stack[-1].children.append(_Node("markup", token))
        elif token.startswith("</"):
            if not _close_open_element(stack, _tag_name(token), token):
                stack[-1].children.append(_Node("markup", token))
        else:
            name = _tag_name(token)
            node = _Node("element", token, name)
            stack[-1].children.append(node)
            if name in VOID_TAGS or token.endswith("/>"):
                continue
            if name in RAW_TEXT_TAGS or name in PREFORMATTED_TAGS:
                closing = re.compile(rf"</{re.escape(name)}\s*>", re.IGNORECASE)
                end = closing.search(markup, pos)
                if end is None:
                    node.raw = markup[pos:]
                    pos = len(markup)
                else:
                    node.raw = markup[pos:end.start()]
                    node.end = end.group()
                    pos = end.end()
                continue
            stack.append(node)
    return root


class _Layout:
    """Renders one parsed tree into indented lines.

    Walks the tree with explicit stacks, so nesting depth is bounded by
    memory rather than the interpreter's recursion limit.
    """

    def __init__(self, options: FormatOptions) -> None:
        self.indent_unit = " " * options.indent_size
        self.inline_tags = options.inline_tags
        self.lines: list[str] = []

    def mark_inline(self, root: _Node) -> None:
        # Reversed pre-order visits every child before its parent.
        order: list[_Node] = []
        stack = [root]
        while stack:
            node = stack.pop()
            order.append(node)
            stack.extend(node.children)
        for node in reversed(order):
            if node.kind in ("text", "comment"):
                node.inline = True
            elif node.kind != "element" or node.name not in self.inline_tags:
                node.inline = False
            else:
                node.inline = all(child.inline for child in node.children)

    def inline_markup(self, node: _Node) -> str:
        parts: list[str] = []
        stack: list[_Node | str] = [node]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif item.kind == "text":
                parts.append(_WHITESPACE_RE.sub(" ", item.text))
            elif item.kind != "element":
                parts.append(item.text)
            elif item.raw is not None:
                parts.append(item.text + item.raw + (item.end or ""))
            else:
                parts.append(item.text)
                stack.append(item.end or "")
                stack.extend(reversed(item.children))
        return "".join(parts)

    def emit(self, depth: int, text: str) -> None:
        self.lines.append(self.indent_unit * depth + text)

    def flush(self, run: list[_Node], depth: int) -> None:
        text = "".join(self.inline_markup(node) for node in run).strip(_WHITESPACE)
        if text:
            self.emit(depth, text)

    def child_steps(self, children: list[_Node], depth: int) -> list[tuple]:
        """Group *children* into inline runs and blocks, in document order."""
        steps: list[tuple] = []
        run: list[_Node] = []
        for child in children:
            if child.inline:
                run.append(child)
                continue
            if run:
                steps.append(("run", run, depth))
                run = []
            steps.append(("block", child, depth))
        if run:
            steps.append(("run", run, depth))
        return steps

    def render(self, root: _Node) -> None:
        self.mark_inline(root)
        pending = self.child_steps(root.children, 0)[::-1]
        while pending:
            step, payload, depth = pending.pop()
            if step == "line":
                self.emit(depth, payload)
            elif step == "run":
                self.flush(payload, depth)
            else:
                pending.extend(reversed(self.render_block(payload, depth)))

    def render_block(self, node: _Node, depth: int) -> list[tuple]:
        """Emit what fits on the opening line; return the steps still due."""
        if node.kind != "element":
            self.emit(depth, node.text.strip(_WHITESPACE))
            return []

        end = node.end or ""
        if node.raw is not None:
            self.render_raw(node, depth)
            return []

        if all(child.inline for child in node.children):
            inner = "".join(self.inline_markup(child) for child in node.children)
            self.emit(depth, node.text + inner.strip(_WHITESPACE) + end)
            return []

        self.emit(depth, node.text)
        steps = self.child_steps(node.children, depth + 1)
        if end:
            steps.append(("line", end, depth))
        return steps

    def render_raw(self, node: _Node, depth: int) -> None:
        end = node.end or ""
        if node.name in PREFORMATTED_TAGS:
            self.emit(depth, node.text + node.raw + end)
            return

        body = [
            line.rstrip()
            for line in textwrap.dedent(node.raw).splitlines()
            if line.strip()
        ]
        if not body:
            self.emit(depth, node.text + end)
            return
        self.emit(depth, node.text)
        for line in body:
            self.emit(depth + 1, line)
        if end:
            self.emit(depth, end)


class HtmlBeautifier:
    """Default ``MarkupFormatter``: consistent indentation, no blank lines."""

    def format(self, markup: str, options: FormatOptions) -> str:
        layout = _Layout(options)
        layout.render(parse_markup(markup))
        return "\n".join(layout.lines)
