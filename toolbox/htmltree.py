"""A small HTML document tree, with link extraction and outlines."""

from __future__ import annotations

import argparse
import enum
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import IO, Union

_HEAD_TAGS = frozenset(
    {"base", "basefont", "bgsound", "link", "meta", "noscript", "script",
     "style", "template", "title"}
)
_VOID_TAGS = frozenset(
    {"area", "base", "basefont", "bgsound", "br", "col", "embed", "hr", "img",
     "input", "keygen", "link", "meta", "param", "source", "track", "wbr"}
)


class NodeType(enum.Enum):
    """The kind of a node in a document tree."""

    ERROR = 0
    TEXT = 1
    DOCUMENT = 2
    ELEMENT = 3
    COMMENT = 4
    DOCTYPE = 5


@dataclass(eq=False)
class Node:
    """A node of an HTML document tree.

    For elements, data is the tag name; for text and comments, the text.
    """

    type: NodeType
    data: str = ""
    attr: list[tuple[str, str]] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    parent: Node | None = field(default=None, repr=False)

    @property
    def first_child(self) -> Node | None:
        return self.children[0] if self.children else None

    def append_child(self, child: Node) -> Node:
        child.parent = self
        self.children.append(child)
        return child

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value of the first attribute named key."""
        for k, v in self.attr:
            if k == key:
                return v
        return default


class _TreeBuilder(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.document = Node(NodeType.DOCUMENT)
        self.html: Node | None = None
        self.head: Node | None = None
        self.body: Node | None = None
        self.stack: list[Node] = []

    def _ensure_html(self) -> Node:
        if self.html is None:
            self.html = self.document.append_child(Node(NodeType.ELEMENT, "html"))
        return self.html

    def _ensure_head(self) -> Node:
        html = self._ensure_html()
        if self.head is None:
            self.head = html.append_child(Node(NodeType.ELEMENT, "head"))
        return self.head

    def _ensure_body(self) -> Node:
        self._ensure_head()
        if self.body is None:
            self.stack.clear()
            self.body = self.html.append_child(Node(NodeType.ELEMENT, "body"))
        return self.body

    def _parent_for(self, tag: str) -> Node:
        if self.stack:
            return self.stack[-1]
        if self.body is not None:
            return self.body
        if tag in _HEAD_TAGS:
            return self._ensure_head()
        return self._ensure_body()

    def _current(self) -> Node:
        if self.stack:
            return self.stack[-1]
        for node in (self.body, self.head, self.html):
            if node is not None:
                return node
        return self.document

    def handle_starttag(self, tag, attrs) -> None:
        pairs = [(k, v if v is not None else "") for k, v in attrs]
        if tag == "html":
            html = self._ensure_html()
            known = {k for k, _ in html.attr}
            html.attr.extend(p for p in pairs if p[0] not in known)
            return
        if tag == "head":
            if self.body is None:
                self._ensure_head().attr.extend(pairs)
            return
        if tag == "body":
            if self.body is None:
                self._ensure_body().attr.extend(pairs)
            return
        node = self._parent_for(tag).append_child(Node(NodeType.ELEMENT, tag, pairs))
        if tag not in _VOID_TAGS:
            self.stack.append(node)

    def handle_endtag(self, tag) -> None:
        if tag in ("html", "head", "body"):
            return
        for i in range(len(self.stack) - 1, -1, -1):
            if self.stack[i].data == tag:
                del self.stack[i:]
                return

    def handle_data(self, data) -> None:
        if self.stack or self.body is not None:
            parent = self._current()
        elif data.strip() == "":
            if self.head is None:
                return
            parent = self.head
        else:
            parent = self._ensure_body()
        last = parent.children[-1] if parent.children else None
        if last is not None and last.type is NodeType.TEXT:
            last.data += data
        else:
            parent.append_child(Node(NodeType.TEXT, data))

    def handle_comment(self, data) -> None:
        self._current().append_child(Node(NodeType.COMMENT, data))

    def handle_decl(self, decl) -> None:
        if decl.lower().startswith("doctype") and self.html is None:
            name = decl[len("doctype"):].strip().lower()
            self.document.append_child(Node(NodeType.DOCTYPE, name))

    def finish(self) -> Node:
        self.close()
        self._ensure_body()
        return self.document


def parse(source: Union[str, bytes, IO]) -> Node:
    """Parse HTML text, bytes or a readable stream into a document tree.

    The tree always has html, head and body elements.
    """
    if hasattr(source, "read"):
        source = source.read()
    if isinstance(source, bytes):
        source = source.decode("utf-8", "replace")
    builder = _TreeBuilder()
    builder.feed(source)
    return builder.finish()


def for_each_node(
    n: Node,
    pre: Callable[[Node], None] | None = None,
    post: Callable[[Node], None] | None = None,
) -> None:
    """Call pre before and post after visiting the children of each node."""
    if pre is not None:
        pre(n)
    for child in n.children:
        for_each_node(child, pre, post)
    if post is not None:
        post(n)


def visit(n: Node) -> list[str]:
    """Return the href of every anchor element in the tree, in document order."""
    links: list[str] = []

    def collect(node: Node) -> None:
        if node.type is NodeType.ELEMENT and node.data == "a":
            links.extend(v for k, v in node.attr if k == "href")

    for_each_node(n, collect)
    return links


def outline(n: Node) -> list[list[str]]:
    """Return the stack of open tag names at each element, in document order."""
    result: list[list[str]] = []

    def walk(node: Node, stack: list[str]) -> None:
        if node.type is NodeType.ELEMENT:
            stack = stack + [node.data]
            result.append(stack)
        for child in node.children:
            walk(child, stack)

    walk(n, [])
    return result


def outline_text(n: Node) -> str:
    """Render the element structure as indented start and end tags."""
    lines: list[str] = []
    depth = 0

    def start(node: Node) -> None:
        nonlocal depth
        if node.type is NodeType.ELEMENT:
            lines.append(f"{'  ' * depth}<{node.data}>")
            depth += 1

    def end(node: Node) -> None:
        nonlocal depth
        if node.type is NodeType.ELEMENT:
            depth -= 1
            lines.append(f"{'  ' * depth}</{node.data}>")

    for_each_node(n, start, end)
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Run the findlinks, outline or outline2 command."""
    parser = argparse.ArgumentParser(prog="htmltree")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("findlinks", help="print the links in HTML read from stdin")
    sub.add_parser("outline", help="print the element stacks of HTML from stdin")
    o2 = sub.add_parser("outline2", help="print an indented outline of each URL")
    o2.add_argument("urls", nargs="*")
    args = parser.parse_args(argv)

    if args.command == "outline2":
        from toolbox.fetch import fetch

        for url in args.urls:
            try:
                doc = parse(fetch(url))
            except OSError as err:
                print(f"outline2: {err}", file=sys.stderr)
                continue
            sys.stdout.write(outline_text(doc))
        return 0

    name = "findlinks1" if args.command == "findlinks" else "outline"
    try:
        doc = parse(sys.stdin.read())
    except OSError as err:
        print(f"{name}: {err}", file=sys.stderr)
        return 1
    if args.command == "findlinks":
        for link in visit(doc):
            print(link)
    else:
        for stack in outline(doc):
            print("[" + " ".join(stack) + "]")
    return 0


if __name__ == "__main__":
    sys.exit(main())