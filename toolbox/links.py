"""Fetching HTML pages to extract their links and titles."""

from __future__ import annotations

import argparse
import logging
import sys
import urllib.error
import urllib.request
from contextlib import closing
from dataclasses import dataclass
from urllib.parse import urljoin

from toolbox.graph import breadth_first
from toolbox.htmltree import Node, NodeType, for_each_node, parse, visit

log = logging.getLogger(__name__)


class TitleError(ValueError):
    """Raised when a page's title cannot be determined."""


@dataclass
class _Response:
    url: str
    code: int
    status: str
    content_type: str
    body: bytes


def _get(url: str) -> _Response:
    try:
        resp = urllib.request.urlopen(urllib.request.Request(url))
    except urllib.error.HTTPError as err:
        resp = err
    with closing(resp):
        body = resp.read()
        code = resp.getcode()
        return _Response(
            url=resp.geturl(),
            code=code,
            status=f"{code} {resp.reason}",
            content_type=resp.headers.get("Content-Type", ""),
            body=body,
        )


def _get_ok(url: str) -> _Response:
    resp = _get(url)
    if resp.code != 200:
        raise OSError(f"getting {url}: {resp.status}")
    return resp


def extract(url: str) -> list[str]:
    """Fetch url and return its links resolved against the final URL."""
    resp = _get_ok(url)
    doc = parse(resp.body)
    links: list[str] = []

    def visit_node(n: Node) -> None:
        if n.type is NodeType.ELEMENT and n.data == "a":
            for key, val in n.attr:
                if key != "href":
                    continue
                try:
                    links.append(urljoin(resp.url, val))
                except ValueError:
                    continue  # ignore bad URLs

    for_each_node(doc, visit_node)
    return links


def find_links(url: str) -> list[str]:
    """Fetch url and return the href values of its anchors, unresolved."""
    return visit(parse(_get_ok(url).body))


def crawl(url: str) -> list[str]:
    """Print url and return its links; failures are logged and give none."""
    print(url)
    try:
        return extract(url)
    except OSError as err:
        log.warning("%s", err)
        return []


def _fetch_html(url: str) -> Node:
    resp = _get(url)
    ct = resp.content_type
    if ct != "text/html" and not ct.startswith("text/html;"):
        raise TitleError(f"{url} has type {ct}, not text/html")
    return parse(resp.body)


def _is_title(n: Node) -> bool:
    return n.type is NodeType.ELEMENT and n.data == "title" and n.first_child is not None


def titles(url: str) -> list[str]:
    """Return the text of every title element of the HTML page at url."""
    doc = _fetch_html(url)
    found: list[str] = []
    for_each_node(doc, lambda n: found.append(n.first_child.data) if _is_title(n) else None)
    return found


class _Bailout(Exception):
    pass


def sole_title(doc: Node) -> str:
    """Return the text of the only non-empty title element in doc.

    Raises TitleError if there is none or more than one.
    """
    found = ""

    def visit_node(n: Node) -> None:
        nonlocal found
        if _is_title(n):
            if found != "":
                raise _Bailout
            found = n.first_child.data

    try:
        for_each_node(doc, visit_node)
    except _Bailout:
        raise TitleError("multiple title elements") from None
    if found == "":
        raise TitleError("no title element")
    return found


def title(url: str) -> str:
    """Return the sole title of the HTML page at url."""
    return sole_title(_fetch_html(url))


def main(argv: list[str] | None = None) -> int:
    """Run the findlinks, crawl or title command."""
    parser = argparse.ArgumentParser(prog="links")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("findlinks", help="print the links of each URL").add_argument("urls", nargs="*")
    sub.add_parser("crawl", help="crawl the web breadth-first").add_argument("urls", nargs="*")
    t = sub.add_parser("title", help="print the title of each URL")
    t.add_argument("--all", action="store_true", help="print every title element")
    t.add_argument("urls", nargs="*")
    args = parser.parse_args(argv)

    if args.command == "findlinks":
        for url in args.urls:
            try:
                found = find_links(url)
            except OSError as err:
                print(f"findlinks2: {err}", file=sys.stderr)
                continue
            for link in found:
                print(link)
    elif args.command == "crawl":
        logging.basicConfig(format="%(asctime)s %(message)s")
        breadth_first(crawl, args.urls)
    else:
        for url in args.urls:
            try:
                if args.all:
                    for text in titles(url):
                        print(text)
                else:
                    print(title(url))
            except (OSError, TitleError) as err:
                print(f"title: {err}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())