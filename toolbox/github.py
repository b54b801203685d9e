"""Searching the GitHub issue tracker and formatting the results."""

from __future__ import annotations

import argparse
import json
import sys
import urllib.error
import urllib.parse
import urllib.request
from contextlib import closing
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

ISSUES_URL = "https://api.github.com/search/issues"


class SearchError(Exception):
    """Raised when an issue search fails."""


@dataclass
class User:
    login: str = ""
    html_url: str = ""


@dataclass
class Issue:
    number: int = 0
    html_url: str = ""
    title: str = ""
    state: str = ""
    user: User | None = None
    created_at: datetime | None = None
    body: str = ""


@dataclass
class IssuesSearchResult:
    total_count: int = 0
    items: list[Issue] = field(default_factory=list)


def _fold(obj: Any) -> dict[str, Any]:
    if not isinstance(obj, dict):
        return {}
    return {k.casefold(): v for k, v in obj.items()}


def _time(text: Any) -> datetime | None:
    if not text:
        return None
    text = str(text)
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def parse_result(data: str | bytes | dict) -> IssuesSearchResult:
    """Build a search result from a JSON document or already-decoded dict."""
    obj = _fold(data if isinstance(data, dict) else json.loads(data))
    items = []
    for raw in obj.get("items") or []:
        it = _fold(raw)
        u = _fold(it.get("user")) if it.get("user") is not None else None
        user = None if u is None else User(u.get("login") or "", u.get("html_url") or "")
        items.append(
            Issue(
                number=int(it.get("number") or 0),
                html_url=it.get("html_url") or "",
                title=it.get("title") or "",
                state=it.get("state") or "",
                user=user,
                created_at=_time(it.get("created_at")),
                body=it.get("body") or "",
            )
        )
    return IssuesSearchResult(int(obj.get("total_count") or 0), items)


def search_issues(terms: list[str], base_url: str = ISSUES_URL) -> IssuesSearchResult:
    """Query the issue tracker for issues matching terms."""
    q = urllib.parse.quote_plus(" ".join(terms))
    try:
        resp = urllib.request.urlopen(base_url + "?q=" + q)
    except urllib.error.HTTPError as err:
        with closing(err):
            raise SearchError(f"search query failed: {err.code} {err.reason}") from None
    with closing(resp):
        if resp.status != 200:
            raise SearchError(f"search query failed: {resp.status} {resp.reason}")
        return parse_result(resp.read())


def format_issues(result: IssuesSearchResult) -> str:
    """Format a one-line-per-issue table."""
    lines = [f"{result.total_count} issues:"]
    for item in result.items:
        login = item.user.login if item.user else ""
        lines.append(f"#{item.number:<5d} {login[:9]:>9} {item.title[:55]}")
    return "".join(line + "\n" for line in lines)


def days_ago(t: datetime, now: datetime | None = None) -> int:
    """Return the whole number of days from t until now."""
    if now is None:
        now = datetime.now(timezone.utc)
    return int((now - t).total_seconds() / 3600 / 24)


def format_report(result: IssuesSearchResult, now: datetime | None = None) -> str:
    """Format a multi-line report of each issue."""
    parts = [f"{result.total_count} issues:\n"]
    for item in result.items:
        login = item.user.login if item.user else ""
        age = days_ago(item.created_at, now) if item.created_at else 0
        parts.append(
            "----------------------------------------\n"
            f"Number: {item.number}\n"
            f"User:   {login}\n"
            f"Title:  {item.title[:64]}\n"
            f"Age:    {age} days\n"
        )
    return "".join(parts)


_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&#34;", "'": "&#39;"}


def _esc(value: object) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in str(value))


def format_html(result: IssuesSearchResult) -> str:
    """Format the issues as an HTML table, escaping every value."""
    parts = [
        f"\n<h1>{_esc(result.total_count)} issues</h1>\n<table>\n"
        "<tr style='text-align: left'>\n  <th>#</th>\n  <th>State</th>\n"
        "  <th>User</th>\n  <th>Title</th>\n</tr>\n"
    ]
    for item in result.items:
        user = item.user or User()
        parts.append(
            "\n<tr>\n"
            f"  <td><a href='{_esc(item.html_url)}'>{_esc(item.number)}</a></td>\n"
            f"  <td>{_esc(item.state)}</td>\n"
            f"  <td><a href='{_esc(user.html_url)}'>{_esc(user.login)}</a></td>\n"
            f"  <td><a href='{_esc(item.html_url)}'>{_esc(item.title)}</a></td>\n"
            "</tr>\n"
        )
    parts.append("\n</table>\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Search issues and print them as a table, report or HTML."""
    parser = argparse.ArgumentParser(prog="issues")
    parser.add_argument("--format", choices=["table", "report", "html"], default="table")
    parser.add_argument("terms", nargs="*")
    args = parser.parse_args(argv)
    try:
        result = search_issues(args.terms)
    except (SearchError, OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    formatter = {"table": format_issues, "report": format_report, "html": format_html}
    sys.stdout.write(formatter[args.format](result))
    return 0


if __name__ == "__main__":
    sys.exit(main())