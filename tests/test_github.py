import json
import threading
from datetime import datetime, timedelta, timezone
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from toolbox.github import (
    IssuesSearchResult,
    Issue,
    SearchError,
    User,
    days_ago,
    format_html,
    format_issues,
    format_report,
    parse_result,
    search_issues,
)

DOC = {
    "total_count": 1,
    "items": [
        {
            "number": 5680,
            "html_url": "http://example.com/i/5680",
            "title": "encoding/json: set key converter on en/decoder",
            "state": "open",
            "user": {"login": "eaigner", "html_url": "http://example.com/u"},
            "created_at": "2020-01-01T00:00:00Z",
            "body": "text",
        }
    ],
}


def test_parse_result():
    r = parse_result(json.dumps(DOC))
    assert r.total_count == 1
    item = r.items[0]
    assert item.number == 5680
    assert item.user.login == "eaigner"
    assert item.created_at == datetime(2020, 1, 1, tzinfo=timezone.utc)


def test_format_issues_line():
    out = format_issues(parse_result(DOC))
    assert out == (
        "1 issues:\n"
        "#5680    eaigner encoding/json: set key converter on en/decoder\n"
    )


def test_days_ago():
    t = datetime(2020, 1, 1, tzinfo=timezone.utc)
    assert days_ago(t, t + timedelta(days=3, hours=5)) == 3


def test_format_report():
    r = parse_result(DOC)
    now = r.items[0].created_at + timedelta(days=750)
    out = format_report(r, now)
    assert "Number: 5680\n" in out
    assert "User:   eaigner\n" in out
    assert "Age:    750 days\n" in out


def test_format_html_escapes():
    r = IssuesSearchResult(1, [Issue(1, "u", "<b>x</b>", "open", User("a", "v"))])
    out = format_html(r)
    assert "&lt;b&gt;x&lt;/b&gt;" in out
    assert "<b>" not in out


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if "fail" in self.path:
            self.send_response(500)
            self.end_headers()
            return
        body = json.dumps(DOC).encode()
        self.send_response(200)
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    srv = HTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{srv.server_address[1]}"
    srv.shutdown()
    srv.server_close()


def test_search_issues(server):
    r = search_issues(["json", "decoder"], server + "/search")
    assert r.items[0].number == 5680


def test_search_issues_failure(server):
    with pytest.raises(SearchError, match="search query failed"):
        search_issues(["x"], server + "/fail")