import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from toolbox.graph import breadth_first
from toolbox.htmltree import parse
from toolbox.links import (
    TitleError,
    crawl,
    extract,
    find_links,
    main,
    sole_title,
    title,
    titles,
)

PAGES = {
    "/": (
        "text/html; charset=utf-8",
        b'<html><head><title>Home</title></head><body>'
        b'<a href="/a">A</a><a href="b.html">B</a><a name="x">no</a></body></html>',
    ),
    "/a": ("text/html", b'<title>Page A</title><a href="/">home</a><a href="/missing">gone</a>'),
    "/b.html": ("text/html", b"<p>no title</p>"),
    "/two": ("text/html", b"<title>One</title><title>Two</title>"),
    "/img": ("image/png", b"\x89PNG"),
}


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        page = PAGES.get(self.path)
        if page is None:
            self.send_error(404)
            return
        ctype, body = page
        self.send_response(200)
        self.send_header("Content-Type", ctype)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture(scope="module")
def base():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def test_extract_resolves_links(base):
    assert extract(base + "/") == [base + "/a", base + "/b.html"]


def test_find_links_unresolved(base):
    assert find_links(base + "/") == ["/a", "b.html"]


def test_extract_not_found(base):
    with pytest.raises(OSError, match="getting .*404"):
        extract(base + "/missing")


def test_find_links_not_found(base):
    with pytest.raises(OSError, match="404"):
        find_links(base + "/missing")


def test_titles(base):
    assert titles(base + "/") == ["Home"]
    assert titles(base + "/two") == ["One", "Two"]


def test_titles_wrong_content_type(base):
    url = base + "/img"
    with pytest.raises(TitleError) as info:
        titles(url)
    assert str(info.value) == f"{url} has type image/png, not text/html"


def test_title_sole(base):
    assert title(base + "/a") == "Page A"


def test_title_multiple(base):
    with pytest.raises(TitleError, match="multiple title elements"):
        title(base + "/two")


def test_title_missing(base):
    with pytest.raises(TitleError, match="no title element"):
        title(base + "/b.html")


def test_sole_title_offline():
    assert sole_title(parse("<title>Only</title><p>x</p>")) == "Only"
    with pytest.raises(TitleError, match="no title element"):
        sole_title(parse("<title></title>"))


def test_crawl_breadth_first(base, capsys):
    visited = breadth_first(crawl, [base + "/"])
    expected = [base + "/", base + "/a", base + "/b.html", base + "/missing"]
    assert visited == expected
    assert capsys.readouterr().out.splitlines() == expected


def test_crawl_failure_returns_empty(base, capsys):
    assert crawl(base + "/missing") == []
    assert capsys.readouterr().out == base + "/missing\n"


def test_main_title(base, capsys):
    assert main(["title", base + "/"]) == 0
    assert capsys.readouterr().out == "Home\n"


def test_main_title_all_reports_errors(base, capsys):
    assert main(["title", "--all", base + "/two", base + "/img"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "One\nTwo\n"
    assert "not text/html" in captured.err


def test_main_findlinks(base, capsys):
    assert main(["findlinks", base + "/a"]) == 0
    assert capsys.readouterr().out == "/\n/missing\n"