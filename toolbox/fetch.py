"""Fetching URLs: printing, timing in parallel, saving, and waiting for servers."""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed
from contextlib import closing
from typing import BinaryIO

log = logging.getLogger(__name__)

_CHUNK = 32 * 1024


def _open(url: str, method: str = "GET"):
    """Open url; an HTTP error status still yields the response body."""
    request = urllib.request.Request(url, method=method)
    try:
        return urllib.request.urlopen(request)
    except urllib.error.HTTPError as err:
        return err


def _copy(src, dst: BinaryIO | None) -> int:
    n = 0
    while True:
        chunk = src.read(_CHUNK)
        if not chunk:
            return n
        n += len(chunk)
        if dst is not None:
            dst.write(chunk)


def fetch(url: str) -> bytes:
    """Return the content found at url."""
    with closing(_open(url)) as resp:
        return resp.read()


def _fetch_report(url: str) -> str:
    start = time.monotonic()
    try:
        resp = _open(url)
    except Exception as err:
        return str(err)
    try:
        with closing(resp):
            nbytes = _copy(resp, None)
    except Exception as err:
        return f"while reading {url}: {err}"
    secs = time.monotonic() - start
    return f"{secs:.2f}s  {nbytes:7d}  {url}"


def fetch_all(urls: Iterable[str]) -> Iterator[str]:
    """Fetch urls in parallel, yielding a time and size report as each finishes."""
    urls = list(urls)
    if not urls:
        return
    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        futures = [pool.submit(_fetch_report, url) for url in urls]
        for future in as_completed(futures):
            yield future.result()


def _path_base(p: str) -> str:
    if p == "":
        return "."
    p = p.rstrip("/")
    if p == "":
        return "/"
    return p[p.rfind("/") + 1:]


def fetch_to_file(url: str, directory: str = ".") -> tuple[str, int]:
    """Download url into directory; return the local path and its length."""
    with closing(_open(url)) as resp:
        local = _path_base(urllib.parse.urlsplit(resp.geturl()).path)
        if local == "/":
            local = "index.html"
        path = os.path.join(directory, local)
        with open(path, "wb") as f:
            n = _copy(resp, f)
    return path, n


def wait_for_server(url: str, timeout: float = 60.0) -> int:
    """Try to contact the server of url until timeout seconds have passed.

    Retries with exponential back-off. Returns the number of attempts
    made; raises ConnectionError if every attempt failed.
    """
    deadline = time.monotonic() + timeout
    tries = 0
    while time.monotonic() < deadline:
        try:
            with closing(_open(url, "HEAD")):
                pass
            return tries + 1
        except OSError as err:
            log.warning("server not responding (%s); retrying...", err)
        time.sleep(1 << tries)
        tries += 1
    raise ConnectionError(f"server {url} failed to respond after {timeout:g}s")


def main(argv: list[str] | None = None) -> int:
    """Run one of the fetch, fetchall, save or wait commands."""
    parser = argparse.ArgumentParser(prog="fetch")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("fetch", help="print the content at each URL").add_argument("urls", nargs="*")
    sub.add_parser("fetchall", help="time fetching URLs in parallel").add_argument("urls", nargs="*")
    save = sub.add_parser("save", help="save each URL into a local file")
    save.add_argument("-d", "--directory", default=".")
    save.add_argument("urls", nargs="*")
    sub.add_parser("wait", help="wait for a server to respond").add_argument("url")
    args = parser.parse_args(argv)

    if args.command == "fetch":
        for url in args.urls:
            try:
                data = fetch(url)
            except OSError as err:
                print(f"fetch: {err}", file=sys.stderr)
                return 1
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
    elif args.command == "fetchall":
        start = time.monotonic()
        for line in fetch_all(args.urls):
            print(line)
        print(f"{time.monotonic() - start:.2f}s elapsed")
    elif args.command == "save":
        for url in args.urls:
            try:
                path, n = fetch_to_file(url, args.directory)
            except OSError as err:
                print(f"fetch {url}: {err}", file=sys.stderr)
                continue
            print(f"{url} => {path} ({n} bytes).", file=sys.stderr)
    else:
        logging.basicConfig(format="%(asctime)s %(message)s")
        try:
            wait_for_server(args.url)
        except ConnectionError as err:
            print(f"Site is down: {err}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())