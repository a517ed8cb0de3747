import threading
import time

import pytest

from config import CrawlConfig
from errors import FetchError


class FakeSite:
    """Stands in for fetch_text: url -> body, or url -> exception to raise."""

    def __init__(self, pages=None, delay=0.0):
        self.pages = dict(pages or {})
        self.delay = delay
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0
        self._lock = threading.Lock()

    def __call__(self, url, headers=None, timeout=None):
        with self._lock:
            self.calls.append(url)
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                time.sleep(self.delay)
            body = self.pages.get(url)
            if body is None:
                raise FetchError(url, "Not Found", status=404)
            if isinstance(body, Exception):
                raise body
            return body
        finally:
            with self._lock:
                self.in_flight -= 1


def rss(*items):
    """Minimal RSS 2.0 document; each item is a (title, link) pair."""
    body = "".join(
        f"<item><title><![CDATA[{t}]]></title><link>{l}</link></item>" for t, l in items
    )
    return f'<?xml version="1.0" encoding="UTF-8"?><rss version="2.0"><channel>{body}</channel></rss>'


def page(*hrefs):
    links = "".join(f'<a href="{h}">link</a>' for h in hrefs)
    return f"<html><body><div class='se-main-container'>{links}</div></body></html>"


@pytest.fixture
def config():
    return CrawlConfig(blog_id="X", max_posts=150, concurrency=3, timeout=5.0)
