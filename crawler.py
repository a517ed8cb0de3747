# crawler.py  (2026-10-12)
"""
Per-post link extraction and the bounded fan-out over all seeds.

One pass only: every seed post is fetched once, and links found there are
recorded but never followed.
"""

from __future__ import annotations

import concurrent.futures
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set
from urllib.parse import parse_qs, urljoin

from config import BLOG_PARAM, MOBILE_ORIGIN, SELF_HOSTS, CrawlConfig
from fetcher import Fetch, fetch_text
from graph import Reference
from parser import iter_hrefs
from utils import split_url

logger = logging.getLogger(__name__)


# ─────────────────────── single post ─────────────────────────────
def _same_blog(parts, blog_id: str) -> bool:
    values = parse_qs(parts.query, keep_blank_values=True).get(BLOG_PARAM)
    if values is not None:
        return values[0] == blog_id
    segments = parts.path.split("/")
    return len(segments) > 1 and segments[1] == blog_id


_DEFAULT_PORTS = {"http": 80, "https": 443}


def _is_self_host(parts) -> bool:
    if (parts.hostname or "") not in SELF_HOSTS:
        return False
    return parts.port is None or parts.port == _DEFAULT_PORTS.get(parts.scheme.lower())


def _target_of(href: str, config: CrawlConfig) -> str | None:
    """Post id a raw href points at, or None if it is not a same-blog post link."""
    url = href.strip()
    if not url:
        return None
    if url.startswith("/"):
        url = urljoin(MOBILE_ORIGIN + "/", url)
    parts = split_url(url)
    if parts is None or not _is_self_host(parts):
        return None
    if not _same_blog(parts, config.blog_id):
        return None
    return config.policy.extract_parts(parts)


def extract_outgoing_links(log_no: str, config: CrawlConfig,
                           fetch: Fetch = fetch_text) -> Set[Reference]:
    """
    Fetch one post's mobile page and return its distinct same-blog references.
    Fetch errors are not caught here.
    """
    html = fetch(config.post_url(log_no), timeout=config.timeout)
    edges: Set[Reference] = set()
    for href in iter_hrefs(html):
        target = _target_of(href, config)
        if target and target != log_no:
            edges.add(Reference(log_no, target))
    return edges


# ─────────────────────── whole crawl ─────────────────────────────
@dataclass(frozen=True)
class CrawlFailure:
    log_no: str
    reason: str


@dataclass
class CrawlResult:
    references: Set[Reference] = field(default_factory=set)
    failures: List[CrawlFailure] = field(default_factory=list)
    link_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def succeeded(self) -> int:
        return len(self.link_counts)


def crawl(log_nos: Iterable[str], config: CrawlConfig,
          fetch: Fetch = fetch_text) -> CrawlResult:
    """
    Run extract_outgoing_links for every distinct id with at most
    `config.concurrency` in flight. A failing post is logged and recorded,
    the rest carry on. Results are merged on the calling thread only.
    """
    ordered = list(dict.fromkeys(log_nos))
    result = CrawlResult()
    if not ordered:
        return result

    with concurrent.futures.ThreadPoolExecutor(
        max_workers=config.concurrency,
        thread_name_prefix="crawl",
    ) as pool:
        futures = {
            pool.submit(extract_outgoing_links, log_no, config, fetch): log_no
            for log_no in ordered
        }
        for f in concurrent.futures.as_completed(futures):
            log_no = futures[f]
            try:
                out = f.result()
            except Exception as exc:
                logger.warning(" ! %s failed: %s", log_no, exc)
                result.failures.append(CrawlFailure(log_no, str(exc)))
                continue
            result.references.update(out)
            result.link_counts[log_no] = len(out)
            logger.info(" - %s: %d links", log_no, len(out))

    return result
