# seeds.py  (2026-10-12)
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List

from config import CrawlConfig
from errors import EmptyFeedError
from fetcher import Fetch, fetch_text
from graph import Node
from parser import parse_feed
from utils import as_text, normalize_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedItem:
    log_no: str
    title: str
    url: str


def load_seeds(config: CrawlConfig, fetch: Fetch = fetch_text) -> List[SeedItem]:
    """
    Read the blog's RSS feed and turn its items into seeds, in feed order.
    Items without a usable link or post id are dropped; at most
    `config.max_posts` seeds are kept. Raises EmptyFeedError if none remain.
    """
    xml = fetch(config.feed_url, timeout=config.timeout)
    items = parse_feed(xml)
    logger.debug("feed has %d items", len(items))

    seeds: List[SeedItem] = []
    for it in items:
        link = normalize_url(as_text(it.get("link")).strip())
        if not link:
            continue
        log_no = config.policy.extract(link)
        if not log_no:
            logger.debug("no post id in feed link %s", link)
            continue
        seeds.append(SeedItem(log_no=log_no, title=as_text(it.get("title")).strip(), url=link))
        if len(seeds) >= config.max_posts:
            break

    if not seeds:
        raise EmptyFeedError(f"No posts in RSS {config.feed_url}. Check BLOG_ID.")
    return seeds


def build_registry(seeds: Iterable[SeedItem]) -> Dict[str, Node]:
    """id -> Node; a repeated id keeps the first title/url seen."""
    registry: Dict[str, Node] = {}
    for s in seeds:
        if s.log_no not in registry:
            registry[s.log_no] = Node(id=s.log_no, label=s.title or s.log_no, url=s.url)
    return registry
