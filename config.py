# config.py  (2026-10-12)
"""
Run configuration, built once by the CLI and handed to every stage.
Site-specific URL shapes live here so the rest of the code only sees ids.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path

from errors import ConfigError
from utils import NAVER_POLICY, IdentifierPolicy

# ─────────────────────────── defaults ─────────────────────────────
DEFAULT_MAX_POSTS   = 150
DEFAULT_CONCURRENCY = 6
DEFAULT_TIMEOUT     = 15.0
DEFAULT_OUTPUT      = "graph.json"

SELF_HOSTS    = frozenset({"blog.naver.com", "m.blog.naver.com"})
MOBILE_ORIGIN = "https://m.blog.naver.com"
BLOG_PARAM    = "blogId"
# ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CrawlConfig:
    blog_id: str
    max_posts: int = DEFAULT_MAX_POSTS
    concurrency: int = DEFAULT_CONCURRENCY
    timeout: float = DEFAULT_TIMEOUT
    output: Path = Path(DEFAULT_OUTPUT)
    policy: IdentifierPolicy = field(default=NAVER_POLICY)

    def __post_init__(self) -> None:
        if not self.blog_id or not self.blog_id.strip():
            raise ConfigError("blog id is required (set BLOG_ID or pass --blog-id)")
        if self.max_posts < 1:
            raise ConfigError(f"max posts must be >= 1, got {self.max_posts}")
        if self.concurrency < 1:
            raise ConfigError(f"concurrency must be >= 1, got {self.concurrency}")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")

    @property
    def feed_url(self) -> str:
        return f"https://rss.blog.naver.com/{self.blog_id}.xml"

    def post_url(self, log_no: str) -> str:
        return f"{MOBILE_ORIGIN}/PostView.naver?{BLOG_PARAM}={self.blog_id}&logNo={log_no}"
