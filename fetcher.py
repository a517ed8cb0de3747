#fetcher.py
from __future__ import annotations
import logging
from typing import Callable, Mapping

import requests

from errors import FetchError

logger = logging.getLogger(__name__)

_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120 Safari/537.36"
)

# (url, headers=None, timeout=...) -> body text; raises FetchError
Fetch = Callable[..., str]


def fetch_text(url: str, headers: Mapping[str, str] | None = None,
               timeout: float = 15.0) -> str:
    """Single GET, no retries. Non-2xx or network trouble -> FetchError."""
    hdrs = {"User-Agent": _UA, **(headers or {})}
    logger.debug("FETCH %s", url)
    try:
        r = requests.get(url, headers=hdrs, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(url, str(exc)) from exc
    if not r.ok:
        raise FetchError(url, r.reason or "HTTP error", status=r.status_code)
    return r.text
