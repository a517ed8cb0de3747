#parser.py
import xml.etree.ElementTree as ET
from typing import Any, Dict, Iterator, List

from bs4 import BeautifulSoup

from errors import FeedError


def _element_value(el: ET.Element) -> Any:
    """Leaf -> its text; anything with attributes or children -> a dict."""
    children = list(el)
    if not children and not el.attrib:
        return el.text or ""
    node: Dict[str, Any] = {f"@{k}": v for k, v in el.attrib.items()}
    for child in children:
        val = _element_value(child)
        if child.tag in node:
            prev = node[child.tag]
            node[child.tag] = prev + [val] if isinstance(prev, list) else [prev, val]
        else:
            node[child.tag] = val
    text = (el.text or "").strip()
    if text:
        node["#text"] = text
    return node


def parse_feed(xml_text: str) -> List[Dict[str, Any]]:
    """RSS document -> one dict per <item>, in feed order."""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise FeedError(f"feed is not valid XML: {exc}") from exc
    items = []
    for item in root.iter("item"):
        value = _element_value(item)
        items.append(value if isinstance(value, dict) else {})
    return items


def iter_hrefs(html: str) -> Iterator[str]:
    """Raw href of every <a href=...> in the page."""
    if not html:
        return
    soup = BeautifulSoup(html, "html.parser")
    for a in soup.find_all("a", href=True):
        yield a["href"]
