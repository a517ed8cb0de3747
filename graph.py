# graph.py  (2026-10-12)
"""
Graph value types and the final assembly step.

Nodes are keyed by post id (first writer wins); edges are keyed by the
ordered pair. ``assemble`` adds a bare node for every edge endpoint that
was not in the seed set, so no edge can point at a missing node.
"""

from __future__ import annotations
import json, logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Mapping, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    id: str
    label: str
    url: str


@dataclass(frozen=True, order=True)
class Reference:
    source: str
    target: str

    @property
    def key(self) -> str:
        return f"{self.source}->{self.target}"


@dataclass(frozen=True)
class Graph:
    generated_at: str
    site_id: str
    nodes: Tuple[Node, ...]
    edges: Tuple[Reference, ...]

    @property
    def counts(self) -> Dict[str, int]:
        return {"nodes": len(self.nodes), "edges": len(self.edges)}

    def to_dict(self) -> Dict[str, Any]:
        """Cytoscape-style document: every element wrapped in {"data": ...}."""
        return {
            "generatedAt": self.generated_at,
            "blogId": self.site_id,
            "counts": self.counts,
            "elements": {
                "nodes": [{"data": asdict(n)} for n in self.nodes],
                "edges": [
                    {"data": {"id": e.key, "source": e.source, "target": e.target}}
                    for e in self.edges
                ],
            },
        }


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def assemble(registry: Mapping[str, Node],
             references: Iterable[Reference],
             site_id: str,
             url_for: Callable[[str], str]) -> Graph:
    """
    Build the final graph from seed nodes plus every collected reference.
    `url_for(id)` gives the canonical post URL for targets outside the seeds.
    """
    nodes: Dict[str, Node] = dict(registry)
    edges = sorted(set(references))
    added = 0
    for ref in edges:
        for end in (ref.source, ref.target):
            if end not in nodes:
                nodes[end] = Node(id=end, label=end, url=url_for(end))
                added += 1
    if added:
        logger.debug("materialized %d posts outside the seed set", added)
    return Graph(
        generated_at=_utc_now(),
        site_id=site_id,
        nodes=tuple(nodes.values()),
        edges=tuple(edges),
    )


def write_graph(graph: Graph, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(graph.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
    logger.info("graph written to %s", path)
    return path
