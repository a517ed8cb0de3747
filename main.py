# main.py  (2026-10-12)
from __future__ import annotations
import logging
from pathlib import Path

import click
from dotenv import load_dotenv

from config import (CrawlConfig, DEFAULT_CONCURRENCY, DEFAULT_MAX_POSTS,
                    DEFAULT_OUTPUT, DEFAULT_TIMEOUT)
from crawler import crawl
from errors import GraphBuildError
from fetcher import Fetch, fetch_text
from graph import Graph, assemble, write_graph
from seeds import build_registry, load_seeds


def run(config: CrawlConfig, fetch: Fetch = fetch_text) -> Graph:
    """Seeds -> crawl -> assembled graph. Writing it out is the caller's job."""
    click.echo(f"[1/3] Reading RSS: {config.feed_url}")
    seeds = load_seeds(config, fetch=fetch)
    registry = build_registry(seeds)

    click.echo(f"[2/3] Crawling bodies & extracting internal links "
               f"(total {len(registry)}, concurrency {config.concurrency})")
    result = crawl(registry.keys(), config, fetch=fetch)
    if result.failures:
        click.echo(click.style(f"⚠️  {len(result.failures)} of {len(registry)} posts failed.",
                               fg="yellow"))

    return assemble(registry, result.references, config.blog_id, config.post_url)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
def cli(verbose: bool) -> None:
    """Map the internal link graph of a blog."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format="%(message)s")
    logging.getLogger("urllib3").setLevel(logging.WARNING)


@cli.command()
@click.option("--blog-id", envvar="BLOG_ID", default="", help="Target blog id.")
@click.option("--max-posts", envvar="MAX_POSTS", type=int, default=DEFAULT_MAX_POSTS,
              show_default=True, help="Max seed posts taken from the feed.")
@click.option("--concurrency", envvar="CONCURRENCY", type=int, default=DEFAULT_CONCURRENCY,
              show_default=True, help="Max pages fetched at once.")
@click.option("--timeout", envvar="FETCH_TIMEOUT", type=float, default=DEFAULT_TIMEOUT,
              show_default=True, help="Per-request timeout in seconds.")
@click.option("-o", "--output", envvar="GRAPH_OUTPUT", type=click.Path(dir_okay=False, path_type=Path),
              default=DEFAULT_OUTPUT, show_default=True, help="Where to write the graph JSON.")
def build(blog_id: str, max_posts: int, concurrency: int, timeout: float, output: Path) -> None:
    """Crawl the blog once and write graph.json."""
    try:
        config = CrawlConfig(blog_id=blog_id.strip(), max_posts=max_posts,
                             concurrency=concurrency, timeout=timeout, output=output)
        graph = run(config)
        click.echo(f"[3/3] Saving {config.output}")
        write_graph(graph, config.output)
    except (GraphBuildError, OSError) as exc:
        click.echo(click.style(f"✗ {exc}", fg="red"), err=True)
        raise SystemExit(1)

    c = graph.counts
    click.echo(click.style(f"✓ Done: nodes={c['nodes']}, edges={c['edges']}", fg="green"))


def main() -> None:
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
