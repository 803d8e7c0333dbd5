"""CLI commands for Maple Epoch using Typer."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from maple_epoch.config import Settings, get_settings
from maple_epoch.exceptions import MapleEpochError
from maple_epoch.models.display_post import DisplayPost
from maple_epoch.services.articles import ArticleService
from maple_epoch.services.content_fetcher import ContentFetcher, create_content_fetcher
from maple_epoch.services.fetch_cache import create_fetch_cache
from maple_epoch.services.sections import SECTIONS, create_section_service
from maple_epoch.utils.logging import setup_logging
from maple_epoch.utils.text_utils import strip_html, truncate_text


app = typer.Typer(
    name="maple-epoch",
    help="Browse Maple Epoch news content from the WordPress API",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging before any command runs."""
    settings = get_settings()
    level = logging.DEBUG if verbose else settings.log_level.upper()
    setup_logging(level=level, log_file=settings.log_file)


@asynccontextmanager
async def _content_fetcher(settings: Settings) -> AsyncIterator[ContentFetcher]:
    async with httpx.AsyncClient() as client:
        cache = create_fetch_cache(settings, http_client=client)
        yield create_content_fetcher(settings, cache)


def _display_posts(posts: list[DisplayPost], title: str) -> None:
    """Display a list of posts."""
    if not posts:
        console.print("[yellow]No content available.[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Category")
    table.add_column("Author")
    table.add_column("Read", justify="right")
    table.add_column("Flags")

    for post in posts:
        flags = [
            name
            for name, on in (
                ("featured", post.featured),
                ("trending", post.is_trending),
                ("breaking", post.is_breaking),
            )
            if on
        ]
        table.add_row(
            str(post.id),
            escape(truncate_text(post.title, 70)),
            escape(post.category),
            escape(post.author),
            post.read_time,
            ", ".join(flags),
        )

    console.print(table)


# --- Listing Commands ---


@app.command()
def headlines(
    limit: int = typer.Option(3, "--limit", "-n", help="Number of headlines"),
):
    """Show the latest headlines."""
    settings = get_settings()

    async def run():
        async with _content_fetcher(settings) as fetcher:
            service = create_section_service(fetcher, settings.section_fetch_size)
            return await service.get_latest_headlines(limit)

    _display_posts(asyncio.run(run()), "Latest Headlines")


@app.command()
def section(
    name: str = typer.Argument(..., help="Section name, see 'sections'"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Posts to show"),
    fallback: bool = typer.Option(False, "--fallback", help="Show fallback posts when empty"),
):
    """Show the posts of a home page section."""
    if name not in SECTIONS:
        console.print(f"[red]Unknown section: {escape(name)}[/red]")
        raise typer.Exit(1)

    settings = get_settings()
    show = limit or SECTIONS[name].default_limit

    async def run():
        async with _content_fetcher(settings) as fetcher:
            service = create_section_service(fetcher, settings.section_fetch_size)
            if fallback:
                return await service.get_section_or_fallback(name, limit)
            return await service.get_section(name, limit)

    posts = asyncio.run(run())
    _display_posts(posts[:show], f"Section: {name}")


@app.command("editors-picks")
def editors_picks(
    limit: int = typer.Option(3, "--limit", "-n", help="Number of picks"),
):
    """Show editor's picks."""
    settings = get_settings()

    async def run():
        async with _content_fetcher(settings) as fetcher:
            service = create_section_service(fetcher, settings.section_fetch_size)
            return await service.get_editors_picks(limit)

    _display_posts(asyncio.run(run())[:limit], "Editor's Picks")


@app.command()
def sections():
    """List the known sections and their CMS category slugs."""
    table = Table(title="Sections")
    table.add_column("Section", style="cyan")
    table.add_column("Category slug")
    table.add_column("Default limit", justify="right")
    for name, sec in SECTIONS.items():
        table.add_row(name, sec.slug, str(sec.default_limit))
    console.print(table)


@app.command()
def categories():
    """List CMS categories."""
    settings = get_settings()

    async def run():
        async with _content_fetcher(settings) as fetcher:
            return await fetcher.get_categories()

    try:
        result = asyncio.run(run())
    except MapleEpochError as exc:
        console.print(f"[red]Could not fetch categories: {exc}[/red]")
        raise typer.Exit(1)

    table = Table(title="Categories")
    table.add_column("ID", justify="right")
    table.add_column("Slug", style="cyan")
    table.add_column("Name")
    table.add_column("Posts", justify="right")
    for cat in result:
        table.add_row(str(cat.id), cat.slug, escape(cat.name), str(cat.count))
    console.print(table)


# --- Article Command ---


@app.command()
def article(
    article_id: str = typer.Argument(..., help="Article id"),
    full: bool = typer.Option(False, "--full", help="Print the article body as text"),
):
    """Show a single article."""
    settings = get_settings()

    async def run():
        async with _content_fetcher(settings) as fetcher:
            return await ArticleService(fetcher).get_article(article_id)

    post = asyncio.run(run())
    if post is None:
        console.print(f"[red]Article not found: {escape(article_id)}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]{escape(post.title)}[/bold]")
    console.print(
        f"[dim]{escape(post.category)} | {escape(post.author)} | {post.read_time} | {post.publish_date}[/dim]"
    )
    console.print(f"\n{escape(post.excerpt)}")
    if post.tags:
        console.print(f"\n[dim]Tags: {escape(', '.join(post.tags))}[/dim]")
    if full:
        console.print(f"\n{escape(strip_html(post.content))}")


if __name__ == "__main__":
    app()
