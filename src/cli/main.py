"""
Typer CLI for Critical Mind.

Commands:
    critical-mind topics              - List the catalog with your progress flags
    critical-mind read <id>           - Read a topic section by section
    critical-mind like <id>           - Toggle like on a topic
    critical-mind favorite <id>       - Toggle favorite (saves to library)
    critical-mind complete <id>       - Mark a topic completed
    critical-mind explore             - Recommended and discover feeds
    critical-mind insights            - Level, points and category progress
    critical-mind library             - Saved topics
    critical-mind share               - Print a shareable progress summary
    critical-mind reset               - Forget all user data

Usage:
    critical-mind --help
    critical-mind topics --category Science
    critical-mind read gmo-food --no-pause
"""

from __future__ import annotations

import sys
from typing import Annotated

import typer
from loguru import logger
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table
from rich.text import Text

from config import Settings, get_settings
from src.catalog import Catalog, CatalogLoader, Category, InvalidCatalog, Topic
from src.engagement import InteractionStore, JsonFileBackend
from src.recommendation import filter_by_category
from src.views import (
    ReaderSession,
    build_explore_view,
    build_insights_view,
    build_library_view,
    build_share_message,
)

app = typer.Typer(
    name="critical-mind",
    help="Critical Mind: explore controversial topics and sharpen your critical thinking",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

EXIT_UNKNOWN_TOPIC = 1
EXIT_INVALID_CATALOG = 2


# ========================================
# Context Builder (Dependency Injection)
# ========================================


class CLIContext:
    """
    Dependency injection container for CLI commands.

    Lazily loads the catalog and the user's interaction store.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._catalog: Catalog | None = None
        self._store: InteractionStore | None = None

    @property
    def catalog(self) -> Catalog:
        if self._catalog is None:
            try:
                self._catalog = CatalogLoader(self.settings.catalog_path).load()
            except FileNotFoundError as e:
                console.print(f"[red]Error:[/red] {e}")
                raise typer.Exit(EXIT_INVALID_CATALOG) from e
            except InvalidCatalog as e:
                console.print("[red]Error:[/red] the topic catalog is invalid:")
                for problem in e.problems:
                    console.print(f"  - {problem}")
                raise typer.Exit(EXIT_INVALID_CATALOG) from e
        return self._catalog

    @property
    def store(self) -> InteractionStore:
        if self._store is None:
            self._store = InteractionStore(JsonFileBackend(self.settings.user_data_path))
        return self._store

    def topic(self, topic_id: str) -> Topic:
        """Resolve a topic id or exit with an error."""
        try:
            return self.catalog.get(topic_id)
        except KeyError as e:
            console.print(f"[red]Error:[/red] unknown topic '{topic_id}'")
            console.print("[dim]Run 'critical-mind topics' to list topic ids.[/dim]")
            raise typer.Exit(EXIT_UNKNOWN_TOPIC) from e


def configure_logging(level: str) -> None:
    """Route loguru output to stderr at the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )


@app.callback()
def main_callback(ctx: typer.Context):
    """Critical Mind learning companion."""
    settings = get_settings()
    configure_logging(settings.log_level)
    ctx.obj = CLIContext(settings)


# ========================================
# Formatting Helpers
# ========================================


def _format_progress_bar(percent: float, width: int = 10) -> str:
    """Format a progress bar."""
    filled = int(min(max(percent, 0), 100) / 100 * width)
    return "#" * filled + "-" * (width - filled)


def _category_style(category: str) -> str:
    try:
        return Category(category).color
    except ValueError:
        return "cyan"


def _topic_table(title: str, topics: list[Topic], store: InteractionStore) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAVY, show_lines=False)
    table.add_column("ID", style="bold", no_wrap=True)
    table.add_column("Title")
    table.add_column("Category", no_wrap=True)
    table.add_column("Views", justify="right", no_wrap=True)
    table.add_column("Status", no_wrap=True)

    for topic in topics:
        flags = []
        if store.is_completed(topic.id):
            flags.append("[green]done[/green]")
        if store.is_liked(topic.id):
            flags.append("[red]liked[/red]")
        if store.is_favorited(topic.id):
            flags.append("[yellow]saved[/yellow]")
        table.add_row(
            topic.id,
            topic.title,
            f"[{_category_style(topic.category)}]{topic.category}[/]",
            f"{topic.view_count:,}",
            " ".join(flags),
        )
    return table


# ========================================
# Catalog & Reading Commands
# ========================================


@app.command("topics")
def list_topics(
    ctx: typer.Context,
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Only show one category")
    ] = None,
) -> None:
    """List the topic catalog."""
    cli: CLIContext = ctx.obj
    topics = filter_by_category(cli.catalog, category)
    if not topics:
        console.print(f"[yellow]No topics in category '{category}'.[/yellow]")
        return
    console.print(_topic_table(f"Topics ({len(topics)})", topics, cli.store))


@app.command("read")
def read_topic(
    ctx: typer.Context,
    topic_id: Annotated[str, typer.Argument(help="Topic to read")],
    no_pause: Annotated[
        bool, typer.Option("--no-pause", help="Print all sections without prompting")
    ] = False,
) -> None:
    """
    Read a topic section by section.

    Finishing the last section completes the topic and awards clarity points
    the first time.
    """
    cli: CLIContext = ctx.obj
    topic = cli.topic(topic_id)
    session = ReaderSession(cli.catalog, cli.store, cli.settings, start_topic_id=topic.id)
    total = len(topic.sections)

    while True:
        number = session.section_index + 1
        console.print(
            Panel(
                session.current_section.text,
                title=f"[bold]{topic.title}[/bold] - {session.current_section.title}",
                subtitle=f"{number}/{total}",
                border_style=_category_style(topic.category),
            )
        )

        if not session.is_last_section and not no_pause:
            if not Confirm.ask("Continue?", default=True, console=console):
                console.print("[dim]Stopped reading. Progress on this topic is not saved.[/dim]")
                return

        result = session.advance_section()
        if result.completed_topic:
            break

    if result.points_awarded:
        console.print(
            f"[green]Topic completed![/green] +{result.points_awarded} points "
            f"(total {cli.store.points})"
        )
    else:
        console.print("[dim]Already completed - no new points.[/dim]")


@app.command("like")
def like_topic(
    ctx: typer.Context,
    topic_id: Annotated[str, typer.Argument(help="Topic to like or unlike")],
) -> None:
    """Toggle like on a topic."""
    cli: CLIContext = ctx.obj
    topic = cli.topic(topic_id)
    if cli.store.toggle_like(topic.id):
        console.print(f"[red]Liked[/red] {topic.title}")
    else:
        console.print(f"Removed like from {topic.title}")


@app.command("favorite")
def favorite_topic(
    ctx: typer.Context,
    topic_id: Annotated[str, typer.Argument(help="Topic to save or unsave")],
) -> None:
    """Toggle favorite on a topic (favorites appear in the library)."""
    cli: CLIContext = ctx.obj
    topic = cli.topic(topic_id)
    if cli.store.toggle_favorite(topic.id):
        console.print(f"[yellow]Saved[/yellow] {topic.title} to your library")
    else:
        console.print(f"Removed {topic.title} from your library")


@app.command("complete")
def complete_topic(
    ctx: typer.Context,
    topic_id: Annotated[str, typer.Argument(help="Topic to mark as completed")],
) -> None:
    """Mark a topic completed without reading it."""
    cli: CLIContext = ctx.obj
    topic = cli.topic(topic_id)
    points = cli.store.complete_topic(topic.id, cli.settings.points_per_completion)
    if points:
        console.print(f"[green]Completed[/green] {topic.title} (+{points} points)")
    else:
        console.print(f"[dim]{topic.title} was already completed.[/dim]")


# ========================================
# Screen Commands
# ========================================


@app.command("explore")
def explore(ctx: typer.Context) -> None:
    """Show recommendations once enough topics are completed."""
    cli: CLIContext = ctx.obj
    view = build_explore_view(cli.catalog, cli.store.snapshot(), cli.settings)

    if not view.unlocked:
        content = Text()
        content.append("Explore is locked\n\n", style="bold")
        content.append(
            f"Complete {view.threshold} topics to unlock Explore and discover new content.\n\n"
        )
        content.append(f"{_format_progress_bar(view.unlock_percent)} ")
        content.append(f"{view.completed_count}/{view.threshold} topics", style="bold")
        console.print(Panel(content, title="[bold]Explore[/bold]", border_style="dim"))
        return

    if view.categories:
        chips = Text("  ").join(
            Text(c, style=_category_style(c)) for c in view.categories
        )
        console.print(chips)

    if view.recommended:
        console.print(_topic_table("Recommended for you", view.recommended, cli.store))
    console.print(_topic_table("All topics", view.discover, cli.store))


@app.command("insights")
def insights(ctx: typer.Context) -> None:
    """Show level, points and progress per category."""
    cli: CLIContext = ctx.obj
    view = build_insights_view(cli.catalog, cli.store.snapshot(), cli.settings)

    content = Text()
    content.append(f"Level {view.level}", style="bold magenta")
    content.append(f"   Clarity {view.points}\n", style="bold")
    content.append(f"{_format_progress_bar(view.level_progress_percent)} ")
    content.append(
        f"{view.progress_in_level}/{view.points_per_level} to level {view.level + 1}\n\n"
    )
    totals = view.totals
    content.append(
        f"Completed {totals.completed}   Liked {totals.liked}   Saved {totals.favorited}\n"
    )
    content.append(f"{_format_progress_bar(view.overall_progress_percent)} ")
    content.append(f"{totals.completed}/{totals.catalog_size} topics explored")
    console.print(Panel(content, title="[bold]Your progress[/bold]", border_style="blue"))

    table = Table(title="By category", box=box.SIMPLE_HEAVY)
    table.add_column("Category", no_wrap=True)
    table.add_column("Progress", no_wrap=True)
    table.add_column("Done", justify="right", no_wrap=True)
    for stat in view.category_stats:
        table.add_row(
            f"[{_category_style(stat.category)}]{stat.category}[/]",
            _format_progress_bar(stat.percent),
            f"{stat.completed}/{stat.total}",
        )
    console.print(table)

    if view.recently_completed:
        console.print("[bold]Recently completed[/bold]")
        for topic in view.recently_completed:
            console.print(f"  [green]OK[/green] {topic.title} [dim]({topic.category})[/dim]")


@app.command("library")
def library(ctx: typer.Context) -> None:
    """List saved (favorited) topics."""
    cli: CLIContext = ctx.obj
    view = build_library_view(cli.catalog, cli.store.snapshot())
    if view.is_empty:
        console.print(
            Panel(
                "Add topics to your favorites to find them here.",
                title="[bold]Library is empty[/bold]",
                border_style="dim",
            )
        )
        return
    noun = "topic" if view.count == 1 else "topics"
    console.print(f"[bold]Library[/bold] ({view.count} saved {noun})")
    for topic in view.topics:
        console.print(
            Panel(
                Text(topic.summary, style="dim"),
                title=f"[bold]{topic.title}[/bold]",
                title_align="left",
                subtitle=f"{topic.id} [{_category_style(topic.category)}]{topic.category}[/]",
                subtitle_align="right",
                border_style=_category_style(topic.category),
            )
        )


@app.command("share")
def share(ctx: typer.Context) -> None:
    """Print a shareable summary of your progress."""
    cli: CLIContext = ctx.obj
    view = build_insights_view(cli.catalog, cli.store.snapshot(), cli.settings)
    console.print(build_share_message(view), markup=False, highlight=False)


@app.command("reset")
def reset(
    ctx: typer.Context,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Forget all likes, favorites, completions and points."""
    cli: CLIContext = ctx.obj
    if not yes and not Confirm.ask("Erase all your progress?", default=False, console=console):
        console.print("Cancelled.")
        raise typer.Exit(0)
    cli.store.reset()
    console.print("[green]User data cleared.[/green]")


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
