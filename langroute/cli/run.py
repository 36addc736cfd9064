"""CLI commands."""
from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from langroute import __version__
from langroute.client.http_client import TranslationClient
from langroute.client.resolver import LOADING_FALLBACK, LanguageResolver
from langroute.config.logging_config import setup_logging
from langroute.config.settings import settings
from langroute.routing import RouteMatch, language_links, match_route, nav_links, switch_language
from langroute.translations.errors import TranslationError
from langroute.translations.store import TranslationStore

app = typer.Typer(
    add_completion=False,
    help="langroute - Language-routed site and translation server",
)
console = Console()


@app.command()
def serve(
    host: str = typer.Option(settings.server.host, "--host", help="Interface to bind"),
    port: int = typer.Option(settings.server.port, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the translation server and site.

    Examples:
        langroute serve
        langroute serve --port 8080 --reload
    """
    import uvicorn

    from app.main import create_app

    setup_logging(settings.log_level)
    settings.server.host = host
    settings.server.port = port

    if reload:
        # Reload needs an import string; the factory rebuilds settings from env
        uvicorn.run(
            "app.main:create_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            log_level=settings.log_level.lower(),
        )
    else:
        uvicorn.run(
            create_app(settings),
            host=host,
            port=port,
            log_level=settings.log_level.lower(),
        )


@app.command()
def fetch(
    lang: str = typer.Argument(..., help="Language code, e.g. en or fr-CA"),
    server: str | None = typer.Option(None, "--server", "-s", help="Translation server URL"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON bundle"),
) -> None:
    """Fetch one translation bundle from a running server.

    Example:
        langroute fetch fr --server http://localhost:3001
    """
    client = TranslationClient(server)
    try:
        with console.status(f"[bold blue]{LOADING_FALLBACK}", spinner="dots"):
            bundle = client.fetch(lang)
    except TranslationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    finally:
        client.close()

    if as_json:
        console.print_json(data=bundle)
        return

    table = Table(title=f"Translations: {lang}")
    table.add_column("Key", style="cyan")
    table.add_column("Text")
    if isinstance(bundle, dict):
        for key, value in bundle.items():
            table.add_row(str(key), str(value))
    console.print(table)


@app.command()
def switch(
    path: str = typer.Argument(..., help="Current path, e.g. /en/about"),
    lang: str = typer.Argument(..., help="Language to switch to"),
) -> None:
    """Print ``path`` with its language segment replaced.

    Example:
        langroute switch /en/about fr
    """
    console.print(switch_language(path, lang), markup=False, highlight=False)


@app.command()
def browse(
    paths: list[str] = typer.Argument(..., help="Paths to visit in order"),
    server: str | None = typer.Option(None, "--server", "-s", help="Translation server URL"),
    timeout: float = typer.Option(30.0, "--timeout", "-t", help="Seconds to wait per load"),
) -> None:
    """Visit paths like a browser would and render each page.

    Example:
        langroute browse / /fr/about /en/unknown-page
    """
    client = TranslationClient(server)
    resolver = LanguageResolver(client.fetch)
    default = settings.languages.default_language

    try:
        for path in paths:
            match = match_route(path, default)
            if match.kind == "redirect":
                console.print(f"[dim]{escape(path)} -> redirect to {match.location}[/dim]")
                path = match.location
                match = match_route(path, default)

            resolver.resolve_active_language(match.language)
            if resolver.is_loading:
                with console.status(f"[bold blue]{LOADING_FALLBACK}", spinner="dots"):
                    if not resolver.wait(timeout):
                        console.print(f"[red]Error:[/red] Timed out loading {match.language!r}")
                        raise typer.Exit(1)

            if resolver.active_language != match.language:
                console.print(
                    f"[yellow]Warning:[/yellow] {escape(str(resolver.last_error or 'translations unavailable'))}"
                )

            console.print(_render(path, match, resolver))
    finally:
        resolver.shutdown(wait=False)
        client.close()


def _render(path: str, match: RouteMatch, resolver: LanguageResolver) -> Panel:
    """Text rendition of the header and page body."""
    t = resolver.translate

    header = "  ".join(escape(t(key)) for key, _ in nav_links(match.language))
    switcher = "  ".join(
        f"{label} ({escape(href)})"
        for label, href in language_links(path, settings.languages.switcher_languages)
    )

    prefix = match.page or "notFound"
    body = f"[bold]{escape(t(f'{prefix}.title'))}[/bold]\n{escape(t(f'{prefix}.body'))}"

    return Panel(
        f"{header}\n[dim]{switcher}[/dim]\n\n{body}",
        title=escape(path),
        border_style="cyan" if match.kind == "page" else "red",
    )


@app.command()
def languages(
    server: str | None = typer.Option(
        None, "--server", "-s", help="Ask a running server instead of reading local bundles"
    ),
) -> None:
    """List languages that have a translation bundle."""
    if server:
        client = TranslationClient(server)
        try:
            listing = client.list_languages()
        except TranslationError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        finally:
            client.close()
        codes, default = listing.get("languages", []), listing.get("default")
    else:
        codes = TranslationStore().available_languages()
        default = settings.languages.default_language

    for code in codes:
        marker = " (default)" if code == default else ""
        console.print(f"{code}{marker}", highlight=False)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]langroute[/bold] v{__version__}")
    console.print("[dim]Language-routed site and translation server[/dim]")


if __name__ == "__main__":
    app()
