"""Typer CLI application for the demo programs."""

from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: uv pip install cod[cli]")

    from cod.cli.demos import DEMOS, run
    from cod.session import Session

    app = typer.Typer(
        name="cod",
        help="Draw shapes, text and colors in the terminal with ANSI escapes.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.command()
    def demo(
        name: Annotated[str, typer.Argument(help="Demo to run")],
    ) -> None:
        """Run one of the demo programs."""
        if name not in DEMOS:
            console.print(f"[red]Unknown demo: {name}[/]")
            console.print(f"Available: {', '.join(DEMOS)}")
            raise typer.Exit(1)
        run(name, Session())

    @app.command("list")
    def list_demos() -> None:
        """List the available demos."""
        for name, func in DEMOS.items():
            summary = (func.__doc__ or "").strip().split("\n")[0]
            console.print(f"[bold]{name}[/]  {summary}")

    @app.command()
    def size(
        fallback: Annotated[Optional[str], typer.Option("--fallback", "-f", help="COLSxROWS used when not a terminal")] = None,
    ) -> None:
        """Print the terminal size."""
        from cod.term.terminal import Terminal, TerminalSize

        default = None
        if fallback:
            try:
                cols, rows = (int(part) for part in fallback.lower().split("x"))
            except ValueError:
                console.print(f"[red]Invalid size: {fallback}[/] (expected COLSxROWS)")
                raise typer.Exit(1)
            default = TerminalSize(cols, rows)
        current = Terminal.size_or(default)
        console.print(f"{current.cols}x{current.rows}")

    return app
