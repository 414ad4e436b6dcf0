"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from fmtstring.core.constants import CSI


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: pip install fmtstring[cli]")

    app = typer.Typer(
        name="fmtstring",
        help="Parse, inspect and minimise ANSI true-color text.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log parser diagnostics")] = False,
    ) -> None:
        """Parse, inspect and minimise ANSI true-color text."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    def _load(path: Path, strict: bool = False, reset_both: bool = False):
        import fmtstring

        try:
            return fmtstring.load(path, strict=strict, reset_both_grounds=reset_both)
        except (fmtstring.FmtStringError, OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Cannot read {escape(str(path))}: {escape(str(e))}[/]")
            raise typer.Exit(1)

    @app.command()
    def optimise(
        source: Annotated[Path, typer.Argument(help="ANSI text file to optimise")],
        dest: Annotated[Optional[Path], typer.Argument(help="Output file (default: stdout)")] = None,
        strict: Annotated[bool, typer.Option("--strict", help="Fail on truncated escape sequences")] = False,
        reset_both: Annotated[bool, typer.Option("--reset-both", help="Treat SGR 39/49 as full resets")] = False,
    ) -> None:
        """Rewrite a file with the fewest possible color escapes."""
        from fmtstring.io.writer import save

        string = _load(source, strict, reset_both)

        if dest is None:
            print(string.optimised, end="")
            return

        original_size = source.stat().st_size
        written = save(string, dest)
        saved = original_size - written
        console.print(f"[green]Optimised {source.name}[/] → {dest.name}")
        console.print(f"{original_size} → {written} bytes ({saved} saved)")

    @app.command()
    def strip(
        source: Annotated[Path, typer.Argument(help="ANSI text file")],
    ) -> None:
        """Print the plain text with all colors removed."""
        from fmtstring.render.text import TextRenderer

        string = _load(source)
        print(TextRenderer().render(string), end="")

    @app.command()
    def info(
        source: Annotated[Path, typer.Argument(help="ANSI text file to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show character, color and escape statistics for a file."""
        import json

        string = _load(source)
        raw = source.read_bytes().decode("utf-8")
        optimised = string.optimised

        fg_colors = {cell.fg for cell in string}
        bg_colors = {cell.bg for cell in string}
        data = {
            "characters": len(string),
            "foreground_colors": len(fg_colors),
            "background_colors": len(bg_colors),
            "escapes_in": raw.count(CSI),
            "escapes_out": optimised.count(CSI),
            "bytes_in": len(raw.encode("utf-8")),
            "bytes_out": len(optimised.encode("utf-8")),
        }

        if json_output:
            print(json.dumps(data, indent=2))
        else:
            console.print(f"[bold cyan]{source.name}[/]")
            console.print(f"  [bold]Characters:[/] {data['characters']}")
            console.print(f"  [bold]Colors:[/]     {data['foreground_colors']} fg, {data['background_colors']} bg")
            console.print(f"  [bold]Escapes:[/]    {data['escapes_in']} → {data['escapes_out']}")
            console.print(f"  [bold]Bytes:[/]      {data['bytes_in']} → {data['bytes_out']}")

    return app
