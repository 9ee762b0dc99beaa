"""Click CLI with compile, graph, and serve subcommands."""

from __future__ import annotations

import logging
from pathlib import Path

import click
import pyperclip

from frostbite import __version__
from frostbite.errors import CompileError
from frostbite.locator import find_scripts
from frostbite.models import CompileConfig, CompileResult
from frostbite.osts import OstsFormatError, OstsScript, read_osts, write_osts
from frostbite.pipeline import run_compile


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """frostbite: Shrink Office Scripts by dropping unused library methods."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_script(script: str) -> Path:
    """Use script as a path if it exists, otherwise search for it by name."""
    path = Path(script).expanduser()
    if path.is_file():
        return path
    if path.name != script:
        raise click.ClickException(f"File not found: {script}")

    matches = find_scripts(script)
    if not matches:
        raise click.ClickException(f"No file named {script!r} found")
    if len(matches) == 1:
        return matches[0]

    click.echo(f"Found {len(matches)} files named {script!r}:", err=True)
    for i, match in enumerate(matches, 1):
        click.echo(f"  {i}. {match}", err=True)
    choice = click.prompt(
        "Which one?", type=click.IntRange(1, len(matches)), default=1, err=True,
    )
    return matches[choice - 1]


def _load(path: Path) -> tuple[str, OstsScript | None]:
    """Return the code to compile and, for .osts input, its container."""
    try:
        if path.suffix == ".osts":
            container = read_osts(path)
            return container.body, container
        return path.read_text(encoding="utf-8"), None
    except OstsFormatError as e:
        raise click.ClickException(str(e))


def _compile(source: str) -> CompileResult:
    try:
        return run_compile(source)
    except CompileError as e:
        raise click.ClickException(str(e))


@cli.command("compile")
@click.argument("script")
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), help="Output file")
@click.option("--copy", "-c", is_flag=True, help="Copy the compiled script to the clipboard")
@click.option("--quiet", "-q", is_flag=True, help="Suppress the summary")
def compile_command(script: str, output: Path | None, copy: bool, quiet: bool):
    """Compile SCRIPT (a path or a bare file name) to its minimal form."""
    path = _resolve_script(script)
    source, container = _load(path)
    result = _compile(source)

    if copy:
        try:
            pyperclip.copy(result.output)
        except pyperclip.PyperclipException as e:
            raise click.ClickException(f"Could not copy to clipboard: {e}")

    if output is None:
        if not copy:
            click.echo(result.output, nl=False)
    elif container is not None and output.suffix == ".osts":
        write_osts(container.with_body(result.output), output)
    else:
        output.write_text(result.output, encoding="utf-8")

    if quiet:
        return

    click.echo(click.style(f"Compiled {path}", fg="cyan"), err=True)
    if result.split.has_library:
        click.echo(f"  Methods: {result.methods_kept}/{result.methods_total} kept", err=True)
    else:
        click.echo("  No library namespace found, output is the cleaned input", err=True)
    click.echo(f"  Size:    {result.input_size} -> {result.output_size} chars", err=True)
    if result.unknown_roots:
        click.echo(
            click.style(f"  Unknown: {', '.join(result.unknown_roots)}", fg="yellow"), err=True,
        )
    if result.aliased_roots:
        aliases = CompileConfig().root_aliases
        kept = ", ".join(f"{name} -> {aliases[name]}" for name in result.aliased_roots)
        click.echo(f"  Aliased: {kept}", err=True)
    if output is not None:
        click.echo(f"  Wrote {output}", err=True)
    if copy:
        click.echo("  Copied to clipboard", err=True)


@cli.command()
@click.argument("script")
@click.option("--required-only", is_flag=True, help="Only show methods the script needs")
def graph(script: str, required_only: bool):
    """Print the library call graph for SCRIPT."""
    path = _resolve_script(script)
    source, _ = _load(path)
    result = _compile(source)

    if not result.split.has_library:
        click.echo("No library namespace found.")
        return

    required = set(result.required)
    for name in sorted(result.graph.edges):
        if required_only and name not in required:
            continue
        callees = ", ".join(result.graph.callees(name))
        color = "green" if name in required else "white"
        click.echo(f"{click.style(name, fg=color)} -> {callees}")

    click.echo()
    click.echo(f"Required ({len(result.required)}): {', '.join(result.required)}")


@cli.command()
@click.option("--port", "-p", default=8420, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
@click.option("--open/--no-open", default=False, help="Open the API docs in a browser")
def serve(port: int, host: str, open: bool):
    """Start the web API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the web API. "
            "Install with: pip install 'frostbite[web]'"
        )

    from frostbite.web import create_app

    click.echo(f"Starting frostbite web API at http://{host}:{port}")

    if open:
        import webbrowser
        import threading
        threading.Timer(1.0, lambda: webbrowser.open(f"http://{host}:{port}/docs")).start()

    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
