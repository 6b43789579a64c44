"""
Capture CLI.

Command-line client built with Typer for taking screenshots, generating
PDFs and animated captures, and extracting content and metadata through
the Capture API.

Authentication is done via environment variables:
  CAPTURE_KEY    - Your Capture API key
  CAPTURE_SECRET - Your Capture API secret

Usage:
    capture screenshot https://example.com -X vw=1920 -o shot.png
    capture content https://example.com --format markdown
    capture metadata https://example.com --pretty
    capture --edge pdf https://example.com --dry-run
"""

import json
import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import typer

from .. import __version__
from ..client import Capture
from ..errors import CaptureError, MissingCredential
from ..types import RequestOptions, RequestType
from .options import parse_options
from .output import write_output

logger = logging.getLogger(__name__)

KEY_ENV = "CAPTURE_KEY"
SECRET_ENV = "CAPTURE_SECRET"

CONTENT_FORMATS = ("html", "text", "markdown")

app = typer.Typer(
    help="Capture CLI - Screenshots, PDFs, and content extraction. Documentation: https://docs.capture.page/",
    no_args_is_help=True,
    add_completion=False,
)


@dataclass(frozen=True)
class CLISettings:
    key: str
    secret: str
    use_edge: bool
    timeout: float


@app.callback()
def main_callback(
    ctx: typer.Context,
    edge: bool = typer.Option(False, "--edge", help="Use edge server for faster response"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    timeout: float = typer.Option(30.0, "--timeout", help="Request timeout in seconds"),
) -> None:
    """Capture CLI - Screenshots, PDFs, and content extraction."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[verbose] %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = CLISettings(
        key=os.environ.get(KEY_ENV, ""),
        secret=os.environ.get(SECRET_ENV, ""),
        use_edge=edge,
        timeout=timeout,
    )


def _new_client(ctx: typer.Context) -> Capture:
    settings: CLISettings = ctx.obj
    if not settings.key or not settings.secret:
        raise MissingCredential(f"{KEY_ENV} and {SECRET_ENV} environment variables are required")
    return Capture(settings.key, settings.secret, {
        "useEdge": settings.use_edge,
        "timeout": settings.timeout,
    })


@contextmanager
def _reporting(action: Optional[str] = None) -> Iterator[None]:
    """Turn SDK and file errors into a message on stderr and exit code 1."""
    try:
        yield
    except (CaptureError, OSError) as e:
        message = e.message if isinstance(e, CaptureError) else str(e)
        if action:
            message = f"{action}: {message}"
        typer.echo(f"Error: {message}", err=True)
        raise typer.Exit(code=1) from e


def _prepare(ctx: typer.Context, option: Optional[List[str]]) -> Tuple[Capture, RequestOptions]:
    opts = parse_options(option)
    return _new_client(ctx), opts


def _run_binary(
    ctx: typer.Context,
    request_type: RequestType,
    url: str,
    option: Optional[List[str]],
    output: Optional[str],
    dry_run: bool,
    action: str,
) -> None:
    with _reporting():
        client, opts = _prepare(ctx, option)
        if dry_run:
            typer.echo(client.build_url(request_type, url, opts))
            return

        logger.debug("%s %s", action.capitalize(), url)
        fetch = {
            RequestType.IMAGE: client.fetch_image,
            RequestType.PDF: client.fetch_pdf,
            RequestType.ANIMATED: client.fetch_animated,
        }[request_type]
        with _reporting(f"failed to {action}"):
            data = fetch(url, opts)
        write_output(data, output)


@app.command()
def screenshot(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Page to capture"),
    option: Optional[List[str]] = typer.Option(None, "--option", "-X", help="API option as key=value (can be repeated)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the request URL without executing"),
) -> None:
    """Take a screenshot of a web page.

    Example: capture screenshot https://example.com -X vw=1920 -X vh=1080 -o full.png
    """
    _run_binary(ctx, RequestType.IMAGE, url, option, output, dry_run, "capture screenshot")


@app.command()
def pdf(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Page to render"),
    option: Optional[List[str]] = typer.Option(None, "--option", "-X", help="API option as key=value (can be repeated)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the request URL without executing"),
) -> None:
    """Generate a PDF from a web page.

    Example: capture pdf https://example.com -X landscape=true -o landscape.pdf
    """
    _run_binary(ctx, RequestType.PDF, url, option, output, dry_run, "generate PDF")


@app.command()
def animated(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Page to record"),
    option: Optional[List[str]] = typer.Option(None, "--option", "-X", help="API option as key=value (can be repeated)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the request URL without executing"),
) -> None:
    """Create an animated recording (GIF or video) of a web page.

    Example: capture animated https://example.com -X duration=5 -o recording.gif
    """
    _run_binary(ctx, RequestType.ANIMATED, url, option, output, dry_run, "create animated capture")


@app.command()
def content(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Page to extract"),
    option: Optional[List[str]] = typer.Option(None, "--option", "-X", help="API option as key=value (can be repeated)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the request URL without executing"),
    output_format: str = typer.Option("markdown", "--format", help="Output format: html, text, markdown"),
    as_json: bool = typer.Option(False, "--json", help="Output raw JSON response"),
) -> None:
    """Extract content (HTML, text, or markdown) from a web page.

    Example: capture content https://example.com --format text
    """
    with _reporting():
        client, opts = _prepare(ctx, option)
        if dry_run:
            typer.echo(client.build_content_url(url, opts))
            return

        if not as_json and output_format not in CONTENT_FORMATS:
            typer.echo(f"Error: invalid format: {output_format} (use html, text, or markdown)", err=True)
            raise typer.Exit(code=1)

        logger.debug("Extracting content from %s", url)
        with _reporting("failed to extract content"):
            result = client.fetch_content(url, opts)

        if as_json:
            write_output(json.dumps(result, indent=2, ensure_ascii=False), output)
            return

        field = {"html": "html", "text": "textContent", "markdown": "markdown"}[output_format]
        write_output(result[field], output)


@app.command()
def metadata(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Page to inspect"),
    option: Optional[List[str]] = typer.Option(None, "--option", "-X", help="API option as key=value (can be repeated)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the request URL without executing"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty print JSON output"),
) -> None:
    """Extract metadata (title, description, Open Graph, etc.) from a web page.

    Example: capture metadata https://example.com --pretty
    """
    with _reporting():
        client, opts = _prepare(ctx, option)
        if dry_run:
            typer.echo(client.build_metadata_url(url, opts))
            return

        logger.debug("Extracting metadata from %s", url)
        with _reporting("failed to extract metadata"):
            result = client.fetch_metadata(url, opts)

        if pretty:
            data = json.dumps(result, indent=2, ensure_ascii=False)
        else:
            data = json.dumps(result, separators=(",", ":"), ensure_ascii=False)
        write_output(data, output)


@app.command()
def version() -> None:
    """Print the CLI version."""
    typer.echo(f"capture {__version__}")


def main() -> None:
    app(prog_name="capture")
