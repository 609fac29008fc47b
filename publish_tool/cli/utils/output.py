# publish_tool/cli/utils/output.py
"""Output formatting utilities"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ...api.exceptions import PublishToolError
from ...constants import EMOJI_ERROR, EMOJI_SUCCESS
from ...models import PublishResult
from ...utils.version_utils import VersionInfo

console = Console()


def format_publish_result(result: PublishResult, show_files: bool = False) -> None:
    """Format and display publish operation result"""
    lines = [
        f"[green]{EMOJI_SUCCESS}[/green] Publishing completed successfully!",
        "",
        f"[bold]Coordinates:[/bold] {result.coordinates}",
        f"[bold]Repository:[/bold] {result.repository_name}",
        f"[bold]Artifacts:[/bold] {result.artifact_count}",
        f"[bold]Files uploaded:[/bold] {len(result.uploaded_files)}",
        f"[bold]Duration:[/bold] {result.duration:.1f}s",
    ]

    if show_files and result.uploaded_files:
        lines.append("")
        lines.append("[bold]Uploaded:[/bold]")
        for path in result.uploaded_files:
            lines.append(f"  • {path}")

    panel = Panel(
        "\n".join(lines),
        title="Publish Result",
        border_style="green"
    )
    console.print(panel)


def format_error(error: PublishToolError, title: str = "Publish Error") -> None:
    """Display a publish-tool error with its code and kind"""
    code = f"[{error.error_code}] " if error.error_code else ""
    panel = Panel(
        f"[red]{EMOJI_ERROR} {code}{error.kind}:[/red] {error}",
        title=f"[bold red]{title}[/bold red]",
        border_style="red"
    )
    console.print(panel)


def format_version_info(info: VersionInfo, repository_ids: Optional[tuple] = None) -> None:
    """Display the classification of a version"""
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Version", info.version or "[dim](empty)[/dim]")
    table.add_row("Classification", f"[cyan]{info.classification.name}[/cyan]")
    if repository_ids:
        table.add_row("Repository", " or ".join(repository_ids))
    if info.base_version != info.version:
        table.add_row("Base version", info.base_version)
    if info.is_prerelease:
        table.add_row("Note", "[yellow]pre-release version[/yellow]")

    console.print(table)


def format_xml(document: bytes, title: Optional[str] = None) -> None:
    """Format and display XML with syntax highlighting"""
    syntax = Syntax(document.decode("utf-8"), "xml", theme="monokai", line_numbers=False)

    if title:
        panel = Panel(syntax, title=title, border_style="blue")
        console.print(panel)
    else:
        console.print(syntax)
