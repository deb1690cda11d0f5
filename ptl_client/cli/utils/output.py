# ptl_client/cli/utils/output.py
"""Output formatting utilities"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...constants import EMOJI_SUCCESS, EMOJI_WARNING
from ...models import DeployResult, Identity, PackResult, UndeployResult
from ...utils.file_utils import format_size

console = Console()


def format_identity(identity: Identity, endpoint: Optional[str] = None) -> None:
    """Display the resolved caller identity"""
    lines = [
        f"[bold]Username:[/bold] {identity.username}",
        f"[bold]Email:[/bold] {identity.email}",
        f"[bold]Organisation:[/bold] {identity.org_name}",
    ]
    if endpoint:
        lines.append(f"[bold]Endpoint:[/bold] {endpoint}")

    console.print(Panel("\n".join(lines), title="Identity", border_style="cyan"))


def format_deploy_result(result: DeployResult) -> None:
    """Format and display deploy operation result"""
    if result.dry_run:
        title = "Deploy Dry Run"
        header = "[yellow]Dry run:[/yellow] nothing was sent"
        border = "yellow"
    else:
        title = "Deploy Result"
        header = f"[green]{EMOJI_SUCCESS}[/green] '{result.app_name}' submitted for deployment"
        border = "green"

    lines = [header, ""]
    if result.repo_context:
        lines.append(f"[bold]Context:[/bold] {result.repo_context}")
    if result.zippacks:
        lines.append(f"[bold]Zippacks:[/bold] {len(result.zippacks)}")
    if result.services:
        lines.append(f"[bold]Services:[/bold] {', '.join(result.services)}")
    if result.duration is not None:
        lines.append(f"[dim]Duration: {result.duration:.2f}s[/dim]")

    console.print(Panel("\n".join(lines), title=title, border_style=border))

    if result.zippacks:
        table = Table(title="Zippacks", box=box.ROUNDED)
        table.add_column("Service", style="cyan")
        table.add_column("Size", justify="right")
        for service_name, size in result.zippacks.items():
            table.add_row(service_name, format_size(size))
        console.print(table)


def format_undeploy_result(result: UndeployResult) -> None:
    """Format and display undeploy operation result"""
    context = f" ({result.repo_context})" if result.repo_context else ""

    if not result.existed:
        console.print(Panel(
            f"[yellow]{EMOJI_WARNING}[/yellow] Nothing deployed for '{result.app_name}'{context}",
            title="Undeploy Result",
            border_style="yellow"
        ))
        return

    lines = [f"[green]{EMOJI_SUCCESS}[/green] '{result.app_name}'{context} terminated"]
    if result.services:
        lines.append("")
        lines.append("[bold]Terminated:[/bold]")
        for service_name in result.services:
            lines.append(f"  • {service_name}")

    console.print(Panel("\n".join(lines), title="Undeploy Result", border_style="green"))


def format_pack_result(result: PackResult) -> None:
    """Format and display pack operation result"""
    lines = [
        f"[green]{EMOJI_SUCCESS}[/green] Zippack created successfully!",
        f"",
        f"[bold]Source:[/bold] {result.source_path}",
        f"[bold]Archive:[/bold] {result.output_path}",
        f"[bold]Files:[/bold] {result.file_count}",
        f"[bold]Size:[/bold] {format_size(result.size)}",
    ]

    console.print(Panel("\n".join(lines), title="Pack Result", border_style="green"))
