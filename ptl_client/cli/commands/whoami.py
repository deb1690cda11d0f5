"""Whoami command implementation"""

import click

from ..utils.output import format_identity


@click.command()
@click.pass_context
def whoami(ctx):
    """Check credentials and show who they belong to"""
    service = ctx.obj.connect()
    format_identity(service.identity, service.settings.endpoint)
