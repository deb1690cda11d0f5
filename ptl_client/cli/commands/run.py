"""Run command implementation"""

import click

from ..utils.output import format_deploy_result, format_undeploy_result
from ...models import DeployResult, UndeployResult


@click.command()
@click.option('--event', envvar='GITHUB_EVENT_NAME',
              help='Trigger event (push deploys, delete undeploys) [env: GITHUB_EVENT_NAME]')
@click.option('--manifest', type=click.Path(dir_okay=False),
              help='Manifest path (default: search /app, /context, $GITHUB_WORKSPACE)')
@click.pass_context
def run(ctx, event, manifest):
    """Deploy or undeploy based on the CI trigger event

    This is what the GitHub Action runs. A push event deploys the
    application for the current branch or tag, a delete event terminates
    it. Any other event does nothing.

    Examples:

        # Inside a workflow
        ptl run

        # Locally, pretending to be a branch delete
        GITHUB_REF_TYPE=branch GITHUB_REF_NAME=feature-x ptl run --event delete
    """
    service = ctx.obj.connect(event=event, manifest=manifest)
    result = service.run()

    if isinstance(result, DeployResult):
        format_deploy_result(result)
    elif isinstance(result, UndeployResult):
        format_undeploy_result(result)
