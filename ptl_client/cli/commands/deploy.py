"""Deploy and undeploy command implementations"""

import click

from ..utils.output import console, format_deploy_result, format_undeploy_result


@click.command()
@click.option('--manifest', type=click.Path(dir_okay=False),
              help='Manifest path (default: search /app, /context, $GITHUB_WORKSPACE)')
@click.option('--dry-run', is_flag=True, help='Build the payload without sending it')
@click.option('--show-payload', is_flag=True, help='Print the YAML payload (with --dry-run)')
@click.pass_context
def deploy(ctx, manifest, dry_run, show_payload):
    """Deploy the application regardless of the trigger event

    Every service with a build path is zip-packed and embedded in the
    manifest before it is submitted.

    Examples:

        ptl deploy
        ptl deploy --manifest ./ptl.yml --dry-run --show-payload
    """
    service = ctx.obj.connect(manifest=manifest)
    result = service.deploy_app(dry_run=dry_run)

    format_deploy_result(result)
    if dry_run and show_payload and result.payload:
        console.print(result.payload, markup=False, highlight=False)


@click.command()
@click.option('--manifest', type=click.Path(dir_okay=False),
              help='Manifest path (default: search /app, /context, $GITHUB_WORKSPACE)')
@click.pass_context
def undeploy(ctx, manifest):
    """Terminate the deployment for the current branch or tag

    Needs GITHUB_REF_TYPE and GITHUB_REF_NAME. Terminating something that
    is not deployed only prints a warning.

    Example:

        GITHUB_REF_TYPE=branch GITHUB_REF_NAME=feature-x ptl undeploy
    """
    service = ctx.obj.connect(manifest=manifest)
    result = service.undeploy_app()

    format_undeploy_result(result)
