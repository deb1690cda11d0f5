"""Pack command implementation"""

import glob
from pathlib import Path

import click

from ..utils.output import format_pack_result
from ...core.zippack import ZipPacker
from ...models import OperationStatus, PackResult


@click.command()
@click.argument('source_path', type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    '--output', '-o',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Output file (default: <directory name>.zip)'
)
@click.option(
    '--exclude', '-e',
    multiple=True,
    help='Extra exclude patterns (can be specified multiple times)'
)
def pack(source_path, output, exclude):
    """Build a zippack locally to see what would be shipped

    No credentials are needed and nothing is sent.

    Examples:
        ptl pack ./app
        ptl pack ./app -o /tmp/app.zip -e '*.log'
    """
    packer = ZipPacker()
    packer.ignore_globs.extend(exclude)

    source_path = source_path.resolve()
    if output is None:
        output = Path.cwd() / f"{source_path.name}.zip"
    output = output.resolve()

    # Never pack the archive being written, nor one left by an earlier run
    if source_path in output.parents:
        packer.ignore_globs.append(glob.escape(output.relative_to(source_path).as_posix()))

    result = PackResult(status=OperationStatus.IN_PROGRESS, source_path=str(source_path))

    archive, file_count = packer.archive(source_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(archive)

    result.output_path = str(output)
    result.size = len(archive)
    result.file_count = file_count
    result.complete(OperationStatus.SUCCESS)

    format_pack_result(result)
