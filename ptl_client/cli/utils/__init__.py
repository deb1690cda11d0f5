"""CLI utility functions"""

from .output import (
    console,
    format_identity,
    format_deploy_result,
    format_undeploy_result,
    format_pack_result,
)

__all__ = [
    'console',
    'format_identity',
    'format_deploy_result',
    'format_undeploy_result',
    'format_pack_result',
]
