# ptl_client/core/repo_context.py
"""Repository context from CI environment"""

import os
from typing import Mapping, Optional

from ..constants import ENV_REF_NAME, ENV_REF_TYPE
from ..models.manifest import RepoContext


def resolve_context(environ: Optional[Mapping[str, str]] = None) -> Optional[RepoContext]:
    """
    Work out which branch or tag triggered the run

    Args:
        environ: Environment to read (defaults to os.environ)

    Returns:
        RepoContext if both ref type and ref name are set, else None
    """
    if environ is None:
        environ = os.environ

    ref_type = environ.get(ENV_REF_TYPE)
    ref_name = environ.get(ENV_REF_NAME)

    if not ref_type or not ref_name:
        return None

    return RepoContext(type=ref_type, name=ref_name)
