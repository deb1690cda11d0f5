# ptl_client/core/zippack.py
"""Zippack builder

Turns a service build path into a zip archive, leaving out VCS metadata and
the manifest itself.
"""

import base64
import fnmatch
import logging
import os
import tempfile
import zipfile
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..api.exceptions import ZippackError
from ..constants import ZIPPACK_IGNORE_GLOBS, ZIPPACK_PREFIX, ZIPPACK_SUFFIX
from ..models.manifest import AppManifest, ServiceZippack
from ..utils.file_utils import format_size, remove_file

logger = logging.getLogger(__name__)


class ZipPacker:
    """Builds zippacks for service build paths"""

    def __init__(self, ignore_globs: Optional[List[str]] = None):
        """
        Initialize packer

        Args:
            ignore_globs: fnmatch patterns matched against paths relative to
                the build path (defaults to the VCS/manifest ignore list)
        """
        self.ignore_globs = list(ZIPPACK_IGNORE_GLOBS if ignore_globs is None else ignore_globs)

    def is_ignored(self, relative_path: str) -> bool:
        """
        Check a relative path against the ignore list

        Args:
            relative_path: POSIX path relative to the build path

        Returns:
            True if any ignore pattern matches
        """
        return any(fnmatch.fnmatch(relative_path, glob) for glob in self.ignore_globs)

    def iter_files(self, source_path: Path) -> Iterator[Tuple[Path, str]]:
        """
        Walk the build path and yield the files that go into the archive

        Args:
            source_path: Build path to walk

        Yields:
            (absolute path, relative archive name) in sorted order
        """
        for path in sorted(source_path.rglob('*')):
            relative_path = path.relative_to(source_path).as_posix()
            if self.is_ignored(relative_path):
                continue
            # Directory structure is implied by the file names
            if path.is_dir():
                continue
            yield path, relative_path

    def build_archive(self, source_path: Union[str, Path]) -> bytes:
        """Archive a build path and return the raw zip bytes"""
        archive, _ = self.archive(source_path)
        return archive

    def archive(self, source_path: Union[str, Path]) -> Tuple[bytes, int]:
        """
        Archive a build path

        Args:
            source_path: Directory to archive

        Returns:
            (raw zip archive bytes, number of files archived)

        Raises:
            ZippackError: If the path can't be read or the archive can't be written
        """
        source_path = Path(source_path)
        if not source_path.is_dir():
            raise ZippackError(f"Build path is not a directory: {source_path}")

        fd, archive_path = tempfile.mkstemp(prefix=ZIPPACK_PREFIX, suffix=ZIPPACK_SUFFIX)
        os.close(fd)

        file_count = 0
        try:
            with zipfile.ZipFile(archive_path, 'w', zipfile.ZIP_DEFLATED) as zipf:
                for path, relative_path in self.iter_files(source_path):
                    logger.debug(f" > Found {relative_path}")
                    zipf.write(path, arcname=relative_path)
                    file_count += 1

            # Archive is closed and flushed at this point
            with open(archive_path, 'rb') as f:
                return f.read(), file_count

        except (OSError, zipfile.BadZipFile) as e:
            raise ZippackError(f"Failed to build zippack for {source_path}: {e}") from e
        finally:
            remove_file(archive_path)

    def pack_services(self, manifest: AppManifest, base_dir: Union[str, Path]) -> Tuple[AppManifest, Dict[str, int]]:
        """
        Replace every service build path with its zippack

        Args:
            manifest: Manifest to pack
            base_dir: Directory relative build paths are resolved against

        Returns:
            Tuple of (packed manifest, {service: archive size})
        """
        base_dir = Path(base_dir)
        sizes = {}

        for service_name, build_path in list(manifest.build_paths()):
            source_path = (base_dir / build_path).resolve()
            logger.info(f"Found path to zippack: {source_path}")

            archive = self.build_archive(source_path)
            sizes[service_name] = len(archive)
            logger.debug(f"  > Resulting Zippack is {format_size(len(archive))}")

            manifest = manifest.with_zippack(
                service_name,
                ServiceZippack(
                    context=build_path,
                    zippack=base64.b64encode(archive).decode('ascii'),
                ),
            )

        return manifest, sizes


def build_archive(source_path: Union[str, Path]) -> bytes:
    """Archive a build path with the default ignore list"""
    return ZipPacker().build_archive(source_path)
