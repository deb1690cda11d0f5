"""Tests for the zippack builder."""

import base64
import io
import zipfile

import pytest

from ptl_client.api.exceptions import ZippackError
from ptl_client.core.manifest_loader import parse_manifest
from ptl_client.core.zippack import ZipPacker, build_archive


def archive_names(data):
    with zipfile.ZipFile(io.BytesIO(data)) as zipf:
        return sorted(zipf.namelist())


@pytest.fixture
def source_tree(tmp_path):
    """Build path containing every kind of entry the packer must skip."""
    root = tmp_path / "src"
    files = {
        "index.js": "main",
        "lib/util.js": "util",
        "lib/deep/nested.txt": "nested",
        ".git/config": "git config",
        ".git/objects/ab/cdef": "blob",
        ".github/workflows/ci.yml": "on: push",
        ".gitignore": "node_modules",
        ".gitmodules": "[submodule]",
        "ptl.yml": "name: demo",
        "sub/ptl.yml": "nested manifest",
        ".env": "SECRET=1",
    }
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    (root / "empty_dir").mkdir()
    return root


class TestIgnoreRules:
    """Test the fixed ignore list."""

    @pytest.mark.parametrize("path", [
        ".git/config",
        ".git/objects/ab/cdef",
        ".github/workflows/ci.yml",
        ".gitignore",
        ".gitmodules",
        "ptl.yml",
    ])
    def test_ignored(self, path):
        assert ZipPacker().is_ignored(path)

    @pytest.mark.parametrize("path", [
        "index.js",
        "sub/ptl.yml",
        ".env",
        "src/.gitignore",
        ".git",
    ])
    def test_not_ignored(self, path):
        assert not ZipPacker().is_ignored(path)

    def test_custom_ignore_list(self):
        packer = ZipPacker(ignore_globs=["*.log"])
        assert packer.is_ignored("debug.log")
        assert not packer.is_ignored(".gitignore")


class TestBuildArchive:
    """Test archive construction."""

    def test_only_filtered_files_are_archived(self, source_tree):
        data = build_archive(source_tree)

        assert archive_names(data) == [
            ".env",
            "index.js",
            "lib/deep/nested.txt",
            "lib/util.js",
            "sub/ptl.yml",
        ]

    def test_no_directory_entries(self, source_tree):
        with zipfile.ZipFile(io.BytesIO(build_archive(source_tree))) as zipf:
            assert not any(info.is_dir() for info in zipf.infolist())

    def test_contents_round_trip(self, source_tree, tmp_path):
        data = build_archive(source_tree)
        target = tmp_path / "extracted"
        with zipfile.ZipFile(io.BytesIO(data)) as zipf:
            zipf.extractall(target)

        extracted = sorted(
            p.relative_to(target).as_posix() for p in target.rglob("*") if p.is_file()
        )
        assert extracted == archive_names(data)
        for relative in extracted:
            assert (target / relative).read_bytes() == (source_tree / relative).read_bytes()

    def test_same_content_every_run(self, source_tree):
        first = build_archive(source_tree)
        second = build_archive(source_tree)

        with zipfile.ZipFile(io.BytesIO(first)) as a, zipfile.ZipFile(io.BytesIO(second)) as b:
            assert a.namelist() == b.namelist()
            for name in a.namelist():
                assert a.read(name) == b.read(name)

    def test_empty_directory_gives_empty_archive(self, tmp_path):
        assert archive_names(build_archive(tmp_path)) == []

    def test_missing_path_raises(self, tmp_path):
        with pytest.raises(ZippackError):
            build_archive(tmp_path / "nope")

    def test_file_path_raises(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("x")
        with pytest.raises(ZippackError):
            build_archive(path)

    def test_temporary_file_is_removed(self, source_tree, tmp_path, monkeypatch):
        scratch = tmp_path / "scratch"
        scratch.mkdir()
        monkeypatch.setattr("tempfile.tempdir", str(scratch))

        build_archive(source_tree)

        assert list(scratch.iterdir()) == []

    def test_temporary_file_is_removed_on_error(self, source_tree, tmp_path, monkeypatch):
        scratch = tmp_path / "scratch"
        scratch.mkdir()
        monkeypatch.setattr("tempfile.tempdir", str(scratch))

        def broken_write(self, *args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr(zipfile.ZipFile, "write", broken_write)

        with pytest.raises(ZippackError, match="disk full"):
            build_archive(source_tree)
        assert list(scratch.iterdir()) == []


class TestPackServices:
    """Test manifest packing."""

    def test_only_services_with_build_are_packed(self, tmp_path):
        for name in ("api", "worker"):
            (tmp_path / name).mkdir()
            (tmp_path / name / "main.py").write_text(name)
        (tmp_path / "ptl.yml").write_text(
            "name: demo\n"
            "services:\n"
            "  api: {build: ./api, port: 80}\n"
            "  worker: {build: worker}\n"
            "  db: {image: postgres}\n"
            "  cache: {image: redis}\n"
        )
        manifest = parse_manifest(tmp_path / "ptl.yml")

        packed, sizes = ZipPacker().pack_services(manifest, tmp_path)

        services = packed.services
        assert set(sizes) == {"api", "worker"}
        assert services["api"]["build"]["context"] == "./api"
        assert services["api"]["port"] == 80
        assert services["worker"]["build"]["context"] == "worker"
        assert services["db"] == {"image": "postgres"}
        assert services["cache"] == {"image": "redis"}

        archive = base64.b64decode(services["api"]["build"]["zippack"])
        assert archive_names(archive) == ["main.py"]
        assert sizes["api"] == len(archive)

    def test_original_manifest_is_untouched(self, app_dir):
        manifest = parse_manifest(app_dir / "ptl.yml")

        ZipPacker().pack_services(manifest, app_dir)

        assert manifest.services["web"]["build"] == "./app"

    def test_missing_build_path_aborts(self, tmp_path):
        (tmp_path / "ptl.yml").write_text("name: demo\nservices:\n  web: {build: ./missing}\n")
        manifest = parse_manifest(tmp_path / "ptl.yml")

        with pytest.raises(ZippackError):
            ZipPacker().pack_services(manifest, tmp_path)
