"""Tests for candidate image discovery."""

import os
import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings, strategies as st

from imagedupes.errors import NotFoundError
from imagedupes.scan.walker import find_image_files, has_image_extension


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x")
    return path


class TestHasImageExtension:
    @pytest.mark.parametrize("name", ["a.png", "a.JPG", "a.Jpeg", "a.gif", "a.BMP", "dir.x/a.jpg"])
    def test_accepts_image_extensions(self, name):
        assert has_image_extension(Path(name))

    @pytest.mark.parametrize("name", ["a.txt", "a.webp", "a", ".png", "a.png.bak", "a.tiff"])
    def test_rejects_other_names(self, name):
        assert not has_image_extension(Path(name))

    def test_custom_extension_set(self):
        assert has_image_extension(Path("a.webp"), frozenset({"webp"}))
        assert not has_image_extension(Path("a.png"), frozenset({"webp"}))


class TestFindImageFiles:
    def test_missing_root_raises_not_found(self, tmp_path):
        """Test that a missing root fails before any scanning."""
        with pytest.raises(NotFoundError, match="Folder not found"):
            find_image_files(tmp_path / "missing")

    def test_file_root_raises_not_found(self, tmp_path):
        """Test that a regular file is not accepted as a root."""
        file_root = _touch(tmp_path / "a.png")
        with pytest.raises(NotFoundError):
            find_image_files(file_root)

    def test_empty_directory_returns_empty_list(self, tmp_path):
        assert find_image_files(tmp_path) == []

    def test_filters_by_extension(self, tmp_path):
        _touch(tmp_path / "a.jpg")
        _touch(tmp_path / "b.PNG")
        _touch(tmp_path / "notes.txt")
        _touch(tmp_path / "noext")

        result = find_image_files(tmp_path)

        assert [p.name for p in result] == ["a.jpg", "b.PNG"]

    def test_recursive_descends_into_subfolders(self, tmp_path):
        _touch(tmp_path / "top.png")
        _touch(tmp_path / "sub" / "mid.gif")
        _touch(tmp_path / "sub" / "deeper" / "low.bmp")

        result = find_image_files(tmp_path, recursive=True)

        assert {p.name for p in result} == {"top.png", "mid.gif", "low.bmp"}

    def test_shallow_ignores_subfolders(self, tmp_path):
        _touch(tmp_path / "top.png")
        _touch(tmp_path / "sub" / "mid.gif")

        result = find_image_files(tmp_path, recursive=False)

        assert result == [tmp_path / "top.png"]

    def test_directory_with_image_suffix_is_not_a_candidate(self, tmp_path):
        (tmp_path / "folder.png").mkdir()
        _touch(tmp_path / "folder.png" / "inner.jpg")

        assert find_image_files(tmp_path, recursive=False) == []
        assert find_image_files(tmp_path) == [tmp_path / "folder.png" / "inner.jpg"]

    def test_discovery_order_is_sorted_files_before_subfolders(self, tmp_path):
        _touch(tmp_path / "b.png")
        _touch(tmp_path / "a.png")
        _touch(tmp_path / "a_dir" / "z.png")

        result = find_image_files(tmp_path)

        assert result == [tmp_path / "a.png", tmp_path / "b.png", tmp_path / "a_dir" / "z.png"]

    def test_accepts_string_root(self, tmp_path):
        _touch(tmp_path / "a.png")
        assert find_image_files(str(tmp_path)) == [tmp_path / "a.png"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_broken_symlink_is_skipped(self, tmp_path):
        _touch(tmp_path / "real.png")
        os.symlink(tmp_path / "gone.png", tmp_path / "dangling.png")

        result = find_image_files(tmp_path)

        assert result == [tmp_path / "real.png"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_file_symlink_is_skipped(self, tmp_path):
        """A link and its target must not both become candidates."""
        target = _touch(tmp_path / "real.png")
        os.symlink(target, tmp_path / "link.png")

        assert find_image_files(tmp_path) == [target]
        assert find_image_files(tmp_path, recursive=False) == [target]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_to_file_outside_root_is_skipped(self, tmp_path):
        outside = _touch(tmp_path / "elsewhere" / "photo.jpg")
        root = tmp_path / "root"
        root.mkdir()
        os.symlink(outside, root / "photo.jpg")

        assert find_image_files(root) == []

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_directory_symlink_is_not_followed(self, tmp_path):
        _touch(tmp_path / "photos" / "a.png")
        os.symlink(tmp_path / "photos", tmp_path / "loop", target_is_directory=True)
        os.symlink(tmp_path, tmp_path / "photos" / "back", target_is_directory=True)

        result = find_image_files(tmp_path)

        assert result == [tmp_path / "photos" / "a.png"]

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="permission bits are not enforced for root",
    )
    def test_unreadable_subfolder_is_skipped(self, tmp_path):
        _touch(tmp_path / "a.png")
        locked = tmp_path / "locked"
        _touch(locked / "b.png")
        locked.chmod(0)
        try:
            result = find_image_files(tmp_path)
        finally:
            locked.chmod(0o755)

        assert result == [tmp_path / "a.png"]


_names = st.tuples(
    st.integers(min_value=0, max_value=2),
    st.sampled_from(["png", "PNG", "jpg", "JPEG", "jpeg", "gif", "Bmp", "txt", "webp", "tif", ""]),
)


class TestFindImageFilesProperties:
    @settings(max_examples=30, deadline=None)
    @given(entries=st.lists(_names, max_size=12))
    def test_recursive_scan_returns_exactly_allowed_files(self, entries):
        """For any tree, a recursive scan returns exactly the files with an allowed extension."""
        allowed = {"png", "jpg", "jpeg", "gif", "bmp"}
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            expected = set()
            for index, (depth, ext) in enumerate(entries):
                folder = root.joinpath(*[f"d{level}" for level in range(depth)])
                name = f"f{index}.{ext}" if ext else f"f{index}"
                path = _touch(folder / name)
                if ext.lower() in allowed:
                    expected.add(path)

            result = find_image_files(root)

            assert set(result) == expected
            assert len(result) == len(expected)
