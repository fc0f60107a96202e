"""Unit tests for source discovery and loading."""

from pathlib import Path

import pytest

from nolintlint.shared.domain.exceptions import SourceLoadError
from nolintlint.source import iter_source_files, load_comment_groups


@pytest.fixture
def project(tmp_path):
    """Create a small Go project tree."""
    files = [
        "a.go",
        "notes.txt",
        "sub/c.go",
        "sub/deeper/d.go",
        "vendor/v.go",
        "testdata/t.go",
        "_hidden/h.go",
        ".git/g.go",
    ]
    for name in files:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("package p\n", encoding="utf-8")
    return tmp_path


def relative(paths, root):
    return [p.resolve().relative_to(root.resolve()).as_posix() for p in paths]


class TestIterSourceFiles:
    """Test pattern expansion."""

    def test_directory_is_not_recursive(self, project):
        assert relative(iter_source_files([str(project)]), project) == ["a.go"]

    def test_recursive_pattern_skips_special_directories(self, project):
        files = iter_source_files([f"{project}/..."])
        assert relative(files, project) == ["a.go", "sub/c.go", "sub/deeper/d.go"]

    def test_file_pattern(self, project):
        assert relative(iter_source_files([str(project / "notes.txt")]), project) == ["notes.txt"]

    def test_duplicates_are_dropped(self, project):
        files = iter_source_files([str(project / "a.go"), f"{project}/..."])
        assert relative(files, project) == ["a.go", "sub/c.go", "sub/deeper/d.go"]

    def test_empty_patterns_mean_current_directory(self, project, monkeypatch):
        monkeypatch.chdir(project)
        assert relative(iter_source_files([]), project) == ["a.go"]

    def test_dot_recursive(self, project, monkeypatch):
        monkeypatch.chdir(project / "sub")
        assert relative(iter_source_files(["./..."]), project) == ["sub/c.go", "sub/deeper/d.go"]

    def test_custom_extensions(self, project):
        files = iter_source_files([str(project)], extensions=[".txt", ".go"])
        assert relative(files, project) == ["a.go", "notes.txt"]

    def test_missing_path(self, tmp_path):
        with pytest.raises(SourceLoadError, match="no such file"):
            list(iter_source_files([str(tmp_path / "missing")]))

    def test_recursive_file_pattern(self, project):
        with pytest.raises(SourceLoadError, match="not a directory"):
            list(iter_source_files([f"{project / 'a.go'}/..."]))


class TestLoadCommentGroups:
    """Test load_comment_groups()."""

    def test_positions_name_the_file(self, tmp_path):
        path = tmp_path / "main.go"
        path.write_text("package main\n\n//nolint\nfunc main() {}\n", encoding="utf-8")

        groups = load_comment_groups(path)

        assert len(groups) == 1
        assert groups[0].position.filename == str(path)
        assert groups[0].position.line == 3

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "bad.go"
        path.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(SourceLoadError, match="cannot read"):
            load_comment_groups(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceLoadError):
            load_comment_groups(Path(tmp_path / "nope.go"))
