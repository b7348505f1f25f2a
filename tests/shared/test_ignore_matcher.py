"""
Tests for gitignore-style ignore patterns.
"""

from pathlib import Path, PurePosixPath

import pytest

from todoscan.shared.infrastructure.ignore_matcher import IgnoreMatcher, IgnorePattern

ROOT = PurePosixPath()


class TestIgnorePatternParse:
    """Test parsing of ignore file lines."""

    @pytest.mark.parametrize("line", ["", "   ", "# comment", "/", "\n"])
    def test_skips_blank_and_comment_lines(self, line):
        assert IgnorePattern.parse(line, ROOT) is None

    def test_plain_pattern(self):
        pattern = IgnorePattern.parse("*.log\n", ROOT)

        assert pattern == IgnorePattern("*.log", ROOT)

    def test_flags(self):
        """Test negation, directory-only and anchoring are recognised."""
        pattern = IgnorePattern.parse("!/build/", ROOT)

        assert pattern.pattern == "build"
        assert pattern.negated
        assert pattern.dir_only
        assert pattern.anchored

    def test_escaped_hash(self):
        pattern = IgnorePattern.parse("\\#notes", ROOT)

        assert pattern.pattern == "#notes"
        assert not pattern.negated


class TestIgnorePatternMatch:
    """Test matching of relative paths."""

    def test_unanchored_matches_name_at_any_depth(self):
        pattern = IgnorePattern.parse("*.log", ROOT)

        assert pattern.match(PurePosixPath("debug.log"), is_dir=False)
        assert pattern.match(PurePosixPath("a/b/debug.log"), is_dir=False)
        assert not pattern.match(PurePosixPath("debug.txt"), is_dir=False)

    def test_anchored_matches_from_base(self):
        pattern = IgnorePattern.parse("/build", ROOT)

        assert pattern.match(PurePosixPath("build"), is_dir=True)
        assert not pattern.match(PurePosixPath("src/build"), is_dir=True)

    def test_dir_only(self):
        pattern = IgnorePattern.parse("out/", ROOT)

        assert pattern.match(PurePosixPath("out"), is_dir=True)
        assert not pattern.match(PurePosixPath("out"), is_dir=False)

    def test_double_star(self):
        pattern = IgnorePattern.parse("docs/**/*.md", ROOT)

        assert pattern.match(PurePosixPath("docs/index.md"), is_dir=False)
        assert pattern.match(PurePosixPath("docs/a/b/page.md"), is_dir=False)
        assert not pattern.match(PurePosixPath("src/docs/page.md"), is_dir=False)

    def test_single_star_stays_in_directory(self):
        pattern = IgnorePattern.parse("src/*.go", ROOT)

        assert pattern.match(PurePosixPath("src/main.go"), is_dir=False)
        assert not pattern.match(PurePosixPath("src/pkg/main.go"), is_dir=False)

    def test_nested_base(self):
        """Test patterns only apply below the directory that declared them."""
        pattern = IgnorePattern.parse("*.gen.go", PurePosixPath("api"))

        assert pattern.match(PurePosixPath("api/types.gen.go"), is_dir=False)
        assert pattern.match(PurePosixPath("api/v1/types.gen.go"), is_dir=False)
        assert not pattern.match(PurePosixPath("types.gen.go"), is_dir=False)


class TestIgnoreMatcher:
    """Test loading ignore files from a directory tree."""

    def test_gitignore(self, tmp_path: Path):
        (tmp_path / ".gitignore").write_text("*.log\nbuild/\n")
        matcher = IgnoreMatcher(tmp_path)
        matcher.load_directory(tmp_path)

        assert matcher.should_ignore(tmp_path / "app.log", is_dir=False)
        assert matcher.should_ignore(tmp_path / "build", is_dir=True)
        assert not matcher.should_ignore(tmp_path / "main.go", is_dir=False)

    def test_todosignore(self, tmp_path: Path):
        (tmp_path / ".todosignore").write_text("generated.go\n")
        matcher = IgnoreMatcher(tmp_path)
        matcher.load_directory(tmp_path)

        assert matcher.should_ignore(tmp_path / "generated.go", is_dir=False)

    def test_negation_reincludes(self, tmp_path: Path):
        """Test the last matching pattern wins."""
        (tmp_path / ".gitignore").write_text("*.go\n!keep.go\n")
        matcher = IgnoreMatcher(tmp_path)
        matcher.load_directory(tmp_path)

        assert matcher.should_ignore(tmp_path / "drop.go", is_dir=False)
        assert not matcher.should_ignore(tmp_path / "keep.go", is_dir=False)

    def test_child_overrides_parent(self, tmp_path: Path):
        sub = tmp_path / "sub"
        sub.mkdir()
        (tmp_path / ".gitignore").write_text("*.py\n")
        (sub / ".gitignore").write_text("!main.py\n")
        matcher = IgnoreMatcher(tmp_path)
        matcher.load_directory(tmp_path)
        matcher.load_directory(sub)

        assert matcher.should_ignore(tmp_path / "main.py", is_dir=False)
        assert not matcher.should_ignore(sub / "main.py", is_dir=False)
        assert matcher.should_ignore(sub / "other.py", is_dir=False)

    def test_custom_ignore_file_names(self, tmp_path: Path):
        (tmp_path / ".gitignore").write_text("*.go\n")
        matcher = IgnoreMatcher(tmp_path, ignore_file_names=[])
        matcher.load_directory(tmp_path)

        assert not matcher.should_ignore(tmp_path / "main.go", is_dir=False)

    def test_no_ignore_files(self, tmp_path: Path):
        matcher = IgnoreMatcher(tmp_path)
        matcher.load_directory(tmp_path)

        assert not matcher.should_ignore(tmp_path / "anything", is_dir=False)
