"""Tests for stale translation removal."""

import os
import sys
from pathlib import Path

import pytest

from localesync.core.pruner import prune_root

needs_symlinks = pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges")


class TestPruneRoot:
    def test_only_base_files_survive(self, tree, files_in):
        prune_root(tree, "en")
        assert files_in(tree) == {"en.txt", "greeting.en.txt", "nested/menu.en.md"}

    def test_directories_are_kept(self, tree):
        (tree / "nested" / "menu.en.md").unlink()
        prune_root(tree, "en")
        assert (tree / "nested").is_dir()

    def test_result_lists_removed_files(self, tree):
        result = prune_root(tree, "en")
        assert {p.name for p in result.removed} == {"greeting.es.txt", "notes.txt", "orphan.fr.md"}
        assert result.kept == 3
        assert result.errors == []

    def test_reports_each_removal(self, tree):
        events = []
        prune_root(tree, "en", on_progress=lambda e, p, d: events.append((e, p.name)))
        assert sorted(events) == [
            ("removed", "greeting.es.txt"),
            ("removed", "notes.txt"),
            ("removed", "orphan.fr.md"),
        ]

    def test_other_base_locale_removes_everything_else(self, tree, files_in):
        prune_root(tree, "es")
        assert files_in(tree) == {"greeting.es.txt"}

    def test_delete_failure_does_not_stop_walk(self, tree, files_in, monkeypatch):
        real_unlink = Path.unlink

        def flaky_unlink(self, *args, **kwargs):
            if self.name == "greeting.es.txt":
                raise PermissionError(13, "Permission denied")
            return real_unlink(self, *args, **kwargs)

        monkeypatch.setattr(Path, "unlink", flaky_unlink)
        events = []
        result = prune_root(tree, "en", on_progress=lambda e, p, d: events.append(e))

        assert "greeting.es.txt" in files_in(tree)
        assert "notes.txt" not in files_in(tree)
        assert "nested/orphan.fr.md" not in files_in(tree)
        assert len(result.errors) == 1
        path, message = result.errors[0]
        assert path.endswith("greeting.es.txt")
        assert "Permission denied" in message
        assert events.count("error") == 1

    @needs_symlinks
    def test_translated_symlink_is_removed_as_a_link(self, tmp_path):
        target = tmp_path / "shared" / "greeting.en.txt"
        target.parent.mkdir()
        target.write_text("x")
        link = tmp_path / "greeting.fr.txt"
        os.symlink(target, link)

        events = []
        result = prune_root(tmp_path, "en", on_progress=lambda e, p, d: events.append((e, p.name, d)))

        assert not os.path.lexists(link)
        assert target.read_text() == "x"
        assert result.removed == [link]
        assert result.errors == []
        assert ("removed", "greeting.fr.txt", "symbolic link") in events

    @needs_symlinks
    def test_dangling_symlink_is_removed(self, tmp_path):
        link = tmp_path / "old.de.txt"
        os.symlink(tmp_path / "gone.txt", link)

        prune_root(tmp_path, "en")

        assert not os.path.lexists(link)

    @needs_symlinks
    def test_base_symlink_is_kept(self, tmp_path):
        target = tmp_path / "source.txt"
        target.write_text("x")
        link = tmp_path / "greeting.en.txt"
        os.symlink(target, link)

        result = prune_root(tmp_path, "en")

        assert link.is_symlink()
        assert result.kept == 1
        assert [p.name for p in result.removed] == ["source.txt"]

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs named pipes")
    def test_special_file_is_reported(self, tmp_path):
        fifo = tmp_path / "pipe.fr"
        os.mkfifo(fifo)

        result = prune_root(tmp_path, "en")

        assert fifo.exists()
        assert result.errors == [(str(fifo), "skipped: not a regular file")]

    def test_missing_root_is_recorded(self, tmp_path):
        missing = tmp_path / "missing"
        events = []
        result = prune_root(missing, "en", on_progress=lambda e, p, d: events.append(e))

        assert result.removed == []
        assert result.errors == [
            (str(missing), f"cannot remove old translations in {missing}: no such directory")
        ]
        assert events == ["error"]

    def test_unreadable_subfolder_keeps_earlier_removals(self, tmp_path, unlistable):
        (tmp_path / "greeting.en.txt").write_text("hi")
        (tmp_path / "greeting.fr.txt").write_text("salut")
        (tmp_path / "zz").mkdir()
        (tmp_path / "zz" / "old.de.txt").write_text("x")
        unlistable("zz")

        result = prune_root(tmp_path, "en")

        assert result.removed == [tmp_path / "greeting.fr.txt"]
        assert sorted(os.listdir(tmp_path)) == ["greeting.en.txt", "zz"]
        assert len(result.errors) == 1
        root, message = result.errors[0]
        assert root == str(tmp_path)
        assert "cannot remove old translations in" in message
        assert "Permission denied" in message
