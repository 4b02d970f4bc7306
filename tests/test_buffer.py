"""Tests for the export buffer."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from clialgo.core import FileKind, build_entry
from clialgo.errors import ExportError
from clialgo.export import Buffer, export_path


def make_root(tmp_path: Path) -> tuple[Path, Path]:
    root = tmp_path / "notes"
    root.mkdir()
    export_folder = root / "export"
    export_folder.mkdir()
    return root, export_folder


class TestBuffer:
    """Test staging and exporting buffered entries."""

    def test_update_replaces_contents(self, tmp_path: Path) -> None:
        buffer = Buffer(tmp_path, tmp_path / "export")
        first = build_entry("queue", "LINKED_LIST", FileKind.NOTE)
        second = build_entry("heap", "BINARY_HEAP", FileKind.CODE)

        buffer.update_buffer([first])
        buffer.update_buffer([second])

        assert buffer.entries == (second,)
        assert len(buffer) == 1

    def test_is_empty(self, tmp_path: Path) -> None:
        buffer = Buffer(tmp_path, tmp_path / "export")
        assert buffer.is_empty()
        buffer.update_buffer([build_entry("queue", "LINKED_LIST", FileKind.NOTE)])
        assert not buffer.is_empty()
        buffer.update_buffer([])
        assert buffer.is_empty()

    def test_export_empty_buffer_is_a_no_op(self, tmp_path: Path) -> None:
        root, export_folder = make_root(tmp_path)
        ui = MagicMock()
        buffer = Buffer(root, export_folder, ui)

        report = buffer.export_buffer()

        assert report.exported == []
        assert report.errors == []
        assert list(export_folder.iterdir()) == []
        assert ui.method_calls == []

    def test_export_copies_files(self, tmp_path: Path) -> None:
        root, export_folder = make_root(tmp_path)
        (root / "queue.txt").write_text("FIFO")
        (root / "heap.cpp").write_text("// heap")
        buffer = Buffer(root, export_folder)
        buffer.update_buffer(
            [
                build_entry("queue", "LINKED_LIST", FileKind.NOTE),
                build_entry("heap", "BINARY_HEAP", FileKind.CODE),
            ]
        )

        report = buffer.export_buffer()

        assert report.exported == [export_folder / "queue.txt", export_folder / "heap.cpp"]
        assert (export_folder / "queue.txt").read_text() == "FIFO"
        assert (export_folder / "heap.cpp").read_text() == "// heap"
        # Sources are copied, not moved.
        assert (root / "queue.txt").exists()

    def test_missing_folder_is_recreated_without_writes(self, tmp_path: Path) -> None:
        root = tmp_path / "notes"
        root.mkdir()
        (root / "queue.txt").write_text("FIFO")
        export_folder = root / "export"
        ui = MagicMock()
        buffer = Buffer(root, export_folder, ui)
        buffer.update_buffer([build_entry("queue", "LINKED_LIST", FileKind.NOTE)])

        report = buffer.export_buffer()

        assert report.folder_recreated
        assert report.exported == []
        assert export_folder.is_dir()
        assert list(export_folder.iterdir()) == []
        ui.print_export_folder_missing.assert_called_once()
        assert len(buffer) == 1

    def test_missing_source_is_skipped(self, tmp_path: Path) -> None:
        root, export_folder = make_root(tmp_path)
        (root / "heap.cpp").write_text("// heap")
        ui = MagicMock()
        buffer = Buffer(root, export_folder, ui)
        buffer.update_buffer(
            [
                build_entry("queue", "LINKED_LIST", FileKind.NOTE),
                build_entry("heap", "BINARY_HEAP", FileKind.CODE),
            ]
        )

        report = buffer.export_buffer()

        assert report.exported == [export_folder / "heap.cpp"]
        assert [error.entry_name for error in report.errors] == ["queue"]
        ui.print_file_missing.assert_called_once_with("queue")

    def test_export_path_uses_entry_name(self, tmp_path: Path) -> None:
        entry = build_entry("bfs", "GRAPH_TRAVERSAL", FileKind.CODE)
        assert export_path(tmp_path, entry) == tmp_path / "bfs.cpp"

    def test_export_path_stays_in_export_folder(self, tmp_path: Path) -> None:
        entry = build_entry("../victim", "SORTING", FileKind.NOTE)
        with pytest.raises(ExportError):
            export_path(tmp_path / "export", entry)

    def test_export_drains_buffer(self, tmp_path: Path) -> None:
        root, export_folder = make_root(tmp_path)
        (root / "queue.txt").write_text("FIFO")
        buffer = Buffer(root, export_folder)
        buffer.update_buffer([build_entry("queue", "LINKED_LIST", FileKind.NOTE)])

        buffer.export_buffer()

        assert buffer.is_empty()
        assert buffer.export_buffer().exported == []

    def test_pass_with_skipped_entries_drains_buffer(self, tmp_path: Path) -> None:
        root, export_folder = make_root(tmp_path)
        buffer = Buffer(root, export_folder, MagicMock())
        buffer.update_buffer([build_entry("queue", "LINKED_LIST", FileKind.NOTE)])

        report = buffer.export_buffer()

        assert [error.entry_name for error in report.errors] == ["queue"]
        assert buffer.is_empty()

    def test_export_folder_is_a_file(self, tmp_path: Path) -> None:
        root = tmp_path / "notes"
        root.mkdir()
        (root / "queue.txt").write_text("FIFO")
        (root / "export").write_text("not a folder")
        ui = MagicMock()
        buffer = Buffer(root, root / "export", ui)
        buffer.update_buffer([build_entry("queue", "LINKED_LIST", FileKind.NOTE)])

        report = buffer.export_buffer()

        assert report.exported == []
        assert not report.folder_recreated
        assert [error.entry_name for error in report.errors] == ["export"]
        ui.print_export_fail.assert_called_once()
        assert (root / "export").read_text() == "not a folder"
        assert len(buffer) == 1

    def test_entry_escaping_export_folder_is_skipped(self, tmp_path: Path) -> None:
        root, export_folder = make_root(tmp_path)
        (tmp_path / "victim.txt").write_text("ORIGINAL")
        (root / "victim.txt").write_text("KEEP")
        (root / "queue.txt").write_text("FIFO")
        ui = MagicMock()
        buffer = Buffer(root, export_folder, ui)
        buffer.update_buffer(
            [
                build_entry("../victim", "SORTING", FileKind.NOTE),
                build_entry("queue", "LINKED_LIST", FileKind.NOTE),
            ]
        )

        report = buffer.export_buffer()

        assert report.exported == [export_folder / "queue.txt"]
        assert [error.entry_name for error in report.errors] == ["../victim"]
        assert (root / "victim.txt").read_text() == "KEEP"
        ui.print_export_fail.assert_called_once()
