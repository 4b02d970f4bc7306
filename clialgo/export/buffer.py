"""Staging and export of filtered files for clialgo."""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from ..core.files import FileEntry
from ..errors import ExportError

if TYPE_CHECKING:
    from ..ui import Ui


@dataclass
class ExportReport:
    """Outcome of one export call."""

    exported: list[Path] = field(default_factory=list)
    errors: list[ExportError] = field(default_factory=list)
    folder_recreated: bool = False


def export_path(export_folder: Path, entry: FileEntry) -> Path:
    """Destination of ``entry``: its name plus the extension of its source file.

    Raises:
        ExportError: If the destination would fall outside ``export_folder``.
    """
    target = export_folder / f"{entry.name}{Path(entry.path).suffix}"
    if target.resolve().parent != export_folder.resolve():
        raise ExportError(entry.name, "Destination is outside the export folder.")
    return target


class Buffer:
    """Hold the entries produced by the last list or filter, ready for export."""

    def __init__(
        self, root_dir: Path, export_folder: Path, ui: Ui | None = None
    ) -> None:
        self.root_dir = Path(root_dir)
        self.export_folder = Path(export_folder)
        self.ui = ui
        self._entries: tuple[FileEntry, ...] = ()

    @property
    def entries(self) -> tuple[FileEntry, ...]:
        return self._entries

    def update_buffer(self, entries: Iterable[FileEntry]) -> None:
        """Replace the buffered entries with ``entries``."""
        self._entries = tuple(entries)
        logger.debug(f"Buffer now holds {len(self._entries)} entries")

    def is_empty(self) -> bool:
        return not self._entries

    def export_buffer(self) -> ExportReport:
        """Copy every buffered file into the export folder.

        If the export folder is missing it is recreated and nothing is copied;
        the user is asked to run the export again. A buffered file missing from
        the root directory is reported and skipped, and the remaining files are
        still exported. The buffer is emptied once a pass over the entries has
        run, and kept when the folder had to be recreated or could not be.

        Returns:
            ExportReport with the written paths and per-entry errors.
        """
        report = ExportReport()
        if self.is_empty():
            return report

        if not self.export_folder.is_dir():
            logger.warning(
                f"Export folder {self.export_folder} is missing, recreating it"
            )
            try:
                self.export_folder.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.error(f"Cannot create export folder {self.export_folder}: {e}")
                report.errors.append(ExportError(self.export_folder.name, str(e)))
                if self.ui is not None:
                    self.ui.print_export_fail(self.export_folder.name, str(e))
                return report
            report.folder_recreated = True
            if self.ui is not None:
                self.ui.print_export_folder_missing()
            return report

        for entry in self._entries:
            source = self.root_dir / entry.path
            if not source.is_file():
                logger.warning(f"Cannot export {entry.name}: {source} is missing")
                report.errors.append(
                    ExportError(entry.name, "File missing from root directory.")
                )
                if self.ui is not None:
                    self.ui.print_file_missing(entry.name)
                continue

            try:
                target = export_path(self.export_folder, entry)
                shutil.copyfile(source, target)
            except ExportError as e:
                logger.warning(f"Cannot export {entry.name}: {e.reason}")
                report.errors.append(e)
                if self.ui is not None:
                    self.ui.print_export_fail(entry.name, e.reason)
                continue
            except OSError as e:
                logger.warning(f"Cannot export {entry.name}: {e}")
                report.errors.append(ExportError(entry.name, str(e)))
                if self.ui is not None:
                    self.ui.print_export_fail(entry.name, str(e))
                continue
            report.exported.append(target)

        logger.debug(
            f"Exported {len(report.exported)} of {len(self._entries)} entries "
            f"to {self.export_folder}"
        )
        self._entries = ()
        return report

    def __len__(self) -> int:
        return len(self._entries)
