"""File list model and the rules that compute target names."""

from __future__ import annotations

import enum
import os
import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field


class Mode(enum.Enum):
    """How target names are built during a preview."""

    PREFIX = "prefix"
    REPLACE = "replace"


class DestinationMissingError(ValueError):
    """Raised when files are processed before a destination folder is set."""


def _file_name(path: str) -> str:
    return path.rsplit("/", 1)[-1]


def base_name(path: str) -> str:
    """Return the file name up to, but not including, its first dot."""
    return _file_name(path).split(".", 1)[0]


def complete_suffix(path: str) -> str:
    """Return everything in the file name after its first dot."""
    return _file_name(path).partition(".")[2]


def _target(folder: str, stem: str, suffix: str) -> str:
    extension = f".{suffix}" if suffix else ""
    return f"{folder}/{stem}{extension}"


def prefix_targets(sources: Iterable[str], folder: str, prefix: str) -> dict[str, str]:
    """Name each source ``prefix`` plus its zero-padded position, keeping its suffix."""
    keys = sorted(set(sources))
    width = len(str(len(keys)))
    return {
        src: _target(
            folder,
            f"{prefix}{index:0{width}d}" if base_name(src) else "",
            complete_suffix(src),
        )
        for index, src in enumerate(keys)
    }


def replace_targets(
    sources: Iterable[str], folder: str, old: str, new: str
) -> dict[str, str]:
    """Name each source after its base name with ``old`` replaced by ``new``."""
    return {
        src: _target(folder, base_name(src).replace(old, new), complete_suffix(src))
        for src in sorted(set(sources))
    }


@dataclass
class FileModel:
    """Maps source paths to target paths, always ordered by source path."""

    files: dict[str, str] = field(default_factory=dict)
    dst_folder: str = ""

    def __post_init__(self) -> None:
        self.files = dict(sorted(self.files.items()))

    def load(self, paths: Iterable[str]) -> dict[str, str]:
        """Replace the file list with ``paths``, none of them with a target yet."""
        self.files = {path: "" for path in sorted(set(paths))}
        return dict(self.files)

    def edit_cell(self, row: int, column: int, text: str) -> None:
        """Apply an edit of the table cell at ``row``/``column``.

        Column 0 renames the source key, column 1 sets the target. Rows
        outside the list are ignored.
        """
        keys = list(self.files)
        if not 0 <= row < len(keys):
            return
        key = keys[row]
        files = dict(self.files)
        if column == 0:
            files[text] = files.pop(key)
        elif column == 1:
            files[key] = text
        self.files = dict(sorted(files.items()))

    def preview(
        self, mode: Mode, prefix: str = "", old: str = "", new: str = ""
    ) -> dict[str, str]:
        """Compute every target path in the destination folder for ``mode``."""
        if mode is Mode.PREFIX:
            targets = prefix_targets(self.files, self.dst_folder, prefix)
        else:
            targets = replace_targets(self.files, self.dst_folder, old, new)
        self.files = targets
        return dict(self.files)

    def process(self) -> list[str]:
        """Copy each source to its target and return the targets written.

        Existing targets are never overwritten; copies that fail are skipped.
        """
        if not self.dst_folder:
            raise DestinationMissingError("Destination folder must be filled.")
        copied = []
        for src, dst in self.files.items():
            if not dst or os.path.lexists(dst):
                continue
            try:
                shutil.copy(src, dst)
            except OSError:
                continue
            copied.append(dst)
        return copied