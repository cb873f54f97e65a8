"""Wires a window's requests to the file model."""

from __future__ import annotations

from typing import Any

from filerenamer.model import FileModel


class FileRenamerController:
    """Handles the requests a main window raises and keeps it in sync."""

    def __init__(self, view: Any, model: FileModel | None = None) -> None:
        self.view = view
        self.model = model if model is not None else FileModel()
        view.browse_requested = self.on_browse_requested
        view.dest_requested = self.on_dest_requested
        view.preview_requested = self.on_preview_requested
        view.process_requested = self.on_process_requested
        view.cell_changed = self.on_cell_changed

    def show_main_window(self) -> None:
        self.view.show()

    def on_cell_changed(self, row: int, column: int, text: str) -> None:
        self.model.edit_cell(row, column, text)

    def on_browse_requested(self) -> None:
        paths = self.view.ask_open_files()
        files = self.model.load(paths)
        self.view.set_file_list(files)

    def on_dest_requested(self) -> None:
        dest = self.view.ask_directory()
        self.model.dst_folder = dest
        self.view.dest_text = dest

    def on_preview_requested(self) -> None:
        files = self.model.preview(
            self.view.mode(),
            prefix=self.view.prefix_text,
            old=self.view.old_text,
            new=self.view.new_text,
        )
        self.view.set_file_list(files)

    def on_process_requested(self) -> None:
        if not self.view.dest_text:
            self.view.warn("Warning !", "Destination folder must be filled.")
            return
        self.model.process()
        self.view.inform("Succes !", "Succes.")