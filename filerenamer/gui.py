"""Main window of the renamer and the command that starts it."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from filerenamer.controller import FileRenamerController
from filerenamer.model import Mode

_COLUMNS = ("source", "preview")


def table_rows(files: Mapping[str, str]) -> list[tuple[str, str]]:
    """Return the table rows for ``files``, ordered by source path."""
    return sorted(files.items())


class MainWindow:
    """File table on the left, rename options and actions on the right.

    Requests are raised through the callables stored in ``browse_requested``,
    ``dest_requested``, ``preview_requested``, ``process_requested`` and
    ``cell_changed``.
    """

    def __init__(self, master: Any = None) -> None:
        import tkinter as tk
        from tkinter import ttk

        self._ttk = ttk
        self._root = master if master is not None else tk.Tk()
        self._root.title("File Renamer")

        self.browse_requested = None
        self.dest_requested = None
        self.preview_requested = None
        self.process_requested = None
        self.cell_changed = None

        self._mode = tk.StringVar(master=self._root, value="")
        self._prefix = tk.StringVar(master=self._root)
        self._old = tk.StringVar(master=self._root)
        self._new = tk.StringVar(master=self._root)
        self._dest = tk.StringVar(master=self._root)

        splitter = ttk.PanedWindow(self._root, orient=tk.HORIZONTAL)
        splitter.pack(fill=tk.BOTH, expand=True)
        left = ttk.Frame(splitter, padding=6)
        right = ttk.Frame(splitter, padding=6)
        splitter.add(left, weight=1)
        splitter.add(right, weight=2)

        self._tree = ttk.Treeview(left, columns=_COLUMNS, show="headings")
        self._tree.heading("source", text="Source")
        self._tree.heading("preview", text="Preview")
        self._tree.pack(fill=tk.BOTH, expand=True)
        self._tree.bind("<Double-1>", self._begin_edit)

        file_buttons = ttk.Frame(left)
        file_buttons.pack(fill=tk.X, pady=(6, 0))
        ttk.Button(
            file_buttons, text="Browse…", command=lambda: self._emit("browse_requested")
        ).pack(side=tk.LEFT, expand=True, fill=tk.X)
        ttk.Button(file_buttons, text="Select All").pack(side=tk.LEFT, expand=True, fill=tk.X)
        ttk.Button(file_buttons, text="Deselect All").pack(
            side=tk.LEFT, expand=True, fill=tk.X
        )

        ttk.Radiobutton(
            right, text="Prefix + index", variable=self._mode, value=Mode.PREFIX.value
        ).pack(anchor=tk.W)
        ttk.Label(right, text="Prefix").pack(anchor=tk.W)
        ttk.Entry(right, textvariable=self._prefix).pack(fill=tk.X)
        ttk.Radiobutton(
            right, text="Replace", variable=self._mode, value=Mode.REPLACE.value
        ).pack(anchor=tk.W, pady=(6, 0))
        ttk.Label(right, text="Old").pack(anchor=tk.W)
        ttk.Entry(right, textvariable=self._old).pack(fill=tk.X)
        ttk.Label(right, text="New").pack(anchor=tk.W)
        ttk.Entry(right, textvariable=self._new).pack(fill=tk.X)

        dest_row = ttk.Frame(right)
        dest_row.pack(fill=tk.X, pady=(12, 0))
        ttk.Label(dest_row, text="Select dest folder").pack(anchor=tk.W)
        ttk.Entry(dest_row, textvariable=self._dest, state="readonly").pack(
            side=tk.LEFT, fill=tk.X, expand=True
        )
        ttk.Button(
            dest_row, text="…", width=3, command=lambda: self._emit("dest_requested")
        ).pack(side=tk.LEFT)

        action_row = ttk.Frame(right)
        action_row.pack(fill=tk.X, pady=(6, 0))
        ttk.Button(
            action_row, text="Preview", command=lambda: self._emit("preview_requested")
        ).pack(side=tk.LEFT, expand=True, fill=tk.X)
        ttk.Button(
            action_row, text="Process", command=lambda: self._emit("process_requested")
        ).pack(side=tk.LEFT, expand=True, fill=tk.X)

    def _emit(self, name: str, *args: Any) -> None:
        handler = getattr(self, name)
        if handler is not None:
            handler(*args)

    def _begin_edit(self, event: Any) -> None:
        tree = self._tree
        if tree.identify_region(event.x, event.y) != "cell":
            return
        item = tree.identify_row(event.y)
        column_id = tree.identify_column(event.x)
        bbox = tree.bbox(item, column_id)
        if not item or not bbox:
            return
        column = int(column_id.lstrip("#")) - 1
        x, y, width, height = bbox
        old = tree.set(item, _COLUMNS[column])

        editor = self._ttk.Entry(tree)
        editor.insert(0, old)
        editor.select_range(0, "end")
        editor.place(x=x, y=y, width=width, height=height)
        editor.focus_set()

        def commit(_event: Any = None) -> None:
            if not editor.winfo_exists():
                return
            text = editor.get()
            editor.destroy()
            if text != old:
                tree.set(item, _COLUMNS[column], text)
                self._emit("cell_changed", tree.index(item), column, text)

        editor.bind("<Return>", commit)
        editor.bind("<FocusOut>", commit)
        editor.bind("<Escape>", lambda _event: editor.destroy())

    def mode(self) -> Mode:
        """Prefix mode when its button is checked, replace mode otherwise."""
        return Mode.PREFIX if self._mode.get() == Mode.PREFIX.value else Mode.REPLACE

    @property
    def prefix_text(self) -> str:
        return self._prefix.get()

    @property
    def old_text(self) -> str:
        return self._old.get()

    @property
    def new_text(self) -> str:
        return self._new.get()

    @property
    def dest_text(self) -> str:
        return self._dest.get()

    @dest_text.setter
    def dest_text(self, value: str) -> None:
        self._dest.set(value)

    def set_file_list(self, files: Mapping[str, str]) -> None:
        self._tree.delete(*self._tree.get_children())
        for source, target in table_rows(files):
            self._tree.insert("", "end", values=(source, target))

    def show(self) -> None:
        self._root.deiconify()
        self._root.lift()

    def ask_open_files(self) -> list[str]:
        from tkinter import filedialog

        chosen = filedialog.askopenfilenames(
            parent=self._root,
            title="Sélectionner des fichiers",
            filetypes=[("Tous fichiers", "*")],
        )
        return list(chosen) if chosen else []

    def ask_directory(self) -> str:
        from tkinter import filedialog

        chosen = filedialog.askdirectory(
            parent=self._root,
            title="Select A folder",
            initialdir=os.path.expanduser("~"),
            mustexist=True,
        )
        return chosen or ""

    def warn(self, title: str, text: str) -> None:
        from tkinter import messagebox

        messagebox.showwarning(title, text, parent=self._root)

    def inform(self, title: str, text: str) -> None:
        from tkinter import messagebox

        messagebox.showinfo(title, text, parent=self._root)


def main(argv: list[str] | None = None) -> int:
    """Open the main window and run until it is closed."""
    import tkinter as tk

    root = tk.Tk()
    window = MainWindow(root)
    controller = FileRenamerController(window)
    controller.show_main_window()
    root.mainloop()
    return 0