# filerenamer

A small desktop tool for renaming many files at once. Pick the source
files, choose a destination folder, preview the new names, and then copy
every file to its new name in the destination. The source files are
copied, not moved.

The window uses `tkinter` from the standard library. Some Python builds
ship it as a separate system package.

## Install

```
pip install .
```

## Run

```
filerenamer
```

This opens the main window and runs until you close it.

## Using the window

The left side holds a two-column table: **Source** (the picked file) and
**Preview** (the path it will be copied to). Rows are ordered by source
path. Double-click a cell to edit it. Press Enter or move the focus away
to keep the edit, or press Escape to cancel it. If you edit a Source cell,
that entry in the list gets the new path. The file on disk is not
renamed. If you edit a Preview cell, that entry's target is set to the
text you typed.

On the right side, choose how the new names are built:

- **Prefix + index**: each file becomes `<destination>/<prefix><index><ext>`.
  The index follows the order of the table and starts at 0. It is
  zero-padded to the number of digits in the file count, so ten files are
  numbered `00` to `09`. A file whose name starts with a dot, such as
  `.bashrc`, gets no prefix and keeps its name.
- **Replace**: in each file's base name, every occurrence of the *Old*
  text is replaced with the *New* text, and the extension is kept.
  Replace is also used when neither option is selected.

The base name is the file name up to its first dot. The extension is
everything after that dot, so `archive.tar.gz` keeps `.tar.gz`.

Buttons:

- **Browse…** chooses the source files. This replaces the current list,
  and no file has a target yet.
- **…** chooses the destination folder.
- **Preview** fills the Preview column, using the chosen destination
  folder.
- **Process** copies each source file to its target. If no destination
  folder is set, a warning is shown and nothing is copied. Rows that have
  no target are skipped. Targets that already exist are never
  overwritten. A copy that fails is skipped without an error, and a
  success message is shown when the run ends.

## Using it from Python

`filerenamer.model` holds the logic and does not depend on the window:

```python
from filerenamer.model import FileModel, Mode

model = FileModel()
model.load(["/tmp/a.txt", "/tmp/b.txt"])
model.dst_folder = "/tmp/out"
targets = model.preview(Mode.PREFIX, prefix="photo_")
# {'/tmp/a.txt': '/tmp/out/photo_0.txt', '/tmp/b.txt': '/tmp/out/photo_1.txt'}
written = model.process()  # list of the target paths that were copied
```

- `FileModel.load(paths)` replaces the list with `paths`, each with an
  empty target.
- `FileModel.edit_cell(row, column, text)`: column 0 renames the source
  entry and column 1 sets its target. A row outside the list is ignored.
- `FileModel.preview(mode, prefix="", old="", new="")` computes every
  target, stores the targets in the model and returns them.
- `FileModel.process()` copies the files and returns the targets that
  were written. It raises `DestinationMissingError` (a `ValueError`) when
  `dst_folder` is empty.
- `base_name(path)`, `complete_suffix(path)`, `prefix_targets(sources,
  folder, prefix)` and `replace_targets(sources, folder, old, new)` are
  the naming rules as plain functions.

`filerenamer.controller.FileRenamerController(view, model=None)` connects
a window to a `FileModel`. `filerenamer.gui.MainWindow` is the tkinter
window, and `filerenamer.gui.main()` starts the application.

## Limitations

- The **Select All** and **Deselect All** buttons do nothing. The table
  has no per-file selection, so every listed file is processed.
- No style sheet or theme is loaded. The window uses the default
  tkinter look.

## Tests

```
pip install .[test]
pytest
```