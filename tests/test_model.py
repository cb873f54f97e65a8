from pathlib import Path

import pytest

from filerenamer.model import (
    DestinationMissingError,
    FileModel,
    Mode,
    base_name,
    complete_suffix,
    prefix_targets,
    replace_targets,
)


@pytest.mark.parametrize(
    "path",
    ["/data/archive.tar.gz", "/data/photo.jpg", "relative/notes.md", "x.y.z.w"],
)
def test_base_name_and_suffix_rebuild_file_name(path):
    name = path.rsplit("/", 1)[-1]
    assert f"{base_name(path)}.{complete_suffix(path)}" == name
    assert "." not in base_name(path)


def test_suffix_starts_after_first_dot():
    assert complete_suffix("/data/archive.tar.gz") == "tar.gz"


def test_name_without_dot_has_no_suffix():
    assert complete_suffix("/data/README") == ""
    assert base_name("/data/README") == "README"


def test_hidden_file_has_empty_base_name():
    assert base_name("/home/.bashrc") == ""
    assert complete_suffix("/home/.bashrc") == "bashrc"


def test_dots_in_directories_are_ignored():
    assert base_name("/some.dir/file") == "file"
    assert complete_suffix("/some.dir/file") == ""


def test_prefix_targets_worked_example():
    targets = prefix_targets(["/in/b.txt", "/in/a.jpg"], "/out", "img")
    assert targets == {"/in/a.jpg": "/out/img0.jpg", "/in/b.txt": "/out/img1.txt"}


def test_prefix_targets_pad_to_count_width():
    sources = [f"/in/file{n:02d}.dat" for n in range(10)]
    targets = prefix_targets(sources, "/out", "p")
    stems = [base_name(t) for t in targets.values()]
    assert all(len(stem) == len("p") + 2 for stem in stems)
    assert len(set(stems)) == len(sources)
    assert list(targets) == sorted(sources)


def test_prefix_targets_keep_empty_stem_for_hidden_files():
    targets = prefix_targets(["/in/.hidden"], "/out", "p")
    assert targets["/in/.hidden"] == "/out/.hidden"


def test_replace_targets_substitutes_in_base_name_only():
    targets = replace_targets(["/in/old_old.old.txt"], "/dst", "old", "new")
    assert targets["/in/old_old.old.txt"] == "/dst/new_new.old.txt"


def test_replace_targets_without_match_keep_name():
    targets = replace_targets(["/in/report.pdf"], "/dst", "zzz", "y")
    assert targets["/in/report.pdf"] == "/dst/report.pdf"


def test_load_sorts_and_clears_targets():
    model = FileModel()
    model.load(["/b", "/a", "/b"])
    assert list(model.files) == ["/a", "/b"]
    assert set(model.files.values()) == {""}


def test_constructor_orders_files():
    model = FileModel(files={"/z": "1", "/a": "2"})
    assert list(model.files) == ["/a", "/z"]


def test_edit_cell_renames_key_and_keeps_value():
    model = FileModel(files={"/a": "A", "/b": "B"})
    model.edit_cell(0, 0, "/c")
    assert model.files == {"/b": "B", "/c": "A"}


def test_edit_cell_sets_target():
    model = FileModel(files={"/a": "A", "/b": "B"})
    model.edit_cell(1, 1, "/target")
    assert model.files == {"/a": "A", "/b": "/target"}


@pytest.mark.parametrize("row", [2, 10, -1])
def test_edit_cell_out_of_range_is_ignored(row):
    model = FileModel(files={"/a": "A", "/b": "B"})
    model.edit_cell(row, 1, "x")
    assert model.files == {"/a": "A", "/b": "B"}


def test_edit_cell_unknown_column_leaves_files():
    model = FileModel(files={"/a": "A"})
    model.edit_cell(0, 5, "x")
    assert model.files == {"/a": "A"}


def test_preview_prefix_uses_destination_folder():
    model = FileModel(dst_folder="/out")
    model.load(["/in/a.jpg", "/in/b.txt"])
    result = model.preview(Mode.PREFIX, prefix="img")
    assert result == prefix_targets(["/in/a.jpg", "/in/b.txt"], "/out", "img")
    assert model.files == result


def test_preview_replace_uses_destination_folder():
    model = FileModel(dst_folder="/out")
    model.load(["/in/cat.png"])
    result = model.preview(Mode.REPLACE, old="cat", new="dog")
    assert result == {"/in/cat.png": "/out/dog.png"}


def test_process_requires_destination():
    model = FileModel(files={"/a": "/b"})
    with pytest.raises(DestinationMissingError):
        model.process()


def test_process_copies_to_targets(tmp_path: Path):
    src_dir = tmp_path / "src"
    dst_dir = tmp_path / "dst"
    src_dir.mkdir()
    dst_dir.mkdir()
    (src_dir / "one.txt").write_text("first")
    (src_dir / "two.txt").write_text("second")
    model = FileModel(dst_folder=str(dst_dir))
    model.load([str(src_dir / "one.txt"), str(src_dir / "two.txt")])
    model.preview(Mode.PREFIX, prefix="f")
    copied = model.process()
    assert copied == list(model.files.values())
    contents = sorted(Path(p).read_text() for p in copied)
    assert contents == ["first", "second"]


def test_process_never_overwrites(tmp_path: Path):
    src = tmp_path / "a.txt"
    dst = tmp_path / "b.txt"
    src.write_text("new")
    dst.write_text("old")
    model = FileModel(files={str(src): str(dst)}, dst_folder=str(tmp_path))
    assert model.process() == []
    assert dst.read_text() == "old"


def test_process_skips_missing_sources_and_empty_targets(tmp_path: Path):
    model = FileModel(
        files={str(tmp_path / "missing"): str(tmp_path / "out"), "/x": ""},
        dst_folder=str(tmp_path),
    )
    assert model.process() == []
    assert not (tmp_path / "out").exists()