from pathlib import Path

import pytest

from svg_sprite.fragments import load_fragment_file, load_fragments, load_manifest

SVG = '<svg viewBox="0 0 4 4"><rect width="4" height="4"/></svg>'


def _write_svg(path: Path, content: str = SVG) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_load_fragment_file_uses_stem_as_name(tmp_path: Path) -> None:
    fragment = load_fragment_file(_write_svg(tmp_path / "Home Icon.svg"))
    assert fragment.name == "Home Icon"
    assert fragment.raw_markup == SVG


def test_load_fragment_file_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_fragment_file(tmp_path / "nope.svg")


def test_load_fragments_keeps_order_and_sorts_directories(tmp_path: Path) -> None:
    first = _write_svg(tmp_path / "zz.svg")
    _write_svg(tmp_path / "icons" / "b.svg")
    _write_svg(tmp_path / "icons" / "a.svg")
    (tmp_path / "icons" / "notes.txt").write_text("ignored")

    fragments = load_fragments([first, tmp_path / "icons"])
    assert [f.name for f in fragments] == ["zz", "a", "b"]


def test_load_manifest_paths_and_inline_markup(tmp_path: Path) -> None:
    _write_svg(tmp_path / "icons" / "home.svg")
    manifest = tmp_path / "fragments.yaml"
    manifest.write_text(
        """\
fragments:
  - name: Home
    path: icons/home.svg
  - name: Dot
    markup: '<svg viewBox="0 0 8 8"><circle r="4"/></svg>'
  - path: icons/home.svg
  - name: 42
    markup: '<svg><rect/></svg>'
""",
        encoding="utf-8",
    )

    fragments = load_manifest(manifest)
    assert [f.name for f in fragments] == ["Home", "Dot", "home", "42"]
    assert fragments[0].raw_markup == SVG
    assert fragments[1].raw_markup.startswith('<svg viewBox="0 0 8 8">')


def test_load_manifest_rejects_incomplete_entries(tmp_path: Path) -> None:
    manifest = tmp_path / "bad.yaml"
    manifest.write_text("fragments:\n  - name: nothing\n", encoding="utf-8")
    with pytest.raises(ValueError, match="needs 'markup' or 'path'"):
        load_manifest(manifest)


def test_load_manifest_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_manifest(tmp_path / "missing.yaml")
