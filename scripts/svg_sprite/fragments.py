"""Fragment loading from SVG files, directories and YAML manifests."""

from pathlib import Path
from typing import Iterable

from .config import Fragment, load_yaml
from .svg.utils import load_svg_file


def load_fragment_file(path: Path, name: str | None = None) -> Fragment:
    """Load one SVG file as a fragment.

    Args:
        path: Path to an exported SVG file
        name: Fragment name; defaults to the file stem

    Returns:
        Fragment with the file's raw markup
    """
    if not path.is_file():
        raise FileNotFoundError(f"SVG file not found: {path}")
    return Fragment(name=name if name is not None else path.stem, raw_markup=load_svg_file(path))


def load_fragments(paths: Iterable[Path]) -> list[Fragment]:
    """Load fragments from files and directories, keeping the given order.

    Directories contribute their ``*.svg`` files sorted by name.
    """
    fragments = []
    for path in paths:
        if path.is_dir():
            fragments.extend(load_fragment_file(p) for p in sorted(path.glob("*.svg")))
        else:
            fragments.append(load_fragment_file(path))
    return fragments


def load_manifest(path: Path) -> list[Fragment]:
    """Load fragments listed in a YAML manifest.

    Manifest format::

        fragments:
          - name: Home Icon
            path: icons/home.svg
          - name: inline
            markup: '<svg viewBox="0 0 8 8"><circle r="4"/></svg>'

    Relative paths are resolved against the manifest's directory.

    Args:
        path: Path to manifest YAML

    Returns:
        Fragments in manifest order
    """
    if not path.exists():
        raise FileNotFoundError(f"Manifest not found: {path}")

    data = load_yaml(path)
    entries = data.get("fragments", []) if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise ValueError(f"'fragments' in {path} must be a list")

    fragments = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Manifest entry {index} must be a mapping")
        name = str(entry["name"]) if entry.get("name") is not None else None
        if "markup" in entry:
            fragments.append(Fragment(name=name or "", raw_markup=entry["markup"]))
        elif "path" in entry:
            svg_path = Path(entry["path"])
            if not svg_path.is_absolute():
                svg_path = path.parent / svg_path
            fragments.append(load_fragment_file(svg_path, name))
        else:
            raise ValueError(f"Manifest entry {index} needs 'markup' or 'path'")
    return fragments
