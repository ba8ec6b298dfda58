"""
Compile exported SVG fragments into a single <symbol>/<use> sprite.

Usage:
    python -m svg_sprite compile icons/ -o sprite.svg
    python -m svg_sprite compile --manifest fragments.yaml -o sprite.svg
    python -m svg_sprite preview sprite.svg -o preview.html
"""

from .config import (
    CompiledDocument,
    ExtractedBody,
    ExtractionFailure,
    Fragment,
    SpriteConfig,
    SymbolUnit,
    load_yaml,
    load_sprite_config,
)
from .errors import EmptyBatchError, NoUsableContentError, SpriteError
from .fragments import load_fragment_file, load_fragments, load_manifest
from .compiler import compile_sprite, placeholder_body

__all__ = [
    # Config
    "CompiledDocument",
    "ExtractedBody",
    "ExtractionFailure",
    "Fragment",
    "SpriteConfig",
    "SymbolUnit",
    "load_yaml",
    "load_sprite_config",
    # Errors
    "EmptyBatchError",
    "NoUsableContentError",
    "SpriteError",
    # Fragments
    "load_fragment_file",
    "load_fragments",
    "load_manifest",
    # Compiler
    "compile_sprite",
    "placeholder_body",
]
