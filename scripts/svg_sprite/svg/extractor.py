"""Content extraction: isolate the markup that belongs inside a <symbol>."""

import logging

from ..config import ExtractedBody, ExtractionFailure, SpriteConfig
from .tokenizer import END, START, Token, parse_tag, tokenize
from .utils import find_view_box

logger = logging.getLogger(__name__)

CONTAINER_TAG = "svg"


def _is_container(token: Token) -> bool:
    # Accept prefixed forms such as <svg:svg>
    return token.name.rsplit(":", 1)[-1].lower() == CONTAINER_TAG


def structural_inner(raw_markup: str) -> str | None:
    """Return the text between the first <svg> start tag and its matching close.

    Nested <svg> elements are balanced, so an inner </svg> does not end the
    match early. Prolog, doctype and comments before the container are skipped.

    Args:
        raw_markup: Raw exported markup

    Returns:
        Inner text (untrimmed), or None when no balanced container is found
    """
    open_end: int | None = None
    depth = 0
    for token in tokenize(raw_markup):
        if token.kind == START and _is_container(token):
            if open_end is None:
                if token.self_closing:
                    return None
                open_end = token.end
                depth = 1
            elif not token.self_closing:
                depth += 1
        elif token.kind == END and open_end is not None and _is_container(token):
            depth -= 1
            if depth == 0:
                return raw_markup[open_end:token.start]
    return None


def positional_inner(raw_markup: str) -> str | None:
    """Slice between the end of the first <svg ...> tag and the last </svg>.

    Used when the tokenizer cannot balance the container, e.g. an attribute
    value containing an unquoted ``>``.
    """
    lowered = raw_markup.lower()
    open_start = lowered.find("<svg")
    if open_start == -1:
        return None
    open_end = raw_markup.find(">", open_start) + 1
    close_start = lowered.rfind("</svg>")
    if open_end > 0 and close_start > open_end:
        return raw_markup[open_end:close_start]
    return None


def container_namespaces(raw_markup: str) -> dict[str, str]:
    """Return the ``xmlns:prefix`` declarations of the first <svg> start tag.

    Removing the container drops these declarations, so the caller must
    re-declare them for prefixed attributes (``inkscape:``, ``sodipodi:``)
    in the inner markup to stay well-formed.
    """
    for token in tokenize(raw_markup):
        if token.kind == START and _is_container(token):
            return {
                attr.name.split(":", 1)[1]: attr.value
                for attr in parse_tag(token.text).attributes
                if attr.name.startswith("xmlns:") and attr.value is not None
            }
    return {}


def extract(
    raw_markup: str, config: SpriteConfig | None = None
) -> ExtractedBody | ExtractionFailure:
    """Extract the inner markup and viewBox of one fragment.

    Tries a balanced structural match first, then a positional scan. Failure
    is reported as a value, never raised, so the caller can substitute a
    placeholder.

    Args:
        raw_markup: Raw exported SVG text
        config: Sprite configuration (default viewBox, minimum length)

    Returns:
        ExtractedBody on success, ExtractionFailure otherwise
    """
    config = config or SpriteConfig()

    if len(raw_markup) < config.min_markup_length:
        return ExtractionFailure(
            reason=f"markup too short ({len(raw_markup)} chars)"
        )

    if "<svg" not in raw_markup.lower():
        return ExtractionFailure(
            reason="no <svg> container tag found (content may be binary or encoded)"
        )

    inner = (structural_inner(raw_markup) or "").strip()
    if not inner:
        logger.debug("Structural match failed, falling back to positional scan")
        inner = (positional_inner(raw_markup) or "").strip()

    if not inner:
        return ExtractionFailure(reason="could not extract content from <svg> container")

    return ExtractedBody(
        inner_markup=inner,
        view_box=find_view_box(raw_markup, config.default_view_box),
        namespaces=container_namespaces(raw_markup),
    )
