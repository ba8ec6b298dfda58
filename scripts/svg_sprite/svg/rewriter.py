"""Local id rewriting for fragments merged into a shared sprite.

Every fragment's markup ends up in one document, so ids declared inside a
fragment (gradients, clip paths, masks, reused paths) would collide with ids
from other fragments. Each declaration is turned into a class of the same
sanitized name, and same-document ``href``/``xlink:href`` references to a
converted id are pointed at the fragment's own symbol id instead.

Retargeting is lossy: a reference to one sub-element becomes a reference to
the whole symbol. ``url(#...)`` paint references are left alone. Finer
grained preservation (e.g. per-symbol copies of shared definitions) is not
attempted.
"""

import logging
from typing import Collection, NamedTuple

from .tokenizer import (
    COMMENT,
    DECLARATION,
    END,
    PROCESSING,
    START,
    TEXT,
    Tag,
    Token,
    parse_tag,
    tokenize,
)
from .utils import class_name_for, escape_xml

logger = logging.getLogger(__name__)

WRAPPER_TAG = "symbol"

REFERENCE_ATTRS = frozenset({"href", "xlink:href"})

# Tokens that may sit outside a root wrapper without disqualifying it
_IGNORABLE = frozenset({COMMENT, PROCESSING, DECLARATION})


class RewriteReport(NamedTuple):
    """Result of rewriting one fragment body."""

    markup: str
    converted_ids: tuple[str, ...]
    repaired_references: int


def _local_name(tag_name: str) -> str:
    return tag_name.rsplit(":", 1)[-1].lower()


def find_root_wrapper(tokens: list[Token]) -> Token | None:
    """Return the <symbol> start tag that wraps the whole body, if any.

    Only a single non-empty <symbol> whose matching close is the last
    significant token qualifies. Symbols nested anywhere else, or sitting
    beside sibling content, are ordinary elements.
    """
    significant = [
        t for t in tokens
        if t.kind not in _IGNORABLE and not (t.kind == TEXT and not t.text.strip())
    ]
    if not significant:
        return None
    first, last = significant[0], significant[-1]
    if (
        first.kind != START
        or first.self_closing
        or _local_name(first.name) != WRAPPER_TAG
        or last.kind != END
        or _local_name(last.name) != WRAPPER_TAG
    ):
        return None

    depth = 0
    for token in significant:
        if _local_name(token.name) != WRAPPER_TAG or token.self_closing:
            continue
        depth += 1 if token.kind == START else -1
        if depth == 0:
            return first if token is last else None
    return None


def _collect(tokens: list[Token], wrapper: Token | None) -> dict[str, str]:
    declarations: dict[str, str] = {}
    for token in tokens:
        if token.kind != START or token is wrapper:
            continue
        id_attr = parse_tag(token.text).get("id")
        if id_attr is not None and id_attr.value:
            declarations.setdefault(id_attr.value, class_name_for(id_attr.value))
    return declarations


def collect_declarations(markup: str) -> dict[str, str]:
    """Map every local id declared in markup to its replacement class name.

    The id of a root <symbol> wrapper and anything inside comments or CDATA
    are ignored. Nested <symbol> elements are treated like any other element.

    Args:
        markup: Fragment inner markup

    Returns:
        Dict of id -> class name, in declaration order
    """
    tokens = list(tokenize(markup))
    return _collect(tokens, find_root_wrapper(tokens))



def _convert_declaration(tag: Tag, declarations: dict[str, str]) -> bool:
    """Replace the tag's id with a class, merging into any existing class."""
    id_attr = tag.get("id")
    if id_attr is None or id_attr.value not in declarations:
        return False

    class_name = declarations[id_attr.value]
    class_attr = tag.get("class")
    if class_attr is not None and class_attr.value is not None:
        existing = class_attr.value
        class_attr.value = f"{existing} {class_name}" if existing.strip() else class_name
        tag.remove(id_attr)
    elif class_attr is not None:
        # Valueless class attribute
        class_attr.equals, class_attr.quote, class_attr.value = "=", '"', class_name
        tag.remove(id_attr)
    else:
        id_attr.name = "class"
        id_attr.value = class_name
        id_attr.quote = id_attr.quote or '"'
    return True


def _repair_references(tag: Tag, targets: Collection[str], symbol_id: str) -> int:
    repaired = 0
    for attr in tag.attributes:
        if attr.name not in REFERENCE_ATTRS or not attr.value:
            continue
        target = attr.value.strip()
        if target.startswith("#") and target[1:] in targets:
            logger.warning(
                "Fixed broken reference to #%s, referencing symbol '%s' instead",
                target[1:],
                symbol_id,
            )
            attr.value = "#" + escape_xml(symbol_id)
            repaired += 1
    return repaired


def _strip_wrapper_id(tag: Tag) -> bool:
    id_attr = tag.get("id")
    if id_attr is None:
        return False
    tag.remove(id_attr)
    return True


def rewrite_with_report(inner_markup: str, symbol_id: str) -> RewriteReport:
    """Rewrite local ids and references, reporting what changed.

    Two passes: declarations are collected first so a reference that appears
    before its target is still repaired. Tags that need no change, and all
    text between tags, are emitted exactly as they were.

    A root <symbol> wrapper is not given a class; the sprite's own <symbol>
    takes over its identity, so its id is dropped and references to it are
    retargeted to ``symbol_id`` like any other converted id.

    Args:
        inner_markup: Extracted fragment body
        symbol_id: Id allocated to the fragment's <symbol>

    Returns:
        RewriteReport with the new markup and change counts
    """
    tokens = list(tokenize(inner_markup))
    wrapper = find_root_wrapper(tokens)
    declarations = _collect(tokens, wrapper)

    targets = set(declarations)
    if wrapper is not None:
        wrapper_id = parse_tag(wrapper.text).get("id")
        if wrapper_id is not None and wrapper_id.value:
            targets.add(wrapper_id.value)
    if not targets:
        return RewriteReport(inner_markup, (), 0)

    parts = []
    repaired = 0
    for token in tokens:
        if token.kind != START:
            parts.append(token.text)
            continue

        tag = parse_tag(token.text)
        if token is wrapper:
            changed = _strip_wrapper_id(tag)
        else:
            changed = _convert_declaration(tag, declarations)
        count = _repair_references(tag, targets, symbol_id)
        repaired += count

        parts.append(tag.render() if changed or count else token.text)

    return RewriteReport("".join(parts), tuple(declarations), repaired)


def rewrite(inner_markup: str, symbol_id: str) -> str:
    """Rewrite local ids into classes and retarget references to symbol_id.

    Never raises. Markup without id declarations is returned unchanged.
    """
    return rewrite_with_report(inner_markup, symbol_id).markup
