"""
Classification Service.

Assigns a FileKind to each chunk by looking for marker substrings. Rules are
checked in a fixed order and the first match wins; nothing here parses the
chunk's language.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ...core.logging import get_logger
from ...models.project import Chunk, FileKind

logger = get_logger(__name__)

XML_PROLOG = "<?xml"


@dataclass(frozen=True)
class ClassificationRule:
    """A predicate over chunk text paired with the kind it selects."""

    kind: FileKind
    matches: Callable[[str], bool]
    description: str = ""


def _is_source(text: str) -> bool:
    return "package " in text and "class " in text


def _is_manifest(text: str) -> bool:
    return XML_PROLOG in text and "<manifest" in text


def _is_layout(text: str) -> bool:
    # The prolog is only required alongside LinearLayout; the other two
    # containers match on their own.
    return (
        (XML_PROLOG in text and "<LinearLayout" in text)
        or "<RelativeLayout" in text
        or "<ConstraintLayout" in text
    )


def _is_resource(text: str) -> bool:
    return XML_PROLOG in text and "<resources>" in text


def _is_build(text: str) -> bool:
    return "plugins {" in text or "android {" in text


CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(FileKind.SOURCE_CODE, _is_source, "package and class declarations"),
    ClassificationRule(FileKind.MANIFEST, _is_manifest, "XML prolog and <manifest"),
    ClassificationRule(FileKind.LAYOUT, _is_layout, "layout container root"),
    ClassificationRule(FileKind.RESOURCE, _is_resource, "XML prolog and <resources>"),
    ClassificationRule(FileKind.BUILD, _is_build, "plugins or android block"),
)


def classify(chunk: str, rules: Iterable[ClassificationRule] = CLASSIFICATION_RULES) -> FileKind:
    """Classify a chunk of text.

    Args:
        chunk: Trimmed chunk text.
        rules: Ordered rules; the first one that matches decides.

    Returns:
        The matching FileKind, or FileKind.UNRECOGNIZED.
    """
    for rule in rules:
        if rule.matches(chunk):
            return rule.kind
    return FileKind.UNRECOGNIZED


def classify_chunks(texts: Iterable[str]) -> list[Chunk]:
    """Classify segmented texts, keeping their positions."""
    chunks = []
    for index, text in enumerate(texts):
        kind = classify(text)
        logger.debug("Classified chunk", index=index, kind=kind.value, chars=len(text))
        chunks.append(Chunk(index=index, text=text, kind=kind))
    return chunks
