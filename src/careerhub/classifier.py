"""Keyword and heuristic based content safety classifier."""

import re

from collections.abc import Mapping
from typing import Any

from careerhub.models import DEFAULT_KEYWORDS, SafetyKeywords, SafetyReport, SafetyVerdict


# Fields inspected for safety analysis, in concatenation order
TEXT_FIELDS: tuple[str, ...] = (
    "title",
    "name",
    "description",
    "content",
    "message",
    "question",
    "answer",
    "skills",
    "technologies",
    "bio",
    "details",
)

MIN_TEXT_LENGTH = 10
CAPITALS_MIN_LENGTH = 10
CAPITALS_RATIO = 0.3

_UPPERCASE = re.compile(r"[A-Z]")
_REPEATED_PUNCTUATION = re.compile(r"[!?]{2,}")


def combine_text(item: Mapping[str, Any] | None, fields: tuple[str, ...] = TEXT_FIELDS) -> str:
    """Join the truthy text fields of an item with single spaces."""
    if not item:
        return ""
    return " ".join(str(item[name]) for name in fields if item.get(name))


def similarity(text1: str, text2: str) -> float:
    """
    Jaccard similarity of the whitespace-separated tokens of two texts.

    Returns 0.0 when neither text contains any token.
    """
    words1 = set(text1.split())
    words2 = set(text2.split())

    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)


class SafetyClassifier:
    """Classifies content items as safe, warning or flagged."""

    def __init__(
        self,
        keywords: SafetyKeywords = DEFAULT_KEYWORDS,
        fields: tuple[str, ...] = TEXT_FIELDS,
    ) -> None:
        """
        Initialize the classifier.

        Args:
            keywords: Keyword vocabularies to match against
            fields: Item fields combined into the analysis text
        """
        self.keywords = keywords
        self.fields = fields

    def analyze(self, item: Mapping[str, Any] | None) -> SafetyReport:
        """
        Collect every safety signal for a content item.

        Args:
            item: Mapping of field name to value, or None

        Returns:
            SafetyReport with matched keywords, heuristic flags and the verdict
        """
        if item is None:
            return SafetyReport(verdict=SafetyVerdict.SAFE)

        original = combine_text(item, self.fields)
        text = original.lower()

        inappropriate = [k for k in self.keywords.inappropriate if k.lower() in text]
        suspicious = [k for k in self.keywords.suspicious if k.lower() in text]
        unprofessional = [k for k in self.keywords.professional if k.lower() in text]

        excessive_capitals = (
            len(original) > CAPITALS_MIN_LENGTH
            and len(_UPPERCASE.findall(original)) / len(original) > CAPITALS_RATIO
        )
        excessive_punctuation = _REPEATED_PUNCTUATION.search(text) is not None
        is_empty = len(text.strip()) < MIN_TEXT_LENGTH

        if inappropriate or suspicious:
            verdict = SafetyVerdict.FLAGGED
        elif unprofessional or excessive_capitals or excessive_punctuation or is_empty:
            verdict = SafetyVerdict.WARNING
        else:
            verdict = SafetyVerdict.SAFE

        return SafetyReport(
            verdict=verdict,
            inappropriate=inappropriate,
            suspicious=suspicious,
            unprofessional=unprofessional,
            excessive_capitals=excessive_capitals,
            excessive_punctuation=excessive_punctuation,
            is_empty=is_empty,
        )

    def classify(self, item: Mapping[str, Any] | None) -> SafetyVerdict:
        """Return only the verdict for a content item."""
        return self.analyze(item).verdict
