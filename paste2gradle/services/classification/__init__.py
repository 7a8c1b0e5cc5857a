"""Classification service."""

from .service import CLASSIFICATION_RULES, ClassificationRule, classify, classify_chunks

__all__ = ["CLASSIFICATION_RULES", "ClassificationRule", "classify", "classify_chunks"]
