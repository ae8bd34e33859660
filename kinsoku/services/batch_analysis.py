"""
Batch validation service.

Runs the same validation settings over a list of texts, e.g. every field of a
submitted form, and collects the results in input order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kinsoku.types import BatchValidationResult, TableVariant

if TYPE_CHECKING:
    from kinsoku.validator import ShiftJISValidator


class BatchAnalysisService:
    """Service for validating batches of texts."""

    def __init__(self, validator: ShiftJISValidator):
        self._validator = validator

    def analyze_batch(
        self,
        texts: list[str],
        mode=None,
        variant: TableVariant | str = TableVariant.KANJI,
        normalize: bool = True,
    ) -> BatchValidationResult:
        """
        Validate every text in ``texts``.

        Args:
            texts: Texts to validate
            mode: Strictness mode, or None for the configured default
            variant: Which byte-range tables to use
            normalize: Apply dash/tilde normalization first

        Returns:
            BatchValidationResult with one ValidationResult per text
        """
        if isinstance(texts, str):
            raise TypeError("texts must be a sequence of str, not a single str")

        texts = tuple(texts)
        results = tuple(
            self._validator.validate(text, mode=mode, variant=variant, normalize=normalize) for text in texts
        )
        return BatchValidationResult(texts=texts, results=results)
