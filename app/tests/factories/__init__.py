"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_comments_bundle,
    make_context_table,
    make_due_date_ranges,
    make_gender_bundle,
    make_plural_ranges_entry,
    make_russian_results_bundle,
    make_translation_bundle,
)

__all__ = [
    "make_comments_bundle",
    "make_context_table",
    "make_due_date_ranges",
    "make_gender_bundle",
    "make_plural_ranges_entry",
    "make_russian_results_bundle",
    "make_translation_bundle",
]
