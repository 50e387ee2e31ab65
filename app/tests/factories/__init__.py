"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_greeting_records,
    make_translation_master,
    make_translation_record,
    make_translator,
)

__all__ = [
    "make_greeting_records",
    "make_translation_master",
    "make_translation_record",
    "make_translator",
]
