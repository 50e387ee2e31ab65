"""i18n system - translation index and resolution engine.

Resolves human-readable strings for (namespace, key, locale) triples from an
in-memory index, with locale fallback and placeholder substitution.

Main components:
- models: TranslationRecord, LocalizedValue, TranslationQuery, ResolvedQuery
- index: TranslationIndex built from flat translation records
- translator: Translator with the resolution API
- providers: Static, YAML and deferred (future-backed) translations providers
- placeholders: default property-path placeholder substitution
- records: persisted TranslationMaster record model
- factory: create_translator()
"""

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.index import TranslationIndex
from infrastructure.i18n.models import (
    LocalizedValue,
    ResolvedQuery,
    TranslationQuery,
    TranslationRecord,
)
from infrastructure.i18n.providers import (
    DeferredTranslationsProvider,
    StaticTranslationsProvider,
    TranslationsProvider,
    YAMLTranslationsProvider,
)
from infrastructure.i18n.records import LocaleEntry, StoredTranslation, TranslationMaster
from infrastructure.i18n.translator import Translator

__all__ = [
    "LocalizedValue",
    "TranslationRecord",
    "TranslationQuery",
    "ResolvedQuery",
    "TranslationIndex",
    "Translator",
    "TranslationsProvider",
    "StaticTranslationsProvider",
    "YAMLTranslationsProvider",
    "DeferredTranslationsProvider",
    "TranslationMaster",
    "StoredTranslation",
    "LocaleEntry",
    "create_translator",
]
