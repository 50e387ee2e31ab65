"""Persisted translation record models.

Pydantic models for the record shape kept by the translations store, uniquely
identified by (key, namespace). Only ``namespace``, ``key`` and
``translations[].locale/value`` take part in resolution; the timestamps and
sources belong to the store.
"""

from datetime import datetime, timezone
from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from infrastructure.i18n.models import LocalizedValue, TranslationRecord


def _now() -> datetime:
    return datetime.now(timezone.utc)


class RecordModel(BaseModel):
    """Base model for persisted translation records."""

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        from_attributes=True,
    )


class StoredTranslation(RecordModel):
    """One locale's value inside a persisted record."""

    locale: str
    value: str
    changed: datetime = Field(default_factory=_now)
    created: datetime = Field(default_factory=_now)


class LocaleEntry(RecordModel):
    """Flat single-locale view of a record.

    ``value`` is None for a locale that has not been translated yet.
    """

    key: str
    namespace: Optional[str] = None
    locale: str
    value: Optional[str] = None


class TranslationMaster(RecordModel):
    """A translation key with all its per-locale values, as stored.

    Attributes:
        key: Message key.
        namespace: Grouping label for the key.
        created: When the record was first created.
        sources: Paths of the files the key was collected from.
        translations: One entry per translated locale.
    """

    key: str
    namespace: Optional[str] = None
    created: datetime = Field(default_factory=_now)
    sources: List[str] = Field(default_factory=list)
    translations: List[StoredTranslation] = Field(default_factory=list)

    @classmethod
    def new(
        cls,
        key: str,
        namespace: str,
        sources: Optional[Sequence[str]] = None,
    ) -> "TranslationMaster":
        """Create a fresh record with no translations.

        Raises:
            TypeError: If key or namespace is not a string.
        """
        if not isinstance(key, str):
            raise TypeError(
                f'Cannot create model. Expected key to be a string, but got: "{key}"'
            )
        if not isinstance(namespace, str):
            raise TypeError(
                f'Cannot create model. Expected namespace to be a string, but got: "{namespace}"'
            )
        return cls(key=key, namespace=namespace, sources=list(sources or []))

    def find(self, locale: str) -> Optional[StoredTranslation]:
        """Get the stored translation for a locale, if any."""
        for translation in self.translations:
            if translation.locale == locale:
                return translation
        return None

    def translate(
        self, locale: str, value: Optional[str] = None
    ) -> Optional[StoredTranslation]:
        """Add, update or remove the translation for a locale.

        Args:
            locale: Locale to translate in.
            value: New translation; None removes the locale's translation.

        Returns:
            The created or updated translation, or None when removed.

        Raises:
            TypeError: If locale is not a string, or value is neither a
                string nor None.
        """
        if not isinstance(locale, str):
            raise TypeError(
                f'The passed locale is not a string. Instead it\'s a: "{type(locale).__name__}", {locale}'
            )
        if value is not None and not isinstance(value, str):
            raise TypeError(
                f'You have specified a value, but it\'s not a string. Instead it\'s a: "{type(value).__name__}", {value}'
            )

        if value is None:
            self.translations = [t for t in self.translations if t.locale != locale]
            return None

        translation = self.find(locale)
        if translation is None:
            translation = StoredTranslation(locale=locale, value=value)
            self.translations.append(translation)
        else:
            translation.value = value
            translation.changed = _now()
        return translation

    def merge_sources(self, sources: Sequence[str]) -> None:
        """Add source paths not yet recorded, keeping existing order."""
        for source in sources:
            if source not in self.sources:
                self.sources.append(source)

    def for_locales(
        self,
        locales: Union[str, List[str]],
        generate: bool = False,
    ) -> Union[Optional[LocaleEntry], List[Optional[LocaleEntry]]]:
        """Get flat single-locale entries.

        Args:
            locales: A locale, or a list of locales.
            generate: Produce an entry with no value for untranslated locales.

        Returns:
            A LocaleEntry (or None if untranslated and not generating) for a
            single locale; a list of those for a list of locales.

        Raises:
            TypeError: If locales is neither a string nor a list.
        """
        if isinstance(locales, list):
            return [self.for_locales(locale, generate) for locale in locales]
        if not isinstance(locales, str):
            raise TypeError(
                "The passed argument locales must be a string or an string list."
            )

        translation = self.find(locales)
        if translation is None and not generate:
            return None
        return LocaleEntry(
            key=self.key,
            namespace=self.namespace,
            locale=locales,
            value=translation.value if translation else None,
        )

    def to_record(self) -> TranslationRecord:
        """Convert to the flat record consumed by the translation index."""
        return TranslationRecord(
            namespace=self.namespace or "",
            key=self.key,
            translations=tuple(
                LocalizedValue(locale=t.locale, value=t.value)
                for t in self.translations
            ),
        )
