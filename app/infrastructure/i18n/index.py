"""In-memory translation index.

Turns the flat record collection delivered by a translations provider into a
three-level lookup structure: namespace -> key -> locale -> value.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Union

from infrastructure.i18n.models import IndexElements, TranslationRecord
from infrastructure.logging import get_module_logger

logger = get_module_logger()

RecordLike = Union[TranslationRecord, Mapping[str, Any]]


def build(records: Iterable[RecordLike]) -> IndexElements:
    """Build index elements from translation records.

    Records are processed in order; the last value seen for a given
    (namespace, key, locale) wins. Records without translations contribute
    nothing, not even an empty namespace branch.

    Args:
        records: TranslationRecords or mappings of the same shape.

    Returns:
        Nested dict {namespace: {key: {locale: value}}}.
    """
    elements: IndexElements = {}
    count = 0
    for record in records:
        if not isinstance(record, TranslationRecord):
            record = TranslationRecord.from_dict(record)
        count += 1
        for translation in record.translations:
            keys = elements.setdefault(record.namespace, {})
            locales = keys.setdefault(record.key, {})
            locales[translation.locale] = translation.value

    logger.info(
        "translations_indexed",
        record_count=count,
        namespace_count=len(elements),
    )
    return elements


class TranslationIndex:
    """Queryable namespace -> key -> locale -> value index.

    Owned by a single Translator. Empty until ``build`` is called.
    """

    def __init__(self):
        self.elements: IndexElements = {}

    def build(self, records: Iterable[RecordLike]) -> None:
        """Index the given records on top of the current elements."""
        for namespace, keys in build(records).items():
            target = self.elements.setdefault(namespace, {})
            for key, locales in keys.items():
                target.setdefault(key, {}).update(locales)

    def get(self, namespace: str, key: str, locale: str) -> Optional[str]:
        """Look up a single value.

        Returns:
            The stored value, or None if any level is missing.
        """
        keys = self.elements.get(namespace)
        if not keys or key not in keys:
            return None
        return keys[key].get(locale)

    def get_namespace(self, namespace: str) -> Dict[str, Dict[str, str]]:
        """Get the key -> locale -> value mapping of a namespace."""
        return self.elements.get(namespace, {})

    def namespaces(self) -> list:
        """List indexed namespaces in insertion order."""
        return list(self.elements.keys())

    def __len__(self) -> int:
        return len(self.elements)
