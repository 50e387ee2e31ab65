"""Translation models for i18n system.

Defines the flat record shape the index is built from and the normalized
form of a translate call.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

# namespace -> key -> locale -> value
IndexElements = Dict[str, Dict[str, Dict[str, str]]]


@dataclass(frozen=True)
class LocalizedValue:
    """A single translated value for one locale.

    Attributes:
        locale: Locale identifier (e.g., "en", "de_CH").
        value: Translated text, possibly containing placeholders.
    """

    locale: str
    value: str


@dataclass(frozen=True)
class TranslationRecord:
    """A translation master record as delivered by a translations provider.

    Identified by (namespace, key); carries one value per locale.

    Attributes:
        namespace: Grouping label for the key ("" is a valid namespace).
        key: Message key, also used as the human-readable fallback text.
        translations: Values per locale, in delivery order.
    """

    namespace: str
    key: str
    translations: Tuple[LocalizedValue, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TranslationRecord":
        """Create a TranslationRecord from a plain mapping.

        Accepts the shape a YAML/JSON document or a document store yields:
        ``{"namespace": ..., "key": ..., "translations": [{"locale": ..., "value": ...}]}``.
        Fields other than these are ignored. A missing or null namespace
        becomes "" so index keys are never None.

        Args:
            data: Mapping with namespace, key and translations.

        Returns:
            TranslationRecord instance.

        Raises:
            KeyError: If key or a translation's locale/value is missing.
        """
        translations = tuple(
            LocalizedValue(locale=item["locale"], value=item["value"])
            for item in data.get("translations") or ()
        )
        return cls(
            namespace=data.get("namespace") or "",
            key=data["key"],
            translations=translations,
        )


@dataclass(frozen=True)
class TranslationQuery:
    """Fully specified translate call.

    Can be passed as the first argument of ``Translator.translate`` in place
    of a key. ``locale`` defaults to the translator's preferred locale.
    """

    key: str
    namespace: Optional[str] = ""
    locale: Optional[str] = None
    context: Optional[Mapping[str, Any]] = None


@dataclass
class ResolvedQuery:
    """Normalized form of a translate call, built fresh per call.

    Attributes:
        key: Message key to look up.
        namespace: Namespace to look up in; None means undefined (invalid).
        locale: Requested locale.
        context: Values for placeholder substitution, if any.
    """

    key: Any = None
    namespace: Any = ""
    locale: Any = None
    context: Optional[Mapping[str, Any]] = field(default=None)
