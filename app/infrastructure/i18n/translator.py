"""Translation service for resolving translated messages.

Core component for i18n: resolves a (namespace, key, locale) triple against
an in-memory index, falls back to the preferred locale and then to the key
itself, and substitutes placeholders from a context.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Union, overload

from infrastructure.i18n import placeholders
from infrastructure.i18n.index import TranslationIndex
from infrastructure.i18n.models import ResolvedQuery, TranslationQuery
from infrastructure.i18n.providers import TranslationsProvider
from infrastructure.logging import get_module_logger

logger = get_module_logger()

Context = Mapping[str, Any]
Query = Union[TranslationQuery, Mapping[str, Any]]
ReplaceFunc = Callable[[str, Any], str]


def _validate_locale(locale: Any) -> str:
    if not isinstance(locale, str):
        raise TypeError("The passed argument locale is not a string.")
    if len(locale) <= 0:
        raise ValueError("The passed locale is empty.")
    return locale


class Translator:
    """Service for translating keys with locale fallback and placeholders.

    Builds its index once, when the translations provider delivers records.
    Every other operation is a synchronous read of that index.

    Attributes:
        index: TranslationIndex owned by this translator.
    """

    def __init__(
        self,
        translations_provider: TranslationsProvider,
        preferred_locale: str,
        replace: ReplaceFunc = placeholders.replace,
    ):
        """Initialize Translator.

        Args:
            translations_provider: Object whose ``get(callback)`` delivers the
                translation records. Called exactly once, here.
            preferred_locale: Default locale for calls that omit one, and the
                fallback locale when the requested one has no value.
            replace: Placeholder substitution function ``replace(template, context)``.

        Raises:
            TypeError: If preferred_locale is not a string.
            ValueError: If preferred_locale is empty.
        """
        self._preferred_locale = _validate_locale(preferred_locale)
        self._replace = replace
        self.index = TranslationIndex()

        translations_provider.get(self._on_translations)
        logger.info("initialized_translator", preferred_locale=preferred_locale)

    def _on_translations(self, records) -> None:
        self.index.build(records)

    @property
    def preferred_locale(self) -> str:
        return self._preferred_locale

    @overload
    def translate(
        self,
        key_or_query: str,
        namespace_or_context: Optional[str] = None,
        locale_or_context: Optional[str] = None,
        context: Optional[Context] = None,
    ) -> str: ...

    @overload
    def translate(
        self,
        key_or_query: str,
        namespace_or_context: str,
        locale_or_context: Context,
    ) -> str: ...

    @overload
    def translate(self, key_or_query: str, namespace_or_context: Context) -> str: ...

    @overload
    def translate(
        self,
        key_or_query: Query,
        namespace_or_context: Union[str, Context, None] = None,
        locale_or_context: Union[str, Context, None] = None,
        context: Optional[Context] = None,
    ) -> str: ...

    def translate(
        self,
        key_or_query,
        namespace_or_context=None,
        locale_or_context=None,
        context=None,
    ):
        """Translate a key against the translations index.

        The role of each positional argument follows from its type: a string
        in second position is the namespace, in third the locale; a mapping
        in either position is the context. An explicit ``context`` argument
        overrides any context passed positionally.

        Args:
            key_or_query: Key to translate, or a TranslationQuery / mapping
                with ``key``, ``namespace`` and optional ``locale``/``context``.
            namespace_or_context: Namespace ("" when omitted) or context.
            locale_or_context: Locale overriding the preferred one, or context.
            context: Values for placeholders in the resolved message.

        Returns:
            The value for the requested locale, else the value for the
            preferred locale, else the key itself; with placeholders
            substituted when a context is given.

        Raises:
            TypeError: If an argument has the wrong type.
            ValueError: If the key is missing or the namespace is undefined.
        """
        preferred_locale = self._preferred_locale
        query = self._normalize(
            preferred_locale,
            key_or_query,
            namespace_or_context,
            locale_or_context,
            context,
        )

        translation = self.index.get(query.namespace, query.key, query.locale)
        if not translation and query.locale != preferred_locale:
            translation = self.index.get(query.namespace, query.key, preferred_locale)
            if translation:
                logger.debug(
                    "used_fallback_translation",
                    key=query.key,
                    namespace=query.namespace,
                    requested_locale=query.locale,
                    fallback_locale=preferred_locale,
                )

        result = translation
        if not result:
            logger.debug(
                "translation_not_found",
                key=query.key,
                namespace=query.namespace,
                locale=query.locale,
            )
            result = query.key

        if query.context is not None:
            result = self._replace(result, query.context)

        return result

    def _normalize(
        self,
        preferred_locale: str,
        key_or_query: Any,
        namespace_or_context: Any,
        locale_or_context: Any,
        context: Any,
    ) -> ResolvedQuery:
        """Turn any accepted call shape into a validated ResolvedQuery."""
        query = ResolvedQuery(namespace="", locale=preferred_locale)

        if isinstance(key_or_query, str):
            query.key = key_or_query
        elif isinstance(key_or_query, TranslationQuery):
            query = ResolvedQuery(
                key=key_or_query.key,
                namespace=key_or_query.namespace,
                locale=key_or_query.locale,
                context=key_or_query.context,
            )
        elif isinstance(key_or_query, Mapping):
            query = ResolvedQuery(
                key=key_or_query.get("key"),
                namespace=key_or_query.get("namespace"),
                locale=key_or_query.get("locale"),
                context=key_or_query.get("context"),
            )
        else:
            raise TypeError(
                f'The passed key: "{key_or_query}" is neither a string nor a query.'
            )

        if query.locale is None:
            query.locale = preferred_locale

        if isinstance(namespace_or_context, str):
            query.namespace = namespace_or_context
        elif isinstance(namespace_or_context, Mapping):
            query.context = namespace_or_context
        elif namespace_or_context is not None:
            raise TypeError(
                f'The passed namespace: "{namespace_or_context}" is neither a string nor a context.'
            )

        if isinstance(locale_or_context, str):
            query.locale = locale_or_context
        elif isinstance(locale_or_context, Mapping):
            query.context = locale_or_context
        elif locale_or_context is not None:
            raise TypeError(
                f'The passed locale: "{locale_or_context}" is neither a string nor a context.'
            )

        if context is not None:
            if not isinstance(context, Mapping):
                raise TypeError(f'The passed context: "{context}" is not an object.')
            query.context = context

        if not query.key:
            raise ValueError("A key is required!")
        if not isinstance(query.key, str):
            raise TypeError(f'The passed key: "{query.key}" is not a string.')
        if query.namespace is None:
            raise ValueError("A namespace is required!")
        if not isinstance(query.namespace, str):
            raise TypeError(f'The passed namespace: "{query.namespace}" is not a string.')
        if not query.locale:
            raise ValueError("A locale is required!")
        if not isinstance(query.locale, str):
            raise TypeError(f'The passed locale: "{query.locale}" is not a string.')
        if query.context is not None and not isinstance(query.context, Mapping):
            raise TypeError(f'The passed context: "{query.context}" is not an object.')

        return query

    def get_translations_by_namespace(self, namespace: str) -> Dict[str, Optional[str]]:
        """Get every key of a namespace with its preferred-locale value.

        No locale fallback is applied: a key without a value at the preferred
        locale maps to None.

        Args:
            namespace: Namespace to dump.

        Returns:
            Dict of key -> value at the preferred locale.

        Raises:
            TypeError: If namespace is not a string.
        """
        if not isinstance(namespace, str):
            raise TypeError("The passed namespace is not a string.")

        preferred_locale = self._preferred_locale
        return {
            key: locales.get(preferred_locale)
            for key, locales in self.index.get_namespace(namespace).items()
        }

    def is_ready(self) -> bool:
        """Check whether the translator is ready to translate.

        Returns:
            True once at least one translation has been indexed.
        """
        return len(self.index) > 0

    def set_preferred_locale(self, locale: str) -> None:
        """Set the preferred locale for all subsequent calls.

        Args:
            locale: Locale identifier (language[_territory]).

        Raises:
            TypeError: If locale is not a string.
            ValueError: If locale is empty.
        """
        self._preferred_locale = _validate_locale(locale)
        logger.info("preferred_locale_changed", preferred_locale=locale)
