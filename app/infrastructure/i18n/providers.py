"""Translations providers.

A provider hands the translator its flat record collection exactly once,
through ``get(callback)``. The translator calls ``get`` during construction
and builds its index when the callback fires.
"""

from concurrent.futures import Future
from pathlib import Path
from typing import Any, Callable, List, Protocol, Sequence

import yaml

from infrastructure.i18n.models import TranslationRecord
from infrastructure.logging import get_module_logger

logger = get_module_logger()

RecordsCallback = Callable[[Sequence[Any]], None]


class TranslationsProvider(Protocol):
    """Anything that can deliver translation records once via a callback."""

    def get(self, callback: RecordsCallback) -> None:
        """Invoke ``callback(records)`` once records are available."""


class StaticTranslationsProvider:
    """Provider for records already held in memory.

    Delivers synchronously: the callback runs inside ``get``.
    """

    def __init__(self, records: Sequence[Any]):
        self.records = list(records)

    def get(self, callback: RecordsCallback) -> None:
        callback(self.records)


class YAMLTranslationsProvider:
    """Provider reading translation records from YAML files.

    Every ``*.yml``/``*.yaml`` file in the directory is read in sorted name
    order. Each file holds a list of records::

        - namespace: ui
          key: greeting
          translations:
            - locale: en
              value: "Hello, {{name}}"

    Records from later files overwrite earlier ones for the same
    (namespace, key, locale).

    Attributes:
        translations_dir: Path to directory containing YAML files.
    """

    def __init__(self, translations_dir: Path):
        """Initialize YAML translations provider.

        Args:
            translations_dir: Path to directory with YAML record files.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_provider",
            translations_dir=str(self.translations_dir),
        )

    def load(self) -> List[TranslationRecord]:
        """Read and parse all record files.

        Returns:
            TranslationRecords in file order.

        Raises:
            ValueError: If a file cannot be parsed.
        """
        files = sorted(
            list(self.translations_dir.glob("*.yml"))
            + list(self.translations_dir.glob("*.yaml"))
        )

        records: List[TranslationRecord] = []
        for yaml_file in files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, list):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="list"
                )
                continue

            for item in data:
                if not isinstance(item, dict):
                    logger.warning(
                        "invalid_record_format",
                        file=str(yaml_file),
                        expected="mapping",
                    )
                    continue
                records.append(TranslationRecord.from_dict(item))

        logger.info(
            "loaded_translation_records",
            file_count=len(files),
            record_count=len(records),
        )
        return records

    def get(self, callback: RecordsCallback) -> None:
        callback(self.load())


class DeferredTranslationsProvider:
    """Provider backed by a future that resolves to the record collection.

    The callback runs when the future completes, on the thread completing it,
    or immediately if it is already done. A future that fails or is cancelled
    never fires the callback, leaving the translator not ready. An error
    raised while indexing the delivered records is logged the same way, as
    ``concurrent.futures`` would otherwise drop it.
    """

    def __init__(self, future: "Future[Sequence[Any]]"):
        self.future = future

    def get(self, callback: RecordsCallback) -> None:
        def _deliver(future: "Future[Sequence[Any]]") -> None:
            if future.cancelled():
                logger.warning("translations_future_cancelled")
                return
            error = future.exception()
            if error is not None:
                logger.error("translations_future_failed", error=str(error))
                return
            try:
                callback(future.result())
            except Exception as e:  # pylint: disable=broad-except
                logger.error("translations_index_failed", error=str(e))

        self.future.add_done_callback(_deliver)
