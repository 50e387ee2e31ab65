"""Feature-level fixtures for i18n system tests.

Provides translation records, YAML record files and ready translators.
"""

import pytest
import yaml

from infrastructure.i18n import StaticTranslationsProvider, Translator
from tests.factories.i18n import make_greeting_records


@pytest.fixture
def greeting_records():
    """In-memory records used by most translator tests."""
    return make_greeting_records()


@pytest.fixture
def translator(greeting_records):
    """Ready Translator with preferred locale "en"."""
    return Translator(StaticTranslationsProvider(greeting_records), "en")


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML record files.

    Returns a directory structure like:
    - 01-ui.yml
    - 02-overrides.yaml (overrides ui.logout in de)
    """
    ui_records = [
        {
            "namespace": "ui",
            "key": "greeting",
            "translations": [
                {"locale": "en", "value": "Hello, {{name}}"},
                {"locale": "de", "value": "Hallo, {{name}}"},
            ],
        },
        {
            "namespace": "ui",
            "key": "logout",
            "translations": [
                {"locale": "en", "value": "Sign out"},
                {"locale": "de", "value": "Ausloggen"},
            ],
        },
    ]
    with open(tmp_path / "01-ui.yml", "w", encoding="utf-8") as f:
        yaml.dump(ui_records, f, allow_unicode=True)

    overrides = [
        {
            "namespace": "ui",
            "key": "logout",
            "translations": [{"locale": "de", "value": "Abmelden"}],
        }
    ]
    with open(tmp_path / "02-overrides.yaml", "w", encoding="utf-8") as f:
        yaml.dump(overrides, f, allow_unicode=True)

    return tmp_path


class RecordingProvider:
    """Provider that holds on to the callback until told to deliver."""

    def __init__(self):
        self.callbacks = []

    def get(self, callback):
        self.callbacks.append(callback)

    def deliver(self, records):
        for callback in self.callbacks:
            callback(records)


@pytest.fixture
def recording_provider():
    """Provider whose callback fires only when deliver() is called."""
    return RecordingProvider()
