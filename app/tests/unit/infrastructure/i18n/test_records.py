"""Tests for infrastructure.i18n.records module."""

from datetime import datetime, timezone

import pytest

from infrastructure.i18n.models import LocalizedValue, TranslationRecord
from infrastructure.i18n.records import LocaleEntry, TranslationMaster
from tests.factories.i18n import make_translation_master, make_translator


class TestTranslationMasterNew:
    """Tests for TranslationMaster.new()."""

    def test_new(self):
        """new() creates an untranslated record with sources."""
        master = TranslationMaster.new("greeting", "ui", ["index.html"])
        assert master.key == "greeting"
        assert master.namespace == "ui"
        assert master.sources == ["index.html"]
        assert master.translations == []
        assert master.created.tzinfo is not None

    @pytest.mark.parametrize("key,namespace", [(42, "ui"), ("greeting", None)])
    def test_new_rejects_non_strings(self, key, namespace):
        """new() raises TypeError for non-string key or namespace."""
        with pytest.raises(TypeError, match="Cannot create model"):
            TranslationMaster.new(key, namespace)

    def test_validates_persisted_document(self):
        """model_validate() accepts the stored document shape."""
        master = TranslationMaster.model_validate(
            {
                "key": "greeting",
                "namespace": "ui",
                "created": "2024-01-01T00:00:00Z",
                "sources": ["index.html"],
                "translations": [
                    {
                        "locale": "en",
                        "value": "Hello",
                        "changed": "2024-01-02T00:00:00Z",
                        "created": "2024-01-01T00:00:00Z",
                    }
                ],
            }
        )
        assert master.translations[0].changed == datetime(2024, 1, 2, tzinfo=timezone.utc)


class TestTranslationMasterTranslate:
    """Tests for TranslationMaster.translate()."""

    def test_add_translation(self):
        """translate() adds a new locale."""
        master = make_translation_master()
        translation = master.translate("fr", "Bonjour")
        assert translation.value == "Bonjour"
        assert master.find("fr") is translation
        assert len(master.translations) == 3

    def test_update_translation(self):
        """translate() updates an existing locale and stamps changed."""
        master = make_translation_master()
        before = master.find("de").changed
        translation = master.translate("de", "Guten Tag")
        assert translation.value == "Guten Tag"
        assert translation.changed > before
        assert len(master.translations) == 2

    def test_remove_translation(self):
        """translate() with no value removes only that locale."""
        master = make_translation_master()
        assert master.translate("de") is None
        assert [t.locale for t in master.translations] == ["en"]

    def test_rejects_non_string_locale(self):
        """translate() raises TypeError for a non-string locale."""
        with pytest.raises(TypeError):
            make_translation_master().translate(42, "x")

    def test_rejects_non_string_value(self):
        """translate() raises TypeError for a non-string value."""
        with pytest.raises(TypeError):
            make_translation_master().translate("de", 42)


class TestTranslationMasterSources:
    """Tests for TranslationMaster.merge_sources()."""

    def test_merge_sources_union(self):
        """merge_sources() appends unseen sources only."""
        master = make_translation_master(sources=["a.html", "b.html"])
        master.merge_sources(["b.html", "c.html"])
        assert master.sources == ["a.html", "b.html", "c.html"]


class TestTranslationMasterForLocales:
    """Tests for TranslationMaster.for_locales()."""

    def test_single_locale(self):
        """for_locales() returns an entry for a translated locale."""
        entry = make_translation_master().for_locales("de")
        assert entry == LocaleEntry(key="greeting", namespace="ui", locale="de", value="Hallo")

    def test_untranslated_locale(self):
        """for_locales() returns None for an untranslated locale."""
        assert make_translation_master().for_locales("fr") is None

    def test_untranslated_locale_generated(self):
        """for_locales(generate=True) yields an entry without value."""
        entry = make_translation_master().for_locales("fr", generate=True)
        assert entry.locale == "fr"
        assert entry.value is None

    def test_list_of_locales(self):
        """for_locales() maps over a list of locales."""
        entries = make_translation_master().for_locales(["en", "fr"])
        assert [e.value if e else None for e in entries] == ["Hello", None]

    def test_invalid_locales(self):
        """for_locales() raises TypeError for other argument types."""
        with pytest.raises(TypeError):
            make_translation_master().for_locales(42)


class TestTranslationMasterToRecord:
    """Tests for TranslationMaster.to_record()."""

    def test_to_record(self):
        """to_record() keeps namespace, key and locale values only."""
        record = make_translation_master().to_record()
        assert record == TranslationRecord(
            namespace="ui",
            key="greeting",
            translations=(
                LocalizedValue(locale="en", value="Hello"),
                LocalizedValue(locale="de", value="Hallo"),
            ),
        )

    def test_to_record_without_namespace(self):
        """A stored record without namespace indexes under ""."""
        master = TranslationMaster(key="Save")
        assert master.to_record().namespace == ""

    def test_records_feed_translator(self):
        """Converted records resolve through a translator."""
        masters = [
            make_translation_master(),
            make_translation_master(key="bye", translations={"en": "Bye"}),
        ]
        translator = make_translator(
            [m.to_record() for m in masters], preferred_locale="de"
        )
        assert translator.translate("greeting", "ui") == "Hallo"
        assert translator.translate("bye", "ui", "en") == "Bye"
        assert translator.translate("bye", "ui") == "bye"
