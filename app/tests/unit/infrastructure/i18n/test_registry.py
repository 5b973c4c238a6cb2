"""Tests for infrastructure.i18n.registry module."""

import pytest

from infrastructure.i18n.models import Locale, LocaleConfigurationError
from infrastructure.i18n.registry import LANGUAGES, LocaleRegistry, registry
from tests.factories.i18n import make_locale_metadata


@pytest.mark.unit
class TestDefaultRegistry:
    """Tests for the static locale table."""

    def test_default_locale_is_english(self):
        assert registry.default_locale() == Locale.EN

    def test_locales_in_table_order(self):
        assert registry.locales() == (Locale.EN, Locale.KO)

    def test_metadata_for_korean(self):
        metadata = registry.metadata_for(Locale.KO)
        assert metadata.label == "KOR"
        assert metadata.flag == "🇰🇷"
        assert metadata.name == "한국어"
        assert metadata.formatting_locale == "ko-KR"
        assert metadata.html_lang == "ko"
        assert metadata.path_prefix == "ko"

    def test_metadata_for_english(self):
        metadata = registry.metadata_for(Locale.EN)
        assert metadata.label == "ENG"
        assert metadata.formatting_locale == "en-US"

    def test_every_locale_has_metadata(self):
        for locale in Locale:
            assert registry.metadata_for(locale).code == locale

    @pytest.mark.parametrize("token", ["en", "ko", Locale.KO])
    def test_is_supported(self, token):
        assert registry.is_supported(token)

    @pytest.mark.parametrize("token", [None, "", "xx", "KO", " ko", "ko/", 1, ["ko"]])
    def test_is_not_supported(self, token):
        assert not registry.is_supported(token)

    def test_prefixes(self):
        assert registry.prefixes() == frozenset({"en", "ko"})

    def test_locale_for_prefix(self):
        assert registry.locale_for_prefix("ko") == Locale.KO
        assert registry.locale_for_prefix("blog") is None

    def test_iteration_yields_metadata(self):
        assert [metadata.code for metadata in registry] == [Locale.EN, Locale.KO]
        assert len(registry) == 2

    def test_languages_table_is_read_only(self):
        with pytest.raises(TypeError):
            LANGUAGES[Locale.KO] = make_locale_metadata(Locale.KO)  # type: ignore[index]


@pytest.mark.unit
class TestRegistryValidation:
    """Inconsistent tables fail at construction."""

    def test_missing_locale_metadata(self):
        with pytest.raises(LocaleConfigurationError, match="ko"):
            LocaleRegistry({Locale.EN: make_locale_metadata(Locale.EN)})

    def test_unregistered_default(self):
        languages = {Locale.KO: make_locale_metadata(Locale.KO)}
        with pytest.raises(LocaleConfigurationError, match="Default locale"):
            LocaleRegistry(languages, default_locale=Locale.EN)

    def test_duplicate_prefix(self):
        languages = {
            Locale.EN: make_locale_metadata(Locale.EN, path_prefix="xx"),
            Locale.KO: make_locale_metadata(Locale.KO, path_prefix="xx"),
        }
        with pytest.raises(LocaleConfigurationError, match="shared"):
            LocaleRegistry(languages)

    @pytest.mark.parametrize("prefix", ["", "k/o", " ko"])
    def test_invalid_prefix(self, prefix):
        languages = {
            Locale.EN: make_locale_metadata(Locale.EN),
            Locale.KO: make_locale_metadata(Locale.KO, path_prefix=prefix),
        }
        with pytest.raises(LocaleConfigurationError, match="Invalid path prefix"):
            LocaleRegistry(languages)

    def test_metadata_registered_under_wrong_code(self):
        languages = {
            Locale.EN: make_locale_metadata(Locale.EN),
            Locale.KO: make_locale_metadata(Locale.EN, path_prefix="ko"),
        }
        with pytest.raises(LocaleConfigurationError, match="registered as"):
            LocaleRegistry(languages)

    def test_custom_prefix(self):
        languages = {
            Locale.EN: make_locale_metadata(Locale.EN),
            Locale.KO: make_locale_metadata(Locale.KO, path_prefix="kr"),
        }
        custom = LocaleRegistry(languages)
        assert custom.locale_for_prefix("kr") == Locale.KO
        assert custom.locale_for_prefix("ko") is None
