"""Feature-level fixtures for i18n system tests.

Provides temporary translation directories for loader and factory scenarios.
"""

import pytest

from infrastructure.i18n import Locale, YAMLTranslationLoader
from tests.factories.i18n import make_translation_data, write_translation_file


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with complete translations for every locale.

    Returns a directory structure like:
    - site.en.yml
    - site.ko.yml
    """
    en = make_translation_data(Locale.EN, title="Kuanta")
    ko = make_translation_data(Locale.KO, title="쿠안타")
    write_translation_file(tmp_path / "site.en.yml", en)
    write_translation_file(tmp_path / "site.ko.yml", ko)
    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)
