import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.i18n import I18nService, create_translation_resolver  # noqa: E402
from infrastructure.i18n.factory import default_translations_dir  # noqa: E402


@pytest.fixture(scope="session")
def bundled_translations_dir():
    """The translations shipped in app/locales."""
    return default_translations_dir()


@pytest.fixture(scope="session")
def translation_resolver(bundled_translations_dir):
    """TranslationResolver built from the bundled translations."""
    return create_translation_resolver(bundled_translations_dir)


@pytest.fixture(scope="session")
def i18n_service(translation_resolver):
    """I18nService backed by the bundled translations."""
    return I18nService(translations=translation_resolver)
