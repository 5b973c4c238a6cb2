"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- LocaleMetadata
- Translation trees (raw dicts as authored in YAML)
- TranslationCatalog
- BlogPost content items
"""

import copy
from datetime import datetime
from pathlib import Path
from typing import Optional

import yaml

from infrastructure.i18n import Locale, LocaleMetadata, TranslationCatalog, Translations
from modules.feeds import BlogPost

_BASE_TREE = {
    "site": {"title": "Kuanta", "description": "Programmable message routing."},
    "header": {
        "navLinks": [
            {"label": "Docs", "path": "docs"},
            {"label": "Blog", "path": "blog"},
        ],
        "downloadLabel": "Download",
        "downloadPath": "download",
        "menuLabel": "Menu",
        "languageLabel": "Language",
        "homeAriaLabel": "Kuanta home",
    },
    "footer": {
        "brandCompany": "Billycrew",
        "brandProduct": "Kuanta Solution",
        "addressLine": "Seoul",
        "businessLabel": "Business Registration Number",
        "businessNumber": "678-87-02665",
        "topLabel": "TOP",
        "topAriaLabel": "Back to top",
        "copyright": "© billycrew",
    },
    "home": {
        "headTitle": "Home",
        "headDescription": "Home page",
        "hero": {"titleLines": ["PROGRAMMABLE"], "description": "Hero"},
        "cards": {
            "titleLines": ["Cards"],
            "items": [
                {
                    "title": "PMR",
                    "description": "Router",
                    "href": "#",
                    "cta": "Read more",
                    "image": "/images/home/pmr.jpg",
                    "imageAlt": "PMR preview",
                }
            ],
        },
        "features": {
            "title": "Features",
            "subtitle": "Subtitle",
            "description": "Description",
            "items": [{"title": "Fast", "description": "Low latency"}],
        },
        "news": {"title": "NEWS", "readMore": "Read more"},
    },
    "useCases": {
        "headTitle": "Use Cases",
        "headDescription": "Use cases",
        "heroHeading": "POWERED BY",
        "cases": [
            {
                "id": "daishin",
                "titleLines": ["Daishin"],
                "description": "Case",
                "href": "#",
                "cta": "Learn",
                "image": "/images/use-cases/daishin.jpg",
                "imageAlt": "Daishin",
            }
        ],
    },
    "blog": {
        "headTitle": "Blog",
        "headDescription": "Blog",
        "breadcrumbs": {"home": "Home", "blog": "Blog"},
        "searchPlaceholder": "Enter keywords",
        "readCta": "READ",
        "readAriaLabelPrefix": "Read",
    },
    "blogPost": {
        "breadcrumbs": {"home": "Home", "blog": "Blog"},
        "updatedPrefix": "Last updated on",
    },
    "dates": {
        "locale": "en-US",
        "options": {"year": "numeric", "month": "short", "day": "numeric"},
    },
}


def make_translation_data(locale: Locale = Locale.EN, title: Optional[str] = None) -> dict:
    """Create a complete raw translation tree for a locale.

    Args:
        locale: Locale the tree is for; only the site title and date locale differ.
        title: Optional site title override.

    Returns:
        Dict shaped like an authored YAML file.
    """
    data = copy.deepcopy(_BASE_TREE)
    data["site"]["title"] = title or f"Kuanta ({locale.value})"
    data["dates"]["locale"] = "en-US" if locale == Locale.EN else "ko-KR"
    return data


def make_translation_catalog(
    locale: Locale = Locale.EN,
    data: Optional[dict] = None,
) -> TranslationCatalog:
    """Create a TranslationCatalog instance.

    Args:
        locale: Locale for the catalog.
        data: Raw translation tree; defaults to make_translation_data(locale).

    Returns:
        TranslationCatalog instance.
    """
    if data is None:
        data = make_translation_data(locale)
    return TranslationCatalog(
        locale=locale,
        translations=Translations.model_validate(data),
        source_files=(f"site.{locale.value}.yml",),
    )


def make_locale_metadata(
    code: Locale = Locale.EN,
    path_prefix: Optional[str] = None,
    **overrides,
) -> LocaleMetadata:
    """Create a LocaleMetadata instance with sensible defaults."""
    values = {
        "code": code,
        "label": code.value.upper(),
        "flag": "🏳",
        "name": code.value,
        "formatting_locale": f"{code.value}-XX",
        "html_lang": code.value,
        "path_prefix": path_prefix if path_prefix is not None else code.value,
    }
    values.update(overrides)
    return LocaleMetadata(**values)


def make_blog_post(
    translation_key: str = "hello-world",
    lang: str = "en",
    pub_date: Optional[datetime] = None,
    **overrides,
) -> BlogPost:
    """Create a BlogPost instance."""
    values = {
        "translation_key": translation_key,
        "lang": lang,
        "title": f"Post {translation_key}",
        "description": "A post",
        "pub_date": pub_date or datetime(2024, 1, 1),
    }
    values.update(overrides)
    return BlogPost(**values)


def write_translation_file(path: Path, data: dict) -> Path:
    """Write a raw translation tree to ``path`` as YAML."""
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True)
    return path
