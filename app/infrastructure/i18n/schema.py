"""Schema for per-locale translation trees.

Each locale is authored as a complete, independent copy of the site copy.
Validating every tree against the same models turns a missing or misspelled
key into a startup failure instead of blank content on a page.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from pydantic import Field

from infrastructure.i18n.models import Locale
from infrastructure.models import ContentModel


class SiteContent(ContentModel):
    title: str
    description: str


class NavLinkConfig(ContentModel):
    """Navigation entry; ``path`` is a content path without locale prefix."""

    label: str
    path: str


class HeaderContent(ContentModel):
    nav_links: List[NavLinkConfig]
    download_label: str
    download_path: str
    menu_label: str
    language_label: str
    home_aria_label: str


class FooterContent(ContentModel):
    brand_company: str
    brand_product: str
    address_line: str
    business_label: str
    business_number: str
    top_label: str
    top_aria_label: str
    copyright: str


class HeroContent(ContentModel):
    title_lines: List[str]
    description: str


class CardItem(ContentModel):
    title: str
    description: str
    href: str
    cta: str
    image: str
    image_alt: str


class CardsContent(ContentModel):
    title_lines: List[str]
    items: List[CardItem]


class FeatureItem(ContentModel):
    title: str
    description: str


class FeaturesContent(ContentModel):
    title: str
    subtitle: str
    description: str
    items: List[FeatureItem]


class NewsContent(ContentModel):
    title: str
    read_more: str


class HomeTranslations(ContentModel):
    head_title: str
    head_description: str
    hero: HeroContent
    cards: CardsContent
    features: FeaturesContent
    news: NewsContent


class UseCase(ContentModel):
    id: str
    title_lines: List[str]
    description: str
    href: str
    cta: str
    image: str
    image_alt: str
    reverse_on_desktop: bool = False


class UseCasesTranslations(ContentModel):
    head_title: str
    head_description: str
    hero_heading: str
    cases: List[UseCase]


class Breadcrumbs(ContentModel):
    home: str
    blog: str


class BlogTranslations(ContentModel):
    head_title: str
    head_description: str
    breadcrumbs: Breadcrumbs
    search_placeholder: str
    read_cta: str
    read_aria_label_prefix: str


class BlogPostTranslations(ContentModel):
    breadcrumbs: Breadcrumbs
    updated_prefix: str


class DateFormatConfig(ContentModel):
    """Date formatting settings: a BCP 47 tag plus Intl-style options."""

    locale: str
    options: Dict[str, str] = Field(default_factory=dict)


class Translations(ContentModel):
    """Complete translation dictionary for one locale."""

    site: SiteContent
    header: HeaderContent
    footer: FooterContent
    home: HomeTranslations
    use_cases: UseCasesTranslations
    blog: BlogTranslations
    blog_post: BlogPostTranslations
    dates: DateFormatConfig


@dataclass(frozen=True)
class TranslationCatalog:
    """Validated translation tree for a single locale.

    Attributes:
        locale: The Locale this catalog is for.
        translations: The validated translation dictionary.
        source_files: Files the tree was merged from, in merge order.
    """

    locale: Locale
    translations: Translations
    source_files: Tuple[str, ...] = ()
