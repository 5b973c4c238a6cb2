"""Base Pydantic model configurations for site content.

Translation trees and content metadata are authored in YAML with camelCase
keys (``headTitle``, ``navLinks``) and read in Python with snake_case
attribute names.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ContentModel(BaseModel):
    """Base model for authored, read-only site content.

    Provides standard Pydantic configuration for:
    - camelCase aliases with populate_by_name
    - Immutability after validation
    - Rejection of unknown keys so typos fail at load time
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # Accept both field name and alias
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )
