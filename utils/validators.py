import re
from typing import Dict, Optional

from book_inventory.book import Category

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class CategoryValidator:
    """Maps user text to a Category variant, ignoring case and surrounding spaces."""

    _LOOKUP: Dict[str, Category] = {member.name.casefold(): member for member in Category}

    @staticmethod
    def normalize(raw: Optional[str]) -> str:
        if raw is None:
            return ""
        return raw.strip().casefold()

    @staticmethod
    def parse_category(raw: Optional[str]) -> Optional[Category]:
        return CategoryValidator._LOOKUP.get(CategoryValidator.normalize(raw))

    @staticmethod
    def is_valid_category(raw: Optional[str]) -> bool:
        return CategoryValidator.parse_category(raw) is not None

    @staticmethod
    def available() -> str:
        """Valid names in declaration order, e.g. '[FICTION, SCIENCE, ...]'."""
        return "[" + ", ".join(Category.names()) + "]"


class NumberValidator:
    """Integer parsing for menu selectors and book ids."""

    @staticmethod
    def parse_int(raw: Optional[str]) -> Optional[int]:
        if raw is None:
            return None
        s = raw.strip()
        # int() also accepts '1_000' and non-ASCII digits; only plain integers are allowed here
        if not _INT_PATTERN.fullmatch(s):
            return None
        return int(s)

    @staticmethod
    def is_valid_int(raw: Optional[str]) -> bool:
        return NumberValidator.parse_int(raw) is not None
