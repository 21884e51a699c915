import pytest

from book_inventory.book import Category
from utils.validators import CategoryValidator, NumberValidator


@pytest.mark.parametrize("raw, expected", [
    ("FICTION", Category.FICTION),
    ("fiction", Category.FICTION),
    ("  Science ", Category.SCIENCE),
    ("tEcHnOlOgY", Category.TECHNOLOGY),
    ("comics\n", Category.COMICS),
])
def test_parse_category_ignores_case(raw, expected):
    assert CategoryValidator.parse_category(raw) is expected

@pytest.mark.parametrize("raw", ["", "   ", "poetry", "fict", None, "HISTORY!"])
def test_parse_category_rejects_unknown(raw):
    assert CategoryValidator.parse_category(raw) is None
    assert not CategoryValidator.is_valid_category(raw)

def test_available_lists_every_variant():
    assert CategoryValidator.available() == "[FICTION, SCIENCE, HISTORY, TECHNOLOGY, COMICS]"

@pytest.mark.parametrize("raw, expected", [
    ("1", 1),
    (" 42 ", 42),
    ("-3", -3),
    ("+7", 7),
    ("007", 7),
])
def test_parse_int(raw, expected):
    assert NumberValidator.parse_int(raw) == expected

@pytest.mark.parametrize("raw", ["", "abc", "1.5", "1_000", "٣", "1 2", None, "0x1"])
def test_parse_int_rejects_non_integers(raw):
    assert NumberValidator.parse_int(raw) is None
    assert not NumberValidator.is_valid_int(raw)
