"""Tests for delimiter-based list splitting."""

import pytest
from shoplist.parsing.segmenter import ITEM_DELIMITERS, split_items


def test_comma_separated_list() -> None:
    assert split_items("Bread, milk, chicken") == ["Bread", "milk", "chicken"]


def test_mixed_delimiters_and_blank_fragments() -> None:
    text = "Bread;milk\n\n  chicken ,, ;\r\n2x apples"
    assert split_items(text) == ["Bread", "milk", "chicken", "2x apples"]


def test_period_is_not_a_delimiter() -> None:
    assert split_items("1.5 kg flour. eggs, 0.5l cream") == ["1.5 kg flour. eggs", "0.5l cream"]


@pytest.mark.parametrize("text", ["", "   ", ",;\n", " , ; \n \t "])
def test_blank_text_yields_nothing(text: str) -> None:
    assert split_items(text) == []


@pytest.mark.parametrize(
    "text",
    [
        "a,b;c\nd",
        " ,x,, y ;\n\nz ",
        "one item only",
        "milk;;;bread\n,\n",
    ],
)
def test_fragments_are_trimmed_and_free_of_delimiters(text: str) -> None:
    for fragment in split_items(text):
        assert fragment == fragment.strip()
        assert fragment
        assert not any(delimiter in fragment for delimiter in ITEM_DELIMITERS)
