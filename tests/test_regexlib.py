import re

import pytest

from concertlang.regexlib import regex_find_all, regex_match, regex_replace, regex_search
from concertlang.variables import VarStore


def test_replace_all_matches():
    assert regex_replace("a1b2", r"\d", "#") == "a#b#"


def test_replace_with_group_references():
    assert regex_replace("john smith", r"(\w+) (\w+)", "$2 $1") == "smith john"


def test_replace_whole_match_and_dollar():
    assert regex_replace("ab", "b", "[$&]$$") == "a[b]$"


def test_match_whole_text_only():
    assert regex_match("abc", "a.c") is True
    assert regex_match("abcd", "a.c") is False


def test_find_all_matches_in_order():
    assert regex_find_all("a1b22c333", r"\d+") == ["1", "22", "333"]


def test_find_all_empty_matches_terminate():
    found = regex_find_all("ab", "x*")
    assert all(item == "" for item in found)
    assert len(found) <= len("ab") + 1


def test_search_stores_object():
    store = VarStore()
    obj = regex_search(store, "result", "a1b22", r"\d+")
    holder = store.lookup("result").var
    assert holder[0] is obj
    assert obj.keys() == ["length", "data"]
    assert obj.lookup("length").var[0] == len(obj.lookup("data").var)
    assert list(obj.lookup("data").var) == ["1", "22"]


def test_search_without_matches():
    store = VarStore()
    obj = regex_search(store, "none", "abc", r"\d")
    assert obj.lookup("length").var[0] == 0
    assert len(obj.lookup("data").var) == 0


def test_invalid_pattern_raises():
    with pytest.raises(re.error):
        regex_match("abc", "(")