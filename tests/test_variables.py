import pytest

from concertlang.reserved import ReservedWord
from concertlang.variables import (
    ObjectStore,
    Var,
    VarStore,
    literal_var,
    lookup,
    resolve,
    resolve_typed,
    resolve_wide,
    single_quote_var,
    typed_literal_var,
    unescape,
    unquote,
    wide_literal_var,
)


def test_var_defaults_and_length():
    var = Var("a", ReservedWord.TYPE_INT, 3)
    assert len(var) == 3
    assert list(var) == [0, 0, 0]


def test_var_set_and_get_round_trip():
    var = Var("s", ReservedWord.TYPE_STRING, 2)
    var[1] = "hello"
    assert var[1] == "hello"
    assert var[0] == ""


def test_var_rejects_bad_index():
    var = Var("a", ReservedWord.TYPE_DOUBLE, 2)
    with pytest.raises(IndexError) as read_error:
        var[2]
    assert "index 2" in str(read_error.value)
    with pytest.raises(IndexError) as write_error:
        var[-1] = 1.0
    assert "index -1" in str(write_error.value)
    assert var.values == [0.0, 0.0]


def test_var_negative_size():
    with pytest.raises(ValueError):
        Var("a", ReservedWord.TYPE_INT, -1)


def test_object_var_elements_are_distinct_stores():
    var = Var("o", ReservedWord.TYPE_OBJECT, 2)
    assert var[0] is not var[1]
    var[0].add(Var("x", ReservedWord.TYPE_INT))
    assert var[1].keys() == []


def test_store_add_lookup_remove():
    store = VarStore()
    var = Var("count", ReservedWord.TYPE_INT)
    store.add(var)
    found = store.lookup("count")
    assert found.var is var
    assert found.index == 0
    assert found.created is False
    store.remove("count")
    assert store.lookup("count") is None
    with pytest.raises(KeyError):
        store.remove("count")


def test_object_store_keys_in_order():
    obj = ObjectStore()
    obj.add(Var("b", ReservedWord.TYPE_INT))
    obj.add(Var("a", ReservedWord.TYPE_STRING))
    assert obj.keys() == ["b", "a"]


def test_unquote_and_unescape():
    assert unquote('"hi"') == "hi"
    assert unescape('a\\nb \\"q\\"') == 'a\nb "q"'


def test_literal_var_kinds():
    text = literal_var('"word"')
    assert (text.var_type, text[0]) == (ReservedWord.TYPE_STRING, "word")
    dbl = literal_var("1.5")
    assert (dbl.var_type, dbl[0]) == (ReservedWord.TYPE_DOUBLE, 1.5)
    num = literal_var("7")
    assert (num.var_type, num[0]) == (ReservedWord.TYPE_INT, 7)


def test_literal_var_reads_integer_prefix():
    assert literal_var("12abc")[0] == 12


def test_literal_var_errors():
    with pytest.raises(ValueError):
        literal_var("abc")
    with pytest.raises(ValueError):
        literal_var("3000000000")


def test_typed_literal_var():
    assert typed_literal_var("5", ReservedWord.TYPE_LONG)[0] == 5
    assert typed_literal_var("abc", ReservedWord.TYPE_STRING)[0] == "abc"
    assert typed_literal_var('"abc"', ReservedWord.TYPE_STRING)[0] == "abc"
    assert typed_literal_var("2.5", ReservedWord.TYPE_DOUBLE)[0] == 2.5
    assert typed_literal_var("x", ReservedWord.TYPE_OBJECT) is None


def test_wide_literal_var_picks_long_for_large_values():
    big = wide_literal_var("3000000000")
    assert (big.var_type, big[0]) == (ReservedWord.TYPE_LONG, 3000000000)
    small = wide_literal_var("12")
    assert (small.var_type, small[0]) == (ReservedWord.TYPE_INT, 12)


def test_single_quote_var():
    assert single_quote_var("'a'")[0] == "a"
    assert single_quote_var("a") is None


def test_resolve_prefers_stored_variable():
    store = VarStore()
    var = Var("7", ReservedWord.TYPE_STRING)
    store.add(var)
    assert resolve(store, "7").var is var
    literal = resolve(store, "8")
    assert literal.created is True
    assert literal.var[0] == 8


def test_resolve_typed_and_wide_and_lookup():
    store = VarStore()
    assert resolve_typed(store, "9", ReservedWord.TYPE_LONG).var.var_type is ReservedWord.TYPE_LONG
    assert resolve_typed(store, "9", ReservedWord.TYPE_OBJECT) is None
    assert resolve_wide(store, "9").var[0] == 9
    assert lookup(store, "9") is None