import math

import pytest

from concertlang.assignment import (
    assign,
    assign_at,
    assign_element,
    compare,
    copy_var,
    execute_assignment,
    execute_initialization,
)
from concertlang.operators import EvaluationError
from concertlang.reserved import Operator, ReservedWord
from concertlang.variables import Var, VarStore

INT = ReservedWord.TYPE_INT
LONG = ReservedWord.TYPE_LONG
DOUBLE = ReservedWord.TYPE_DOUBLE
STRING = ReservedWord.TYPE_STRING
OBJECT = ReservedWord.TYPE_OBJECT


def make_store(*variables):
    store = VarStore()
    for var in variables:
        store.add(var)
    return store


@pytest.mark.parametrize(
    "operator, expected",
    [
        (Operator.EQUALS, False),
        (Operator.NOT_EQUALS, True),
        (Operator.LESS_THAN, True),
        (Operator.GREATER_THAN, False),
        (Operator.LESS_THAN_EQUALS, True),
        (Operator.GREATER_THAN_EQUALS, False),
    ],
)
def test_compare_ints(operator, expected):
    a = Var.of(1, INT, "a")
    b = Var.of(2, INT, "b")
    assert compare(a, 0, b, 0, operator) is expected


def test_compare_strings_and_equal_values():
    a = Var.of("apple", STRING)
    b = Var.of("banana", STRING)
    assert compare(a, 0, b, 0, Operator.LESS_THAN) is True
    assert compare(a, 0, a, 0, Operator.EQUALS) is True
    assert compare(a, 0, a, 0, Operator.GREATER_THAN_EQUALS) is True


def test_compare_objects_is_false():
    a = Var("o", OBJECT, 1)
    assert compare(a, 0, a, 0, Operator.EQUALS) is False


def test_assign_element_copies_value():
    lhs = Var("a", INT, 3)
    rhs = Var.of(7, INT)
    assign_element(lhs, 2, rhs, 0)
    assert lhs.values == [0, 0, 7]


def test_assign_element_object_deep_copy():
    source = Var("src", OBJECT, 1)
    member = Var.of(4, INT, "n")
    source[0].add(member)
    target = Var("dst", OBJECT, 1)
    assign_element(target, 0, source, 0)
    copied = target[0].lookup("n").var
    assert copied[0] == 4
    copied[0] = 99
    assert member[0] == 4
    assert target[0].keys() == ["n"]


def test_copy_var_arrays():
    lhs = Var("a", DOUBLE, 2)
    rhs = Var("b", DOUBLE, 2)
    rhs.values[:] = [1.5, 2.5]
    copy_var(lhs, rhs)
    assert lhs.values == rhs.values


def test_copy_var_object_array_size_follows_source():
    source = Var("src", OBJECT, 2)
    source[1].add(Var.of("x", STRING, "s"))
    target = Var("dst", OBJECT, 1)
    copy_var(target, source)
    assert len(target) == len(source)
    assert target[1].lookup("s").var[0] == "x"
    assert target[1] is not source[1]


def test_assign_literals():
    store = make_store(Var("i", INT), Var("d", DOUBLE), Var("s", STRING))
    assign(store, "i", "42")
    assign(store, "d", "2.5")
    assign(store, "s", '"a\\nb"')
    assert store.lookup("i").var[0] == 42
    assert store.lookup("d").var[0] == 2.5
    assert store.lookup("s").var[0] == "a\nb"


def test_assign_from_variable():
    store = make_store(Var.of(11, INT, "x"), Var("y", INT))
    assign(store, "y", "x")
    assert store.lookup("y").var[0] == store.lookup("x").var[0]


def test_assign_unknown_target_raises():
    with pytest.raises(EvaluationError):
        assign(VarStore(), "missing", "1")


def test_assign_bad_literal_raises():
    store = make_store(Var("i", INT))
    with pytest.raises(EvaluationError):
        assign(store, "i", "abc")


def test_assign_at_index_and_string_literal():
    store = make_store(Var("arr", STRING, 3))
    assign_at(store, "arr", 1, '"hi"')
    assert store.lookup("arr").var.values == ["", "hi", ""]


def test_assign_at_out_of_range():
    store = make_store(Var("arr", INT, 2))
    with pytest.raises(IndexError):
        assign_at(store, "arr", 5, "1")


def test_execute_initialization_scalar():
    store = make_store(Var("x", INT))
    execute_initialization(store, 3, ["int", "x", "=", "7"])
    assert store.lookup("x").var[0] == 7


def test_execute_initialization_expression():
    store = make_store(Var("x", INT))
    execute_initialization(store, 3, ["int", "x", "=", "2", "+", "3"])
    assert store.lookup("x").var[0] == 5


def test_execute_initialization_array_fills_every_element():
    store = make_store(Var("a", INT, 3))
    execute_initialization(store, 4, ["int", "a", "3", "=", "9"], 3)
    assert store.lookup("a").var.values == [9, 9, 9]


def test_execute_initialization_string():
    store = make_store(Var("s", STRING))
    execute_initialization(store, 3, ["string", "s", "=", '"hello"'])
    assert store.lookup("s").var[0] == "hello"


def test_execute_assignment_equals_string_literal():
    store = make_store(Var("s", STRING))
    execute_assignment(store, ["s", "=", '"word"'])
    assert store.lookup("s").var[0] == "word"


@pytest.mark.parametrize("forward, backward", [("+=", "-="), ("*=", "/=")])
def test_compound_round_trip_int(forward, backward):
    store = make_store(Var.of(10, INT, "x"))
    execute_assignment(store, ["x", forward, "5"])
    assert store.lookup("x").var[0] != 10
    execute_assignment(store, ["x", backward, "5"])
    assert store.lookup("x").var[0] == 10


def test_compound_with_variable_operand():
    store = make_store(Var.of(10, LONG, "x"), Var.of(4, LONG, "y"))
    execute_assignment(store, ["x", "-=", "y"])
    execute_assignment(store, ["x", "+=", "y"])
    assert store.lookup("x").var[0] == 10


def test_xor_twice_restores():
    store = make_store(Var.of(12, INT, "x"))
    execute_assignment(store, ["x", "^=", "7"])
    assert store.lookup("x").var[0] != 12
    execute_assignment(store, ["x", "^=", "7"])
    assert store.lookup("x").var[0] == 12


def test_complement_round_trip():
    store = make_store(Var("x", INT), Var("y", INT))
    execute_assignment(store, ["x", "~=", "5"])
    execute_assignment(store, ["y", "~=", "x"])
    assert store.lookup("y").var[0] == 5


def test_long_complement_literal_reads_as_int():
    store = make_store(Var("y", LONG))
    with pytest.raises(EvaluationError):
        execute_assignment(store, ["y", "~=", "3000000000"])


def test_int_addition_wraps():
    store = make_store(Var.of(2147483647, INT, "x"))
    execute_assignment(store, ["x", "+=", "1"])
    assert store.lookup("x").var[0] == -2147483648


def test_int_division_by_zero_raises():
    store = make_store(Var.of(3, INT, "x"))
    with pytest.raises(EvaluationError):
        execute_assignment(store, ["x", "/=", "0"])


def test_double_division_by_zero_is_infinite():
    store = make_store(Var.of(1.0, DOUBLE, "d"))
    execute_assignment(store, ["d", "/=", "0.0"])
    assert store.lookup("d").var[0] == math.inf


def test_string_append():
    store = make_store(Var.of("ab", STRING, "s"), Var.of("cd", STRING, "t"))
    execute_assignment(store, ["s", "+=", '"xy"'])
    execute_assignment(store, ["s", "+=", "t"])
    assert store.lookup("s").var[0] == "ab" + "xy" + "cd"


def test_unsupported_operation_leaves_value():
    store = make_store(Var.of("ab", STRING, "s"), Var.of(1.5, DOUBLE, "d"))
    execute_assignment(store, ["s", "-=", '"b"'])
    execute_assignment(store, ["d", "^=", "1"])
    assert store.lookup("s").var[0] == "ab"
    assert store.lookup("d").var[0] == 1.5


def test_compound_unknown_target_raises():
    with pytest.raises(EvaluationError):
        execute_assignment(VarStore(), ["nope", "+=", "1"])