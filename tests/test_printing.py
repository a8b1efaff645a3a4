import io

from concertlang.printing import format_var, print_var, println_var
from concertlang.reserved import ReservedWord
from concertlang.variables import Var


def _var(var_type, values):
    var = Var("v", var_type, len(values))
    for index, value in enumerate(values):
        var[index] = value
    return var


def test_format_ints():
    assert format_var(_var(ReservedWord.TYPE_INT, [1, 2])) == "1 2 "


def test_format_long():
    assert format_var(_var(ReservedWord.TYPE_LONG, [3000000000])) == "3000000000 "


def test_format_doubles_use_six_significant_digits():
    assert format_var(_var(ReservedWord.TYPE_DOUBLE, [1.5])) == "1.5 "
    assert format_var(_var(ReservedWord.TYPE_DOUBLE, [1234567.0])) == "1.23457e+06 "


def test_format_strings():
    assert format_var(_var(ReservedWord.TYPE_STRING, ["a", "b c"])) == "a b c "


def test_format_object_is_empty():
    assert format_var(Var("o", ReservedWord.TYPE_OBJECT, 2)) == ""


def test_print_and_println_write_formatted_text():
    var = _var(ReservedWord.TYPE_INT, [4, 5])
    out = io.StringIO()
    print_var(var, out)
    println_var(var, out)
    assert out.getvalue() == format_var(var) * 2