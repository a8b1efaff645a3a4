"""Names of the standard library functions and the libraries that import them."""

from __future__ import annotations

from enum import IntEnum


class LibraryFunction(IntEnum):
    """Standard library functions, with the identifiers the language uses."""

    STRING_SUBSTRING = 0
    STRING_FIND = 1
    STRING_CONTAINS = 2
    STRING_LENGTH = 3
    STRING_TO_INT = 4
    STRING_TO_DOUBLE = 5
    FILE_OPEN_FILE = 7
    FILE_CLOSE_FILE = 8
    FILE_WRITE_STRING = 9
    FILE_GET_LINE = 11
    FILE_IS_OPEN = 13
    FILE_IS_EOF = 14
    FILE_IS_EXIST = 15
    FILE_CREATE_FILE = 16
    FILE_GET_FILE_SIZE = 17
    STRING_CHAR_AT = 18
    MATH_SRAND = 19
    MATH_RAND = 20
    FILE_SEEK = 23
    FILE_READ = 24
    FILE_WRITE = 25
    FILE_REMOVE = 26
    FILE_RENAME = 27
    FILE_TELLG = 28
    STRING_CHAR_TO_STRING = 29
    STRING_INT_TO_STRING = 30
    STRING_DOUBLE_TO_STRING = 31
    MATH_INT_TO_DOUBLE = 32
    MATH_DOUBLE_TO_INT = 33
    MATH_INT_TO_LONG = 35
    STRING_TO_LOWER_CASE = 36
    STRING_TO_UPPER_CASE = 37
    FILE_CREATE_DIRECTORY = 38
    MATH_LONG_TO_INT = 39
    MATH_LONG_TO_DOUBLE = 40
    MATH_DOUBLE_TO_LONG = 41
    REGEX_SEARCH = 42
    REGEX_MATCH = 43
    REGEX_REPLACE = 44
    THREAD_GET_THREAD_ID = 45
    MATH_ABSOLUTE_VALUE = 46
    STRING_WCHAR_TO_STRING = 47
    FILE_OPEN_BYTE_FILE = 48
    FILE_WRITE_WCHAR = 49
    FILE_READ_WCHAR = 50
    STRING_WCHAR_TO_INT = 51
    STRING_WCHAR_AT = 52
    MATH_LOG10 = 53
    MATH_SQRT = 54
    MATH_ROUND = 55
    MATH_FLOOR = 56
    MATH_CEIL = 57
    MATH_SIN = 58
    MATH_COS = 59
    MATH_TAN = 60
    MATH_GET_PI = 61
    MATH_SET_PRECISION = 62
    MATH_EXP = 63
    THREAD_HARDWARE_CONCURRENCY = 64
    THREAD_SLEEP = 65
    DATE_LOCALTIME = 66
    DATE_LOCALTIME_NS = 67
    IMAGE_READ_CHANNEL_DATA = 68
    IMAGE_WRITE_CHANNEL_DATA = 69


_LIBRARIES: dict[str, tuple[str, ...]] = {
    "string": (
        "substring", "find", "contains", "length", "to_int", "to_double",
        "char_at", "wchar_at", "char_to_string", "wchar_to_string",
        "int_to_string", "double_to_string", "wchar_to_int",
        "to_lower_case", "to_upper_case",
    ),
    "io": (
        "open_file", "open_byte_file", "close_file", "write_string", "get_line",
        "is_open", "is_end", "is_file_exist", "create_file", "get_file_size",
        "seek_file_pointer", "read_byte", "write_byte", "read_wchar",
        "write_wchar", "remove_file", "rename_file", "tell_file_pointer",
        "create_directory",
    ),
    "math": (
        "seed_random", "get_random", "int_to_double", "double_to_int",
        "int_to_long", "long_to_int", "long_to_double", "double_to_long",
        "absolute_value", "sqrt", "log10", "round", "floor", "ceil", "sin",
        "cos", "tan", "get_pi", "set_precision", "exp",
    ),
    "regex": ("regex_search", "regex_match", "regex_replace"),
    "thread": ("get_thread_id", "hardware_concurrency", "sleep"),
    "date": ("localtime", "localtime_ns"),
    "image": ("read_channel_data", "write_channel_data"),
}

_FUNCTIONS: dict[str, LibraryFunction] = {
    "substring": LibraryFunction.STRING_SUBSTRING,
    "find": LibraryFunction.STRING_FIND,
    "contains": LibraryFunction.STRING_CONTAINS,
    "length": LibraryFunction.STRING_LENGTH,
    "to_int": LibraryFunction.STRING_TO_INT,
    "to_double": LibraryFunction.STRING_TO_DOUBLE,
    "open_file": LibraryFunction.FILE_OPEN_FILE,
    "open_byte_file": LibraryFunction.FILE_OPEN_BYTE_FILE,
    "close_file": LibraryFunction.FILE_CLOSE_FILE,
    "write_string": LibraryFunction.FILE_WRITE_STRING,
    "get_line": LibraryFunction.FILE_GET_LINE,
    "is_open": LibraryFunction.FILE_IS_OPEN,
    "is_end": LibraryFunction.FILE_IS_EOF,
    "is_file_exist": LibraryFunction.FILE_IS_EXIST,
    "create_file": LibraryFunction.FILE_CREATE_FILE,
    "get_file_size": LibraryFunction.FILE_GET_FILE_SIZE,
    "char_at": LibraryFunction.STRING_CHAR_AT,
    "wchar_at": LibraryFunction.STRING_WCHAR_AT,
    "seed_random": LibraryFunction.MATH_SRAND,
    "get_random": LibraryFunction.MATH_RAND,
    "seek_file_pointer": LibraryFunction.FILE_SEEK,
    "read_byte": LibraryFunction.FILE_READ,
    "write_byte": LibraryFunction.FILE_WRITE,
    "read_wchar": LibraryFunction.FILE_READ_WCHAR,
    "write_wchar": LibraryFunction.FILE_WRITE_WCHAR,
    "remove_file": LibraryFunction.FILE_REMOVE,
    "rename_file": LibraryFunction.FILE_RENAME,
    "tell_file_pointer": LibraryFunction.FILE_TELLG,
    "char_to_string": LibraryFunction.STRING_CHAR_TO_STRING,
    "int_to_string": LibraryFunction.STRING_INT_TO_STRING,
    "double_to_string": LibraryFunction.STRING_DOUBLE_TO_STRING,
    "int_to_double": LibraryFunction.MATH_INT_TO_DOUBLE,
    "double_to_int": LibraryFunction.MATH_DOUBLE_TO_INT,
    "wchar_to_int": LibraryFunction.STRING_WCHAR_TO_INT,
    "int_to_long": LibraryFunction.MATH_INT_TO_LONG,
    "to_lower_case": LibraryFunction.STRING_TO_LOWER_CASE,
    "to_upper_case": LibraryFunction.STRING_TO_UPPER_CASE,
    "create_directory": LibraryFunction.FILE_CREATE_DIRECTORY,
    "long_to_int": LibraryFunction.MATH_LONG_TO_INT,
    "long_to_double": LibraryFunction.MATH_LONG_TO_DOUBLE,
    "double_to_long": LibraryFunction.MATH_DOUBLE_TO_LONG,
    "regex_search": LibraryFunction.REGEX_SEARCH,
    "regex_match": LibraryFunction.REGEX_MATCH,
    "regex_replace": LibraryFunction.REGEX_REPLACE,
    "get_thread_id": LibraryFunction.THREAD_GET_THREAD_ID,
    "absolute_value": LibraryFunction.MATH_ABSOLUTE_VALUE,
    "wchar_to_string": LibraryFunction.STRING_WCHAR_TO_STRING,
    "sqrt": LibraryFunction.MATH_SQRT,
    "log10": LibraryFunction.MATH_LOG10,
    "round": LibraryFunction.MATH_ROUND,
    "floor": LibraryFunction.MATH_FLOOR,
    "ceil": LibraryFunction.MATH_CEIL,
    "sin": LibraryFunction.MATH_SIN,
    "cos": LibraryFunction.MATH_COS,
    "tan": LibraryFunction.MATH_TAN,
    "get_pi": LibraryFunction.MATH_GET_PI,
    "set_precision": LibraryFunction.MATH_SET_PRECISION,
    "exp": LibraryFunction.MATH_EXP,
    "hardware_concurrency": LibraryFunction.THREAD_HARDWARE_CONCURRENCY,
    "sleep": LibraryFunction.THREAD_SLEEP,
    "localtime": LibraryFunction.DATE_LOCALTIME,
    "localtime_ns": LibraryFunction.DATE_LOCALTIME_NS,
    "read_channel_data": LibraryFunction.IMAGE_READ_CHANNEL_DATA,
    "write_channel_data": LibraryFunction.IMAGE_WRITE_CHANNEL_DATA,
}


def library_functions(library: str) -> tuple[str, ...]:
    """Return the function names an import of ``library`` brings in.

    Raises KeyError for a library that does not exist.
    """
    try:
        return _LIBRARIES[library]
    except KeyError:
        raise KeyError(f"unknown library: {library!r}") from None


def library_function(name: str) -> LibraryFunction | None:
    """Return the library function a name refers to, or None."""
    return _FUNCTIONS.get(name)


def is_library(name: str) -> bool:
    """Tell whether ``name`` is a library that can be imported."""
    return name in _LIBRARIES