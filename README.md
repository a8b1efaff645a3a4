# concertlang

Building blocks of a small, statement-based scripting language, as a Python
library. A script is a sequence of `;`-terminated statements. The library turns
source text into token lists, holds typed variables (int, long, double, string
and object, each stored as an array), evaluates infix expressions with the
language's precedence rules, carries out assignment statements, and provides
the regex, thread and timing helpers that scripts call.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `concertlang.reserved`: keywords, type names and comparison operators
  (`ReservedWord`, `Operator`, `reserved_word`, `type_identifier`,
  `comparison_operator`). Each lookup returns `None` for an unknown token.
- `concertlang.stdlib_table`: the names of the standard library functions and
  which importable library provides each (`LibraryFunction`,
  `library_functions`, `library_function`, `is_library`).
  `library_functions` raises `KeyError` for an unknown library.
- `concertlang.utf8`: UTF-8 conversion that drops invalid sequences
  (`utf8_to_text`, `text_to_utf8`).
- `concertlang.timer`: a nanosecond monotonic clock and elapsed-time reports
  such as `Delta: 12 ms` (`get_time`, `format_difference_millis`,
  `format_difference_all`, `print_difference_millis`, `print_difference_all`).
- `concertlang.tokenizer`: splits source into statements (`tokenize`,
  `Tokenizer`, `read_statements`, `read_statements_joined`,
  `add_exit_statement`, `extract_definitions`, `FunctionTable`, `peek`,
  `replace_all`). `read_statements` reads a file line by line;
  `read_statements_joined` joins its lines with spaces first. Both append an
  `exit` statement when the program does not already end with one.
- `concertlang.variables`: typed variables and the stores holding them
  (`Var`, `VarStore`, `ObjectStore`, `resolve`, `resolve_typed`,
  `resolve_wide`, `lookup`, `literal_var`, `typed_literal_var`,
  `wide_literal_var`, `single_quote_var`, `unquote`, `unescape`). The
  `resolve*` functions look a name up and otherwise read it as a literal,
  returning a `Resolved(var, index, created)` tuple.
- `concertlang.printing`: writes every element of a variable followed by a
  space (`format_var`, `print_var`, `println_var`); `println_var` does not
  write the newline itself.
- `concertlang.threadlib`: `thread_id`, `hardware_concurrency` and
  `sleep_millis`.
- `concertlang.regexlib`: `regex_replace` (with `$&`, `$1`, `` $` ``, `$'`,
  `$$` references), `regex_match` (whole-text match), `regex_find_all` and
  `regex_search`, which stores an object variable with `length` and `data`
  members.
- `concertlang.operators`: expression evaluation (`evaluate`, `apply_op`,
  `binary_op`, `has_precedence`, `EvaluationError`).
- `concertlang.assignment`: assignment and comparison (`execute_assignment`,
  `execute_initialization`, `assign`, `assign_at`, `assign_element`,
  `copy_var`, `compare`). `execute_assignment` handles `=`, `+=`, `-=`,
  `*=`, `/=`, `~=` and `^=`.

## Example

```python
from concertlang.tokenizer import tokenize
from concertlang.variables import Var, VarStore
from concertlang.reserved import ReservedWord
from concertlang.assignment import execute_assignment

statements = tokenize("x = 2 + 3 * 4;")
store = VarStore()
store.add(Var("x", ReservedWord.TYPE_INT, 1))
execute_assignment(store, statements[0])
print(store.lookup("x").var[0])   # 14
```

Expressions use the language's own precedence table: shifts bind tightest,
then `* / %`, then `+ -`, then the bitwise operators. Arithmetic on `int`
values wraps at 32 bits and on `long` values at 64 bits; integer division
truncates toward zero, and division by zero raises `EvaluationError`.

## What the package does not do

There is no statement executor and no command: nothing here runs a whole
program, calls functions, handles `if`/`while`, threads or `try` blocks, or
reads input. The string, io, math, date and image library functions exist
only as names in `concertlang.stdlib_table`; only the regex and thread
functions are implemented.