"""Tokenizer, typed variables, expression evaluation, assignment and regex, thread and timing helpers for a small scripting language."""

__version__ = "0.1.0"