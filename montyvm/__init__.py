"""Interpreter for Monty bytecode files: stack, tokenizer, errors and command."""

__version__ = "0.1.0"
__all__ = ["errors", "stack", "tokens", "interpreter"]