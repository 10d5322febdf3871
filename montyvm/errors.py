"""Errors raised while loading or running a Monty bytecode script."""


class MontyError(Exception):
    """Base class for every error the interpreter reports."""


class UsageError(MontyError):
    """The command line did not name exactly one script."""

    def __init__(self):
        super().__init__("USAGE: monty file")


class FileOpenError(MontyError):
    """A script file could not be opened."""

    def __init__(self, filename):
        self.filename = filename
        super().__init__(f"Error: Can't open file {filename}")


class InstructionError(MontyError):
    """An instruction failed; reported with the script line it came from."""

    def __init__(self, detail, line_number=None):
        super().__init__(detail)
        self.detail = detail
        self.line_number = line_number

    def at_line(self, line_number):
        """Attach the script line number and return the error itself."""
        self.line_number = line_number
        return self

    def __str__(self):
        if self.line_number is None:
            return self.detail
        return f"L{self.line_number}: {self.detail}"


class UnknownInstructionError(InstructionError):
    """The opcode on a line is not one the interpreter knows."""

    def __init__(self, opcode, line_number=None):
        self.opcode = opcode
        super().__init__(f"unknown instruction {opcode}", line_number)


class PushArgumentError(InstructionError):
    """``push`` was given no argument or one that is not an integer."""

    def __init__(self, line_number=None):
        super().__init__("usage: push integer", line_number)


class EmptyStackError(InstructionError):
    """An opcode needing one element found the stack empty."""

    def __init__(self, op, line_number=None):
        self.op = op
        if op == "pop":
            detail = "can't pop an empty stack"
        else:
            detail = f"can't {op}, stack empty"
        super().__init__(detail, line_number)


class ShortStackError(InstructionError):
    """An opcode needing two elements found fewer."""

    def __init__(self, op, line_number=None):
        self.op = op
        super().__init__(f"can't {op}, stack too short", line_number)


class DivisionByZeroError(InstructionError):
    """``div`` or ``mod`` with a zero on top of the stack."""

    def __init__(self, line_number=None):
        super().__init__("division by zero", line_number)


class PcharError(InstructionError):
    """``pchar`` could not print the top element."""

    def __init__(self, reason, line_number=None):
        self.reason = reason
        super().__init__(f"can't pchar, {reason}", line_number)