"""Running Monty bytecode scripts line by line."""

import sys

from .errors import (
    FileOpenError,
    InstructionError,
    MontyError,
    UnknownInstructionError,
    UsageError,
)
from .stack import Mode, MontyStack
from .tokens import parse_push_argument, split_words

_OPERATIONS = {
    "pall": MontyStack.pall,
    "pint": MontyStack.pint,
    "pop": MontyStack.pop,
    "swap": MontyStack.swap,
    "add": MontyStack.add,
    "nop": MontyStack.nop,
    "sub": MontyStack.sub,
    "div": MontyStack.div,
    "mul": MontyStack.mul,
    "mod": MontyStack.mod,
    "pchar": MontyStack.pchar,
    "pstr": MontyStack.pstr,
    "rotl": MontyStack.rotl,
    "rotr": MontyStack.rotr,
    "stack": lambda stack: stack.set_mode(Mode.STACK),
    "queue": lambda stack: stack.set_mode(Mode.QUEUE),
}


class Interpreter:
    """Executes Monty instructions against one stack."""

    def __init__(self, out=None):
        self.stack = MontyStack(out)

    def execute(self, tokens, line_number):
        """Run the instruction given by ``tokens`` (opcode first)."""
        opcode = tokens[0]
        if opcode.startswith("#"):
            return
        try:
            if opcode == "push":
                argument = tokens[1] if len(tokens) > 1 else None
                self.stack.push(parse_push_argument(argument))
                return
            operation = _OPERATIONS.get(opcode)
            if operation is None:
                raise UnknownInstructionError(opcode)
            operation(self.stack)
        except InstructionError as error:
            raise error.at_line(line_number)

    def run(self, lines):
        """Run every line of a script, stopping at the first error."""
        for line_number, line in enumerate(lines, start=1):
            tokens = split_words(line)
            if tokens:
                self.execute(tokens, line_number)


def run_file(path, out=None):
    """Run the script stored at ``path``."""
    try:
        script = open(path, encoding="utf-8", errors="surrogateescape")
    except OSError as error:
        raise FileOpenError(path) from error
    with script:
        Interpreter(out).run(script)


def main(argv=None):
    """Command entry point: run the single script named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 1:
            raise UsageError()
        run_file(args[0])
    except MontyError as error:
        sys.stdout.flush()
        print(error, file=sys.stderr)
        return 1
    return 0