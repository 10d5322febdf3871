# montyvm

An interpreter for Monty bytecode files. Monty is a small language in which
each line holds one opcode. Each opcode acts on a single list of integers,
and that list behaves either as a stack (LIFO) or as a queue (FIFO).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```
monty script.m
```

The interpreter runs the file one line at a time and stops at the first
error. Output goes to standard output. Error messages go to standard error,
and the exit status is then 1. On success the exit status is 0.

If the command is not given exactly one argument, it prints
`USAGE: monty file`. If the file cannot be opened, it prints
`Error: Can't open file <file>`. The file is read as UTF-8.

## Language

Each line holds one instruction, and words are separated by spaces or tabs.
Blank lines are skipped, and so are lines whose first word starts with `#`.
Words after the ones an opcode uses are ignored.

| Opcode   | Effect                                                                  |
|----------|-------------------------------------------------------------------------|
| `push n` | push integer `n`: at the top in stack mode, at the bottom in queue mode |
| `pall`   | print every value, top first, one per line                              |
| `pint`   | print the top value                                                     |
| `pop`    | remove the top value                                                    |
| `swap`   | swap the top two values                                                 |
| `add`    | replace the top two values with second + top                            |
| `sub`    | replace the top two values with second − top                            |
| `mul`    | replace the top two values with second × top                            |
| `div`    | replace the top two values with second ÷ top, truncated toward zero     |
| `mod`    | replace the top two values with the remainder of second ÷ top (the sign follows the second value) |
| `pchar`  | print the top value as an ASCII character (0–127)                       |
| `pstr`   | print values from the top as characters, stopping at 0, at a value outside 1–127, or at the end |
| `rotl`   | move the top value to the bottom                                        |
| `rotr`   | move the bottom value to the top                                        |
| `stack`  | switch to stack mode (the default)                                      |
| `queue`  | switch to queue mode                                                    |
| `nop`    | do nothing                                                              |

The argument of `push` may contain only decimal digits, with an optional
leading `-`. A `-` on its own counts as 0. Values are ordinary Python integers
and have no fixed width.

Example:

```
push 1
push 2
push 3
pall
add
pint
```

prints

```
3
2
1
5
```

Error messages carry the line number. Some examples:

- `L3: can't pint, stack empty`
- `L4: can't pop an empty stack`
- `L5: can't add, stack too short`
- `L6: division by zero`
- `L7: unknown instruction foo`
- `L8: usage: push integer`
- `L9: can't pchar, value out of range`

## Using it from Python

```python
import io
from montyvm.interpreter import Interpreter, run_file
from montyvm.stack import MontyStack, Mode

out = io.StringIO()
Interpreter(out).run(["push 4", "push 2", "div", "pall"])
print(out.getvalue())   # "2\n"

stack = MontyStack(out)
stack.set_mode(Mode.QUEUE)
stack.push(1)
stack.push(2)
print(list(stack))      # [1, 2]  (iteration goes top to bottom)
print(len(stack))       # 2
print(stack.pop())      # 1
```

- `montyvm.interpreter.Interpreter(out=None)` holds a `MontyStack` as its
  `stack` attribute. `execute(tokens, line_number)` runs one already split
  instruction, and `run(lines)` runs an iterable of lines.
- `montyvm.interpreter.run_file(path, out=None)` runs a script file.
- `montyvm.interpreter.main(argv=None)` is the command entry point. It
  returns the exit status.
- `montyvm.stack.MontyStack(out=None)` has one method for each opcode:
  `push(value)`, `pall`, `pint`, `pop`, `swap`, `add`, `sub`, `mul`, `div`,
  `mod`, `nop`, `pchar`, `pstr`, `rotl`, `rotr` and `set_mode(mode)`. Its
  current `Mode` is in the `mode` attribute. Output is written to `out`, or
  to standard output when `out` is `None`.
- `montyvm.tokens` provides `split_words`, `is_blank` and
  `parse_push_argument`.

Errors are raised as subclasses of `montyvm.errors.MontyError`:
`UsageError`, `FileOpenError`, and the `InstructionError` family
(`UnknownInstructionError`, `PushArgumentError`, `EmptyStackError`,
`ShortStackError`, `DivisionByZeroError`, `PcharError`). Their messages are
the same as the ones the command prints.