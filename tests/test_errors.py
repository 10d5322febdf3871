import pytest

from montyvm.errors import (
    DivisionByZeroError,
    EmptyStackError,
    FileOpenError,
    InstructionError,
    MontyError,
    PcharError,
    PushArgumentError,
    ShortStackError,
    UnknownInstructionError,
    UsageError,
)


def test_usage_message():
    assert str(UsageError()) == "USAGE: monty file"


def test_file_open_message():
    err = FileOpenError("missing.m")
    assert str(err) == "Error: Can't open file missing.m"
    assert err.filename == "missing.m"


def test_unknown_instruction_with_line():
    err = UnknownInstructionError("foo", 3)
    assert str(err) == "L3: unknown instruction foo"
    assert err.opcode == "foo"


def test_at_line_sets_number_and_returns_self():
    err = PushArgumentError()
    assert str(err) == "usage: push integer"
    same = err.at_line(7)
    assert same is err
    assert str(err) == "L7: usage: push integer"
    assert err.line_number == 7


def test_pop_empty_message():
    assert str(EmptyStackError("pop", 2)) == "L2: can't pop an empty stack"


def test_pint_empty_message():
    assert str(EmptyStackError("pint", 4)) == "L4: can't pint, stack empty"


@pytest.mark.parametrize("op", ["swap", "add", "sub", "div", "mul", "mod"])
def test_short_stack_message(op):
    assert str(ShortStackError(op, 1)) == f"L1: can't {op}, stack too short"


def test_division_by_zero_message():
    assert str(DivisionByZeroError(9)) == "L9: division by zero"


@pytest.mark.parametrize("reason", ["stack empty", "value out of range"])
def test_pchar_message(reason):
    assert str(PcharError(reason, 5)) == f"L5: can't pchar, {reason}"


@pytest.mark.parametrize(
    "err",
    [
        UnknownInstructionError("x"),
        PushArgumentError(),
        EmptyStackError("pop"),
        ShortStackError("add"),
        DivisionByZeroError(),
        PcharError("stack empty"),
    ],
)
def test_instruction_errors_share_base(err):
    assert isinstance(err, MontyError)
    with pytest.raises(InstructionError) as info:
        raise err
    caught = info.value.at_line(12)
    assert caught is err
    assert caught.line_number == 12
    assert str(caught).startswith("L12: ")


def test_usage_and_file_errors_are_monty_errors():
    usage = UsageError()
    file_err = FileOpenError("a")
    assert isinstance(usage, MontyError)
    assert isinstance(file_err, MontyError)
    assert str(usage) == "USAGE: monty file"
    assert file_err.filename == "a"
    assert str(file_err) == "Error: Can't open file a"