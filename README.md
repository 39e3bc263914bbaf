# linhvm

Runtime building blocks for the Linh scripting language: the value model,
the bytecode instruction set, value conversions, binary operators, jump
handling, the built-in `math` and `time` packages, and console I/O.

Linh's empty value, `sol`, is represented by `None`.

## Modules

- `linhvm.values`: `UInt`, an unsigned 64-bit integer kept apart from
  ordinary `int`; `FunctionParameter` (`name`, `type`, `is_static`) and
  `FunctionObject` (`name`, `params`, `body`); `create_function(name,
  params, body)`; `intern_string(text)`.
- `linhvm.bytecode`: the `OpCode` enumeration, the `Instruction` dataclass
  (`opcode`, `operand`, `line`, `col`) and `TryTarget`, the operand of a
  `TRY` instruction (`catch_pos`, `finally_pos`, `end_pos`, `error_var`).
- `linhvm.conversions`: `type_of` (returns `sol`, `bool`, `int`, `uint`,
  `float`, `str`, `array`, `map`, `function` or `unknown`), `to_str`,
  `to_int`, `to_float`, `to_uint`, `to_bool`, `length` and
  `format_float_linh`. Conversions that cannot succeed give zero rather
  than raising.
- `linhvm.loop`: `eval_condition(value)` decides whether a value counts
  as true for a conditional jump; `next_ip(stack, instr, ip)` returns the
  next instruction pointer for `JMP`, `JMP_IF_FALSE` and `JMP_IF_TRUE`
  (popping the condition from the stack) and `ip + 1` for anything else.
- `linhvm.arith`: `apply_binary(opcode, a, b)` applies an arithmetic,
  bitwise or comparison opcode. It returns `None` for operand types that
  do not combine, `NotImplemented` when the operation yields nothing, and
  raises `DivisionByZero` for a zero divisor. `binary_op(stack, opcode)`
  pops two operands, applies the opcode and pushes the result; it raises
  `IndexError` if the stack holds fewer than two values.
- `linhvm.mathpkg`: `get_math_function(name)` returns a one-argument
  function (`abs`, `ceil`, `floor`, `round`, `trunc`, `sin`, `cos`, `tan`,
  `asin`, `acos`, `atan`, `radians`, `sinh`, `cosh`, `tanh`, `asinh`,
  `acosh`, `atanh`, `sqrt`, `cbrt`, `exp`, `expm1`, `log`, `log1p`,
  `log10`, `log2`) or `None`; `get_math_functions()`;
  `get_math_constant(name)` (`pi`, `e`, `tau`, `phi`, else `0.0`);
  `get_math_constants()`. Non-numeric or out-of-domain arguments give
  `None`.
- `linhvm.packages`: `initialize_default_packages(packages)`,
  `get_package(name)` (a read-only mapping or `None`),
  `get_constant(package_name, constant_name)`, `package_exists(name)`,
  `get_available_packages()` and `get_package_constants(name)`. The
  `math` package holds the four constants above; the `time` package holds
  `time`, the number of seconds since the epoch at the moment the package
  was loaded.
- `linhvm.console`: `print_value(value, stream)` writes a value with a
  newline, `printf_value(value, stream)` without one, and
  `read_input(prompt, stdin, stdout)` shows an optional prompt on its own
  line and reads one line.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short example

```python
from linhvm.bytecode import OpCode
from linhvm.arith import apply_binary
from linhvm.conversions import to_str, type_of
from linhvm.mathpkg import get_math_function

total = apply_binary(OpCode.ADD, "n = ", 42)
print(total)                       # n = 42
print(type_of(3.5))                # float
print(to_str([1, 2.5, "x"]))       # [1, 2.5, x]

sqrt = get_math_function("sqrt")
print(sqrt(16))                    # 4.0
print(sqrt(-1))                    # None: out of domain gives sol
```

## What this package does not do

It contains no lexer, parser or compiler for Linh source text, and no
virtual machine loop that executes a whole `Instruction` list; it offers
the pieces such a machine uses at each step. There is no command-line
program or interactive prompt.