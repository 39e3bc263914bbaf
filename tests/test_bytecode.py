from linhvm.bytecode import Instruction, OpCode, TryTarget


def test_opcode_order_starts_with_stack_ops():
    assert OpCode(0) is OpCode.NOP
    assert OpCode(1) is OpCode.PUSH_INT
    assert list(OpCode)[0] is OpCode(0)


def test_opcode_last_member_is_package_const():
    assert OpCode(len(OpCode) - 1) is OpCode.LOAD_PACKAGE_CONST


def test_opcode_values_are_consecutive():
    rebuilt = [OpCode(index) for index in range(len(OpCode))]
    assert rebuilt == list(OpCode)


def test_arithmetic_precedes_comparison():
    ops = [
        Instruction(op).opcode
        for op in (OpCode.ADD, OpCode.HASH, OpCode.EQ, OpCode.GTE)
    ]
    assert ops == sorted(ops)
    assert ops[0] < ops[1] < ops[2] < ops[3]


def test_instruction_defaults():
    instr = Instruction(OpCode.HALT)
    assert instr.opcode is OpCode.HALT
    assert instr.operand is None
    assert instr.line == 0
    assert instr.col == 0


def test_instruction_operand_can_be_patched():
    instr = Instruction(OpCode.JMP, -1, 3, 4)
    instr.operand = 12
    assert instr.operand == 12
    assert (instr.line, instr.col) == (3, 4)


def test_try_target_fields():
    target = TryTarget(5, 9, 11, "error")
    assert target.catch_pos == 5
    assert target.finally_pos == 9
    assert target.end_pos == 11
    assert target.error_var == "error"
    assert tuple(target) == (5, 9, 11, "error")