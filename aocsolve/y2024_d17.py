"""A three-register, three-bit computer and a search for a self-printing input."""

import math


def _combo(registers: list[int], operand: int) -> int:
    if operand > 6:
        raise ValueError(f"invalid combo operand {operand}")
    return operand if operand <= 3 else registers[operand - 4]


def run(registers, program) -> list[int]:
    """Run the program with registers A, B, C and return everything it outputs."""
    regs = list(registers)[:3]
    if len(regs) < 3:
        raise ValueError("three registers are needed")
    program = list(program)
    output: list[int] = []
    pc = 0
    while pc < len(program):
        opcode = program[pc]
        operand = program[pc + 1]
        if opcode == 0:
            regs[0] >>= _combo(regs, operand)
        elif opcode == 1:
            regs[1] ^= operand
        elif opcode == 2:
            regs[1] = _combo(regs, operand) % 8
        elif opcode == 3:
            if regs[0] != 0:
                pc = operand
                continue
        elif opcode == 4:
            regs[1] ^= regs[2]
        elif opcode == 5:
            output.append(_combo(regs, operand) % 8)
        elif opcode == 6:
            regs[1] = regs[0] >> _combo(regs, operand)
        elif opcode == 7:
            regs[2] = regs[0] >> _combo(regs, operand)
        else:
            raise ValueError(f"invalid opcode {opcode}")
        pc += 2
    return output


def find_quine(program) -> int:
    """Lowest value of register A that makes the program print itself.

    Raises ValueError if the search finds none.
    """
    program = list(program)

    def search(pos: int, a: int) -> float:
        if run([a, 0, 0], program) == program:
            return a
        if pos >= len(program):
            return math.inf
        best: float = math.inf
        for step in range(8):
            out = run([a + step, 0, 0], program)
            if out and program[len(program) - 1 - pos] == out[0]:
                if out == program:
                    best = min(best, a + step)
                best = min(best, search(pos + 1, (a + step) * 8))
        return best

    found = search(0, 0)
    if found == math.inf:
        raise ValueError("no register value reproduces the program")
    return int(found)


def solve(text: str) -> tuple[str, int]:
    """Return the comma-joined output and the self-printing register value."""
    regs_text, separator, program_text = text.partition("\n\n")
    if not separator:
        raise ValueError("expected a blank line between registers and program")
    registers = [int(line.split(": ")[1]) for line in regs_text.splitlines()]
    program = [int(n.strip()) for n in program_text.partition(": ")[2].split(",")]
    output = ",".join(str(n) for n in run(registers, program))
    return output, find_quine(program)