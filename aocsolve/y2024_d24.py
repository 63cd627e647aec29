"""Evaluating a circuit of AND, OR and XOR gates."""

_OPS = {
    "AND": lambda a, b: a & b,
    "OR": lambda a, b: a | b,
    "XOR": lambda a, b: a ^ b,
}

Gates = dict[str, tuple[str, str, str]]


def parse_circuit(text: str) -> tuple[dict[str, int], Gates]:
    """Return the initial wire values and the gate driving each output wire."""
    inputs, separator, gate_text = text.partition("\n\n")
    if not separator:
        raise ValueError("expected a blank line between inputs and gates")
    values = {}
    for line in inputs.splitlines():
        name, _, value = line.partition(": ")
        values[name] = int(value)
    gates: Gates = {}
    for line in gate_text.splitlines():
        if not line:
            continue
        fields = line.split(" ")
        if len(fields) != 5:
            raise ValueError(f"malformed gate {line!r}")
        gates[fields[4]] = (fields[0], fields[1], fields[2])
    return values, gates


def evaluate(wire: str, values: dict[str, int], gates: Gates) -> int:
    """Value of a wire; computed values are stored into values."""
    if wire in values:
        return values[wire]
    if wire not in gates:
        raise ValueError(f"invalid wire {wire!r}")
    lhs, op, rhs = gates[wire]
    if op not in _OPS:
        raise ValueError(f"invalid operation {op!r}")
    result = _OPS[op](evaluate(lhs, values, gates), evaluate(rhs, values, gates))
    values[wire] = result
    return result


def solve(text: str) -> int:
    """Return the number formed by the z wires."""
    values, gates = parse_circuit(text)
    return sum(
        evaluate(wire, values, gates) << int(wire[1:])
        for wire in gates
        if wire.startswith("z")
    )