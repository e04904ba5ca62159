"""
# Voltage Resolution

Two single passes over the flattened project:

1. Net connectivity. A pin touched by a wire whose other end lands on a net takes the net's level.
2. Logic propagation. `and` and `or` pins are evaluated once each, in source order,
   against the levels known so far.

Pass 2 is not a fixpoint: a logic pin referencing a logic pin that appears later
sees that pin's pass-1 level. Such references are reported with a warning.
"""

from warnings import warn
from typing import Dict, List, Optional

from .data import NetType, Net, Object, Pin, ValueKind, Voltage, Wire
from .geometry import overlapping_point
from .logger import Logger
from .transform import Pass


def net_voltage(net: Net) -> Voltage:
    if net.type == NetType.VCC.value:
        return Voltage.HIGH
    if net.type == NetType.GND.value:
        return Voltage.LOW
    return Voltage.FLOATING


def resolve_nets(pins: List[Pin], wires: List[Wire], nets: List[Net]) -> None:
    """Pass 1: set the voltage of every pin wired directly onto a net."""
    for pin in pins:
        pos = pin.region.position
        wire = next((w for w in wires if w.from_ == pos or w.to == pos), None)
        if wire is None:
            continue
        net = next(
            (
                n
                for n in nets
                if overlapping_point(n.region, wire.from_) or overlapping_point(n.region, wire.to)
            ),
            None,
        )
        if net is None:
            continue
        pin.voltage = net_voltage(net)


def evaluate(kind: ValueKind, inputs: List[Optional[Voltage]]) -> Voltage:
    """Evaluate a logic value. Unresolved inputs count as low."""
    highs = [v == Voltage.HIGH for v in inputs]
    if kind == ValueKind.AND:
        return Voltage.HIGH if all(highs) else Voltage.LOW
    if kind == ValueKind.OR:
        return Voltage.HIGH if any(highs) else Voltage.LOW
    raise ValueError(f"Not a logic value: {kind}")


def resolve_logic(pins: List[Pin], logger: Optional[Logger] = None) -> Dict[str, Voltage]:
    """Pass 2: evaluate logic pins in order. Returns the final label-to-voltage map.
    Suspicious references are warned about, and also recorded in `logger` if given."""
    voltages = {pin.label: pin.voltage for pin in pins if pin.label}
    # Logic pins not yet evaluated
    pending = {pin.label for pin in pins if pin.label and pin.value.is_logic}

    for pin in pins:
        if not pin.value.is_logic:
            continue
        name = pin.label or "(unlabeled)"
        for label in pin.value.labels:
            if label not in voltages:
                msg = f"Pin {name} references unknown label {label}"
            elif label in pending:
                msg = f"Pin {name} references {label} before it is evaluated"
            else:
                continue
            warn(msg)
            if logger is not None:
                logger.warn(msg)

        pin.voltage = evaluate(pin.value.kind, [voltages.get(label) for label in pin.value.labels])
        if pin.label:
            voltages[pin.label] = pin.voltage
            pending.discard(pin.label)
    return voltages


class ResolveVoltages(Pass):
    """Set the derived `voltage` of every pin, in place."""

    def run(self, objects: List[Object]) -> List[Object]:
        pins = [obj for obj in objects if isinstance(obj, Pin)]
        wires = [obj for obj in objects if isinstance(obj, Wire)]
        nets = [obj for obj in objects if isinstance(obj, Net)]

        resolve_nets(pins, wires, nets)
        voltages = resolve_logic(pins, self.logger)

        high = sum(1 for v in voltages.values() if v == Voltage.HIGH)
        self.logger.debug(f"resolved {len(pins)} pins, {high} labels high")
        return objects
