from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from .components import Component

CYCLE_MESSAGE = "Cycle detected."


def format_order(label: str, order: Iterable[int]) -> str:
    ids = " ".join(str(v) for v in order)
    return f"{label}: {ids}" if ids else f"{label}:"


def format_component(component: Component) -> str:
    return format_order(f"component {component.index}", component.members)


def write_traversal(out: TextIO, label: str, order: Iterable[int]) -> None:
    out.write(format_order(label, order) + "\n")


def write_components(out: TextIO, components: Iterable[Component]) -> None:
    for component in components:
        out.write(format_component(component) + "\n")


def write_cycle(out: TextIO, cycle: bool) -> None:
    if cycle:
        out.write(CYCLE_MESSAGE + "\n")
