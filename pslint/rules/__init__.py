"""All pslint rules."""

from pslint.rules import base, layout

ALL_RULES: list[base.Rule] = [
    layout.AvoidLongLines(),
]

__all__ = ["ALL_RULES"]
