from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Union
import math


class CellType(str, Enum):
    """Value of the spreadsheet ``ss:Type`` attribute."""
    NUMBER = "Number"
    STRING = "String"


@dataclass(frozen=True)
class Number:
    value: Union[int, float, Decimal]


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class Null:
    pass


Cell = Union[Number, Text, Boolean, Null]
_TAGGED = (Number, Text, Boolean, Null)


def classify(value: Any) -> Cell:
    """Tag a raw record value. Already-tagged values pass through untouched."""
    if isinstance(value, _TAGGED):
        return value
    if value is None:
        return Null()
    # bool is an int subclass; must be checked first
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, (int, float, Decimal)):
        return Number(value)
    if isinstance(value, str):
        return Text(value)
    return Text(str(value))


def cell_type(value: Any) -> CellType:
    return CellType.NUMBER if isinstance(classify(value), Number) else CellType.STRING


# Floats outside [1e-6, 1e21) are written in exponent form, e.g. 1e+21, 1e-7
_EXP_LOWER = 1e-6
_EXP_UPPER = 1e21


def _number_text(n: Union[int, float, Decimal]) -> str:
    if isinstance(n, float):
        if math.isnan(n):
            return "NaN"
        if math.isinf(n):
            return "Infinity" if n > 0 else "-Infinity"
        r = repr(n)
        if "e" not in r:
            return str(int(n)) if n.is_integer() else r
        if _EXP_LOWER <= abs(n) < _EXP_UPPER:
            # repr already uses exponent form from 1e16 and below 1e-4
            return format(Decimal(r), "f")
        mantissa, exp = r.split("e")
        return "{}e{}{}".format(mantissa, "+" if int(exp) > 0 else "-", abs(int(exp)))
    return str(n)


def cell_text(value: Any) -> str:
    """Plain string form of a value as written into an exported cell."""
    cell = classify(value)
    if isinstance(cell, Null):
        return ""
    if isinstance(cell, Boolean):
        return "true" if cell.value else "false"
    if isinstance(cell, Number):
        return _number_text(cell.value)
    return str(cell.value)
