"""Product lookup implemented twice: as an ``if``/``elif`` chain and as a ``match`` statement."""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Iterable, List, Mapping, Optional, Tuple

# Product catalogue keyed by product number.
PRODUCT_MAPPING: Mapping[int, str] = MappingProxyType(
    {
        1: "SAP A1",
        2: "SAP B1",
        3: "Oracel",
        4: "ERPNext",
        5: "Mobile Applicaton",
        6: "Web Application",
    }
)

DEFAULT_PRODUCT = "AI ......Coming Soon"


def product_name_switch_case(product: int) -> str:
    """Resolve ``product`` with sequential equality checks."""

    if product == 1:
        return "SAP A1"
    elif product == 2:
        return "SAP B1"
    elif product == 3:
        return "Oracel"
    elif product == 4:
        return "ERPNext"
    elif product == 5:
        return "Mobile Applicaton"
    elif product == 6:
        return "Web Application"
    else:
        return DEFAULT_PRODUCT


def product_name_switch_expression(product: int) -> str:
    """Resolve ``product`` with a single structural pattern match."""

    match product:
        case 1:
            return "SAP A1"
        case 2:
            return "SAP B1"
        case 3:
            return "Oracel"
        case 4:
            return "ERPNext"
        case 5:
            return "Mobile Applicaton"
        case 6:
            return "Web Application"
        case _:
            return DEFAULT_PRODUCT


Mapper = Callable[[int], str]

# Timing order is fixed: statement form first.
MAPPERS: Tuple[Tuple[str, Mapper], ...] = (
    ("Switch-Case", product_name_switch_case),
    ("Switch Expression", product_name_switch_expression),
)


def default_sweep() -> List[int]:
    """Catalogue keys plus the out-of-table values either side of them."""

    keys = sorted(PRODUCT_MAPPING)
    return [keys[0] - 2, keys[0] - 1, *keys, keys[-1] + 1, keys[-1] + 1000]


def find_mismatches(values: Optional[Iterable[int]] = None) -> List[int]:
    """Return every value for which the two lookup forms disagree.

    Without ``values`` the catalogue and its neighbours are checked.
    """

    if values is None:
        values = default_sweep()
    return [
        value
        for value in values
        if product_name_switch_case(value) != product_name_switch_expression(value)
    ]


__all__ = [
    "DEFAULT_PRODUCT",
    "MAPPERS",
    "Mapper",
    "PRODUCT_MAPPING",
    "default_sweep",
    "find_mismatches",
    "product_name_switch_case",
    "product_name_switch_expression",
]
