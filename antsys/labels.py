from __future__ import annotations
from typing import Sequence


def city_label(index: int) -> str:
    """Spreadsheet-style label: 0 -> A, 25 -> Z, 26 -> AA, ..."""
    if index < 0:
        raise ValueError(f"negative city index {index}")
    label = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, 26)
        label = chr(ord("A") + rem) + label
    return label


def display_path(path: Sequence[int]) -> str:
    return " -> ".join(city_label(i) for i in path)
