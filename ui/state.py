from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from ..schemas import Dataset
from ..workspace import Workspace


@dataclass
class UIState:
    layout: str = "orig"
    numeric: str = "float"
    table: str = "PressEst"
    row_index: int = 0
    workspace: Workspace = field(default_factory=Workspace)


def row_series(dataset: Dataset, table_name: str, row_index: int) -> Tuple[str, List[float], List[float]]:
    """Label, column breakpoints and values for one row of a 2-D table."""
    table = dataset.tables[table_name]
    if len(table.axes) == 1:
        axis = dataset.axes[table.axes[0]]
        return table_name, list(axis.values), list(table.values)
    row_axis = dataset.axes[table.axes[0]]
    col_axis = dataset.axes[table.axes[1]]
    i = max(0, min(row_index, row_axis.size - 1))
    label = f"{table_name} @ {row_axis.name}={row_axis.values[i]:g} {row_axis.unit}".rstrip()
    return label, list(col_axis.values), list(table.values[i])
