"""
JSON/CSV export of datasets and published workspaces for documentation,
tests and offline analysis. Nothing here is read back by the engine itself.
"""
from __future__ import annotations

import csv
import json
from typing import Any, Dict, List, Mapping, Tuple

import numpy as np
from pydantic import BaseModel

from .schemas import Dataset


def dataset_to_dict(dataset: Dataset) -> Dict[str, Any]:
    return dataset.model_dump(mode="json")


def dataset_from_dict(data: Mapping[str, Any]) -> Dataset:
    """Validate a dict produced by dataset_to_dict (axes, shapes and all)."""
    return Dataset.model_validate(data)


def write_dataset_json(dataset: Dataset, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(dataset_to_dict(dataset), f, ensure_ascii=False)


def read_dataset_json(path: str) -> Dataset:
    with open(path, "r", encoding="utf-8") as f:
        return dataset_from_dict(json.load(f))


def table_rows(dataset: Dataset, name: str) -> Tuple[List[str], List[List[Any]]]:
    """
    Flatten a table for display/CSV.
    2-D: header = [row_axis\\col_axis, *col breakpoints], one row per row breakpoint.
    1-D: header = [axis, name].
    """
    try:
        table = dataset.tables[name]
    except KeyError:
        raise ValueError(f"Unknown table: {name!r} (have {sorted(dataset.tables)})") from None
    if len(table.axes) == 1:
        axis = dataset.axes[table.axes[0]]
        return [axis.name, name], [[x, v] for x, v in zip(axis.values, table.values)]
    row_axis = dataset.axes[table.axes[0]]
    col_axis = dataset.axes[table.axes[1]]
    headers = [f"{row_axis.name}\\{col_axis.name}"] + [f"{c:g}" for c in col_axis.values]
    rows = [[r, *vals] for r, vals in zip(row_axis.values, table.values)]
    return headers, rows


def write_table_csv(dataset: Dataset, name: str, path: str) -> None:
    headers, rows = table_rows(dataset, name)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(headers)
        w.writerows(rows)


def _jsonable(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, np.generic):
        return value.item()
    return value


def workspace_to_dict(values: Mapping[str, Any]) -> Dict[str, Any]:
    """JSON-ready copy of a workspace snapshot."""
    return {k: _jsonable(v) for k, v in values.items()}
