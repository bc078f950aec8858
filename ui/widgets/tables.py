from __future__ import annotations

from typing import Any, List, Optional, Tuple
from PySide6 import QtCore, QtGui
from ..theme import TABLE_GRADIENT


def _gradient_color(frac: float) -> QtGui.QColor:
    frac = min(max(frac, 0.0), 1.0)
    pos = frac * (len(TABLE_GRADIENT) - 1)
    i = min(int(pos), len(TABLE_GRADIENT) - 2)
    t = pos - i
    a, b = TABLE_GRADIENT[i], TABLE_GRADIENT[i + 1]
    return QtGui.QColor(*(int(round(a[k] + (b[k] - a[k]) * t)) for k in range(3)))


class SimpleTableModel(QtCore.QAbstractTableModel):
    """Table view model; first column holds the row breakpoints, the rest are shaded by value."""

    def __init__(self, headers: List[str], rows: List[List[Any]], *,
                 shade_range: Optional[Tuple[float, float]] = None):
        super().__init__()
        self.headers = headers
        self.rows = rows
        if shade_range is None:
            vals = [v for r in rows for v in r[1:] if isinstance(v, float)]
            shade_range = (min(vals), max(vals)) if vals else (0.0, 1.0)
        self.shade_range = shade_range

    def rowCount(self, parent=QtCore.QModelIndex()):
        return len(self.rows)

    def columnCount(self, parent=QtCore.QModelIndex()):
        return len(self.headers)

    def data(self, index, role=QtCore.Qt.DisplayRole):
        if not index.isValid():
            return None
        val = self.rows[index.row()][index.column()]
        if role == QtCore.Qt.DisplayRole:
            return "—" if val is None else f"{val:.4g}" if isinstance(val, float) else str(val)
        if role == QtCore.Qt.BackgroundRole and isinstance(val, float) and index.column() > 0:
            lo, hi = self.shade_range
            span = hi - lo
            return _gradient_color((val - lo) / span if span > 0 else 0.0)
        return None

    def headerData(self, section, orientation, role=QtCore.Qt.DisplayRole):
        if role == QtCore.Qt.DisplayRole and orientation == QtCore.Qt.Horizontal:
            return self.headers[section]
        return None

    # Export to CSV
    def export_csv(self, path: str):
        import csv
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(self.headers)
            for r in self.rows:
                writer.writerow(["" if v is None else v for v in r])
