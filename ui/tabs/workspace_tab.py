from __future__ import annotations

from PySide6 import QtWidgets

from ..widgets.tables import SimpleTableModel
from ..state import UIState
from ...workspace import FORMAT_NAMES, SCALAR_NAMES


class WorkspaceTab(QtWidgets.QWidget):
    """Published scalars and numeric format slots."""

    def __init__(self, state: UIState, parent=None):
        super().__init__(parent)
        self.state = state
        layout = QtWidgets.QVBoxLayout(self)
        self.refresh_btn = QtWidgets.QPushButton("Refresh")
        self.refresh_btn.clicked.connect(self.refresh)
        self.view = QtWidgets.QTableView()
        layout.addWidget(self.refresh_btn)
        layout.addWidget(self.view)
        self.refresh()

    def refresh(self):
        ws = self.state.workspace
        rows = []
        for name in SCALAR_NAMES + FORMAT_NAMES:
            if name not in ws:
                continue
            v = ws[name]
            text = getattr(v, "name", None) or (f"{v.value:.6g}" if hasattr(v, "value") else v)
            rows.append([name, text if isinstance(text, str) else float(text)])
        self.view.setModel(SimpleTableModel(["name", "value"], rows, shade_range=(0.0, 0.0)))
