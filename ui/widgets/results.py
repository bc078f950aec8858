from __future__ import annotations

from PySide6 import QtWidgets, QtGui
from ..theme import COLORS


class MetricCard(QtWidgets.QFrame):
    """Title, value and unit for one published scalar."""

    def __init__(self, title: str, unit: str = "", parent=None):
        super().__init__(parent)
        self.setFrameShape(QtWidgets.QFrame.StyledPanel)
        layout = QtWidgets.QVBoxLayout(self)
        self.title = QtWidgets.QLabel(title)
        self.value = QtWidgets.QLabel("—")
        self.unit = QtWidgets.QLabel(unit)
        layout.addWidget(self.title)
        layout.addWidget(self.value)
        layout.addWidget(self.unit)
        self.setObjectName("MetricCard")

    def set_value(self, v, unit: str = "", layout: str | None = None):
        """Show v (float or text); tint by active layout when given."""
        self.value.setText(f"{v:.6g}" if isinstance(v, float) else str(v))
        if unit:
            self.unit.setText(unit)
        pal = self.value.palette()
        pal.setColor(QtGui.QPalette.WindowText, QtGui.QColor(COLORS.get(layout or "", COLORS["neutral"])))
        self.value.setPalette(pal)
