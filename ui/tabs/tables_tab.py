from __future__ import annotations

from PySide6 import QtWidgets

from ..widgets.plots import Plot
from ..widgets.results import MetricCard
from ..widgets.tables import SimpleTableModel
from ..state import UIState, row_series
from ... import api
from ... import io as IO
from ...errors import CalibrationError
from ...workspace import TABLE_NAMES


class TablesTab(QtWidgets.QWidget):
    def __init__(self, state: UIState, parent=None):
        super().__init__(parent)
        self.state = state
        self._build_ui()
        self.on_apply()

    def _build_ui(self):
        layout = QtWidgets.QHBoxLayout(self)
        left = QtWidgets.QVBoxLayout()
        right = QtWidgets.QVBoxLayout()

        self.layout_box = QtWidgets.QComboBox()
        self.layout_box.addItems(["orig", "pow2"])
        self.layout_box.setCurrentText(self.state.layout)
        self.numeric_box = QtWidgets.QComboBox()
        self.numeric_box.addItems(["float", "fixed"])
        self.numeric_box.setCurrentText(self.state.numeric)
        self.table_box = QtWidgets.QComboBox()
        self.table_box.addItems(list(TABLE_NAMES))
        self.table_box.setCurrentText(self.state.table)
        self.table_box.currentTextChanged.connect(self.on_table_changed)
        self.row_spin = QtWidgets.QSpinBox()
        self.row_spin.valueChanged.connect(self.on_row_changed)
        self.apply = QtWidgets.QPushButton("Apply")
        self.apply.clicked.connect(self.on_apply)

        form = QtWidgets.QFormLayout()
        form.addRow("Breakpoints", self.layout_box)
        form.addRow("Data type", self.numeric_box)
        form.addRow("Table", self.table_box)
        form.addRow("Row", self.row_spin)
        left.addLayout(form)
        self.export_csv_btn = QtWidgets.QPushButton("Export table CSV")
        self.export_csv_btn.clicked.connect(self.on_export_csv)
        self.export_png_btn = QtWidgets.QPushButton("Export plot PNG")
        self.export_png_btn.clicked.connect(self.on_export_png)
        left.addWidget(self.apply)
        left.addWidget(self.export_csv_btn)
        left.addWidget(self.export_png_btn)

        self.card_press = MetricCard("Pressure range", "bar")
        self.card_speed = MetricCard("Speed range", "rad/s")
        self.card_throt = MetricCard("Throttle range", "deg")
        self.card_st = MetricCard("st_range")
        for card in (self.card_press, self.card_speed, self.card_throt, self.card_st):
            left.addWidget(card)
        left.addStretch(1)

        self.view = QtWidgets.QTableView()
        self.plot = Plot()
        right.addWidget(self.view, 3)
        right.addWidget(self.plot.widget, 2)

        layout.addLayout(left)
        layout.addLayout(right, 1)

    def on_apply(self):
        self.state.layout = self.layout_box.currentText()
        self.state.numeric = self.numeric_box.currentText()
        try:
            api.configure(self.state.workspace, self.state.layout, self.state.numeric)
        except CalibrationError as e:
            QtWidgets.QMessageBox.critical(self, "Configuration failed", str(e))
            return
        self._refresh()

    def on_export_csv(self):
        model = self.view.model()
        if model is None:
            return
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Export table", f"{self.state.table}.csv", "CSV (*.csv)")
        if path:
            model.export_csv(path)

    def on_export_png(self):
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Export plot", f"{self.state.table}.png", "PNG (*.png)")
        if path:
            self.plot.export_png(path)

    def on_table_changed(self, name: str):
        self.state.table = name
        self._refresh()

    def on_row_changed(self, i: int):
        self.state.row_index = i
        self._refresh_plot()

    def _refresh(self):
        cfg = self.state.workspace.state
        if cfg is None:
            return
        ds = cfg.dataset
        headers, rows = IO.table_rows(ds, self.state.table)
        self.view.setModel(SimpleTableModel(headers, rows))
        self.row_spin.setRange(0, max(len(rows) - 1, 0))
        b = cfg.bounds
        self.card_press.set_value(f"{b.pressure.min:g} .. {b.pressure.max:g}", layout=cfg.layout.value)
        self.card_speed.set_value(f"{b.speed.min:g} .. {b.speed.max:g}", layout=cfg.layout.value)
        self.card_throt.set_value(f"{b.throttle.min:g} .. {b.throttle.max:g}", layout=cfg.layout.value)
        st = cfg.scalars.st_range
        self.card_st.set_value(st if isinstance(st, float) else f"{st.value:.6g} ({st.format.name})")
        self._refresh_plot()

    def _refresh_plot(self):
        cfg = self.state.workspace.state
        if cfg is None:
            return
        label, xs, ys = row_series(cfg.dataset, self.state.table, self.state.row_index)
        table = cfg.dataset.tables[self.state.table]
        self.plot.clear()
        self.plot.set_axis_labels(table.axes[-1], f"{table.name} [{table.unit}]" if table.unit else table.name)
        self.plot.add_series(label, xs, ys, cfg.layout.value, step=cfg.lookup.interp_method == "None - Flat")
        self.plot.mark_breakpoints(xs)
        # overlay the canonical row nearest the active breakpoint
        if cfg.layout.value != "orig":
            ref = api.canonical_dataset()
            rlabel, rx, ry = _nearest_row(ref, cfg.dataset, self.state.table, self.state.row_index)
            self.plot.add_series(rlabel, rx, ry, "orig", line_width=1)


def _nearest_row(ref, ds, table_name: str, row_index: int):
    """Canonical row closest to the active row breakpoint."""
    table = ds.tables[table_name]
    if len(table.axes) == 1:
        return row_series(ref, table_name, 0)
    axis = table.axes[0]
    target = ds.axes[axis].values[min(row_index, ds.axes[axis].size - 1)]
    ref_vals = ref.axes[axis].values
    j = min(range(len(ref_vals)), key=lambda k: abs(ref_vals[k] - target))
    return row_series(ref, table_name, j)
