from __future__ import annotations

from bisect import bisect_left
from typing import List, Optional, Sequence

from PySide6 import QtCore
import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter
from ..theme import COLORS


class Plot(QtCore.QObject):
    """Row-slice plot of a lookup table with breakpoint markers and a snapping readout."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widget = pg.PlotWidget(background=COLORS["bg"])
        self.widget.showGrid(x=True, y=True, alpha=0.3)
        for side in ("left", "bottom"):
            self.widget.getPlotItem().getAxis(side).setPen(COLORS["neutral"])
        self.legend = self.widget.addLegend()
        pg.setConfigOptions(antialias=True)

        self._series: dict[str, pg.PlotDataItem] = {}
        self._breakpoints: List[float] = []
        self._markers: List[pg.InfiniteLine] = []
        self._x_label = ""
        self._y_label = ""

        self._cursor = pg.InfiniteLine(angle=90, movable=False, pen=pg.mkPen(COLORS["neutral"]))
        self._cursor.setZValue(10)
        self._readout = pg.TextItem("", color=COLORS["neutral"])  # type: ignore[arg-type]
        self._readout.setAnchor((0, 1))
        self._add_overlays()
        self._mouse_proxy = pg.SignalProxy(self.widget.scene().sigMouseMoved, rateLimit=60, slot=self._on_mouse_moved)

    def _add_overlays(self):
        self.widget.addItem(self._cursor, ignoreBounds=True)
        self.widget.addItem(self._readout, ignoreBounds=True)

    def add_series(self, name: str, x: List[float], y: List[float], color_token: str,
                   line_width: int = 2, symbol: Optional[str] = "o", step: bool = False):
        pen = pg.mkPen(COLORS.get(color_token, COLORS["neutral"]), width=line_width)
        if step:
            # flat (nearest) lookup: hold each value over its breakpoint cell
            item = self.widget.plot(x, y, name=name, pen=pen, stepMode="left")
        else:
            item = self.widget.plot(x, y, name=name, pen=pen, symbol=symbol, symbolSize=5)
        self._series[name] = item
        self.widget.enableAutoRange('xy', True)
        return item

    def mark_breakpoints(self, xs: Sequence[float]):
        """Dashed vertical line at every breakpoint of the column axis."""
        for line in self._markers:
            self.widget.removeItem(line)
        self._breakpoints = sorted(float(x) for x in xs)
        pen = pg.mkPen(COLORS["grid"], style=QtCore.Qt.DashLine)
        self._markers = [pg.InfiniteLine(pos=x, angle=90, movable=False, pen=pen) for x in self._breakpoints]
        for line in self._markers:
            self.widget.addItem(line, ignoreBounds=True)

    def clear(self):
        self.widget.clear()
        self._series.clear()
        self._markers.clear()
        self._breakpoints = []
        self.legend = self.widget.addLegend()
        self._add_overlays()
        self.set_axis_labels(self._x_label, self._y_label)

    def export_png(self, path: str):
        ImageExporter(self.widget.plotItem).export(path)

    def set_axis_labels(self, x_label: str = "", y_label: str = ""):
        self._x_label = x_label
        self._y_label = y_label
        if x_label:
            self.widget.setLabel('bottom', x_label)
        if y_label:
            self.widget.setLabel('left', y_label)

    def _nearest_breakpoint(self, x: float) -> Optional[int]:
        bps = self._breakpoints
        if not bps:
            return None
        i = bisect_left(bps, x)
        if i == len(bps) or (i > 0 and x - bps[i - 1] <= bps[i] - x):
            i -= 1
        return i

    def _on_mouse_moved(self, args):
        pos = args[0] if isinstance(args, (list, tuple)) and args else args
        vb = self.widget.plotItem.vb
        if vb is None or pos is None:
            return
        p = vb.mapSceneToView(pos)
        i = self._nearest_breakpoint(p.x())
        if i is None:
            self._cursor.setPos(p.x())
            self._readout.setText(f"x={p.x():.4g}")
        else:
            self._cursor.setPos(self._breakpoints[i])
            self._readout.setText(f"bp[{i}]={self._breakpoints[i]:.4g}")
        (x0, _), (_, y1) = vb.viewRange()
        self._readout.setPos(x0, y1)
