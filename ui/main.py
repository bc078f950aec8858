from __future__ import annotations

import sys
from PySide6 import QtCore, QtWidgets

from .app import App
from .state import UIState


def _install_qt_warning_filter() -> None:
    """Drop the null-transform warning pyqtgraph's cursor line triggers on clear(); forward the rest."""

    def _handler(mode, context, message: str):  # type: ignore[no-untyped-def]
        if "QGraphicsItem::itemTransform: null pointer passed" in message:
            return
        sys.stderr.write(message + "\n")

    QtCore.qInstallMessageHandler(_handler)


def main(layout: str = "orig", numeric: str = "float") -> int:
    _install_qt_warning_filter()
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    win = App(UIState(layout=layout, numeric=numeric))
    win.resize(1200, 760)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
