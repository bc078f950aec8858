from __future__ import annotations

from PySide6 import QtWidgets

from .state import UIState
from .tabs.tables_tab import TablesTab
from .tabs.workspace_tab import WorkspaceTab


class App(QtWidgets.QMainWindow):
    def __init__(self, state: UIState | None = None):
        super().__init__()
        self.setWindowTitle("FuelsysDataTool")
        self.state = state or UIState()
        tabs = QtWidgets.QTabWidget()
        self.tables_tab = TablesTab(self.state)
        self.workspace_tab = WorkspaceTab(self.state)
        tabs.addTab(self.tables_tab, "Tables")
        tabs.addTab(self.workspace_tab, "Workspace")
        tabs.currentChanged.connect(lambda _i: self.workspace_tab.refresh())
        self.setCentralWidget(tabs)
