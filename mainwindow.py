from PySide6.QtWidgets import QMainWindow, QTabWidget

# Подключаем FetchTabController
from ui.panels.fetch_tab import FetchTabController

class MainWindow(QMainWindow):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("PageTitle Fetcher")
        self.resize(900, 700)

        self.tabWidget = QTabWidget(self)
        self.setCentralWidget(self.tabWidget)

        # Вкладка Fetch
        self.fetch_tab = FetchTabController()
        self.tabWidget.addTab(self.fetch_tab, "Fetch")
