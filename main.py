from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication
import sys
from mainwindow import MainWindow


def main() -> int:
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()

    def _graceful_shutdown():
        summary = window.fetch_tab.shutdown(timeout_ms=5000)
        print(f"[FETCH] shutdown: cancelled={summary['cancelled']} "
              f"joined={summary['joined']} left={len(summary['left'])}")

    QCoreApplication.instance().aboutToQuit.connect(_graceful_shutdown)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
