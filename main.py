# -*- coding: utf-8 -*-
"""ElecCalc entrypoint.

Intentionally minimal:
- runtime dependency check
- bootstrap (logging, crash hooks)
- QApplication creation
- show main window
"""
import sys


def main() -> None:
    from app.deps import ensure_runtime_deps

    try:
        ensure_runtime_deps()
    except RuntimeError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)

    from PyQt5.QtWidgets import QApplication

    from app.bootstrap import bootstrap
    from app.config import APP_NAME
    from eleccalc.version import get_version
    from screens.calculator.main_window import create_main_window

    bootstrap()

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(get_version())

    window = create_main_window()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
