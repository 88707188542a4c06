import logging
import sys

from PyQt6.QtWidgets import QApplication

try:
    from src.sketchauth.app import SketchAuthApp
except ImportError as e:
    print(f"Error: Could not import the main application class 'SketchAuthApp'.")
    print(f"Please ensure the project structure is correct (e.g., src/sketchauth/app.py exists).")
    print(f"Details: {e}")
    sys.exit(1)


def main():
    """
    The main entry point for the SketchAuth application.

    This function configures logging, initializes the QApplication, creates
    the application controller (SketchAuthApp) and starts the event loop.
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = QApplication(sys.argv)

    # Keep a reference so the window is not garbage collected.
    sketch_auth_app = SketchAuthApp()

    sys.exit(app.exec())


if __name__ == '__main__':
    main()
