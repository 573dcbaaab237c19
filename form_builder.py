import sys
import logging

from PyQt6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QHBoxLayout,
)
from PyQt6.QtGui import QAction

from field_store import FieldStore
from ui import FieldEditorPanel, FormPreview
from util import BuilderConfig

logger = logging.getLogger(__name__)


class FormBuilder(QMainWindow):
    """Main application window: field editor on the left, live preview on the right."""

    def __init__(self, config: BuilderConfig | None = None, id_source=None):
        super().__init__()
        self.config = config or BuilderConfig()
        self.setWindowTitle(self.config.window_title)
        self.setGeometry(100, 100, self.config.window_width, self.config.window_height)

        # Single owner of the field collection; views only read its snapshots
        self.store = FieldStore(parent=self)
        self.id_source = id_source

        self.init_ui()
        self.store.fields_changed.connect(self.on_fields_changed)
        self.on_fields_changed(self.store.fields)

    def init_ui(self):
        """Initialize the user interface."""
        menubar = self.menuBar()
        file_menu = menubar.addMenu('File')

        quit_action = QAction('Quit', self)
        quit_action.setShortcut('Ctrl+Q')
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QHBoxLayout(central_widget)

        # Left panel: editor
        self.editor_panel = FieldEditorPanel(self.store.dispatch, self.id_source)
        main_layout.addWidget(self.editor_panel, stretch=1)

        # Right panel: preview
        self.preview = FormPreview()
        main_layout.addWidget(self.preview, stretch=1)

    def on_fields_changed(self, fields):
        """Re-render both views from the new snapshot."""
        self.editor_panel.set_fields(fields)
        self.preview.set_fields(fields)


def main():
    """Main entry point for the application."""
    config = BuilderConfig()
    logging.basicConfig(level=config.log_level)
    logger.info("Starting form builder")
    app = QApplication(sys.argv)
    window = FormBuilder(config)
    window.show()
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
