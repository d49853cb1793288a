"""
Qt adapters for the host application: a QFileDialog-backed image picker
and a QThread worker that runs an export off the UI thread.
"""
from __future__ import annotations

import logging
from pathlib import Path
from queue import Queue
from typing import Optional

from PySide6.QtCore import QThread, Signal
from PySide6.QtWidgets import QFileDialog, QWidget

from ..common.logging_utils import attach_queue_handler, detach_queue_handler
from ..core.errors import HyugaError
from ..export.controller import ExportConfig, export_project
from ..export.wizard import ImagePicker
from ..storage.project_repository import ProjectRepository

logger = logging.getLogger(__name__)

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg)"
PACKAGE_LOGGER = "hyuga_toolkit"


class QtImagePicker(ImagePicker):
    """ImagePicker backed by native file dialogs."""

    def __init__(self, parent: Optional[QWidget] = None, start_dir: Optional[Path] = None):
        self.parent = parent
        self.start_dir = start_dir or Path.home()

    def pick_image(self, title: str) -> Optional[Path]:
        filename, _ = QFileDialog.getOpenFileName(
            self.parent, title, str(self.start_dir), IMAGE_FILTER
        )
        return Path(filename) if filename else None

    def pick_images(self, title: str) -> list[Path]:
        filenames, _ = QFileDialog.getOpenFileNames(
            self.parent, title, str(self.start_dir), IMAGE_FILTER
        )
        return [Path(f) for f in filenames]


class ExportWorker(QThread):
    """
    Background worker for exporting a project to PDF.

    When ``log_queue`` is given, records from the toolkit's loggers are
    forwarded to it as (message, level) tuples while the export runs, for
    display in a console widget.
    """

    succeeded = Signal(object)  # ExportResult
    failed = Signal(str)

    def __init__(
        self,
        repository: ProjectRepository,
        project_id: str,
        config: Optional[ExportConfig] = None,
        parent=None,
        *,
        log_queue: Optional[Queue] = None,
    ):
        super().__init__(parent)
        self.repository = repository
        self.project_id = project_id
        self.config = config
        self.log_queue = log_queue

    def run(self):
        handler = None
        if self.log_queue is not None:
            handler = attach_queue_handler(self.log_queue, PACKAGE_LOGGER)
        try:
            result = export_project(self.repository, self.project_id, self.config)
        except HyugaError as e:
            logger.error(f"Export of project {self.project_id} failed: {e}")
            self.failed.emit(str(e))
            return
        except Exception as e:
            logger.exception(f"Unexpected error exporting project {self.project_id}")
            self.failed.emit(f"Unexpected error: {e}")
            return
        finally:
            if handler is not None:
                detach_queue_handler(handler, PACKAGE_LOGGER)
        self.succeeded.emit(result)
