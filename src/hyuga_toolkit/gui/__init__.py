"""Qt adapters used by the desktop shell."""

from .adapters import ExportWorker, QtImagePicker

__all__ = ["ExportWorker", "QtImagePicker"]
