"""
Module: export

Purpose:
    Project export to PDF and the guided asset wizard.

Key Functions:
    - export_project(): Load, decode, paginate and render a project

Key Classes:
    - ExportConfig, ExportResult, ExportError
    - AssetWizard, ImagePicker
"""

from .controller import ExportConfig, ExportError, ExportResult, export_project
from .wizard import AssetWizard, ImagePicker, WizardOutcome, guess_meta_from_filenames

__all__ = [
    "ExportConfig",
    "ExportError",
    "ExportResult",
    "export_project",
    "AssetWizard",
    "ImagePicker",
    "WizardOutcome",
    "guess_meta_from_filenames",
]
