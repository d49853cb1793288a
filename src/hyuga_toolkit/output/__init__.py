"""
Module: output

Purpose:
    Document writers for exported projects.
"""

from .renderer import DocumentWriter, ReportLabDocumentWriter

__all__ = [
    "DocumentWriter",
    "ReportLabDocumentWriter",
]
