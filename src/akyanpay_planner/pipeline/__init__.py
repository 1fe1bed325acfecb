"""Document generation stages."""

from .document_generator import CanvasGenerator, MarkdownDocumentGenerator, TemplatedGenerator
from .document_pipeline import DOCUMENT_SPECS, DocumentPipeline, DocumentSpec

__all__ = [
    "TemplatedGenerator",
    "MarkdownDocumentGenerator",
    "CanvasGenerator",
    "DocumentSpec",
    "DOCUMENT_SPECS",
    "DocumentPipeline",
]
