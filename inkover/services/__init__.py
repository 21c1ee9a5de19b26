"""Services: export of flattened annotations."""

from .export_gate import AnnotationResult, ExportError, flatten, export_annotation

__all__ = ['AnnotationResult', 'ExportError', 'flatten', 'export_annotation']
