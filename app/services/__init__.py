"""Services for the annotator API."""

from .annotator import AnnotatorService

__all__ = ["AnnotatorService"]
