"""UI components for WordMaster."""

from .presenter import ViewModel, build_view_model
from .import_view import ImportView
from .study_view import StudyView

__all__ = [
    'ViewModel',
    'build_view_model',
    'ImportView',
    'StudyView',
]
