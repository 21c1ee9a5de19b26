"""Controllers: input session state machine."""

from .session_controller import AnnotationSession, SessionState

__all__ = ['AnnotationSession', 'SessionState']
