"""Recitation session state."""

from recitation.session.state_machine import RecitationSession

__all__ = ["RecitationSession"]
