"""
Pointer (click / tap) input.
"""

from domain.phase import Phase
from services.game_session import GameSession


def handle_click(session: GameSession) -> Phase:
    """A click on the overlay or the restart button: start or restart."""
    return session.on_start_or_restart_request()
