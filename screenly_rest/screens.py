"""
Screen operations for Screenly REST API
"""

from typing import Any, List, Dict

from . import core
from .authentication import Authentication


def list_screens(auth: Authentication) -> List[Dict[str, Any]]:
    """List all screens with their status, hardware info and sync state"""
    return core.get(auth, "v4/screens")


def get_screen(auth: Authentication, uuid: str) -> List[Dict[str, Any]]:
    """Get a screen by UUID

    Parameters:
        :auth: Authentication instance
        :uuid: string screen id

    The API answers with a list holding zero or one screen.
    """
    return core.get(auth, f"v4/screens?id=eq.{uuid}")
