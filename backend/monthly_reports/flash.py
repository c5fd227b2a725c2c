from collections.abc import MutableMapping
from typing import Any, Optional

FLASH_KEY = "flashdata"


def set_flashdata(session: MutableMapping[str, Any], message: str) -> None:
    session[FLASH_KEY] = message


def pop_flashdata(session: MutableMapping[str, Any]) -> Optional[str]:
    """Read the pending notice once; it is gone on the next page."""
    return session.pop(FLASH_KEY, None)
