from typing import Optional

from fastapi import Header

from repairdesk.config import settings


def get_current_user_id(x_user_id: Optional[int] = Header(default=None)) -> int:
    """
    Identity seam for the external auth provider: the caller id arrives in
    ``X-User-Id``; without it the configured default user is assumed.
    """
    if x_user_id is None:
        return settings.DEFAULT_USER_ID
    return x_user_id
