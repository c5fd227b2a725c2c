# monthly_reports/deps/auth.py
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose.exceptions import ExpiredSignatureError, JWTError

from monthly_reports.security import decode_token
from monthly_reports.settings import Settings, get_settings

# Browsers navigating the HTML pages send the cookie; scripts send the header
bearer_scheme = HTTPBearer(auto_error=False)
TOKEN_COOKIE = "access_token"

def make_sure_allowed(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Optional[Dict[str, Any]]:
    """
    Guard for every monthly report action. Returns the token claims, or None
    when AUTH_REQUIRED is switched off (local development).
    """
    if not settings.AUTH_REQUIRED:
        return None

    unauth = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    token = credentials.credentials if credentials else request.cookies.get(TOKEN_COOKIE)
    if not token:
        raise unauth
    try:
        payload = decode_token(token)
    except ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except JWTError:
        raise unauth

    if payload.get("sub") is None:
        raise unauth
    return payload
