from typing import Optional
from fastapi import Depends, Request, Response
from fastapi.security import OAuth2PasswordBearer
from novalife.core.config import settings
from novalife.core.errors import AuthRequiredError
from novalife.core.security import decode_access_token

# The console authenticates with the cookie set at login; API clients may
# send the same token as a bearer header instead.
oauth2_scheme_optional = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/admin", auto_error=False)


def get_token(request: Request, bearer: Optional[str] = Depends(oauth2_scheme_optional)) -> Optional[str]:
    return bearer or request.cookies.get(settings.AUTH_COOKIE_NAME)


def get_current_admin(token: Optional[str] = Depends(get_token)) -> dict:
    if not token:
        raise AuthRequiredError("Not authenticated")
    payload = decode_access_token(token)
    if payload is None or payload.get("role") != "admin":
        raise AuthRequiredError()
    return payload


def set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        path="/",
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(key=settings.AUTH_COOKIE_NAME, path="/")
