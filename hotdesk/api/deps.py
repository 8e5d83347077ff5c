from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from hotdesk.core.config import settings
from hotdesk.core.exceptions import NotFoundError
from hotdesk.core.security import decode_token
from hotdesk.db.session import SeatStore, get_store
from hotdesk.schemas.user import User
from hotdesk.services.engine import BookingEngine

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/login")


def get_engine(store: SeatStore = Depends(get_store)) -> BookingEngine:
    return BookingEngine(store)


def get_current_user(
    token: str = Depends(oauth2_scheme),
    engine: BookingEngine = Depends(get_engine),
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    user_id = decode_token(token)
    if not user_id:
        raise credentials_exception
    try:
        return engine.get_user(user_id)
    except NotFoundError:
        raise credentials_exception


def get_current_admin_user(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user
