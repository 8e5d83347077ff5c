from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from hotdesk.core.config import settings
from hotdesk.core.security import create_access_token

from hotdesk.api.deps import get_current_user, get_engine
from hotdesk.services.engine import BookingEngine
from hotdesk.schemas.user import UserCreate, AdminCreate, Token, User

router = APIRouter(prefix="/auth", tags=["auth"])


def _build_token_response(user: User) -> Token:
    return Token(
        access_token=create_access_token(subject=user.id),
        token_type="bearer",
        user=user,
    )


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(body: UserCreate, engine: BookingEngine = Depends(get_engine)):
    """Sign up. Picking a designated seat assigns it to the new user."""
    user = engine.register_user(
        name=body.name,
        email=body.email,
        password=body.password,
        batch=body.batch,
        designated_seat_id=body.designated_seat_id,
    )
    return _build_token_response(user)


@router.post("/admin/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def admin_register(body: AdminCreate, engine: BookingEngine = Depends(get_engine)):
    if body.admin_secret != settings.ADMIN_SECRET_KEY:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin secret",
        )
    user = engine.register_user(
        name=body.name,
        email=body.email,
        password=body.password,
        batch=body.batch,
        designated_seat_id=body.designated_seat_id,
        role="admin",
    )
    return _build_token_response(user)


@router.post("/login", response_model=Token)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    engine: BookingEngine = Depends(get_engine),
):
    user = engine.authenticate(form_data.username, form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return _build_token_response(user)


@router.post("/logout", status_code=status.HTTP_200_OK)
def logout(current_user: User = Depends(get_current_user)):
    """
    Logout the current user.
    Tokens are stateless JWTs, so the client simply discards its token.
    """
    return {"message": "Successfully logged out"}
