"""
Registration and login endpoints.
"""
import logging
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..auth import hash_password, verify_password, create_access_token
from ..db import get_db
from ..errors import ConflictError, NotFoundError
from ..models import User
from ..schemas import (
    UserCreate,
    UserLogin,
    UserOut,
    RegistrationResponse,
    LoginResponse,
    ErrorResponse,
)
from ..utils.event_logger import log_auth_event

router = APIRouter(prefix="/api/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)

# Same message for unknown user and wrong password, no username enumeration
INVALID_CREDENTIALS = "Username or password is incorrect"


@router.post(
    "/register",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Invalid input or username taken"}},
)
def register(payload: UserCreate, request: Request, db: Session = Depends(get_db)):
    if db.query(User).filter(User.username == payload.username).first():
        raise ConflictError("Username already exists")

    user = User(username=payload.username, password=hash_password(payload.password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # Lost a race against a concurrent registration of the same name
        db.rollback()
        raise ConflictError("Username already exists") from exc
    db.refresh(user)

    log_auth_event("register", request, user_id=user.id, username=user.username)
    return RegistrationResponse(
        message="User registered successfully",
        user=UserOut.model_validate(user),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={404: {"model": ErrorResponse, "description": INVALID_CREDENTIALS}},
)
def login(credentials: UserLogin, request: Request, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.username == credentials.username).first()
    if not user or not verify_password(credentials.password, user.password):
        log_auth_event(
            "login_failure",
            request,
            user_id=user.id if user else None,
            username=credentials.username,
        )
        raise NotFoundError(INVALID_CREDENTIALS)

    log_auth_event("login_success", request, user_id=user.id, username=user.username)
    return LoginResponse(message="Login successful", token=create_access_token(user.id))
