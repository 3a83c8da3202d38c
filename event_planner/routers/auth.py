# event_planner/routers/auth.py
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from event_planner.database import get_db
from event_planner.errors import AuthenticationError, BadRequestError
from event_planner.models.user import User, UserRole
from event_planner.schemas.tokens import AccessToken, RefreshRequest, RegisterResponse, Token
from event_planner.schemas.user import UserCreate, UserLogin
from event_planner.utils.auth import get_credentials
from event_planner.utils.security import CredentialService, REFRESH_TOKEN, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(get_db)):
    existing_user = db.query(User).filter(User.email == user.email).first()
    if existing_user:
        raise BadRequestError("User already exists")

    # Self-registration always yields a regular user
    new_user = User(
        name=user.name,
        email=user.email,
        hashed_password=hash_password(user.password),
        role=UserRole.USER.value,
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise BadRequestError("User already exists")
    db.refresh(new_user)

    logger.info(f"Registered user {new_user.id} ({new_user.email})")
    return {"user": new_user}


@router.post("/login", response_model=Token)
def login(
    user: UserLogin,
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credentials),
):
    db_user = db.query(User).filter(User.email == user.email).first()
    if not db_user or not verify_password(user.password, db_user.hashed_password):
        raise AuthenticationError("Invalid credentials")

    return {
        "access_token": credentials.issue(db_user),
        "refresh_token": credentials.issue_refresh(db_user),
        "user": db_user,
    }


@router.post("/refresh-token", response_model=AccessToken)
def refresh_token(
    body: RefreshRequest,
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credentials),
):
    payload = credentials.verify(body.refresh_token, REFRESH_TOKEN)
    if payload is None:
        raise AuthenticationError("Invalid refresh token")

    db_user = db.get(User, payload["id"])
    if db_user is None:
        raise AuthenticationError("User not found")

    return {"access_token": credentials.issue(db_user)}
