# event_planner/utils/auth.py
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from event_planner.database import get_db
from event_planner.models.user import User
from event_planner.schemas.user import Requester
from event_planner.utils.security import CredentialService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def get_credentials(request: Request) -> CredentialService:
    return request.app.state.credentials


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credentials),
) -> Requester:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    payload = credentials.verify(token)
    if payload is None:
        raise credentials_exception

    user = db.get(User, payload["id"])
    if user is None:
        raise credentials_exception

    # Role is read from the stored user, not from the token claims
    return Requester(id=user.id, role=user.role)
