# event_planner/schemas/tokens.py
from pydantic import BaseModel

from event_planner.schemas.user import UserOut, UserRef


class Token(BaseModel):
    message: str = "Login successful"
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user: UserOut

    model_config = {
        "from_attributes": True
    }


class AccessToken(BaseModel):
    access_token: str
    token_type: str = "bearer"


class RefreshRequest(BaseModel):
    refresh_token: str


class RegisterResponse(BaseModel):
    message: str = "User registered successfully"
    user: UserRef
