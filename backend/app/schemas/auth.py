from datetime import datetime

from pydantic import ConfigDict, Field

from app.schemas.base import CamelModel


class UserRegister(CamelModel):
    username: str = Field(min_length=3, max_length=40)
    display_name: str = Field(min_length=1, max_length=80)
    password: str = Field(min_length=6, max_length=128)

    model_config = ConfigDict(str_strip_whitespace=True)


class UserLogin(CamelModel):
    username: str = Field(min_length=1, max_length=40)
    password: str = Field(min_length=1, max_length=128)


class UserRead(CamelModel):
    id: int
    username: str
    display_name: str
    created_at: datetime


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
