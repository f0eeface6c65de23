from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictStr

from storefront.domain.users.entities import SessionToken


class LoginRequestDTO(BaseModel):
    username: StrictStr | None = None
    password: StrictStr | None = None

    model_config = ConfigDict(extra="ignore")


class UserDTO(BaseModel):
    id: int
    username: str
    role: str

    @classmethod
    def from_session(cls, session: SessionToken) -> UserDTO:
        return cls(id=session.user_id, username=session.username, role=session.role)


class LoginSuccessDTO(BaseModel):
    success: bool = True
    user: UserDTO


class SessionCheckDTO(BaseModel):
    authenticated: bool
    user: UserDTO | None = None


class LoginPageDTO(BaseModel):
    success: bool = True
    redirect: str
