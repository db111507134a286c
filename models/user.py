# Pydantic моделі для даних користувача

from pydantic import BaseModel


class UserIdentity(BaseModel):
    uid: str
    email: str | None = None

    @classmethod
    def from_claims(cls, claims: dict) -> "UserIdentity":
        """
        Будує користувача з розкодованого Firebase токена або сесійного cookie.
        """
        return cls(uid=claims["uid"], email=claims.get("email"))


class SessionCreate(BaseModel):
    id_token: str


class SignOutResponse(BaseModel):
    status: str = "signed_out"
