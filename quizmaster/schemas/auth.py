from pydantic import EmailStr, Field, model_validator
from typing import List
from datetime import datetime
from quizmaster.schemas.base import CamelModel

class RegisterRequest(CamelModel):
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, description="Le mot de passe doit contenir au moins 6 caractères")
    confirm_password: str
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Les mots de passe ne correspondent pas")
        return self

class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)

class UserOut(CamelModel):
    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    points: int
    streak: int
    badges: List[str]
    created_at: datetime

class UserEnvelope(CamelModel):
    user: UserOut

class Message(CamelModel):
    message: str
