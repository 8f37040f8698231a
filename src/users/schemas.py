from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str


class User(BaseModel):
    id: int
    username: str
    password: str
