"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# --- Request Schemas ---


class LoginRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"login": "marco_polo", "password": "silkroad_1271"}]}}

    login: str = Field(..., max_length=64)
    password: str = Field(..., max_length=128)


# --- Response Schemas ---


class RegisterResponse(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {"message": "User successfully registered", "userId": "d4e5f6a7-b8c9-0123-def0-234567890123"}
            ]
        },
    }

    message: str = "User successfully registered"
    user_id: str


class LoginResponse(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    token: str
    user_id: str
    name: str
