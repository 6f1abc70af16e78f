"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


# --- REQUEST MODELS ---
# *Create models are read from query parameters, *Update models from the JSON body.
class GameCreate(BaseModel):
    name: str
    publisher: str
    rating: str


class GameUpdate(BaseModel):
    # Key in the body is accepted but ignored: the key query parameter decides which record changes.
    name: Optional[str] = None
    publisher: str
    rating: str


class ShoeCreate(BaseModel):
    name: str
    color: str
    brand: str


class ShoeUpdate(BaseModel):
    id: Optional[int] = None
    name: str
    color: str
    brand: str


class UcsbBuildingCreate(BaseModel):
    name: str
    description: str
    architecture: str
    location: str


class UcsbBuildingUpdate(BaseModel):
    id: Optional[int] = None
    name: str
    description: str
    architecture: str
    location: str


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    publisher: str
    rating: str


class ShoeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str
    brand: str


class UcsbBuildingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    architecture: str
    location: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    type: str
    message: str
