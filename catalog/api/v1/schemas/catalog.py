# api/v1/schemas/catalog.py
from typing import Any
from pydantic import BaseModel

class HealthOut(BaseModel):
    status: str

class ProductCreatedOut(BaseModel):
    ok: bool = True
    id: Any

class UpdateResultOut(BaseModel):
    matched: int
    modified: int

class DeleteResultOut(BaseModel):
    deleted: int

class AckOut(BaseModel):
    ok: bool = True

class ErrorOut(BaseModel):
    error: str
