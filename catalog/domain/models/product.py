from pydantic import BaseModel, Field
from typing import Any, Dict, List
from datetime import datetime

# Conventional document shapes. The API stores whatever it is given;
# these models only describe (and build) the seed data.

class Ratings(BaseModel):
    average: float = Field(ge=0, le=5)
    count: int = Field(ge=0)
    model_config = {"frozen": True} # immuable = safe

class Product(BaseModel):
    id: str = Field(alias="_id")
    name: str
    brand: str
    price: float
    in_stock: bool
    categories: List[str] = []
    specs: Dict[str, Any] = {}
    tags: List[str] = []
    ratings: Ratings

    model_config = {"frozen": True, "populate_by_name": True}

class UserRef(BaseModel):
    id: str
    name: str
    model_config = {"frozen": True}

class Review(BaseModel):
    product_id: str
    user: UserRef
    rating: int = Field(ge=1, le=5)
    comment: str
    created_at: datetime
    model_config = {"frozen": True}

class Category(BaseModel):
    slug: str
    display_name: str
    description: str
    model_config = {"frozen": True}
