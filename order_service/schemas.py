from pydantic import BaseModel, Field
from typing import List

from .models import Category

# Input item structure
class SummaryItem(BaseModel):
    name: str
    category: Category
    price: float = Field(ge=0) # Price per item >= 0

# Request body for the summary endpoint
class OrderSummaryRequest(BaseModel):
    items: List[SummaryItem] = Field(default_factory=list) # Empty order is valid
    language: str | None = None # Falls back to DEFAULT_LANGUAGE

# Response body
class OrderSummaryResponse(BaseModel):
    total: float = Field(ge=0)
    taxes: float = Field(ge=0)
    language: str
    message: str

class LanguagesResponse(BaseModel):
    languages: List[str]
