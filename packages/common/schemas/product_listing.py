"""
Product listing schemas (Pydantic models)
Input records and grouped category output
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ProductRecord(BaseModel):
    """Single supermarket listing as supplied by the input file"""
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "title": "Leite Integral Piracanjuba 1L",
                "supermarket": "Supermercado A",
            }
        },
    )

    title: str = Field(..., min_length=1, strict=True, description="Free-text product title")
    supermarket: str = Field(..., min_length=1, strict=True, description="Source supermarket")


class ProductEntry(BaseModel):
    """Listing as stored inside a category"""
    title: str
    supermarket: str

    class Config:
        json_schema_extra = {
            "example": {
                "title": "leite integral piracanjuba 1 l",
                "supermarket": "Supermercado B",
            }
        }


class CategoryOutput(BaseModel):
    """
    One category in the result file.

    `category` is the raw title of the first listing seen with this signature.
    """
    category: str
    count: int = Field(..., ge=1, description="Number of listings in the category")
    products: List[ProductEntry]

    class Config:
        json_schema_extra = {
            "example": {
                "category": "Leite Integral Piracanjuba 1 L",
                "count": 2,
                "products": [
                    {"title": "Leite Integral Piracanjuba 1 L", "supermarket": "Supermercado A"},
                    {"title": "leite integral piracanjuba 1 l", "supermarket": "Supermercado B"},
                ],
            }
        }
