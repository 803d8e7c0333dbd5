"""Category model for the CMS taxonomy."""

from pydantic import BaseModel, ConfigDict, Field


class Category(BaseModel):
    """Represents a WordPress category term."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., description="Numeric term id used by the posts filter")
    name: str = Field(default="", description="Human-friendly category name")
    slug: str = Field(..., description="Category slug (e.g., daily-maple)")
    description: str = Field(default="", description="Optional category description")
    count: int = Field(default=0, description="Number of posts in this category")
    parent: int = Field(default=0, description="Parent term id, 0 for top level")
