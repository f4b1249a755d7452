from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field
from typing import Optional

class ProductRecord(BaseModel):
    product_id: str = Field(validation_alias=AliasChoices("product_id", "id"))
    name: str
    brand: Optional[str] = None
    category: Optional[str] = None
    price: float = Field(ge=0)
    original_price: Optional[float] = None
    discount_percentage: Optional[float] = None
    rating: float = Field(default=0.0, ge=0, le=5)
    reviews_count: int = Field(default=0, ge=0)
    description: Optional[str] = None
    image_url: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @computed_field
    @property
    def discount(self) -> float:
        """
        Effective discount percentage used for sorting.
        Stored value wins; otherwise derived from original_price, else 0.
        """
        if self.discount_percentage is not None:
            return self.discount_percentage
        if self.original_price and self.original_price > self.price:
            return round((self.original_price - self.price) / self.original_price * 100, 2)
        return 0.0
