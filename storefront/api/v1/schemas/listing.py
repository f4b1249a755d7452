# storefront/api/v1/schemas/listing.py
from pydantic import BaseModel, Field
from typing import List, Optional

from storefront.domain.models.criteria import CriteriaEdit, CriteriaModel
from storefront.domain.models.product import ProductRecord


class UrlParamsIn(BaseModel):
    search: Optional[str] = None
    category: Optional[str] = None


class ListingEditIn(BaseModel):
    criteria: CriteriaModel = Field(default_factory=CriteriaModel)
    url_params: Optional[UrlParamsIn] = None
    edit: Optional[CriteriaEdit] = None


class ListingOut(BaseModel):
    criteria: CriteriaModel
    items: List[ProductRecord]
    count: int
    total: int


class SortOptionOut(BaseModel):
    value: str
    label: str


class FacetsOut(BaseModel):
    categories: List[str]
    brands: List[str]
    ratings: List[int]
    sort_options: List[SortOptionOut]
    price_max: int
    price_step: int
