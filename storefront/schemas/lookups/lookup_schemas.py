from pydantic import BaseModel
from typing import List


class ColorOut(BaseModel):
    id: int
    name_en: str

    class Config:
        from_attributes = True


class ShoeModelOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class LocationOut(BaseModel):
    id: int
    slug: str
    name: str

    class Config:
        from_attributes = True


class SizeOut(BaseModel):
    id: int
    label: str
    sort_order: int

    class Config:
        from_attributes = True


class ColorListData(BaseModel):
    colors: List[ColorOut]


class ShoeModelListData(BaseModel):
    models: List[ShoeModelOut]


class LocationListData(BaseModel):
    locations: List[LocationOut]


class SizeListData(BaseModel):
    sizes: List[SizeOut]
