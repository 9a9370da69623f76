from pydantic import BaseModel


class PlaceRef(BaseModel):
    name: str
    category: str = ""


class PlaceImagesRequest(BaseModel):
    places: list[PlaceRef]


class PlaceImageResponse(BaseModel):
    name: str
    url: str


class PlaceImagesResponse(BaseModel):
    images: dict[str, str]
