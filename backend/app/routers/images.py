"""Images router: place photos for recommendation cards."""

from fastapi import APIRouter, Depends, HTTPException, Query

from app.dependencies import get_place_image_service
from app.schemas.images import PlaceImageResponse, PlaceImagesRequest, PlaceImagesResponse
from app.services.place_image_service import PlaceImageService

router = APIRouter()


@router.get("/place", response_model=PlaceImageResponse)
async def get_place_image(
    name: str = Query(..., min_length=1),
    query: str = Query(""),
    images: PlaceImageService = Depends(get_place_image_service),
):
    """Photo URL for a single place."""
    url = await images.fetch_place_image(name, query)
    return PlaceImageResponse(name=name, url=url)


@router.post("/places", response_model=PlaceImagesResponse)
async def get_place_images(
    body: PlaceImagesRequest,
    images: PlaceImageService = Depends(get_place_image_service),
):
    """Photo URLs for several places, keyed by place name."""
    if not body.places:
        raise HTTPException(status_code=400, detail="At least one place is required")
    result = await images.fetch_multiple_place_images([p.model_dump() for p in body.places])
    return PlaceImagesResponse(images=result)
