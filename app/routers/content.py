from fastapi import APIRouter, HTTPException

from app.dependencies import SanityDep
from app.schemas.sanity import Globals, TourPage

router = APIRouter(prefix="/content")


@router.get("/globals", response_model=Globals)
async def get_globals(sanity: SanityDep) -> Globals:
    globals_doc = await sanity.fetch_globals()
    if globals_doc is None:
        raise HTTPException(status_code=404, detail="Globals not found")
    return globals_doc


@router.get("/tours/{slug}", response_model=TourPage)
async def get_tour_page(slug: str, sanity: SanityDep) -> TourPage:
    tour = await sanity.fetch_tour_page(slug)
    if tour is None:
        raise HTTPException(status_code=404, detail="Tour page not found")
    return tour
