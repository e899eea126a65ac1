# tarot_api/api/routes/root_routes.py
from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def read_root():
    return {"message": "The cards are ready to be drawn."}
