from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def read_root():
    """API health check endpoint."""
    return {"message": "Receitas API is running!"}
