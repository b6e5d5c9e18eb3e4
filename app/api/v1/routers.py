from fastapi import APIRouter
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health")
async def health_check():
    # El estado del servicio de autores no afecta la salud del catálogo
    return {"status": "ok"}
