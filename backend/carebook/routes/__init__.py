from fastapi import APIRouter

from .chat import router as chat_router
from .doctors import router as doctors_router

api_router = APIRouter()
api_router.include_router(doctors_router)
api_router.include_router(chat_router)
