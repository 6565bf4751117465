from fastapi import APIRouter
from api.v1.routes.quiz import quiz
api_router = APIRouter(prefix="/api")

api_router.include_router(quiz)
