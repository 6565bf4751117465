from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from api.db.database import get_db
from api.utils.exceptions import (
    InvalidQuizId,
    QuizIdConflict,
    QuizNotFound,
    StoreUnavailable,
)
from api.v1.schemas import quiz as schemas
from api.v1.services import quiz as service

quiz = APIRouter(prefix="/quizzes", tags=["Quizzes"])


def _store_unavailable(e: StoreUnavailable) -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


# --- 1. Create Quiz ---
@quiz.post("", response_model=schemas.QuizOut, status_code=status.HTTP_201_CREATED)
def create_quiz(payload: schemas.QuizCreate, db: Session = Depends(get_db)):
    try:
        created = service.create_quiz(db, payload)
        return service.quiz_to_schema(created)
    except InvalidQuizId as e:
        raise HTTPException(status_code=400, detail=str(e))
    except QuizIdConflict as e:
        raise HTTPException(status_code=409, detail=str(e))
    except StoreUnavailable as e:
        raise _store_unavailable(e)


# --- 2. Mint A Fresh Quiz Id ---
# declared before /{quiz_id} so "generate-id" is not read as an identifier
@quiz.get("/generate-id", response_model=str)
def generate_quiz_id(db: Session = Depends(get_db)):
    try:
        return service.mint_quiz_id(db)
    except StoreUnavailable as e:
        raise _store_unavailable(e)


# --- 3. Validate Quiz Id ---
@quiz.post("/validate", response_model=bool)
def validate_quiz_id(payload: schemas.ValidateQuizRequest, db: Session = Depends(get_db)):
    try:
        exists = service.quiz_exists(db, payload.quiz_id)
    except StoreUnavailable as e:
        raise _store_unavailable(e)

    if not exists:
        return JSONResponse(status_code=404, content=False)
    return True


# --- 4. Get Quiz ---
@quiz.get("/{quiz_id}", response_model=schemas.QuizOut)
def get_quiz(quiz_id: str, db: Session = Depends(get_db)):
    try:
        return service.quiz_to_schema(service.get_quiz(db, quiz_id))
    except QuizNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreUnavailable as e:
        raise _store_unavailable(e)


# --- 5. Replace Quiz Contents ---
@quiz.put("/{quiz_id}", response_model=schemas.QuizOut)
def update_quiz(
    quiz_id: str, payload: schemas.QuizUpdate, db: Session = Depends(get_db)
):
    try:
        updated = service.update_quiz(db, quiz_id, payload)
        return service.quiz_to_schema(updated)
    except QuizNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreUnavailable as e:
        raise _store_unavailable(e)


# --- 6. Delete Quiz ---
@quiz.delete("/{quiz_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_quiz(quiz_id: str, db: Session = Depends(get_db)):
    try:
        service.delete_quiz(db, quiz_id)
    except QuizNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreUnavailable as e:
        raise _store_unavailable(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
