import logging
from contextlib import contextmanager
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.orm.exc import FlushError

from api.utils.exceptions import (
    InvalidQuizId,
    QuizIdConflict,
    QuizNotFound,
    StoreUnavailable,
)
from api.utils.quiz_ids import (
    generate_unique_quiz_id,
    is_valid_quiz_id_length,
    quiz_id_taken,
)
from api.v1.models.question import Question
from api.v1.models.quiz import Quiz
from api.v1.schemas import quiz as schemas

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(db: Session):
    """Roll back and re-raise persistence failures as StoreUnavailable."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Quiz store failure: %s", e)
        raise StoreUnavailable(str(e)) from e


def _build_questions(quiz_id: str, questions: List[schemas.QuestionIn]) -> List[Question]:
    return [
        Question(
            quiz_id=quiz_id,
            title=q.title,
            answer_1=q.answer1,
            answer_2=q.answer2,
            answer_3=q.answer3,
            answer_4=q.answer4,
            correct_answer=q.correct_answer,
        )
        for q in questions
    ]


def _delete_questions(db: Session, quiz_id: str) -> int:
    return (
        db.query(Question)
        .filter(Question.quiz_id == quiz_id)
        .delete()
    )


def _get_or_404(db: Session, quiz_id: str) -> Quiz:
    quiz = db.get(Quiz, quiz_id)
    if quiz is None:
        raise QuizNotFound(quiz_id)
    return quiz


def quiz_to_schema(quiz: Quiz) -> schemas.QuizOut:
    return schemas.QuizOut(
        id=quiz.quiz_id,
        name=quiz.quiz_name,
        difficulty=quiz.difficulty,
        questions=[
            schemas.QuestionOut(
                id=q.question_id,
                title=q.title,
                answer1=q.answer_1,
                answer2=q.answer_2,
                answer3=q.answer_3,
                answer4=q.answer_4,
                correct_answer=q.correct_answer,
            )
            for q in quiz.questions
        ],
    )


def mint_quiz_id(db: Session) -> str:
    with store_errors(db):
        return generate_unique_quiz_id(db)


def quiz_exists(db: Session, quiz_id: str) -> bool:
    with store_errors(db):
        return quiz_id_taken(db, quiz_id)


def get_quiz(db: Session, quiz_id: str) -> Quiz:
    with store_errors(db):
        quiz = (
            db.query(Quiz)
            .options(selectinload(Quiz.questions))
            .filter(Quiz.quiz_id == quiz_id)
            .first()
        )
    if quiz is None:
        raise QuizNotFound(quiz_id)
    return quiz


def create_quiz(db: Session, payload: schemas.QuizCreate) -> Quiz:
    quiz_id = payload.id
    if quiz_id and not is_valid_quiz_id_length(quiz_id):
        raise InvalidQuizId(quiz_id)

    with store_errors(db):
        if not quiz_id:
            quiz_id = generate_unique_quiz_id(db)

        quiz = Quiz(
            quiz_id=quiz_id, quiz_name=payload.name, difficulty=payload.difficulty
        )
        db.add(quiz)
        try:
            db.flush()
        except (IntegrityError, FlushError) as e:
            # the primary key is the only authority on whether the id is free
            db.rollback()
            logger.warning("Quiz id collision on insert: %s", quiz_id)
            raise QuizIdConflict(quiz_id) from e

        db.add_all(_build_questions(quiz_id, payload.questions))
        db.commit()
        db.refresh(quiz)

    logger.info("Created quiz %s with %d questions", quiz_id, len(payload.questions))
    return quiz


def update_quiz(db: Session, quiz_id: str, payload: schemas.QuizUpdate) -> Quiz:
    with store_errors(db):
        quiz = _get_or_404(db, quiz_id)

        quiz.quiz_name = payload.name
        quiz.difficulty = payload.difficulty

        removed = _delete_questions(db, quiz_id)
        db.add_all(_build_questions(quiz_id, payload.questions))
        db.commit()
        db.refresh(quiz)

    logger.info(
        "Updated quiz %s: replaced %d questions with %d",
        quiz_id,
        removed,
        len(payload.questions),
    )
    return quiz


def delete_quiz(db: Session, quiz_id: str) -> None:
    with store_errors(db):
        if not quiz_id_taken(db, quiz_id):
            raise QuizNotFound(quiz_id)

        removed = _delete_questions(db, quiz_id)
        db.query(Quiz).filter(Quiz.quiz_id == quiz_id).delete()
        db.commit()

    logger.info("Deleted quiz %s and its %d questions", quiz_id, removed)
