import logging
import os
import random
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy import exists
from sqlalchemy.orm import Session

from api.utils.exceptions import QuizIdSpaceExhausted
from api.v1.models.quiz import Quiz

load_dotenv(".env")

logger = logging.getLogger(__name__)

QUIZ_ID_LENGTH = 6
QUIZ_ID_MIN = 100000
QUIZ_ID_MAX = 999999
QUIZ_ID_MAX_ATTEMPTS = int(os.getenv("QUIZ_ID_MAX_ATTEMPTS", "1000"))


def is_valid_quiz_id_length(quiz_id: str) -> bool:
    # only the length is checked, any characters are accepted
    return len(quiz_id) == QUIZ_ID_LENGTH


def quiz_id_taken(db: Session, quiz_id: str) -> bool:
    return db.query(exists().where(Quiz.quiz_id == quiz_id)).scalar()


def generate_unique_quiz_id(
    db: Session,
    rng: Optional[random.Random] = None,
    max_attempts: int = QUIZ_ID_MAX_ATTEMPTS,
) -> str:
    """Sample 6-digit ids until one is not used by any stored quiz.

    Nothing is reserved: a concurrent create can still claim the returned
    id, in which case the insert fails on the primary key.
    """
    rng = rng or random.Random()

    for attempt in range(1, max_attempts + 1):
        candidate = str(rng.randint(QUIZ_ID_MIN, QUIZ_ID_MAX))
        if not quiz_id_taken(db, candidate):
            return candidate
        logger.debug("Quiz id %s already taken (attempt %d)", candidate, attempt)

    logger.error("Gave up minting a quiz id after %d attempts", max_attempts)
    raise QuizIdSpaceExhausted(max_attempts)
