class QuizError(Exception):
    """Base class for quiz lifecycle failures."""


class InvalidQuizId(QuizError):
    def __init__(self, quiz_id: str):
        self.quiz_id = quiz_id
        super().__init__("Quiz ID must be 6 characters")


class QuizNotFound(QuizError):
    def __init__(self, quiz_id: str):
        self.quiz_id = quiz_id
        super().__init__(f"Quiz not found with id: {quiz_id}")


class QuizIdConflict(QuizError):
    """The identifier was claimed by another quiz when the header was inserted."""

    def __init__(self, quiz_id: str):
        self.quiz_id = quiz_id
        super().__init__(f"Quiz id already in use: {quiz_id}")


class StoreUnavailable(QuizError):
    """Any persistence failure not covered by the other kinds."""


class QuizIdSpaceExhausted(StoreUnavailable):
    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"No free quiz id found after {attempts} attempts")
