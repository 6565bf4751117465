from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


# 📝 1. Question as sent by the quiz editor
class QuestionIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None  # ignored, the store assigns question ids
    title: str = Field(..., min_length=1)
    answer1: str = Field(..., min_length=1)
    answer2: str = Field(..., min_length=1)
    answer3: str = Field(..., min_length=1)
    answer4: str = Field(..., min_length=1)
    correct_answer: int = Field(..., alias="correctAnswer", ge=1, le=4)


# 📝 2. Fields shared by create and update; text is stored exactly as sent
class QuizBase(BaseModel):
    name: str = Field(..., min_length=1)
    difficulty: str
    questions: List[QuestionIn] = Field(default_factory=list)


# 📝 3. Create Quiz Request
class QuizCreate(QuizBase):
    id: Optional[str] = None  # minted when absent or empty


# ✏️ 4. Update Quiz Request
class QuizUpdate(QuizBase):
    id: Optional[str] = None  # ignored, the path identifier wins


# 📩 5. Question as returned to callers
class QuestionOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    answer1: str
    answer2: str
    answer3: str
    answer4: str
    correct_answer: int = Field(..., alias="correctAnswer")


# 📩 6. Full Quiz
class QuizOut(BaseModel):
    id: str
    name: str
    difficulty: str
    questions: List[QuestionOut]


# ✅ 7. Validate Quiz Id Request
class ValidateQuizRequest(BaseModel):
    quiz_id: str = Field(..., alias="quizId")
