from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from api.db.database import Base


class Question(Base):
    __tablename__ = "questions"
    # ids of deleted questions are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    question_id = Column(Integer, primary_key=True, autoincrement=True)
    quiz_id = Column(
        String(6), ForeignKey("quizzes.quiz_id"), nullable=False, index=True
    )
    title = Column(Text, nullable=False)
    answer_1 = Column(String(255), nullable=False)
    answer_2 = Column(String(255), nullable=False)
    answer_3 = Column(String(255), nullable=False)
    answer_4 = Column(String(255), nullable=False)
    correct_answer = Column(Integer, nullable=False)  # 1-4

    quiz = relationship("Quiz", back_populates="questions")
