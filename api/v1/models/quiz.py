from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from api.db.database import Base


class Quiz(Base):
    __tablename__ = "quizzes"

    quiz_id = Column(String(6), primary_key=True)
    quiz_name = Column(String(255), nullable=False)
    difficulty = Column(String(50), nullable=False)

    # children are removed explicitly by the lifecycle service, not by cascade
    questions = relationship(
        "Question",
        back_populates="quiz",
        order_by="Question.question_id",
        passive_deletes=True,
    )
