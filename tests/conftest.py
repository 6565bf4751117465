import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from api.db.database import Base, get_db, init_db
from main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def question_payload(title="2+2?", answers=("3", "4", "5", "6"), correct=2):
    return {
        "title": title,
        "answer1": answers[0],
        "answer2": answers[1],
        "answer3": answers[2],
        "answer4": answers[3],
        "correctAnswer": correct,
    }


@pytest.fixture
def file_session_factory(tmp_path):
    # separate connections per session, so uncommitted writes stay private
    engine = create_engine(
        f"sqlite:///{tmp_path / 'quizzes.db'}",
        connect_args={"check_same_thread": False},
    )
    init_db(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()
