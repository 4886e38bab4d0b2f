from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from prompthook.database import Base, get_db, init_db, make_engine
from prompthook.main import app
from prompthook.models import Prompt
from prompthook.services.execution_service import get_default_provider
from prompthook.services.llm import LLMProvider

PROMPT_DEFAULTS = {
    "name": "Test Prompt",
    "description": "A test prompt",
    "prompt_text": "Hello {{name}}, how are you?",
    "model": "gpt-3.5-turbo",
    "temperature": Decimal("0.7"),
    "max_tokens": 100,
    "top_p": Decimal("1.0"),
    "frequency_penalty": Decimal("0.0"),
    "presence_penalty": Decimal("0.0"),
    "destination_webhook_url": "https://example.com/webhook",
    "cron_schedule": "0 9 * * *",
    "is_active": True,
}


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Real SQLite session, isolated per test."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def make_prompt(db_session):
    def _make(**overrides) -> Prompt:
        prompt = Prompt(**{**PROMPT_DEFAULTS, **overrides})
        db_session.add(prompt)
        db_session.commit()
        db_session.refresh(prompt)
        return prompt

    return _make


@pytest.fixture
def provider():
    """Completion provider double; set ``provider.complete.return_value`` per test."""
    return Mock(spec=LLMProvider)


@pytest.fixture
def client(db_session, provider):
    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_default_provider] = lambda: provider
    yield TestClient(app)
    app.dependency_overrides.clear()
