import os
from typing import Any, Generator

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from teamify.db.base_class import Base
from teamify.db.session import make_engine
from teamify.tests.utils.seed import create_bot, create_user

import teamify.db.base  # noqa - imports all the tables


SQLALCHEMY_DATABASE_URL = "sqlite:///./test_db.db"


@pytest.fixture(scope="function")
def engine() -> Generator[Engine, Any, None]:
    """
    Creates a fresh database on each test case. The migration opens its own
    sessions and commits, so tests get a real file database instead of a
    transaction that is rolled back at the end.
    """
    _engine = make_engine(SQLALCHEMY_DATABASE_URL)
    Base.metadata.create_all(_engine)  # Create the tables.
    yield _engine
    Base.metadata.drop_all(_engine)
    _engine.dispose()
    if os.path.exists("./test_db.db"):
        os.remove("./test_db.db")


@pytest.fixture(scope="function")
def db_session(engine: Engine) -> Generator[Session, Any, None]:
    SessionTesting = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = SessionTesting()
    yield session
    session.close()


@pytest.fixture(scope="function")
def example_bot(db_session: Session):
    """
    Bot "MyBot" owned by U1 with additional owners U2 (already a user) and
    U3 (never logged in).
    """
    create_user("U1", db_session)
    create_user("U2", db_session, api_token="u2-token", staff=True)
    bot = create_bot(
        "B1",
        owner="U1",
        additional_owners=["U2", "U3"],
        db=db_session,
        queue_name="MyBot",
        queue_avatar="http://x/a.png",
    )
    db_session.commit()
    return bot
