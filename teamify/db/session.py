from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from urllib.parse import urlparse

from teamify.core.config import settings


def make_engine(database_url: str = settings.DATABASE_URL) -> Engine:
    url = urlparse(database_url)
    return create_engine(
        database_url,
        connect_args={}
        if url.scheme.startswith("postgres")
        else {"check_same_thread": False},
    )


engine = make_engine()
