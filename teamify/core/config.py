import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_path = BASE_DIR / ".env"
load_dotenv(dotenv_path=env_path)


class Settings:
    # The infinity database on the local socket, same as the site itself
    DATABASE_URL: str = os.getenv("DATABASE_URL", "postgresql+psycopg2:///infinity")

    API_TOKEN_LENGTH = 128


settings = Settings()
