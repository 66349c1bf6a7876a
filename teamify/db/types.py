"""Column types that are Postgres-native in production and still work on
SQLite, which the test suite runs against."""
from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import ARRAY, JSONB

# text[] on Postgres, a JSON list everywhere else
StringArray = ARRAY(String).with_variant(JSON(), "sqlite")

# jsonb on Postgres
JSONList = JSON().with_variant(JSONB(), "postgresql")
