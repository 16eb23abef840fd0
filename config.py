import os

basedir = os.path.abspath(os.path.dirname(__file__))


def _env_int(name, default):
    raw = (os.environ.get(name) or "").strip()
    return int(raw) if raw else default


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-key')

    # Підключення до PostgreSQL (ті самі змінні, що й у старій панелі)
    PG_HOST = os.environ.get('PG_HOST', 'localhost')
    PG_PORT = _env_int('PG_PORT', 5432)
    PG_USERNAME = os.environ.get('PG_USERNAME', 'postgres')
    PG_PASSWORD = os.environ.get('PG_PASSWORD', '')
    PG_DEFAULT_DB = os.environ.get('PG_DEFAULT_DB') or 'postgres'

    # Пул з'єднань: по одному на кожну назву БД
    PG_POOL_SIZE = _env_int('PG_POOL_SIZE', 5)
    PG_MAX_OVERFLOW = _env_int('PG_MAX_OVERFLOW', 10)
    PG_POOL_TIMEOUT = _env_int('PG_POOL_TIMEOUT', 30)

    SCHEMA_FILE = os.path.join(basedir, 'schema.sql')
