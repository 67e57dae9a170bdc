import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DATA_DIR = BASE_DIR / "data"
    JSONDB_PATH = Path(os.getenv("JSONDB_PATH") or DATA_DIR / "db.json")
    # Run create/update/delete one at a time; off reproduces lost updates
    JSONDB_SERIALIZE_WRITES = _env_flag("JSONDB_SERIALIZE_WRITES", "true")
    STATIC_DIR = Path(os.getenv("STATIC_DIR") or BASE_DIR / "dist")
    API_PREFIX = "/api"


class DevConfig(Config):
    DEBUG = True


class ProdConfig(Config):
    DEBUG = False
