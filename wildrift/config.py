"""Process settings.

Everything here comes from environment variables (optionally seeded from a .env
file at the project root). Mapping and patch-source configuration lives in the
JSON database document itself, see wildrift.models.mapping.

Environment:
- WR_DATABASE_PATH: path to the JSON database document (default ./data/wildrift_database.json)
- WR_FETCH_TIMEOUT: per-request timeout in seconds for patch sources (default 15)
"""

import os

DEFAULT_DATABASE_PATH = "./data/wildrift_database.json"
DEFAULT_FETCH_TIMEOUT = 15.0

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
ACCEPT_LANGUAGE = "zh-TW,zh;q=0.9,en;q=0.8"


def _load_env_from_file():
    """Load environment variables from a .env file at the project root if present.

    Only sets variables that aren't already present in the process environment.
    """
    try:
        root_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
        env_path = os.path.join(root_dir, ".env")
        if not os.path.isfile(env_path):
            return
        with open(env_path, "r", encoding="utf-8") as f:
            for line in f:
                s = line.strip()
                if not s or s.startswith("#"):
                    continue
                if "=" not in s:
                    continue
                key, val = s.split("=", 1)
                key = key.strip()
                val = val.strip().strip('"').strip("'")
                if key and (key not in os.environ or not os.environ[key]):
                    os.environ[key] = val
    except OSError:
        # Loading .env is best-effort
        pass


def get_database_path() -> str:
    _load_env_from_file()
    return os.getenv("WR_DATABASE_PATH") or DEFAULT_DATABASE_PATH


def get_fetch_timeout() -> float:
    _load_env_from_file()
    raw = os.getenv("WR_FETCH_TIMEOUT")
    if not raw:
        return DEFAULT_FETCH_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_FETCH_TIMEOUT
    return value if value > 0 else DEFAULT_FETCH_TIMEOUT
