import os
from pathlib import Path


def _find_project_root() -> Path:
    """Find the directory holding the non-package `config/` folder.

    Walks up from this file; a `.git` directory also marks the root. The
    `originscan/config` package itself is skipped since it has an
    `__init__.py`.
    """
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        config_dir = parent / "config"
        if config_dir.is_dir() and not (config_dir / "__init__.py").exists():
            return parent
        if (parent / ".git").is_dir():
            return parent

    return Path(__file__).resolve().parents[2]


def _get_config_dir() -> Path:
    """Directory searched for `.env.dev` and `.env` files."""
    return _find_project_root() / "config"


def resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. ORIGINSCAN_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("ORIGINSCAN_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = _get_config_dir()
    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None
