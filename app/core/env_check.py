"""
Deployment environment checks.

Variables are grouped per deployment target. A group of several names is
satisfied when any one of them is set, which covers the two spellings of
the MongoDB connection string.
"""
import logging
import os
from pathlib import Path
from typing import Iterable, Mapping

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

BACKEND_REQUIRED: list[tuple[str, ...]] = [
    ("MONGODB_URI", "MONGODB_CONNECTION_STRING"),
    ("JWT_SECRET",),
    ("NODE_ENV",),
]

FRONTEND_REQUIRED: list[tuple[str, ...]] = [
    ("VITE_API_URL",),
    ("VITE_APP_ENV",),
]

TARGETS = {
    "backend": BACKEND_REQUIRED,
    "frontend": FRONTEND_REQUIRED,
    "all": BACKEND_REQUIRED + FRONTEND_REQUIRED,
}

SECRET_VARIABLES = {"MONGODB_URI", "MONGODB_CONNECTION_STRING", "JWT_SECRET"}

REPORTED_VARIABLES = [
    "NODE_ENV",
    "PORT",
    "MONGODB_URI",
    "MONGODB_CONNECTION_STRING",
    "JWT_SECRET",
    "AZURE_KEY_VAULT_URL",
    "VITE_API_URL",
    "VITE_APP_ENV",
]

PROJECT_ROOT = Path(__file__).resolve().parents[2]

def _is_set(environ: Mapping[str, str], name: str) -> bool:
    return bool(environ.get(name, "").strip())

def find_missing(target: str = "backend", environ: Mapping[str, str] | None = None) -> list[str]:
    """
    Names of the required variables for ``target`` that are unset or blank.
    """
    if target not in TARGETS:
        raise ValueError(f"Unknown target {target!r}, expected one of {sorted(TARGETS)}")
    environ = os.environ if environ is None else environ

    missing = []
    for group in TARGETS[target]:
        if not any(_is_set(environ, name) for name in group):
            missing.append(" or ".join(group))
    return missing

def candidate_env_files(cwd: Path | None = None) -> list[Path]:
    cwd = cwd or Path.cwd()
    return [
        PROJECT_ROOT / ".env",
        cwd / ".env",
        PROJECT_ROOT.parent / ".env",
    ]

def load_environment(paths: Iterable[Path] | None = None) -> Path | None:
    """
    Loads the first .env file found. Variables already present in the
    process environment win over the file.
    """
    for path in paths if paths is not None else candidate_env_files():
        logger.debug("Checking %s", path)
        if path.is_file():
            load_dotenv(path, override=False)
            logger.info("Loaded environment from %s", path)
            return path

    logger.warning("No .env file found. Using system environment variables only.")
    return None

def environment_status(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    environ = os.environ if environ is None else environ
    status = {}
    for name in REPORTED_VARIABLES:
        if name in SECRET_VARIABLES:
            status[name] = "set" if _is_set(environ, name) else "missing"
        else:
            status[name] = environ.get(name) or "not set"
    return status
