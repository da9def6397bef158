import os
import sys
from dataclasses import dataclass

from repokit.logger import logger


def get_env_var(env_var_name: str, default: str) -> str:
    env_var = os.getenv(env_var_name)
    if env_var is None or not env_var.strip():
        return default
    return env_var.strip()


def get_int_env_var(env_var_name: str, default: int) -> int:
    raw = get_env_var(env_var_name, str(default))
    try:
        value = int(raw)
    except ValueError:
        logger.error(f"{env_var_name} must be an integer, got '{raw}'.")
        sys.exit(1)
    if value < 1:
        logger.error(f"{env_var_name} must be a positive integer, got {value}.")
        sys.exit(1)
    return value


@dataclass(frozen=True)
class Settings:
    remote: str = "origin"
    host: str = "github.com"
    repo_list_limit: int = 100

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            remote=get_env_var("REPOKIT_REMOTE", "origin"),
            host=get_env_var("REPOKIT_HOST", "github.com"),
            repo_list_limit=get_int_env_var("REPOKIT_REPO_LIST_LIMIT", 100),
        )
