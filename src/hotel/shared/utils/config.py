import os

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def env_flag(name: str, default: bool = False) -> bool:
    """環境変数を真偽値として読み取る"""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def admin_role() -> str:
    """管理者として扱うロール名"""
    return os.getenv("ADMIN_ROLE", "admin")
