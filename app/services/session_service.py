import json
import os
import secrets
import string
import time
from abc import ABC, abstractmethod
from typing import Dict, Optional

from loguru import logger

from app.core.config import settings

SESSION_KEY = "session_id"
_ALPHABET = string.digits + string.ascii_lowercase


class SessionStorage(ABC):
    """Minimal key/value store; the Python stand-in for browser localStorage."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...


class MemorySessionStorage(SessionStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class FileSessionStorage(SessionStorage):
    """Stores keys in a small JSON file that survives across runs."""

    def __init__(self, path: str):
        self.path = path

    def _read(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)


def generate_session_id() -> str:
    """`session_<epoch ms>_<9 base36 chars>`."""
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(9))
    return f"session_{int(time.time() * 1000)}_{suffix}"


class SessionIdentityProvider:
    """Hands out the pseudo-anonymous id used to own likes."""

    def __init__(self, storage: Optional[SessionStorage]):
        self.storage = storage

    def get_or_create_session_id(self) -> str:
        """
        Return the stored session id, creating and persisting one on first use.

        Without a usable storage the result is an empty string, which turns
        personalization off for the caller.
        """
        if self.storage is None:
            return ""
        try:
            session_id = self.storage.get(SESSION_KEY)
            if not session_id:
                session_id = generate_session_id()
                self.storage.set(SESSION_KEY, session_id)
                logger.debug(f"Nova sessão anônima criada: {session_id}")
            return session_id
        except (OSError, ValueError) as e:
            logger.warning(f"Armazenamento de sessão indisponível: {e}")
            return ""


def default_identity_provider() -> SessionIdentityProvider:
    """Provider backed by the file named in `SESSION_STORE_PATH`."""
    path = settings.SESSION_STORE_PATH
    return SessionIdentityProvider(FileSessionStorage(path) if path else None)
