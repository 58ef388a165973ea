# Stockage clé-valeur asynchrone (simulation AsyncStorage) - compass/infra/storage.py
"""
Backend de persistance minimal : chaînes de caractères indexées par clé.

Toute implémentation respectant KeyValueStore peut être injectée dans
ProgressRepository (fichier, Redis, stockage mobile, …). Les valeurs sont
TOUJOURS des chaînes : la sérialisation JSON est à la charge du repository.
"""
from typing import Dict, Optional, Protocol


class KeyValueStore(Protocol):

    async def get_item(self, key: str) -> Optional[str]:
        ...

    async def set_item(self, key: str, value: str) -> None:
        ...

    async def remove_item(self, key: str) -> None:
        ...


# --- IMPLÉMENTATION MÉMOIRE (tests, usage local) ---

class InMemoryKeyValueStore:

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set_item(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Valeur non textuelle pour la clé {key!r}")
        self._data[key] = value

    async def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return list(self._data.keys())

    def __len__(self) -> int:
        return len(self._data)
