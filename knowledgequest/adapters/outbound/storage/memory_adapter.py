"""In-memory key-value storage for tests and ephemeral sessions."""


class InMemoryStorageAdapter:
    """Key-value storage held in a process-local dict."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.items: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes += 1
