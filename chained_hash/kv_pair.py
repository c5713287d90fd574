from typing import Any, NamedTuple


class KVPair(NamedTuple):
    key: Any
    value: Any

    def __str__(self) -> str:
        return f"{self.key}={self.value}"
