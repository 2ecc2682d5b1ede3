from abc import ABC, abstractmethod
from typing import Any


class CatalogRequestFailed(RuntimeError):
    def __init__(self, status: int | None, reason: str) -> None:
        self.status = status
        self.reason = reason
        label = f"status={status}" if status is not None else "no response"
        super().__init__(f"Catalog request failed ({label}): {reason}")


class CatalogConnector(ABC):
    name: str

    @abstractmethod
    def fetch(self, term: str) -> list[dict[str, Any]]:
        """Return the raw catalog items matching ``term``, in catalog order.

        Implementations raise CatalogRequestFailed for transport errors,
        non-success statuses and bodies without a ``results`` list.
        """

    def close(self) -> None:
        return None
