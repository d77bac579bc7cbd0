"""Storage for the user's financial profile.

The calculators never read the profile directly; the dashboard injects a
repository so the same pages work against browser-local storage or memory.
"""

import logging
from typing import Any, Protocol, runtime_checkable

from pydantic import ValidationError

from credwise.models.profile import FinancialProfile

logger = logging.getLogger(__name__)


@runtime_checkable
class ProfileRepository(Protocol):
    def load(self) -> FinancialProfile | None:
        """Return the stored profile, or None if nothing is saved."""
        ...

    def save(self, profile: FinancialProfile) -> None:
        """Persist ``profile``, replacing any previous one."""
        ...

    def clear(self) -> None:
        ...


class InMemoryProfileRepository:
    def __init__(self, profile: FinancialProfile | None = None):
        self._profile = profile

    def load(self) -> FinancialProfile | None:
        return self._profile

    def save(self, profile: FinancialProfile) -> None:
        self._profile = profile

    def clear(self) -> None:
        self._profile = None


class StoreProfileRepository:
    """Profile held in a ``dcc.Store(storage_type="local")`` payload.

    Wraps the store's current ``data``; after ``save``/``clear`` the callback
    returns ``repo.data`` as the store's new value.
    """

    def __init__(self, data: dict[str, Any] | None):
        self.data = data

    def load(self) -> FinancialProfile | None:
        if not self.data:
            return None
        try:
            return FinancialProfile.model_validate(self.data)
        except ValidationError as e:
            logger.warning("Discarding unreadable stored profile: %s", e)
            return None

    def save(self, profile: FinancialProfile) -> None:
        self.data = profile.model_dump(mode="json")

    def clear(self) -> None:
        self.data = None
