"""Abstract gateway for named boolean feature flags."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FeatureFlagGateway(ABC):

    @abstractmethod
    def is_active(self, feature_name: str) -> bool:
        """Return the current state of a feature. Unknown features are off."""

    @abstractmethod
    def set_active(self, feature_name: str, enabled: bool) -> None:
        """Switch a feature on or off."""

    @abstractmethod
    def list_all(self) -> dict[str, bool]:
        """Return every known feature and its state."""
