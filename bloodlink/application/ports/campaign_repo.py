"""Port interface for campaign persistence."""

from abc import ABC, abstractmethod

from bloodlink.domain.entities.campaign import Campaign


class CampaignRepository(ABC):
    @abstractmethod
    async def save(self, campaign: Campaign) -> Campaign:
        ...

    @abstractmethod
    async def get_for_ngo(self, campaign_id: int, ngo_id: int) -> Campaign | None:
        """Return the campaign only if it belongs to the given NGO."""
        ...

    @abstractmethod
    async def list_for_ngo(self, ngo_id: int) -> list[Campaign]:
        """Newest first."""
        ...

    @abstractmethod
    async def update(self, campaign: Campaign) -> Campaign:
        ...

    @abstractmethod
    async def delete_for_ngo(self, campaign_id: int, ngo_id: int) -> bool:
        ...
