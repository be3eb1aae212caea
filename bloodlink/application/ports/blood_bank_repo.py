"""Port interface for blood bank persistence."""

from abc import ABC, abstractmethod

from bloodlink.domain.entities.blood_bank import BloodBank


class BloodBankRepository(ABC):
    @abstractmethod
    async def get_many(self, bank_ids: list[int]) -> list[BloodBank]:
        ...
