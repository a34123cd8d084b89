from abc import ABC, abstractmethod

from enrollment.domain.entities.wizard_session import WizardSession


class SessionStorePort(ABC):
    @abstractmethod
    def create(self) -> WizardSession:
        raise NotImplementedError

    @abstractmethod
    def get(self, session_id: str) -> WizardSession | None:
        raise NotImplementedError

    @abstractmethod
    def discard(self, session_id: str) -> bool:
        raise NotImplementedError
