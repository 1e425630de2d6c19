from abc import ABC, abstractmethod


class INotifier(ABC):
    """Outgoing message interface - application layer"""

    @abstractmethod
    async def send(self, to_address: str, subject: str, body: str) -> None:
        """Deliver a plain text message to to_address"""
        pass
