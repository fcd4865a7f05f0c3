from abc import ABC, abstractmethod
from typing import List, Dict


class LLMClient(ABC):
    @abstractmethod
    def generate(self, messages: List[Dict]) -> str:
        """Generate assistant text from chat messages.

        Returns "" when the provider sent no content.
        Raises UpstreamTransportError when the call itself fails.
        """
        pass
