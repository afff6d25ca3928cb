from abc import ABC, abstractmethod


class GeneratorError(RuntimeError):
    """A backend could not produce text (bad status, bad body, transport failure)."""


class RoastGenerator(ABC):
    """
    Abstract Base Class for a text-generation backend.
    Defines the single capability the roast requester relies on, so backends
    with different wire protocols can sit in one ordered list.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifier used in logs, e.g. 'openrouter:<model>'."""
        pass

    @abstractmethod
    def generate(self, prompt: str, max_tokens: int, temperature: float) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: The full user prompt.
            max_tokens: Output-length budget.
            temperature: Sampling temperature.

        Returns:
            The raw generated text.

        Raises:
            GeneratorError: on any transport or response failure.
        """
        pass
