"""Line-based input sources for the interactive menu."""

from abc import ABC, abstractmethod
from logger import get_logger

logger = get_logger()


class InputSource(ABC):
    """Abstract base class for where the menu reads its answers from.

    Subclasses only supply raw lines; prompting and integer parsing are
    shared so every source behaves identically.
    """

    @abstractmethod
    def read_line(self) -> str:
        """Return the next line of input without its trailing newline.

        Raises:
            EOFError: If no more input is available.
        """
        pass

    def read_string(self, prompt: str) -> str:
        """Print the prompt and return one line verbatim."""
        print(prompt)
        return self.read_line()

    def read_int(self, prompt: str) -> int:
        """Print the prompt and read lines until one parses as an integer.

        Args:
            prompt: Text shown once before the first attempt.

        Returns:
            The first line that parse_int() accepts.
        """
        print(prompt)
        while True:
            line = self.read_line()
            try:
                return parse_int(line)
            except ValueError:
                logger.debug(f"Rejected non-integer input: {line!r}")
                print("Invalid input. Please enter a valid number.")


def parse_int(text: str) -> int:
    """Parse a base-10 integer, rejecting the digit separators int() allows."""
    if "_" in text:
        raise ValueError(f"invalid literal for integer: {text!r}")
    return int(text)


class ConsoleInput(InputSource):
    """Input source backed by standard input."""

    def read_line(self) -> str:
        return input()
