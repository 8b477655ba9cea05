"""Line sink handed to demos in place of ``print``."""
from typing import Any, Callable, List, Optional


class DemoConsole:
    """
    Collects the lines a demo emits.

    An optional ``echo`` callable receives every line as well, which lets the
    CLI stream output while the runner still records it.
    """

    def __init__(self, echo: Optional[Callable[[str], None]] = None):
        self._lines: List[str] = []
        self._echo = echo

    def emit(self, value: Any) -> None:
        line = str(value)
        self._lines.append(line)
        if self._echo is not None:
            self._echo(line)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)
