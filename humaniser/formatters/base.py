# humaniser/formatters/base.py
"""Common behaviour of the value formatters"""

from abc import ABC, abstractmethod

from ..constants import OutputFormat


class HumanFormatter(ABC):
    """Base class for immutable value wrappers

    Subclasses implement :meth:`format`; ``str()`` gives the full form.
    """

    def concise(self) -> str:
        """Short, symbol based rendering"""
        return self.format(OutputFormat.CONCISE)

    def full(self) -> str:
        """Word based rendering"""
        return self.format(OutputFormat.FULL)

    def render(self, style: OutputFormat) -> str:
        return self.format(OutputFormat(style))

    @abstractmethod
    def format(self, style: OutputFormat) -> str:
        pass

    def __str__(self) -> str:
        return self.full()
