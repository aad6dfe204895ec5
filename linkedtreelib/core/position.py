"""Position abstraction for LinkedTreeLib.

A Position is the only handle clients hold on a node. It is intentionally
narrow: the element can be read, nothing else. All structural navigation and
mutation goes through the Tree that issued the position, which re-validates
the handle on every call.
"""

from abc import ABC, abstractmethod
from typing import Any


class Position(ABC):
    """Read-only handle on an element stored in a tree.

    Positions compare by identity. Two positions holding equal elements are
    still different positions.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def element(self) -> Any:
        """Return the element stored at this position."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.element!r})"
