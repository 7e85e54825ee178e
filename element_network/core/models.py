"""
Core data models for element networks.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Connection:
    """An undirected edge between two distinct elements, stored with a < b."""
    a: int
    b: int

    @classmethod
    def of(cls, a: int, b: int) -> "Connection":
        """Build a connection independent of argument order."""
        return cls(a, b) if a < b else cls(b, a)

    def __str__(self) -> str:
        return f"{self.a} - {self.b}"


@dataclass(frozen=True)
class ConnectionLevel:
    """
    Answer to a reachability query between two elements.

    ``level`` is 0 both when ``a == b`` and when the elements are unreachable;
    ``connected`` tells the two apart.
    """
    a: int
    b: int
    connected: bool
    level: int

    @property
    def kind(self) -> str:
        """One of 'same', 'direct', 'indirect' or 'none'."""
        if not self.connected:
            return "none"
        if self.a == self.b:
            return "same"
        return "direct" if self.level == 1 else "indirect"

    def describe(self) -> str:
        if not self.connected:
            return f"The elements {self.a} and {self.b} are not connected."
        if self.level == 1:
            return f"The elements {self.a} and {self.b} are directly connected (level {self.level})."
        return f"The elements {self.a} and {self.b} are indirectly connected (level {self.level})."
