"""Various fixedbits related protocol classes."""

import abc

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class Width(Protocol):
    """A protocol for fixed width unsigned integer types.

    The classes in :mod:`fixedbits.base` conform to it as class objects.

    """

    @classmethod
    @abc.abstractmethod
    def max_len(cls) -> int:
        """Return the number of bits in the width."""

    @classmethod
    @abc.abstractmethod
    def max(cls) -> int:
        """Return the value with every bit set."""

    @classmethod
    @abc.abstractmethod
    def zero(cls) -> int:
        """Return the value with no bits set."""

    @classmethod
    @abc.abstractmethod
    def one(cls) -> int:
        """Return the value with only the lowest bit set."""

    @classmethod
    @abc.abstractmethod
    def one_at_index(cls, index: int) -> int:
        """Return the value with only bit `index` set."""
