"""A fixed capacity array of booleans packed into a single unsigned integer.

Bit ``i`` of the packed value holds the boolean at index ``i``, so the first
element of the input to :meth:`BitArray.new` is the least significant bit.

.. note::

   :meth:`BitArray.get` and :meth:`BitArray.set` do **not** check their index
   argument. Passing an index outside ``[0, len(array))`` is a caller error.
   It is caught by an ``assert`` in debug mode and silently wraps around the
   width when assertions are disabled with ``python -O``. Use
   :meth:`BitArray.checked_get` where the index comes from untrusted input.

"""

from __future__ import annotations

import functools
import logging
from typing import (
    Any,
    ClassVar,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

import toolz
from public import private, public

from .base import U8, U16, U32, U64, U128, Base
from .protocols import Width

_log = logging.getLogger(__name__)

A = TypeVar("A", bound="BitArray")

_MISSING = object()


@private  # type: ignore[misc]
@functools.lru_cache(maxsize=None)
def specialize(base: Type[Base]) -> Type[BitArray]:
    """Return the :class:`BitArray` class storing its bits in `base`."""
    name = f"{BitArray.__name__}[{base.__name__}]"
    namespace = dict(__slots__=(), __module__=__name__, __qualname__=name, base=base)
    return type(name, (BitArray,), namespace)


def restore(base: Width, data: int) -> BitArray:
    """Rebuild a pickled :class:`BitArray`."""
    return BitArray[base].from_value(data)


@public  # type: ignore[misc]
class BitArray:
    """An array of booleans with a fixed capacity of ``base.max_len()``.

    Subscript the class with one of the widths in :mod:`fixedbits.base` to
    obtain a concrete array type.

    Examples
    --------
    >>> from fixedbits import BitArray, U8
    >>> arr = BitArray[U8].new([True, False, False, False, False, True, True, True])
    >>> list(arr.ones())
    [0, 5, 6, 7]
    >>> str(arr)
    '11100001'

    """

    __slots__ = ("data",)

    base: ClassVar[Width]

    def __class_getitem__(cls, base: Any) -> Type[BitArray]:
        if cls is not BitArray:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not isinstance(base, type) or base not in Base.widths():
            raise TypeError(
                f"BitArray must be specialized with one of "
                f"{[width.__name__ for width in Base.widths()]}, got {base!r}"
            )
        return specialize(base)

    def __init__(self) -> None:
        """Construct an array with every bit unset."""
        self.data = self._width().zero()

    @classmethod
    def _width(cls) -> Width:
        if cls is BitArray:
            raise TypeError(
                "BitArray must be specialized with a width, e.g. BitArray[U8]"
            )
        return cls.base

    @classmethod
    def from_value(cls: Type[A], data: int) -> A:
        """Construct an array whose packed value is `data`."""
        array = cls()
        array.data = data
        return array

    @classmethod
    def new(cls: Type[A], bits: Iterable[Any], *, strict: bool = False) -> A:
        """Construct an array from the truth values of `bits`.

        The ``k``-th element of `bits` becomes the bit at index ``k``. At most
        ``max_len`` elements are read, so `bits` may be infinite. Indices past
        the end of a short input are left unset.

        Parameters
        ----------
        bits
            An iterable of values whose truthiness gives the bits.
        strict
            If :data:`True`, reject input longer than the capacity instead of
            ignoring the rest of it.

        Raises
        ------
        ValueError
            If `strict` is :data:`True` and `bits` yields more than
            ``max_len`` elements

        """
        max_len = cls._width().max_len()
        array = cls()
        items = iter(bits)
        count = 0
        for index, bit in enumerate(toolz.take(max_len, items)):
            array.set(index, bool(bit))
            count = index + 1

        if count < max_len:
            _log.debug(
                "%s.new consumed %d of %d bits, the rest are unset",
                cls.__name__,
                count,
                max_len,
            )
        elif strict and next(items, _MISSING) is not _MISSING:
            raise ValueError(
                f"{cls.__name__} holds at most {max_len} bits, "
                f"got an iterable with more elements"
            )
        return array

    @classmethod
    def all_one(cls: Type[A]) -> A:
        """Construct an array with every bit set."""
        return cls.from_value(cls._width().max())

    @classmethod
    def from_dict(cls: Type[A], fields: Mapping[str, Any]) -> A:
        """Construct an array from the output of :meth:`to_dict`.

        Raises
        ------
        KeyError
            If `fields` has no ``"data"`` key
        ValueError
            If the packed value is not an integer that fits in the width

        """
        width = cls._width()
        data = fields["data"]
        if (
            not isinstance(data, int)
            or isinstance(data, bool)
            or not width.zero() <= data <= width.max()
        ):
            _log.debug("rejecting packed value %r for %s", data, cls.__name__)
            raise ValueError(
                f"data must be an integer in [0, {width.max()}], data == {data!r}"
            )
        return cls.from_value(data)

    def to_dict(self) -> dict[str, int]:
        """Return the fields of the array as plain data."""
        return {"data": self.data}

    def __reduce__(self) -> Tuple[Any, ...]:
        return restore, (self.base, self.data)

    def get(self, index: int) -> bool:
        """Return the bit at `index`.

        `index` must be in ``[0, max_len)``; it is not checked.

        """
        assert (
            0 <= index < len(self)
        ), f"index not in [0, {len(self)}), index == {index}"
        return (self.data & self.base.one_at_index(index)) != self.base.zero()

    def checked_get(self, index: int) -> Optional[bool]:
        """Return the bit at `index` or :data:`None` if `index` is out of range."""
        if 0 <= index < self.base.max_len():
            return self.get(index)
        return None

    def set(self, index: int, bit: bool) -> None:
        """Set the bit at `index` to `bit`.

        `index` must be in ``[0, max_len)``; it is not checked.

        """
        assert (
            0 <= index < len(self)
        ), f"index not in [0, {len(self)}), index == {index}"
        mask = self.base.one_at_index(index)
        if bit:
            self.data |= mask
        else:
            self.data &= self.base.max() ^ mask

    def copy(self: A) -> A:
        """Return an independent copy of the array."""
        return self.from_value(self.data)

    __copy__ = copy

    def __deepcopy__(self: A, memo: Any) -> A:
        return self.copy()

    def iter(self) -> BitArrayIter:
        """Return an iterator over every bit, starting at index 0."""
        return BitArrayIter(self)

    def ones(self) -> OnesIter:
        """Return an iterator over the indices of the set bits."""
        return OnesIter(self)

    def zeroes(self) -> ZeroesIter:
        """Return an iterator over the indices of the unset bits."""
        return ZeroesIter(self)

    def __iter__(self) -> Iterator[bool]:
        return self.iter()

    def __len__(self) -> int:
        """Return the capacity of the array."""
        return self.base.max_len()

    def __int__(self) -> int:
        return self.data

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BitArray):
            return NotImplemented
        return self.base is other.base and self.data == other.data

    def __str__(self) -> str:
        """Return the packed value in binary, most significant bit first."""
        return format(self.data, "b")

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return format(self.data, spec)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(0b{self})"


@public  # type: ignore[misc]
class BitArrayIter(Iterator[bool]):
    """An iterator over every bit of a snapshot of a :class:`BitArray`."""

    __slots__ = "array", "counter"

    def __init__(self, array: BitArray) -> None:
        self.array = array.copy()
        self.counter = 0

    def __next__(self) -> bool:
        if self.counter >= len(self.array):
            raise StopIteration
        bit = self.array.get(self.counter)
        self.counter += 1
        return bit

    def __length_hint__(self) -> int:
        return len(self.array) - self.counter


class IndexIter(Iterator[int]):
    """Iterate over the indices of a snapshot whose bit equals `wanted`."""

    __slots__ = "array", "counter"

    wanted: ClassVar[bool]

    def __init__(self, array: BitArray) -> None:
        self.array = array.copy()
        self.counter = 0

    def __next__(self) -> int:
        max_len = len(self.array)
        while self.counter < max_len:
            index = self.counter
            self.counter += 1
            if self.array.get(index) is self.wanted:
                return index
        raise StopIteration

    def __length_hint__(self) -> int:
        return len(self.array) - self.counter


@public  # type: ignore[misc]
class OnesIter(IndexIter):
    """An iterator over the indices of the set bits, in ascending order."""

    __slots__ = ()
    wanted = True


@public  # type: ignore[misc]
class ZeroesIter(IndexIter):
    """An iterator over the indices of the unset bits, in ascending order."""

    __slots__ = ()
    wanted = False


BitArray8 = BitArray[U8]
BitArray16 = BitArray[U16]
BitArray32 = BitArray[U32]
BitArray64 = BitArray[U64]
BitArray128 = BitArray[U128]

public(
    BitArray8=BitArray8,
    BitArray16=BitArray16,
    BitArray32=BitArray32,
    BitArray64=BitArray64,
    BitArray128=BitArray128,
)
