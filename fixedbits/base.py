"""The closed set of unsigned integer widths a bit array can be built on.

Values of a width are plain non-negative :class:`int` instances smaller than
``2 ** max_len()``. Bit ``0`` is the least significant bit.

The set of widths is sealed: :class:`U8`, :class:`U16`, :class:`U32`,
:class:`U64` and :class:`U128` are the only subclasses of :class:`Base`, and
attempting to define another one raises :class:`TypeError`.

"""

from __future__ import annotations

from typing import ClassVar, Tuple, Type

from public import public


@public  # type: ignore[misc]
class Base:
    """An unsigned integer width.

    Every method is a pure function of the class, there is nothing to
    instantiate.

    """

    __slots__ = ()

    bits: ClassVar[int] = 0

    _sealed: ClassVar[bool] = False
    _widths: ClassVar[Tuple[Type[Base], ...]] = ()

    def __init_subclass__(cls, **kwargs: object) -> None:
        if Base._sealed:
            raise TypeError(
                f"cannot define {cls.__qualname__!r}: the set of widths is closed"
            )
        super().__init_subclass__(**kwargs)  # type: ignore[call-arg]
        Base._widths += (cls,)

    def __new__(cls) -> Base:
        raise TypeError(f"{cls.__name__} is a width, not a value")

    @classmethod
    def widths(cls) -> Tuple[Type[Base], ...]:
        """Return every supported width, narrowest first."""
        return Base._widths

    @classmethod
    def max_len(cls) -> int:
        """Return the number of bits in the width."""
        return cls.bits

    @classmethod
    def max(cls) -> int:
        """Return the value with every bit set."""
        return (1 << cls.bits) - 1

    @classmethod
    def zero(cls) -> int:
        return 0

    @classmethod
    def one(cls) -> int:
        return 1

    @classmethod
    def one_at_index(cls, index: int) -> int:
        """Return the value with only bit `index` set.

        `index` must be in ``[0, max_len())``. Other indices are folded into
        that range, so the result is always a single bit of this width.

        """
        return cls.one() << (index & (cls.bits - 1))


@public  # type: ignore[misc]
class U8(Base):
    """8 bit unsigned integer."""

    __slots__ = ()
    bits = 8


@public  # type: ignore[misc]
class U16(Base):
    """16 bit unsigned integer."""

    __slots__ = ()
    bits = 16


@public  # type: ignore[misc]
class U32(Base):
    """32 bit unsigned integer."""

    __slots__ = ()
    bits = 32


@public  # type: ignore[misc]
class U64(Base):
    """64 bit unsigned integer."""

    __slots__ = ()
    bits = 64


@public  # type: ignore[misc]
class U128(Base):
    """128 bit unsigned integer."""

    __slots__ = ()
    bits = 128


Base._sealed = True
