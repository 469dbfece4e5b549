from __future__ import annotations

from typing import Type

import pytest

from fixedbits.base import U8, U16, U32, U64, U128, Base
from fixedbits.protocols import Width


@pytest.mark.parametrize(
    ("width", "expected"), [(U8, 8), (U16, 16), (U32, 32), (U64, 64), (U128, 128)]
)
def test_max_len(width: Type[Base], expected: int) -> None:
    assert width.max_len() == expected


def test_max(width: Type[Base]) -> None:
    assert width.max() == 2 ** width.max_len() - 1
    assert bin(width.max()).count("1") == width.max_len()


def test_zero_and_one(width: Type[Base]) -> None:
    assert width.zero() == 0
    assert width.one() == 1


def test_one_at_index(width: Type[Base]) -> None:
    for index in range(width.max_len()):
        value = width.one_at_index(index)
        assert bin(value).count("1") == 1
        assert value.bit_length() - 1 == index


def test_one_at_index_out_of_range_stays_in_width(width: Type[Base]) -> None:
    value = width.one_at_index(width.max_len() + 3)
    assert value == width.one_at_index(3)
    assert value <= width.max()


def test_widths() -> None:
    assert Base.widths() == (U8, U16, U32, U64, U128)


def test_sealed() -> None:
    with pytest.raises(TypeError, match="closed"):

        class U256(Base):
            bits = 256

    assert len(Base.widths()) == 5


def test_width_subclass_sealed() -> None:
    with pytest.raises(TypeError):

        class MyU8(U8):
            pass


def test_not_instantiable() -> None:
    with pytest.raises(TypeError):
        U8()


def test_conforms_to_width_protocol(width: Type[Base]) -> None:
    assert isinstance(width, Width)
