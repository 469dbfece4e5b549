from __future__ import annotations

from typing import Type

import pytest

from fixedbits.base import U8, U16, U32, U64, U128, Base
from fixedbits.bitarray import BitArray

WIDTHS = [U8, U16, U32, U64, U128]


@pytest.fixture(params=WIDTHS, ids=lambda width: width.__name__)  # type: ignore[misc]
def width(request: pytest.FixtureRequest) -> Type[Base]:
    return request.param


@pytest.fixture  # type: ignore[misc]
def array_type(width: Type[Base]) -> Type[BitArray]:
    return BitArray[width]


@pytest.fixture(scope="session")  # type: ignore[misc]
def example_bits() -> list[bool]:
    return [True, False, False, False, False, True, True, True]


@pytest.fixture  # type: ignore[misc]
def example(example_bits: list[bool]) -> BitArray:
    return BitArray[U8].new(example_bits)
