"""GF(2^8) arithmetic and Reed-Solomon error correction codewords.

The field is generated by the primitive polynomial x^8 + x^4 + x^3 + x^2 + 1
(0x11D) with alpha = 2.
"""

from functools import lru_cache
from typing import List
from typing import Sequence
from typing import Tuple

from anaconda_qr.exceptions import InvalidArgumentError

PRIMITIVE_POLYNOMIAL = 0x11D

# GF(2^8) arithmetic for Reed-Solomon
_GF_EXP = [0] * 512
_GF_LOG = [0] * 256


def _init_gf() -> None:
    x = 1
    for i in range(255):
        _GF_EXP[i] = x
        _GF_LOG[x] = i
        x <<= 1
        if x & 0x100:
            x ^= PRIMITIVE_POLYNOMIAL
    _GF_EXP[255:512] = _GF_EXP[0:257]


_init_gf()


def power(exponent: int) -> int:
    """alpha ** exponent."""
    return _GF_EXP[exponent % 255]


def log(x: int) -> int:
    if x == 0:
        raise InvalidArgumentError("Logarithm of zero is undefined")
    return _GF_LOG[x]


def multiply(x: int, y: int) -> int:
    return 0 if x == 0 or y == 0 else _GF_EXP[_GF_LOG[x] + _GF_LOG[y]]


def divide(x: int, y: int) -> int:
    if y == 0:
        raise InvalidArgumentError("Division by zero in GF(256)")
    if x == 0:
        return 0
    return _GF_EXP[(_GF_LOG[x] + 255 - _GF_LOG[y]) % 255]


def _poly_mul(p: Sequence[int], q: Sequence[int]) -> List[int]:
    r = [0] * (len(p) + len(q) - 1)
    for i, a in enumerate(p):
        for j, b in enumerate(q):
            r[i + j] ^= multiply(a, b)
    return r


@lru_cache(maxsize=None)
def generator_polynomial(degree: int) -> Tuple[int, ...]:
    """Reed-Solomon generator of the given degree, highest power first.

    The result is the monic product (x - alpha^0)(x - alpha^1)...(x - alpha^(degree-1)),
    so it has ``degree + 1`` coefficients and the first is always 1.
    """
    if not 1 <= degree <= 255:
        raise InvalidArgumentError(f"Degree {degree} out of range [1, 255]")
    g = [1]
    for i in range(degree):
        g = _poly_mul(g, [1, _GF_EXP[i]])
    return tuple(g)


def remainder(data: Sequence[int], generator: Sequence[int]) -> List[int]:
    """Remainder of ``data * x^degree`` divided by the generator polynomial.

    Returns exactly ``degree`` coefficients, which are the error correction
    codewords for the block.
    """
    degree = len(generator) - 1
    if degree < 1 or generator[0] != 1:
        raise InvalidArgumentError("Generator polynomial must be monic")
    r = list(data) + [0] * degree
    for i in range(len(data)):
        factor = r[i]
        if factor:
            for j in range(1, len(generator)):
                r[i + j] ^= multiply(generator[j], factor)
    return r[len(data) :]


def reed_solomon_encode(data: Sequence[int], degree: int) -> List[int]:
    return remainder(data, generator_polynomial(degree))
