from typing import Iterable
from typing import Iterator
from typing import List

from anaconda_qr.exceptions import InvalidArgumentError
from anaconda_qr.exceptions import InvariantViolationError


class BitBuffer:
    """An append-only sequence of bits, most significant bit first."""

    def __init__(self) -> None:
        self._bits: List[int] = []

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def bit_length(self) -> int:
        return len(self._bits)

    def append_bits(self, value: int, num_bits: int) -> None:
        """Append the low ``num_bits`` bits of ``value``, MSB first."""
        if not 0 <= num_bits <= 31:
            raise InvalidArgumentError(f"Bit count {num_bits} out of range [0, 31]")
        if value < 0 or value >> num_bits != 0:
            raise InvalidArgumentError(
                f"Value {value} does not fit in {num_bits} bits"
            )
        self._bits.extend((value >> i) & 1 for i in reversed(range(num_bits)))

    def extend_bits(self, bits: Iterable[int]) -> None:
        for bit in bits:
            if bit not in (0, 1):
                raise InvalidArgumentError(f"Not a bit: {bit!r}")
            self._bits.append(bit)

    def to_bytes(self) -> bytes:
        if len(self._bits) % 8 != 0:
            raise InvariantViolationError(
                f"Bit length {len(self._bits)} is not a multiple of 8"
            )
        result = bytearray(len(self._bits) // 8)
        for i, bit in enumerate(self._bits):
            result[i >> 3] |= bit << (7 - (i & 7))
        return bytes(result)
