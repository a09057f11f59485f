from enum import Enum

from anaconda_qr.exceptions import InvalidArgumentError


class Ecc(Enum):
    """Error correction level, in order of increasing redundancy.

    The value of each member is ``(ordinal, format_bits)``; the format bits are
    the 2-bit code written into the format information, which does not follow
    the ordinal.
    """

    LOW = (0, 1)
    MEDIUM = (1, 0)
    QUARTILE = (2, 3)
    HIGH = (3, 2)

    @property
    def ordinal(self) -> int:
        return self.value[0]

    @property
    def format_bits(self) -> int:
        return self.value[1]

    @classmethod
    def parse(cls, name: str) -> "Ecc":
        """Look up a level by name (``"quartile"``) or initial (``"Q"``)."""
        key = name.strip().upper()
        for level in cls:
            if key in (level.name, level.name[0]):
                return level
        raise InvalidArgumentError(f"Unknown error correction level: {name!r}")
