"""Render a QR Code for display in a terminal."""

from anaconda_qr.exceptions import InvalidArgumentError
from anaconda_qr.qrcode import QRCode

BOTH_DARK, TOP_DARK, BOT_DARK, BOTH_LIGHT = "█", "▀", "▄", " "


def qr_to_terminal(qr: QRCode, quiet_zone: int = 4, invert: bool = False) -> str:
    """Draw the symbol with half-block characters, two module rows per line.

    Set ``invert`` on terminals with a dark background, where a printed block
    shows up as a light module.
    """
    if quiet_zone < 0:
        raise InvalidArgumentError(f"Quiet zone must not be negative: {quiet_zone}")

    size = qr.size
    full_size = size + 2 * quiet_zone
    full = [[False] * full_size for _ in range(full_size)]
    for r, row in enumerate(qr.to_matrix()):
        for c, dark in enumerate(row):
            full[r + quiet_zone][c + quiet_zone] = dark

    both_dark, top_dark, bot_dark, both_light = BOTH_DARK, TOP_DARK, BOT_DARK, BOTH_LIGHT
    if invert:
        both_dark, both_light = both_light, both_dark
        top_dark, bot_dark = bot_dark, top_dark

    lines = []
    for r in range(0, full_size, 2):
        line = ""
        for c in range(full_size):
            top = full[r][c]
            bot = full[r + 1][c] if r + 1 < full_size else False
            line += (
                both_dark
                if top and bot
                else top_dark
                if top
                else bot_dark
                if bot
                else both_light
            )
        lines.append(line)

    return "\n".join(lines)
