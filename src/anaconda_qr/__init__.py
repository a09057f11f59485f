__version__ = "0.1.0"

from anaconda_qr.ecc import Ecc  # noqa: E402
from anaconda_qr.qrcode import QRCode  # noqa: E402
from anaconda_qr.qrcode import encode_binary  # noqa: E402
from anaconda_qr.qrcode import encode_segments  # noqa: E402
from anaconda_qr.qrcode import encode_text  # noqa: E402
from anaconda_qr.segment import Mode  # noqa: E402
from anaconda_qr.segment import QrSegment  # noqa: E402
from anaconda_qr.segment import make_segments  # noqa: E402

__all__ = [
    "__version__",
    "Ecc",
    "Mode",
    "QRCode",
    "QrSegment",
    "encode_binary",
    "encode_segments",
    "encode_text",
    "make_segments",
]
