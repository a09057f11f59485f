from typing import Literal
from typing import Optional

from pydantic import Field

from anaconda_cli_base.config import AnacondaBaseSettings
from anaconda_qr.ecc import Ecc


class AnacondaQRConfig(AnacondaBaseSettings, plugin_name="qr"):
    """Defaults for the ``anaconda qr`` commands.

    Set with ``ANACONDA_QR_*`` environment variables or in the ``[plugin.qr]``
    table of ``~/.anaconda/config.toml``.
    """

    error_correction: Literal["low", "medium", "quartile", "high"] = "low"
    boost_ecl: bool = True
    min_version: int = Field(default=1, ge=1, le=40)
    max_version: int = Field(default=40, ge=1, le=40)
    mask: Optional[int] = Field(default=None, ge=0, le=7)
    quiet_zone: int = Field(default=4, ge=0)
    invert: bool = False
    parallel_masks: bool = False

    @property
    def ecl(self) -> Ecc:
        return Ecc.parse(self.error_correction)
