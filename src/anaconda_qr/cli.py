from typing import Optional

import typer
from rich.table import Table

from anaconda_cli_base.console import console
from anaconda_cli_base.exceptions import register_error_handler
from anaconda_qr import __version__
from anaconda_qr.config import AnacondaQRConfig
from anaconda_qr.ecc import Ecc
from anaconda_qr.exceptions import DataTooLongError
from anaconda_qr.exceptions import InvalidArgumentError
from anaconda_qr.qrcode import encode_segments
from anaconda_qr.render import qr_to_terminal
from anaconda_qr.segment import QrSegment
from anaconda_qr.segment import make_segments
from anaconda_qr.tables import check_version
from anaconda_qr.tables import ecc_codewords_per_block
from anaconda_qr.tables import num_data_codewords
from anaconda_qr.tables import num_error_correction_blocks
from anaconda_qr.tables import symbol_size


@register_error_handler(DataTooLongError)
def data_too_long(e: Exception) -> int:
    console.print(
        f"[bold][red]{e.__class__.__name__}[/red][/bold]: {e}. "
        "Try a lower error correction level or a larger --max-version."
    )
    return 1


@register_error_handler(InvalidArgumentError)
def invalid_argument(e: Exception) -> int:
    console.print(f"[bold][red]{e.__class__.__name__}[/red][/bold]: {e}")
    return 2


app = typer.Typer(
    name="qr",
    add_completion=False,
    help="Encode text and data as QR Codes",
    context_settings={"help_option_names": ["--help", "-h"]},
)


@app.callback(invoke_without_command=True, no_args_is_help=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "-V", "--version"),
) -> None:
    if version:
        console.print(f"anaconda-qr, version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.command("encode")
def encode(
    text: str = typer.Argument(..., help="Text to encode"),
    ecl: Optional[str] = typer.Option(
        None, "-e", "--ecl", help="Error correction level (low, medium, quartile, high)"
    ),
    min_version: Optional[int] = typer.Option(None, "--min-version"),
    max_version: Optional[int] = typer.Option(None, "--max-version"),
    mask: Optional[int] = typer.Option(None, "--mask", help="Force a mask pattern (0-7)"),
    boost: Optional[bool] = typer.Option(
        None, "--boost/--no-boost", help="Raise the error correction level if it fits"
    ),
    quiet_zone: Optional[int] = typer.Option(None, "--quiet-zone"),
    invert: Optional[bool] = typer.Option(None, "--invert/--no-invert"),
    binary: bool = typer.Option(
        False, "--binary", help="Encode the UTF-8 bytes as a single byte segment"
    ),
) -> None:
    """Print TEXT as a QR Code."""
    config = AnacondaQRConfig()

    if binary:
        segments = [QrSegment.make_bytes(text.encode("utf-8"))]
    else:
        segments = make_segments(text)

    qr = encode_segments(
        segments,
        Ecc.parse(ecl) if ecl is not None else config.ecl,
        min_version=config.min_version if min_version is None else min_version,
        max_version=config.max_version if max_version is None else max_version,
        mask=config.mask if mask is None else mask,
        boost_ecl=config.boost_ecl if boost is None else boost,
        parallel_masks=config.parallel_masks,
    )

    console.print(
        qr_to_terminal(
            qr,
            quiet_zone=config.quiet_zone if quiet_zone is None else quiet_zone,
            invert=config.invert if invert is None else invert,
        ),
        highlight=False,
        soft_wrap=True,
    )
    console.print(
        f"Version: {qr.version} ({qr.size}x{qr.size}), "
        f"Error correction: {qr.error_correction_level.name}, Mask: {qr.mask}"
    )


@app.command("capacity")
def capacity(
    version: int = typer.Argument(..., help="Symbol version (1-40)"),
) -> None:
    """Show the data capacity of a version at each error correction level."""
    check_version(version)
    size = symbol_size(version)

    table = Table(title=f"Version {version} ({size}x{size} modules)")
    table.add_column("Level")
    table.add_column("Data codewords", justify="right")
    table.add_column("ECC per block", justify="right")
    table.add_column("Blocks", justify="right")
    for level in Ecc:
        table.add_row(
            level.name,
            str(num_data_codewords(version, level)),
            str(ecc_codewords_per_block(version, level)),
            str(num_error_correction_blocks(version, level)),
        )
    console.print(table)
