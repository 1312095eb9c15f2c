"""QR code rendering for shareable links."""

import base64
from io import BytesIO

import qrcode
from qrcode.constants import ERROR_CORRECT_M
from qrcode.image.svg import SvgPathImage


def render_qr_svg(data: str, *, box_size: int = 10, border: int = 4) -> bytes:
    """Return ``data`` encoded as an SVG QR code document."""

    qr = qrcode.QRCode(
        error_correction=ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
        image_factory=SvgPathImage,
    )
    qr.add_data(data)
    qr.make(fit=True)

    buffer = BytesIO()
    qr.make_image().save(buffer)
    return buffer.getvalue()


def render_qr_svg_base64(data: str) -> str:
    """Return the SVG QR code for ``data`` as a base64 ASCII string."""

    return base64.b64encode(render_qr_svg(data)).decode("ascii")


__all__ = ["render_qr_svg", "render_qr_svg_base64"]
