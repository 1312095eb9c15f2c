"""Tests for QR code rendering."""

import base64

from halluapp.infrastructure.qr import render_qr_svg, render_qr_svg_base64


def test_render_qr_svg_produces_svg_document() -> None:
    svg = render_qr_svg("http://testserver/register?code=ABC")

    assert b"<svg" in svg


def test_base64_output_decodes_to_the_same_svg() -> None:
    data = "http://testserver/register?code=ABC"
    encoded = render_qr_svg_base64(data)

    assert isinstance(encoded, str)
    assert base64.b64decode(encoded) == render_qr_svg(data)
