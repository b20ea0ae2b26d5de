"""Extension vocabulary and the default invalid-character set."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Characters never allowed in a filename (ordered, exact literal list)
# ---------------------------------------------------------------------------
INVALID_CHARS: tuple[str, ...] = (
    "!", "@", "#", "$", "%", "^", "&", "*", "{", "}", "/", "\\",
    ",", "<", ">", "?", ":", ";", "'", "|", "=", "+", "`",
)

# U+FFFD, left behind when upstream text decoding failed
REPLACEMENT_CHAR = "\ufffd"

# ---------------------------------------------------------------------------
# Format tables (lowercase, no leading dot)
# ---------------------------------------------------------------------------
IMAGE_FORMATS: tuple[str, ...] = tuple(
    """
    jpg jpeg jpe jfif jif
    png gif bmp
    svg svgz
    raw arw cr2 nrw k25
    webp tiff tif
    heif helc
    jp2 j2k jpf jpx jpm mj2
    eps
    """.split()
)

# Adobe formats: Photoshop, InDesign, Illustrator
PROPRIETARY_FORMATS: tuple[str, ...] = tuple("psd ind indt indd ai".split())

EXECUTABLE_FORMATS: tuple[str, ...] = tuple("action exe bat".split())
