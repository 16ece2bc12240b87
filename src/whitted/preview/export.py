"""Image export for rendered canvases.

Supported formats:
    - PNG (8-bit RGB via Pillow)
    - PPM (plain-text P3)

Both formats clamp colors to [0, 1] before scaling to 0..255; no tone
mapping or gamma correction is applied.

Example:
    >>> from src.whitted.preview.export import save_png
    >>> canvas = camera.render(world)
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image as PILImage

if TYPE_CHECKING:
    from src.whitted.preview.canvas import Canvas

# Plain PPM readers are only required to accept lines up to this length
PPM_LINE_LIMIT = 70
PPM_MAX_VALUE = 255


def save_png(canvas: Canvas, filepath: str | Path) -> None:
    """Save the canvas as an 8-bit RGB PNG.

    Args:
        canvas: The rendered canvas.
        filepath: Output file path (should end in .png).
    """
    pil_image = PILImage.fromarray(canvas.to_uint8())
    pil_image.save(filepath)


def canvas_to_ppm(canvas: Canvas) -> str:
    """Encode the canvas as plain PPM text.

    Each pixel row starts on a new line and no line is longer than 70
    characters. The text ends with a newline.
    """
    lines = ["P3", f"{canvas.width} {canvas.height}", str(PPM_MAX_VALUE)]

    for row in canvas.to_uint8():
        line = ""
        for value in row.reshape(-1):
            token = str(int(value))
            if not line:
                line = token
            elif len(line) + 1 + len(token) > PPM_LINE_LIMIT:
                lines.append(line)
                line = token
            else:
                line = f"{line} {token}"
        lines.append(line)

    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    """Save the canvas as a plain PPM (P3) file."""
    Path(filepath).write_text(canvas_to_ppm(canvas), encoding="ascii")
