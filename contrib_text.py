"""Render a word into a 7-row drawing with Pillow."""

from PIL import Image, ImageDraw, ImageFont

from contrib_drawing import MAX_INTENSITY, ROWS


def rasterize_text(text: str, weeks: int, intensity: int = 4) -> list:
    """
    Render text using Pillow, then scale to weeks x 7 and binarize.
    Returns a 7 x weeks grid [row][week] holding `intensity` where the
    text has ink and 0 elsewhere.
    """
    if weeks < 1:
        raise ValueError("weeks must be at least 1")
    if not 1 <= intensity <= MAX_INTENSITY:
        raise ValueError(f"intensity must be between 1 and {MAX_INTENSITY}")

    # Draw large to preserve shapes, then downscale.
    font = ImageFont.load_default()
    tmp = Image.new("L", (1200, 200), 0)
    drw = ImageDraw.Draw(tmp)
    drw.text((0, 0), text, fill=255, font=font)
    bbox = tmp.getbbox()
    if not bbox:
        return [[0] * weeks for _ in range(ROWS)]
    cropped = tmp.crop(bbox)

    # NEAREST keeps pixels crisp
    small = cropped.resize((weeks, ROWS), Image.NEAREST)

    data = small.load()
    return [[intensity if data[x, y] else 0 for x in range(weeks)] for y in range(ROWS)]
