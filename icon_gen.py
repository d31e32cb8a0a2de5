"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ICON_SIZE = 64
_BAR_HEIGHT = 14
_BAR_COLOR = "#0078D4"


def create_icon_image(day: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA calendar page showing *day*'s day of month.

    Falls back to today when no date is given.
    """
    size = ICON_SIZE
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)
    draw.rectangle((0, 0, size - 1, _BAR_HEIGHT - 1), fill=_BAR_COLOR)

    text = str((day or date.today()).day)
    avail_h = size - _BAR_HEIGHT

    # Find the largest font size that fits below the bar
    font_size = 60
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("segoeuib.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size and bbox[3] - bbox[1] <= avail_h:
            break
        font_size -= 1

    # Centre the visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = _BAR_HEIGHT + (avail_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
