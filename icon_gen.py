"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ACCENT = "#0078D4"


def create_icon_image(today: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA image: today's day of month under a blue header bar."""
    size = 64
    bar = 14
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)
    draw.rectangle((0, 0, size - 1, bar - 1), fill=ACCENT)

    text = str((today or date.today()).day)
    avail_h = size - bar

    # Find the largest font size that fits below the bar
    font_size = 60
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            try:
                font = ImageFont.truetype("segoeuib.ttf", font_size)
            except OSError:
                font = ImageFont.load_default()
                break
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size - 4 and bbox[3] - bbox[1] <= avail_h - 4:
            break
        font_size -= 1

    # Centre the visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = bar + (avail_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
