"""Basic rgbhsl usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from rgbhsl import RgbaColor, HslaColor, convert


def demonstrate_colors() -> None:
    # Construct colors and move between RGBA and HSLA.
    accent = RgbaColor.from_byte_triple((255, 128, 64))
    print("RGBA:", accent)
    print("As bytes:", accent.to_byte_triple())

    hsla = accent.to_hsla()
    print("RGBA -> HSLA:", hsla)
    print("HSLA -> RGBA:", hsla.to_rgba())

    print("Complement:", accent.complement())


def demonstrate_normalization() -> None:
    # HSLA repairs out-of-range input; RGBA keeps it verbatim.
    print("Wrapped hue:", HslaColor(400, 150, -20))
    print("Unclamped RGBA:", RgbaColor(1.5, -0.25, 0.5))


def demonstrate_tuples() -> None:
    print("bytes -> hsl:", convert((0, 255, 0), "bytes", "hsl"))
    print("hsl -> rgb:", convert((210.0, 50.0, 50.0), "hsl", "rgb"))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_normalization()
    demonstrate_tuples()
