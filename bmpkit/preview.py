"""
Terminal preview of bitmaps. Use for small images only.
"""

from .bitmap import RasterImage


def colored_block(block: str, red: int, green: int, blue: int) -> str:
    """Wrap `block` in a 24-bit ANSI background color."""
    return f"\033[48;2;{red};{green};{blue}m{block}\033[0m"


def format_bitmap(image: RasterImage, block: str = "  ") -> str:
    lines = []
    for row in image.pixels:
        lines.append("".join(colored_block(block, int(r), int(g), int(b)) for r, g, b in row))
    return "\n".join(lines) + "\n"


def print_bitmap(image: RasterImage) -> None:
    print(format_bitmap(image), end="")


def format_metadata(image: RasterImage) -> str:
    """Human-readable summary of the headers and row layout."""
    bf, bi = image.file_header, image.info_header
    return (
        f"Filename: \t{image.filename}\n"
        f"Filesize: \t{bf.size} bytes\n"
        f"Width: \t\t{bi.width} px\n"
        f"Height: \t{bi.height} px\n"
        f"BitCount: \t{bi.bit_count}bits\n"
        f"PixelOffset: \t{bf.off_bits} bytes\n"
        f"PixelCount: \t{bi.width * bi.height} pixels\n"
        f"Stride: \t{image.stride} bytes\n"
        f"Padding: \t{image.padding} bytes\n"
    )


def print_metadata(image: RasterImage) -> None:
    print(format_metadata(image), end="")
