"""Pillow-backed decode / resize / encode steps."""

from pathlib import Path

from PIL import Image

RESAMPLE_FILTER = Image.Resampling.BILINEAR

DECODE_ERRORS: tuple[type[Exception], ...] = (
    OSError,
    ValueError,
    SyntaxError,
    Image.DecompressionBombError,
)


def get_pil_format(extension: str) -> str:
    """Convert a file extension to a PIL format name."""
    format_map = {
        "jpg": "JPEG",
        "jpeg": "JPEG",
        "png": "PNG",
        "gif": "GIF",
        "webp": "WEBP",
        "bmp": "BMP",
        "tif": "TIFF",
        "tiff": "TIFF",
    }
    ext = extension.lstrip(".").lower()
    return format_map.get(ext, ext.upper())


def decode_image(input_path: str | Path) -> Image.Image:
    """
    Fully decode an image file into memory.

    The returned image no longer references the source file.

    Raises:
        OSError: If the file cannot be read or is not a recognised image
        Image.DecompressionBombError: If the image exceeds Pillow's pixel limit
    """
    with Image.open(input_path) as img:
        img.load()
        return img.copy()


def resize_to_box(img: Image.Image, width: int, height: int) -> Image.Image:
    """Shrink ``img`` in place to fit within ``width`` x ``height``, keeping aspect ratio."""
    img.thumbnail((width, height), RESAMPLE_FILTER)
    return img


def encode_image(img: Image.Image, output_path: str | Path, extension: str) -> Path:
    """
    Encode ``img`` in the format named by ``extension`` and write it out.

    An existing file at ``output_path`` is overwritten. If encoding fails
    midway the partial file is removed before the error propagates.

    Raises:
        OSError: If Pillow fails to encode or write the image
        ValueError: If the image mode cannot be written in the target format
    """
    output_path = Path(output_path)
    fmt = get_pil_format(extension)

    # JPEG does not support alpha or palette modes
    if fmt == "JPEG" and img.mode not in ("RGB", "L", "CMYK"):
        img = img.convert("RGB")

    save_kwargs: dict[str, object] = {}
    if fmt == "JPEG":
        save_kwargs["quality"] = 85
    elif fmt == "PNG":
        save_kwargs["optimize"] = True

    try:
        img.save(output_path, format=fmt, **save_kwargs)
    except Exception:
        if output_path.is_file():
            output_path.unlink()
        raise

    return output_path
