"""Image preparation for fridge photo analysis."""

import io

from shoplist.parsing.errors import InvalidImage

MAX_IMAGE_DIMENSION = 1568  # Longer side; larger uploads are downscaled before sending
JPEG_QUALITY = 80


def prepare_image_bytes(
    image_bytes: bytes, max_dimension: int = MAX_IMAGE_DIMENSION, quality: int = JPEG_QUALITY
) -> bytes:
    """
    Normalize an uploaded photo to JPEG bytes.

    Applies EXIF orientation, downsizes if either side exceeds max_dimension
    (keeping the aspect ratio) and re-encodes as RGB JPEG.

    Args:
        image_bytes: Image data in any format Pillow can read
        max_dimension: Maximum allowed dimension (width or height)
        quality: JPEG quality (1-95)

    Returns:
        JPEG image bytes

    Raises:
        InvalidImage: The data is empty or not a readable image
    """
    from PIL import Image, ImageOps, UnidentifiedImageError

    if not image_bytes:
        raise InvalidImage()

    try:
        img = Image.open(io.BytesIO(image_bytes))
        img = ImageOps.exif_transpose(img)
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImage() from e

    width, height = img.size
    if width > max_dimension or height > max_dimension:
        if width > height:
            new_width = max_dimension
            new_height = int(height * (max_dimension / width))
        else:
            new_height = max_dimension
            new_width = int(width * (max_dimension / height))
        img = img.resize((new_width, new_height), Image.Resampling.LANCZOS)

    buffer = io.BytesIO()
    img.convert("RGB").save(buffer, format="JPEG", quality=quality)
    return buffer.getvalue()
