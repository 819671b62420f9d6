import os
import re
import time
from io import BytesIO

from PIL import Image


def build_filename(original_name: str) -> str:
    """`<epoch millis>-<original name>`, with whitespace runs replaced by underscores."""
    base = os.path.basename(original_name or "").strip() or "upload"
    millis = int(time.time() * 1000)
    safe = re.sub(r"\s+", "_", base)
    return f"{millis}-{safe}"


def check_image(contents: bytes) -> None:
    """
    Raise if `contents` is not a decodable image.

    PIL raises UnidentifiedImageError (an OSError) for unknown formats and
    OSError/SyntaxError for truncated or corrupt data.
    """
    with Image.open(BytesIO(contents)) as img:
        img.verify()


def save_upload(upload_dir: str, filename: str, contents: bytes) -> str:
    os.makedirs(upload_dir, exist_ok=True)
    filepath = os.path.join(upload_dir, filename)
    with open(filepath, "wb") as out_file:
        out_file.write(contents)
    return filepath


def remove_upload(upload_dir: str, filename: str) -> bool:
    """Delete a stored upload; returns False when there was nothing to delete."""
    filepath = os.path.join(upload_dir, os.path.basename(filename))
    if not os.path.isfile(filepath):
        return False
    try:
        os.remove(filepath)
    except FileNotFoundError:
        return False
    return True
