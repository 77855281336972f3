# cover_bot/services/photo_processing.py
import io

import structlog
from aiogram import Bot
from PIL import Image, UnidentifiedImageError

from cover_bot.data.constants import SUPPORTED_IMAGE_MIME_TYPES
from cover_bot.dto.generation import EncodedImage
from cover_bot.exceptions import UnsupportedImageFormat

logger = structlog.get_logger(__name__)


def encode_photo(data: bytes) -> EncodedImage:
    """
    Tags raw upload bytes with their real format. Anything Pillow does not
    recognise as PNG or JPEG is rejected before it reaches the core.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            image_format = img.format
    except (UnidentifiedImageError, OSError) as e:
        raise UnsupportedImageFormat() from e

    mime_type = Image.MIME.get(image_format or "")
    if mime_type not in SUPPORTED_IMAGE_MIME_TYPES:
        logger.info("Rejected upload", image_format=image_format)
        raise UnsupportedImageFormat()
    return EncodedImage(mime_type=mime_type, data=data)


async def download_file(bot: Bot, file_id: str) -> bytes | None:
    """The get_file -> download_file sequence for a single Telegram file."""
    file_info = await bot.get_file(file_id)
    if not file_info.file_path:
        return None
    file_io = await bot.download_file(file_info.file_path)
    if not file_io:
        return None
    return file_io.read()
