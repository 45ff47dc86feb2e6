import base64
import os
from typing import List, Optional, Protocol, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from utils.logging_config import get_logger

logger = get_logger(__name__)

DATA_URL_MARKER = "data:image"
PNG_DATA_URL_PREFIX = "data:image/png;base64,"


class SaveOptions(BaseModel):
    """Options for writing generated images to a sink"""
    model_config = ConfigDict(frozen=True)

    prefix: str = Field(default="kandinsky", min_length=1)


class ImageSink(Protocol):
    """Anything that can receive a generated image"""

    def write(self, filename: str, data_url: str) -> None:
        ...


class FileSystemSink:
    """Decodes data URLs and writes the image bytes into a directory"""

    def __init__(self, directory: str = "output"):
        self.directory = directory

    def write(self, filename: str, data_url: str) -> None:
        image_bytes = decode_data_url(data_url)
        os.makedirs(self.directory, exist_ok=True)
        path = os.path.join(self.directory, filename)
        with open(path, "wb") as f:
            f.write(image_bytes)
        logger.info(f"Saved image to {path}")

    def path_for(self, filename: str) -> str:
        return os.path.join(self.directory, filename)


class MemorySink:
    """Keeps every written image in order"""

    def __init__(self):
        self.images: List[Tuple[str, str]] = []

    def write(self, filename: str, data_url: str) -> None:
        self.images.append((filename, data_url))

    @property
    def filenames(self) -> List[str]:
        return [name for name, _ in self.images]


def to_data_url(image_data: str) -> str:
    """Mark a bare base64 payload as a PNG data URL"""
    if image_data.startswith(DATA_URL_MARKER):
        return image_data
    return PNG_DATA_URL_PREFIX + image_data


def decode_data_url(data_url: str) -> bytes:
    """Return the raw bytes behind a base64 data URL (or bare base64).

    Raises binascii.Error on characters outside the base64 alphabet.
    """
    if data_url.startswith(DATA_URL_MARKER):
        _, _, data_url = data_url.partition(",")
    return base64.b64decode(data_url, validate=True)


def save_images(images: Sequence[str], sink: ImageSink,
                options: Optional[SaveOptions] = None) -> List[str]:
    """
    Emit each image to the sink as `{prefix}_{index}.png`.

    Images keep their input order and the returned filenames follow it.
    Errors raised by the sink are not caught here.
    """
    options = options or SaveOptions()
    filenames = []

    for i, image_data in enumerate(images):
        filename = f"{options.prefix}_{i}.png"
        sink.write(filename, to_data_url(image_data))
        filenames.append(filename)

    logger.debug(f"Emitted {len(filenames)} image(s) with prefix '{options.prefix}'")
    return filenames
