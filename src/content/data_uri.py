"""Build and parse base64 data URIs for uploaded quiz content."""

import base64
import binascii
import mimetypes
import re
from pathlib import Path
from typing import NamedTuple

from src.exceptions import ContentError

DATA_URI_PATTERN = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?P<params>(?:;[\w.+-]+=[^;,]*)*);base64,(?P<data>.*)$",
    re.DOTALL,
)

# Text payloads are embedded into the prompt, images are attached as media
TEXT_MIME_TYPES = {
    "application/json",
    "application/xml",
    "application/csv",
    "application/x-yaml",
}


def is_text_mime_type(mime_type: str) -> bool:
    return mime_type.startswith("text/") or mime_type in TEXT_MIME_TYPES


class DataUri(NamedTuple):
    """A decoded data URI."""

    mime_type: str
    data: bytes

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    @property
    def is_text(self) -> bool:
        return is_text_mime_type(self.mime_type)

    def text(self) -> str:
        """Decode a text payload, tolerating stray bytes."""
        return self.data.decode("utf-8", errors="replace")


def is_supported_mime_type(mime_type: str) -> bool:
    """Check whether a quiz can be built from content of this type."""
    return mime_type.startswith("image/") or is_text_mime_type(mime_type)


def parse_data_uri(uri: str, max_bytes: int | None = None) -> DataUri:
    """
    Parse a 'data:<mimetype>;base64,<encoded_data>' URI.

    Args:
        uri: The data URI
        max_bytes: Reject payloads larger than this once decoded

    Returns:
        DataUri with the MIME type and decoded bytes

    Raises:
        ContentError: If the URI is malformed, empty, too large or of an unsupported type
    """
    match = DATA_URI_PATTERN.match(uri.strip())
    if not match:
        raise ContentError("Content must be a base64 data URI with a MIME type.")

    mime_type = match.group("mime").lower()
    if not is_supported_mime_type(mime_type):
        raise ContentError(
            f"Unsupported content type: {mime_type}. Upload an image or a text file.",
            mime_type=mime_type,
        )

    try:
        data = base64.b64decode(match.group("data"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ContentError("Content is not valid base64.", mime_type=mime_type) from e

    if not data:
        raise ContentError("File content is missing.", mime_type=mime_type)

    if max_bytes is not None and len(data) > max_bytes:
        raise ContentError(
            f"Content is too large ({len(data)} bytes, limit {max_bytes}).",
            mime_type=mime_type,
        )

    return DataUri(mime_type=mime_type, data=data)


def to_data_uri(data: bytes, mime_type: str) -> str:
    """Encode raw bytes as a base64 data URI."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def file_to_data_uri(path: str | Path) -> str:
    """
    Read a file and encode it as a data URI, guessing the MIME type from its name.

    Args:
        path: File to read

    Returns:
        Data URI string

    Raises:
        ContentError: If the file type can't be determined or isn't supported
        FileNotFoundError: If the file doesn't exist
    """
    file_path = Path(path)
    mime_type, _ = mimetypes.guess_type(file_path.name)
    if mime_type is None:
        if file_path.suffix.lower() in {".md", ".markdown"}:
            mime_type = "text/markdown"
        else:
            raise ContentError(f"Could not determine the type of {file_path.name}")

    if not is_supported_mime_type(mime_type):
        raise ContentError(
            f"Unsupported content type: {mime_type}. Upload an image or a text file.",
            mime_type=mime_type,
        )

    return to_data_uri(file_path.read_bytes(), mime_type)
