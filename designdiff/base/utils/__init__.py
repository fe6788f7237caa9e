"""Side-effect free helpers shared by adapters, normalizer and service."""

from .files import VALID_CODE_EXTENSIONS, file_type, is_code_file
from .images import SUPPORTED_IMAGE_MIME_TYPES, encode_image, sniff_image_mime, to_data_url

__all__ = [
    "VALID_CODE_EXTENSIONS",
    "file_type",
    "is_code_file",
    "SUPPORTED_IMAGE_MIME_TYPES",
    "encode_image",
    "sniff_image_mime",
    "to_data_url",
]
