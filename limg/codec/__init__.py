from .decoding import decode, decode_pixels, read_exact, read_image
from .encoding import encode, encode_pixels, write_image
from .header import (
    DIMENSION_BYTES,
    EXTENDED_HEADER_SIZE,
    HEADER_SIZE,
    Header,
    decode_header,
    encode_header,
    header_size,
)

__all__ = [
    "decode",
    "decode_header",
    "decode_pixels",
    "DIMENSION_BYTES",
    "encode",
    "encode_header",
    "encode_pixels",
    "EXTENDED_HEADER_SIZE",
    "Header",
    "HEADER_SIZE",
    "header_size",
    "read_exact",
    "read_image",
    "write_image",
]
