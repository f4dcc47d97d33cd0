"DSF (DSD Stream File) metadata reader."

from importlib import metadata

from .dsf import DSFHeader, DSFMetadata, read_dsf_tags, read_file, read_header
from .errors import DecodeError, FormatError, ReadError, TagError

decode = read_dsf_tags

__all__ = [
    "__version__",
    "DSFHeader",
    "DSFMetadata",
    "DecodeError",
    "FormatError",
    "ReadError",
    "TagError",
    "decode",
    "read_dsf_tags",
    "read_file",
    "read_header",
]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return metadata.version("dsf-meta")
        except metadata.PackageNotFoundError:  # pragma: no cover - during editable dev installs
            return "0.0.0"
    raise AttributeError(name)
