"""Format adapter implementations.

`FormatKind` enumerates the supported formats in benchmark order; use
`get_format` to obtain the adapter for a kind.
"""

from enum import Enum

from .base import BaseFormat, PathLike
from .csv_format import CsvFormat
from .json_format import JsonFormat
from .toml_format import TomlFormat
from .xml_format import XmlFormat
from .yaml_format import YamlFormat


class FormatKind(Enum):
    """Supported serialization formats, in benchmark order."""
    CSV = "csv"
    JSON = "json"
    TOML = "toml"
    XML = "xml"
    YAML = "yaml"


_ADAPTERS: dict[FormatKind, type[BaseFormat]] = {
    FormatKind.CSV: CsvFormat,
    FormatKind.JSON: JsonFormat,
    FormatKind.TOML: TomlFormat,
    FormatKind.XML: XmlFormat,
    FormatKind.YAML: YamlFormat,
}

DEFAULT_FORMATS: tuple[FormatKind, ...] = tuple(FormatKind)


def get_format(kind: FormatKind) -> BaseFormat:
    """Create the default adapter for a format kind."""
    return _ADAPTERS[kind]()


__all__ = [
    "BaseFormat",
    "PathLike",
    "CsvFormat",
    "JsonFormat",
    "TomlFormat",
    "XmlFormat",
    "YamlFormat",
    "FormatKind",
    "DEFAULT_FORMATS",
    "get_format",
]
