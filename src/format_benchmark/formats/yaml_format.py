"""YAML format adapter."""

import logging

import yaml

from format_benchmark.formats.base import BaseFormat, PathLike
from format_benchmark.models import Person

logger = logging.getLogger(__name__)


class YamlFormat(BaseFormat):
    """Reads and writes a top-level YAML sequence of person mappings.

    Scalars are loaded as plain strings (PyYAML's `BaseLoader`), so text
    fields such as `address: 42` or `name: No` stay text; `id` and `age` are
    converted by the Person model, as for CSV and XML. Writes use the safe
    dumper, which quotes any string that would otherwise resolve to another
    type, with keys in field order.
    """

    @property
    def name(self) -> str:
        """Return the format identifier."""
        return "yaml"

    def read(self, path: PathLike) -> list[Person]:
        with open(path, encoding="utf-8") as file:
            data = yaml.load(file, Loader=yaml.BaseLoader)

        if not isinstance(data, list):
            raise ValueError(f"Expected a YAML sequence in {path}, got {type(data).__name__}")

        people = [Person.from_record(entry) for entry in data]
        logger.debug("Read %d records from %s", len(people), path)
        return people

    def write(self, people: list[Person], path: PathLike) -> None:
        data = [person.to_record() for person in people]
        with open(path, "w", encoding="utf-8") as file:
            yaml.safe_dump(data, file, sort_keys=False, allow_unicode=True)

        logger.debug("Wrote %d records to %s", len(people), path)
