"""TOML format adapter."""

import logging

import tomli
import tomli_w

from format_benchmark.formats.base import BaseFormat, PathLike
from format_benchmark.models import Person

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "data"


class TomlFormat(BaseFormat):
    """Reads and writes an array of tables, one table per person.

    The same table name is used for reading and writing, so a written file
    can always be read back:

        [[data]]
        id = 1
        name = "Alice"
        address = "1 Main St"
        age = 30.5

    Attributes:
        table: Name of the array of tables holding the records.
    """

    def __init__(self, table: str = DEFAULT_TABLE):
        self.table = table

    @property
    def name(self) -> str:
        """Return the format identifier."""
        return "toml"

    def read(self, path: PathLike) -> list[Person]:
        with open(path, "rb") as file:
            document = tomli.load(file)

        if self.table not in document:
            raise ValueError(f"TOML document {path} has no [[{self.table}]] table array")
        entries = document[self.table]
        if not isinstance(entries, list):
            raise ValueError(f"Expected [[{self.table}]] in {path} to be an array of tables")

        people = [Person.from_record(entry) for entry in entries]
        logger.debug("Read %d records from %s", len(people), path)
        return people

    def write(self, people: list[Person], path: PathLike) -> None:
        document = {self.table: [person.to_record() for person in people]}
        with open(path, "wb") as file:
            tomli_w.dump(document, file)

        logger.debug("Wrote %d records to %s", len(people), path)
