"""CSV format adapter."""

import csv
import logging

from format_benchmark.formats.base import BaseFormat, PathLike
from format_benchmark.models import Person

logger = logging.getLogger(__name__)


class CsvFormat(BaseFormat):
    """Reads and writes comma-separated rows with an `id,name,address,age` header.

    The header row is required on read and may list the columns in any
    order; extra columns are ignored. A header missing any of the four
    record columns fails before any row is read.

    Attributes:
        write_header: Emit the header row on write. Disable to produce
            header-less files, which this adapter cannot read back.
    """

    def __init__(self, write_header: bool = True):
        self.write_header = write_header

    @property
    def name(self) -> str:
        """Return the format identifier."""
        return "csv"

    def read(self, path: PathLike) -> list[Person]:
        with open(path, newline="", encoding="utf-8") as file:
            reader = csv.DictReader(file)
            header = reader.fieldnames or []
            missing = [column for column in Person.FIELDS if column not in header]
            if missing:
                raise ValueError(
                    f"CSV header in {path} is missing required column(s): {', '.join(missing)}"
                )
            people = [Person.from_record(row) for row in reader]

        logger.debug("Read %d records from %s", len(people), path)
        return people

    def write(self, people: list[Person], path: PathLike) -> None:
        with open(path, "w", newline="", encoding="utf-8") as file:
            writer = csv.writer(file)
            if self.write_header:
                writer.writerow(Person.FIELDS)
            writer.writerows(
                (person.id, person.name, person.address, repr(person.age))
                for person in people
            )

        logger.debug("Wrote %d records to %s", len(people), path)
