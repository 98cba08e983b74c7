"""JSON format adapter."""

import json
import logging

from format_benchmark.formats.base import BaseFormat, PathLike
from format_benchmark.models import Person

logger = logging.getLogger(__name__)


class JsonFormat(BaseFormat):
    """Reads and writes a top-level JSON array of person objects."""

    @property
    def name(self) -> str:
        """Return the format identifier."""
        return "json"

    def read(self, path: PathLike) -> list[Person]:
        with open(path, encoding="utf-8") as file:
            data = json.load(file)

        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array in {path}, got {type(data).__name__}")

        people = [Person.from_record(entry) for entry in data]
        logger.debug("Read %d records from %s", len(people), path)
        return people

    def write(self, people: list[Person], path: PathLike) -> None:
        data = [person.to_record() for person in people]
        with open(path, "w", encoding="utf-8") as file:
            json.dump(data, file, ensure_ascii=False)
            file.write("\n")

        logger.debug("Wrote %d records to %s", len(people), path)
