"""XML format adapter.

Files have a `people` root element holding one `person` element per record,
with the record fields stored as the text of child elements:

    <people>
      <person>
        <id>1</id>
        <name>Alice</name>
        <address>1 Main St</address>
        <age>30.5</age>
      </person>
    </people>

Carriage returns in text are written as `&#13;` so that XML end-of-line
normalisation does not turn them into newlines. Characters XML 1.0 cannot
represent at all (C0 controls other than tab, newline and carriage return)
are rejected on write.
"""

import logging
import re
import struct
import xml.etree.ElementTree as ET

from format_benchmark.formats.base import BaseFormat, PathLike
from format_benchmark.models import Person

logger = logging.getLogger(__name__)

ROOT_TAG = "people"
RECORD_TAG = "person"
XML_DECLARATION = "<?xml version='1.0' encoding='utf-8'?>\n"

INVALID_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def _checked_text(value: str) -> str:
    match = INVALID_XML_CHARS.search(value)
    if match:
        raise ValueError(f"Character {match.group()!r} cannot be represented in XML text")
    return value


def to_single_precision(value: float) -> float:
    """Round a float to the nearest IEEE-754 single precision value."""
    return struct.unpack("f", struct.pack("f", value))[0]


class XmlFormat(BaseFormat):
    """Reads and writes `people`/`person` element trees.

    Attributes:
        single_precision_age: Narrow `age` to single precision on read.
            Off by default; ages are read at full double precision like in
            every other format.
    """

    def __init__(self, single_precision_age: bool = False):
        self.single_precision_age = single_precision_age

    @property
    def name(self) -> str:
        """Return the format identifier."""
        return "xml"

    def read(self, path: PathLike) -> list[Person]:
        root = ET.parse(path).getroot()
        if root.tag != ROOT_TAG:
            raise ValueError(f"Expected <{ROOT_TAG}> root element in {path}, got <{root.tag}>")

        people = [self._parse_person(element) for element in root.findall(RECORD_TAG)]
        logger.debug("Read %d records from %s", len(people), path)
        return people

    def write(self, people: list[Person], path: PathLike) -> None:
        root = ET.Element(ROOT_TAG)
        for person in people:
            element = ET.SubElement(root, RECORD_TAG)
            ET.SubElement(element, "id").text = str(person.id)
            ET.SubElement(element, "name").text = _checked_text(person.name)
            ET.SubElement(element, "address").text = _checked_text(person.address)
            ET.SubElement(element, "age").text = repr(person.age)

        body = ET.tostring(root, encoding="unicode").replace("\r", "&#13;")
        with open(path, "w", encoding="utf-8", newline="") as file:
            file.write(XML_DECLARATION)
            file.write(body)
            file.write("\n")
        logger.debug("Wrote %d records to %s", len(people), path)

    def _parse_person(self, element: ET.Element) -> Person:
        """Build a Person from the child elements of a `person` element."""
        record = {}
        for field in Person.FIELDS:
            child = element.find(field)
            if child is None:
                raise ValueError(f"<{RECORD_TAG}> element is missing <{field}>")
            record[field] = child.text or ""

        if self.single_precision_age:
            record["age"] = to_single_precision(float(record["age"]))

        return Person.from_record(record)
