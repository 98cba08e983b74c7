"""Shared fixtures for format tests."""

import pytest

from format_benchmark.models import Person


SAMPLE_FILES = {
    "csv": (
        "id,name,address,age\n"
        "1,Alice,1 Main St,30.5\n"
        "2,Bob,\"12 High St, Springfield\",40\n"
        "3,Carol,Flat 3,0.25\n"
    ),
    "json": (
        '[{"id": 1, "name": "Alice", "address": "1 Main St", "age": 30.5},'
        ' {"id": 2, "name": "Bob", "address": "12 High St, Springfield", "age": 40},'
        ' {"id": 3, "name": "Carol", "address": "Flat 3", "age": 0.25}]\n'
    ),
    "toml": (
        "[[data]]\nid = 1\nname = \"Alice\"\naddress = \"1 Main St\"\nage = 30.5\n\n"
        "[[data]]\nid = 2\nname = \"Bob\"\naddress = \"12 High St, Springfield\"\nage = 40.0\n\n"
        "[[data]]\nid = 3\nname = \"Carol\"\naddress = \"Flat 3\"\nage = 0.25\n"
    ),
    "xml": (
        "<?xml version=\"1.0\" encoding=\"UTF-8\"?>\n"
        "<people>\n"
        "  <person><id>1</id><name>Alice</name><address>1 Main St</address><age>30.5</age></person>\n"
        "  <person><id>2</id><name>Bob</name><address>12 High St, Springfield</address><age>40</age></person>\n"
        "  <person><id>3</id><name>Carol</name><address>Flat 3</address><age>0.25</age></person>\n"
        "</people>\n"
    ),
    "yaml": (
        "- id: 1\n  name: Alice\n  address: 1 Main St\n  age: 30.5\n"
        "- id: 2\n  name: Bob\n  address: 12 High St, Springfield\n  age: 40\n"
        "- id: 3\n  name: Carol\n  address: Flat 3\n  age: 0.25\n"
    ),
}


@pytest.fixture
def sample_people():
    """Records matching every entry of SAMPLE_FILES."""
    return [
        Person(id=1, name="Alice", address="1 Main St", age=30.5),
        Person(id=2, name="Bob", address="12 High St, Springfield", age=40.0),
        Person(id=3, name="Carol", address="Flat 3", age=0.25),
    ]


@pytest.fixture
def input_dir(tmp_path):
    """Directory holding data.<ext> for every supported format."""
    directory = tmp_path / "temp" / "input_files"
    directory.mkdir(parents=True)
    for extension, content in SAMPLE_FILES.items():
        (directory / f"data.{extension}").write_text(content, encoding="utf-8")
    return directory
