"""Tests for data models."""

import pytest
from pydantic import ValidationError

from format_benchmark.models import Person, UINT32_MAX


class TestPerson:
    """Tests for Person model."""

    def test_create_with_all_fields(self):
        """Test creating a Person with all fields."""
        person = Person(id=1, name="Alice", address="1 Main St", age=30.5)
        assert person.id == 1
        assert person.name == "Alice"
        assert person.address == "1 Main St"
        assert person.age == 30.5

    def test_text_values_are_converted(self):
        """Test text values from CSV/XML are converted to typed fields."""
        person = Person(id="7", name="Bob", address="X", age="40")
        assert person.id == 7
        assert isinstance(person.age, float)
        assert person.age == 40.0

    def test_to_record_field_order(self):
        """Test to_record keeps declaration order."""
        person = Person(id=1, name="Alice", address="1 Main St", age=30.5)
        assert list(person.to_record()) == ["id", "name", "address", "age"]
        assert tuple(person.to_record()) == Person.FIELDS

    def test_from_record_ignores_extra_keys(self):
        """Test unknown keys are ignored."""
        person = Person.from_record(
            {"id": 1, "name": "A", "address": "B", "age": 2, "email": "a@example.com"}
        )
        assert person == Person(id=1, name="A", address="B", age=2)

    def test_is_immutable(self):
        """Test records cannot be modified after construction."""
        person = Person(id=1, name="Alice", address="1 Main St", age=30.5)
        with pytest.raises(ValidationError):
            person.age = 31.0

    def test_equality_by_value(self):
        """Test records with the same fields compare equal."""
        a = Person(id=1, name="Alice", address="1 Main St", age=30.5)
        b = Person(id=1, name="Alice", address="1 Main St", age=30.5)
        assert a == b


class TestPersonValidation:
    """Tests for Person validation failures."""

    def test_missing_field_raises(self):
        """Test a missing field is rejected, not defaulted."""
        with pytest.raises(ValidationError):
            Person(id=1, name="Alice", address="1 Main St")

    def test_negative_id_raises(self):
        """Test ids must be unsigned."""
        with pytest.raises(ValidationError):
            Person(id=-1, name="A", address="B", age=1.0)

    def test_id_upper_bound(self):
        """Test ids must fit in 32 bits."""
        assert Person(id=UINT32_MAX, name="A", address="B", age=1.0).id == UINT32_MAX
        with pytest.raises(ValidationError):
            Person(id=UINT32_MAX + 1, name="A", address="B", age=1.0)

    def test_non_numeric_age_raises(self):
        """Test an unconvertible age is rejected."""
        with pytest.raises(ValidationError):
            Person(id=1, name="A", address="B", age="old")

    def test_boolean_id_raises(self):
        """Test a boolean id is rejected rather than read as 1."""
        with pytest.raises(ValidationError):
            Person(id=True, name="A", address="B", age=1.0)

    def test_boolean_age_raises(self):
        """Test a boolean age is rejected rather than read as 0.0."""
        with pytest.raises(ValidationError):
            Person(id=1, name="A", address="B", age=False)
