"""Data model for the benchmarked record.

Every format adapter reads files into a list of `Person` records and writes
such a list back out. Records are immutable: adapters only ever construct new
instances.

Values coming from text-based formats (CSV cells, XML element text) are
converted by Pydantic's lax mode, so `Person(id="1", age="30.5", ...)` is the
same record as `Person(id=1, age=30.5, ...)`. Missing fields or values that
cannot be converted raise `pydantic.ValidationError`.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

UINT32_MAX = 2**32 - 1


class Person(BaseModel):
    """A single person record.

    Attributes:
        id: Unsigned 32-bit identifier. Uniqueness is not enforced.
        name: Person's name.
        address: Postal address.
        age: Age in years, may be fractional.

    Example:
        >>> Person(id=1, name="Alice", address="1 Main St", age=30.5).to_record()
        {'id': 1, 'name': 'Alice', 'address': '1 Main St', 'age': 30.5}
    """

    FIELDS: ClassVar[tuple[str, ...]] = ("id", "name", "address", "age")

    id: int = Field(..., ge=0, le=UINT32_MAX, description="Unsigned 32-bit identifier")
    name: str = Field(..., description="Person's name")
    address: str = Field(..., description="Postal address")
    age: float = Field(..., description="Age in years")

    model_config = ConfigDict(frozen=True)

    @field_validator("id", "age", mode="before")
    @classmethod
    def reject_booleans(cls, v: Any) -> Any:
        """Reject booleans, which lax mode would otherwise read as 0 or 1."""
        if isinstance(v, bool):
            raise ValueError(f"Expected a number, got boolean {v}")
        return v

    def to_record(self) -> dict[str, Any]:
        """Return the fields as a plain dict in declaration order."""
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "age": self.age,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Person":
        """Create a Person from a mapping keyed by field name.

        Keys other than the four record fields are ignored.
        """
        return cls.model_validate(record)
