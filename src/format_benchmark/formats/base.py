"""Abstract base class for all format adapters."""

import os
from abc import ABC, abstractmethod

from format_benchmark.models import Person

PathLike = str | os.PathLike


class BaseFormat(ABC):
    """Abstract base class that all format adapters must inherit from.

    Defines the interface for reading a file into `Person` records and
    writing records back out. Adapters propagate every failure raised by
    the filesystem or the underlying library; they never substitute
    defaults or return partial results.

    Example:
        class MyFormat(BaseFormat):
            @property
            def name(self) -> str:
                return "my-format"

            def read(self, path: PathLike) -> list[Person]:
                # Implementation here
                pass

            def write(self, people: list[Person], path: PathLike) -> None:
                # Implementation here
                pass
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this format.

        Used in stats files, progress output and logging.
        """
        pass

    @property
    def extension(self) -> str:
        """File extension, without the leading dot."""
        return self.name

    @abstractmethod
    def read(self, path: PathLike) -> list[Person]:
        """Read a file into records.

        Args:
            path: File to read.

        Returns:
            Records in file order.
        """
        pass

    @abstractmethod
    def write(self, people: list[Person], path: PathLike) -> None:
        """Write records to a file, replacing any existing content.

        Args:
            people: Records to write, in order.
            path: Destination file. Its parent directory must exist.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
