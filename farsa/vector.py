"""Dense vector of floats with cached extreme values and norms."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Optional

from farsa.enums import ReportLevel, ReportType
from farsa.exceptions import VectorAssertException, VectorException, require
from farsa.reporter import Reporter

_MAX = "max"
_MIN = "min"
_NORM1 = "norm1"
_NORM2 = "norm2"
_NORM_INF = "norm_inf"


def _zero_cache() -> dict[str, float]:
    return {_MAX: 0.0, _MIN: 0.0, _NORM1: 0.0, _NORM2: 0.0, _NORM_INF: 0.0}


class Vector:
    """A sequence of floats; max, min and norms are cached until modified."""

    def __init__(self, length: Optional[int] = None, value: float = 0.0) -> None:
        if length is None:
            self._values: list[float] = []
            self._cache: dict[str, float] = {}
            return
        require(length >= 0, VectorAssertException, "length must be nonnegative", "length >= 0")
        value = float(value)
        self._values = [value] * length
        self._cache = {
            _MAX: value,
            _MIN: value,
            _NORM1: length * abs(value),
            _NORM2: math.sqrt(length * value**2),
            _NORM_INF: abs(value),
        }

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> float:
        return self._values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"Vector({self._values!r})"

    @property
    def values(self) -> tuple[float, ...]:
        """The elements, read only."""
        return tuple(self._values)

    def _check_length(self, other: Vector) -> None:
        require(
            len(self) == len(other),
            VectorAssertException,
            "vector lengths differ",
            "length == other.length",
        )

    def print(self, reporter: Reporter, name: str) -> None:
        """Print every element, one per line, labelled with ``name``."""
        for index, value in enumerate(self._values):
            reporter.printf(ReportType.SOLVER, ReportLevel.BASIC, "%s[%6d]=%+23.16e\n", name, index, value)

    def make_new_copy(self) -> Vector:
        """Return a new vector with the same elements."""
        vector = Vector(len(self))
        vector.copy(self)
        return vector

    def make_new_linear_combination(self, scalar1: float, scalar2: float, other_vector: Vector) -> Vector:
        """Return ``scalar1 * self + scalar2 * other_vector`` as a new vector."""
        vector = Vector(len(self))
        vector.linear_combination(scalar1, self, scalar2, other_vector)
        return vector

    def set_from_file(self, file_name: str) -> None:
        """Read a length followed by that many values from a text file."""
        try:
            with open(file_name, encoding="utf-8") as handle:
                tokens = handle.read().split()
        except OSError as error:
            raise VectorException("Failed to open input file.", file_name, 0) from error
        if not tokens:
            raise VectorException("Length not read.", file_name, 0)
        try:
            length = int(tokens[0])
        except ValueError as error:
            raise VectorException("Length not read.", file_name, 0) from error
        values: list[float] = []
        for token in tokens[1:]:
            if len(values) >= length:
                break
            try:
                values.append(float(token))
            except ValueError:
                break
        if len(values) < length:
            raise VectorException("Not all vector elements have been read.", file_name, 0)
        self._values = values
        self._cache = {}

    def set_length(self, length: int) -> None:
        """Resize to ``length`` elements, all zero."""
        require(length >= 0, VectorAssertException, "length must be nonnegative", "length >= 0")
        self._values = [0.0] * length
        self._cache = _zero_cache()

    def set(self, index: int, value: float) -> None:
        """Set one element."""
        require(index >= 0, VectorAssertException, "index is negative", "index >= 0")
        require(index < len(self), VectorAssertException, "index out of range", "index < length")
        self._values[index] = float(value)
        self._cache = {}

    def copy(self, other_vector: Vector) -> None:
        """Copy the elements of another vector of the same length."""
        self._check_length(other_vector)
        self._values = list(other_vector._values)
        self._cache = {}

    def copy_array(self, array: Iterable[float]) -> None:
        """Copy the first ``len(self)`` values of ``array``."""
        items = [float(item) for item in array]
        require(
            len(items) >= len(self),
            VectorAssertException,
            "array is shorter than vector",
            "len(array) >= length",
        )
        self._values = items[: len(self)]
        self._cache = {}

    def scale(self, scalar: float) -> None:
        """Multiply every element by ``scalar``."""
        if scalar == 0.0:
            self._values = [0.0] * len(self)
        elif scalar != 1.0:
            self._values = [scalar * value for value in self._values]
        old = self._cache
        new: dict[str, float] = {}
        if scalar >= 0.0:
            for key in (_MAX, _MIN):
                if key in old:
                    new[key] = scalar * old[key]
        elif _MAX in old and _MIN in old:
            new[_MAX] = scalar * old[_MIN]
            new[_MIN] = scalar * old[_MAX]
        for key in (_NORM1, _NORM2, _NORM_INF):
            if key in old:
                new[key] = abs(scalar) * old[key]
        self._cache = new

    def add_scaled_vector(self, scalar: float, other_vector: Vector) -> None:
        """Add ``scalar * other_vector`` to this vector."""
        self._check_length(other_vector)
        self._values = [mine + scalar * theirs for mine, theirs in zip(self._values, other_vector._values)]
        self._cache = {}

    def linear_combination(self, scalar1: float, vector1: Vector, scalar2: float, vector2: Vector) -> None:
        """Set this vector to ``scalar1 * vector1 + scalar2 * vector2``."""
        self._check_length(vector1)
        self._check_length(vector2)
        if scalar1 != 0.0 and scalar2 != 0.0:
            self._values = [scalar1 * a + scalar2 * b for a, b in zip(vector1._values, vector2._values)]
        elif scalar1 != 0.0:
            self._values = [scalar1 * a for a in vector1._values]
        else:
            self._values = [scalar2 * b for b in vector2._values]
        self._cache = _zero_cache() if scalar1 == 0.0 and scalar2 == 0.0 else {}

    def inner_product(self, other_vector: Vector) -> float:
        """Return the dot product with another vector."""
        self._check_length(other_vector)
        return sum(a * b for a, b in zip(self._values, other_vector._values))

    def _cached(self, key: str, compute) -> float:
        if key not in self._cache:
            self._cache[key] = compute()
        return self._cache[key]

    def _require_nonempty(self) -> None:
        require(len(self) > 0, VectorAssertException, "vector is empty", "length > 0")

    def max(self) -> float:
        """Largest element."""
        if _MAX not in self._cache:
            self._require_nonempty()
        return self._cached(_MAX, lambda: max(self._values))

    def min(self) -> float:
        """Smallest element."""
        if _MIN not in self._cache:
            self._require_nonempty()
        return self._cached(_MIN, lambda: min(self._values))

    def norm1(self) -> float:
        """Sum of absolute values."""
        return self._cached(_NORM1, lambda: sum(abs(value) for value in self._values))

    def norm2(self) -> float:
        """Euclidean norm."""
        return self._cached(_NORM2, lambda: math.sqrt(sum(value * value for value in self._values)))

    def norm_inf(self) -> float:
        """Largest absolute value."""
        return self._cached(_NORM_INF, lambda: max((abs(value) for value in self._values), default=0.0))