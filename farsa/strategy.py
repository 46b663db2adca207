"""Interfaces for the pluggable parts of the algorithm."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from farsa.enums import DCStatus, LSStatus
from farsa.reporter import Reporter


class Strategy(ABC):
    """A component of the algorithm with its own options and initialization."""

    @abstractmethod
    def add_options(self, options: Any, reporter: Reporter) -> None:
        """Register this strategy's options."""

    @abstractmethod
    def get_options(self, options: Any, reporter: Reporter) -> None:
        """Read this strategy's option values."""

    @abstractmethod
    def initialize(self, options: Any, quantities: Any, reporter: Reporter) -> None:
        """Prepare the strategy for a run."""

    @abstractmethod
    def name(self) -> str:
        """Name of the strategy."""


class DirectionComputation(Strategy):
    """Strategy that computes a search direction; ``status`` holds its outcome."""

    def __init__(self) -> None:
        self.status: DCStatus = DCStatus.UNSET

    @abstractmethod
    def iteration_header(self) -> str:
        """Column headings printed in the iteration log."""

    @abstractmethod
    def iteration_null_values(self) -> str:
        """Placeholder columns printed when no values are available."""

    @abstractmethod
    def compute_direction(self, options: Any, quantities: Any, reporter: Reporter, strategies: Any) -> None:
        """Compute a direction and set ``status``."""


class LineSearch(Strategy):
    """Strategy that chooses a step along a direction; ``status`` holds its outcome."""

    def __init__(self) -> None:
        self.status: LSStatus = LSStatus.UNSET

    @abstractmethod
    def iteration_header(self) -> str:
        """Column headings printed in the iteration log."""

    @abstractmethod
    def iteration_null_values(self) -> str:
        """Placeholder columns printed when no values are available."""

    @abstractmethod
    def run_line_search(self, options: Any, quantities: Any, reporter: Reporter, strategies: Any) -> None:
        """Run the line search and set ``status``."""