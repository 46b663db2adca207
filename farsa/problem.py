"""Interface that an optimization problem supplies to the solver."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Sequence


class Problem(ABC):
    """An objective with gradient and Hessian-vector products over grouped variables.

    Subclasses provide the evaluations. An evaluation that cannot be carried
    out raises an exception instead of returning a value.
    """

    def __init__(self, number_of_variables: int = 0, groups: Iterable[Iterable[int]] = ()) -> None:
        if number_of_variables < 0:
            raise ValueError("number of variables must be nonnegative")
        self._number_of_variables = int(number_of_variables)
        self._groups: list[list[int]] = [list(group) for group in groups]

    @property
    def groups(self) -> list[list[int]]:
        """Variable indices of each group (a copy)."""
        return [list(group) for group in self._groups]

    def number_of_groups(self) -> int:
        """Number of variable groups."""
        return len(self._groups)

    def number_of_variables(self) -> int:
        """Number of variables."""
        return self._number_of_variables

    @abstractmethod
    def initial_point(self) -> Sequence[float]:
        """Return the initial iterate."""

    @abstractmethod
    def evaluate_objective(self, x: Sequence[float]) -> float:
        """Return the objective value at ``x``."""

    @abstractmethod
    def evaluate_gradient(self, x: Sequence[float]) -> Sequence[float]:
        """Return the gradient at ``x``."""

    @abstractmethod
    def evaluate_hessian_vector_product(
        self,
        x: Sequence[float],
        groups: Sequence[int],
        v: Sequence[float],
    ) -> Sequence[float]:
        """Return the Hessian at ``x``, restricted to ``groups``, times ``v``."""

    @abstractmethod
    def finalize_solution(self, x: Sequence[float], f: float, g: Sequence[float]) -> None:
        """Receive the final iterate, its objective value and its gradient."""