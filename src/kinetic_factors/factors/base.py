"""Base abstract class for kinetic factors."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import MutableSequence, Sequence
from typing import Any, ClassVar

import numpy as np

from kinetic_factors.exceptions import ContractViolationError
from kinetic_factors.utils.config import ParameterSource, get_param

logger = logging.getLogger(__name__)


class AbstractKineticFactor(ABC):
    """Abstract base class for kinetic factors.

    A kinetic factor is one multiplicative term of a reaction rate that
    depends on a single solute concentration. Every factor can hold its
    parameters in one of two places:

    - on the instance, set by :meth:`init_from_config`, used when every
      agent shares the same rate law;
    - in a flat parameter table owned by the caller, written by
      :meth:`init_into_array` and read at ``param_table[index:index +
      num_params]``, used when each agent carries its own values.

    :meth:`rate` and :meth:`derivative` evaluate with instance parameters
    when ``param_table`` is None and with the table slots otherwise. Both
    paths feed the same ``_value``/``_diff`` formulas, so they agree to
    floating-point equality. The table is only borrowed for the duration of
    a call and is never resized, retained or written by evaluation.

    Subclasses declare ``num_params`` and ``param_names`` (in packing order)
    and implement ``_value`` and ``_diff``.

    Attributes:
        num_params: Number of parameter slots this factor occupies.
        param_names: Configuration names of the parameters, in packing order.
    """

    num_params: ClassVar[int] = 0
    param_names: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if len(cls.param_names) != cls.num_params:
            raise TypeError(
                f"{cls.__name__} declares num_params={cls.num_params} "
                f"but param_names={cls.param_names}"
            )

    def __init__(self, params: Sequence[float] | None = None):
        """Initialize kinetic factor.

        Args:
            params: Optional parameter values in packing order. When omitted
                the factor has no instance parameters until
                :meth:`init_from_config` is called.
        """
        self._params: tuple[np.float64, ...] | None = None
        if params is not None:
            self.set_parameters(params)

    @classmethod
    def declare_parameter_count(cls) -> int:
        """Number of slots to reserve for this factor in a parameter table."""
        return cls.num_params

    @classmethod
    def from_config(cls, config: ParameterSource) -> AbstractKineticFactor:
        """Create a factor holding its parameters on the instance."""
        factor = cls()
        factor.init_from_config(config)
        return factor

    @property
    def parameters(self) -> tuple[float, ...] | None:
        """Instance parameters in packing order, or None if not initialized."""
        if self._params is None:
            return None
        return tuple(float(p) for p in self._params)

    def set_parameters(self, params: Sequence[float]) -> None:
        """Replace the instance parameters.

        Raises:
            ContractViolationError: If the number of values is wrong.
        """
        values = tuple(np.float64(p) for p in params)
        if len(values) != self.num_params:
            raise ContractViolationError(
                f"{self.__class__.__name__} expects {self.num_params} parameters, got {len(values)}"
            )
        self._params = values

    def read_config(self, config: ParameterSource) -> tuple[float, ...]:
        """Look up every parameter by name, in packing order.

        Raises:
            ConfigurationError: If a parameter is missing or not numeric.
        """
        return tuple(get_param(config, name) for name in self.param_names)

    def init_from_config(self, config: ParameterSource) -> None:
        """Read parameters from configuration and store them on the instance.

        All values are read before any is stored, so a failed lookup leaves
        the previous instance parameters untouched.

        Args:
            config: Configuration source holding the named parameters.

        Raises:
            ConfigurationError: If a parameter is missing or not numeric.
        """
        values = self.read_config(config)
        self.set_parameters(values)
        logger.debug(
            f"Initialized {self.__class__.__name__}: "
            + ", ".join(f"{n}={v}" for n, v in zip(self.param_names, values))
        )

    def init_into_array(
        self,
        config: ParameterSource,
        param_table: MutableSequence[float] | np.ndarray,
        index: int,
    ) -> None:
        """Read parameters from configuration and write them into a table.

        Writes ``param_table[index:index + num_params]`` in packing order.
        Instance parameters are left untouched.

        Args:
            config: Configuration source holding the named parameters.
            param_table: Caller-owned flat parameter table.
            index: First slot reserved for this factor.

        Raises:
            ConfigurationError: If a parameter is missing or not numeric.
            ContractViolationError: If the slots fall outside the table.
        """
        values = self.read_config(config)
        self._check_slots(param_table, index)
        for offset, value in enumerate(values):
            param_table[index + offset] = value

    def rate(
        self,
        solute: float,
        param_table: Sequence[float] | np.ndarray | None = None,
        index: int = 0,
    ) -> float:
        """Value of the factor at the given solute concentration.

        Args:
            solute: Solute concentration (non-negative).
            param_table: Flat parameter table; instance parameters are used
                when None.
            index: First slot of this factor in ``param_table``.

        Returns:
            Factor value. Degenerate parameters give inf or nan.
        """
        params = self._resolve(param_table, index)
        return float(self._value(np.float64(solute), *params))

    def derivative(
        self,
        solute: float,
        param_table: Sequence[float] | np.ndarray | None = None,
        index: int = 0,
    ) -> float:
        """First derivative of :meth:`rate` with respect to the solute.

        Args:
            solute: Solute concentration (non-negative).
            param_table: Flat parameter table; instance parameters are used
                when None.
            index: First slot of this factor in ``param_table``.

        Returns:
            Derivative value. Degenerate parameters give inf or nan.
        """
        params = self._resolve(param_table, index)
        return float(self._diff(np.float64(solute), *params))

    @staticmethod
    @abstractmethod
    def _value(solute: np.float64, *params: np.float64) -> np.float64:
        """Closed-form rate law."""
        raise NotImplementedError("Subclasses must implement _value()")

    @staticmethod
    @abstractmethod
    def _diff(solute: np.float64, *params: np.float64) -> np.float64:
        """Closed-form derivative of the rate law."""
        raise NotImplementedError("Subclasses must implement _diff()")

    def validate_parameters(
        self,
        param_table: Sequence[float] | np.ndarray | None = None,
        index: int = 0,
    ) -> bool:
        """Check that parameters are positive, finite physical constants.

        Evaluation never performs this check; it is meant for configuration
        time.

        Returns:
            True if parameters are valid, False otherwise.
        """
        params = self._resolve(param_table, index)
        for name, value in zip(self.param_names, params):
            if not np.isfinite(value) or value <= 0:
                logger.error(f"{self.__class__.__name__}: {name} must be positive, got {value}")
                return False
        return True

    def _check_slots(self, param_table: Sequence[float] | np.ndarray, index: int) -> None:
        if index < 0 or index + self.num_params > len(param_table):
            raise ContractViolationError(
                f"{self.__class__.__name__} needs slots [{index}, {index + self.num_params}) "
                f"but the parameter table has length {len(param_table)}"
            )

    def _resolve(
        self,
        param_table: Sequence[float] | np.ndarray | None,
        index: int,
    ) -> tuple[np.float64, ...]:
        if param_table is None:
            if self._params is None:
                raise ContractViolationError(
                    f"{self.__class__.__name__} has no instance parameters; "
                    "call init_from_config() or pass a parameter table"
                )
            return self._params
        self._check_slots(param_table, index)
        return tuple(np.float64(param_table[index + k]) for k in range(self.num_params))

    def __repr__(self) -> str:
        if self._params is None:
            return f"{self.__class__.__name__}(uninitialized)"
        values = ", ".join(f"{n}={float(v)}" for n, v in zip(self.param_names, self._params))
        return f"{self.__class__.__name__}({values})"


__all__ = ["AbstractKineticFactor"]
