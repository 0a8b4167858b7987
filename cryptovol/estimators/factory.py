"""
Factory module for creating DVOL estimator instances.

Estimator parameters are gathered in a single DVOLConfig value with
documented defaults; the factory turns a method tag plus a config into a
ready estimator that carries its own parameter payload.
"""

import warnings
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from cryptovol.estimators.base import DEFAULT_ANNUALIZATION_FACTOR, BaseDVOLEstimator
from cryptovol.estimators.ewma import DEFAULT_EWMA_LAMBDA, EWMADVOLEstimator
from cryptovol.estimators.garch import DEFAULT_GARCH_PARAMS, GARCHDVOLEstimator
from cryptovol.estimators.simple import DEFAULT_WINDOW_SIZE, SimpleDVOLEstimator
from cryptovol.types import DVOLMethod, GARCHParams
from cryptovol.utils import ConfigError, InvalidParameterError

MethodName = Union[str, DVOLMethod]


@dataclass(frozen=True)
class DVOLConfig:
    """
    Parameters for all DVOL estimators.

    Attributes:
        method: Default method used when none is given explicitly
        window_size: Rolling window for the simple method (default: 30)
        ewma_lambda: EWMA decay factor (default: 0.94)
        garch_params: GARCH(1,1) coefficients (default: 1e-6, 0.1, 0.85)
        annualization_factor: Periods per year (default: 365)
    """

    method: MethodName = DVOLMethod.EWMA
    window_size: int = DEFAULT_WINDOW_SIZE
    ewma_lambda: float = DEFAULT_EWMA_LAMBDA
    garch_params: GARCHParams = field(default=DEFAULT_GARCH_PARAMS)
    annualization_factor: float = DEFAULT_ANNUALIZATION_FACTOR

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'DVOLConfig':
        """
        Build a config from the ``dvol`` section of a YAML config.

        Missing keys keep their defaults; unknown keys raise ConfigError.
        """
        if not data:
            return cls()

        data = dict(data)
        known = {f.name for f in fields(cls)} | {'garch'}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown dvol config keys: {unknown}")

        garch = data.pop('garch', None)
        if garch is not None:
            if 'garch_params' in data:
                raise ConfigError("Specify either 'garch' or 'garch_params', not both")
            if not isinstance(garch, Mapping):
                raise ConfigError("'garch' config must be a mapping of omega/alpha/beta")
            try:
                data['garch_params'] = GARCHParams(
                    **{k: float(v) for k, v in garch.items()}
                )
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid garch config: {e}") from e
        elif isinstance(data.get('garch_params'), Mapping):
            try:
                data['garch_params'] = GARCHParams(
                    **{k: float(v) for k, v in data['garch_params'].items()}
                )
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid garch_params config: {e}") from e

        if 'method' in data:
            data['method'] = parse_method(data['method'])

        return cls(**data)

    def with_overrides(self, **overrides: Any) -> 'DVOLConfig':
        """Return a copy with some parameters replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'method': _normalize_name(self.method),
            'window_size': self.window_size,
            'ewma_lambda': self.ewma_lambda,
            'garch': {
                'omega': self.garch_params.omega,
                'alpha': self.garch_params.alpha,
                'beta': self.garch_params.beta,
            },
            'annualization_factor': self.annualization_factor,
        }


DEFAULT_CONFIG = DVOLConfig()

# Registry of available estimators
_ESTIMATORS: Dict[str, Type[BaseDVOLEstimator]] = {
    DVOLMethod.SIMPLE.value: SimpleDVOLEstimator,
    DVOLMethod.EWMA.value: EWMADVOLEstimator,
    DVOLMethod.GARCH.value: GARCHDVOLEstimator,
}

# Export the registry as ESTIMATORS
ESTIMATORS = _ESTIMATORS


def _normalize_name(method: MethodName) -> str:
    if isinstance(method, DVOLMethod):
        return method.value
    return str(method).lower().strip()


def parse_method(method: MethodName) -> MethodName:
    """
    Resolve a method name to its registered form.

    Built-in names resolve to their DVOLMethod tag, registered custom
    estimators keep their lowercase name.

    Raises:
        InvalidParameterError: If no estimator is registered under the name
    """
    name = _normalize_name(method)
    if name not in _ESTIMATORS:
        available = ', '.join(_ESTIMATORS)
        raise InvalidParameterError(
            f"Unsupported DVOL method '{method}'. Available methods: {available}"
        )
    try:
        return DVOLMethod(name)
    except ValueError:
        return name


def get_estimator_class(method: MethodName) -> Type[BaseDVOLEstimator]:
    """Look up the estimator class registered for a method name."""
    return _ESTIMATORS[_normalize_name(parse_method(method))]


def get_estimator(
    method: MethodName,
    config: Optional[DVOLConfig] = None
) -> BaseDVOLEstimator:
    """
    Create an estimator instance by method name.

    Args:
        method: Method tag or registered name ('simple', 'ewma', 'garch', ...)
        config: Parameters (default: DVOLConfig())

    Returns:
        Estimator instance

    Raises:
        InvalidParameterError: If the method is unknown or a parameter is invalid
    """
    estimator_class = get_estimator_class(method)
    return estimator_class.from_config(config or DEFAULT_CONFIG)


def list_estimators() -> List[str]:
    """
    Get a list of available method names.

    Returns:
        List of method names
    """
    return list(_ESTIMATORS.keys())


def register_estimator(
    name: str,
    estimator_class: Type[BaseDVOLEstimator],
    override: bool = False
) -> None:
    """
    Register a custom DVOL estimator.

    The class is built through its ``from_config`` classmethod, so it
    should override that when it takes parameters beyond the
    annualization factor.

    Args:
        name: Method name (will be converted to lowercase)
        estimator_class: Estimator class (must inherit from BaseDVOLEstimator)
        override: If True, allow overriding existing estimators

    Raises:
        TypeError: If estimator_class is not a subclass of BaseDVOLEstimator
        ValueError: If name already exists and override=False
    """
    if not (isinstance(estimator_class, type) and issubclass(estimator_class, BaseDVOLEstimator)):
        raise TypeError(
            f"Estimator class must inherit from BaseDVOLEstimator, "
            f"got {estimator_class}"
        )

    name = name.lower().strip()

    if name in _ESTIMATORS and not override:
        raise ValueError(
            f"Estimator '{name}' already registered. "
            f"Use override=True to replace it."
        )

    if name in _ESTIMATORS and override:
        warnings.warn(
            f"Overriding existing estimator '{name}'",
            UserWarning
        )

    _ESTIMATORS[name] = estimator_class


__all__ = [
    'DVOLConfig',
    'DEFAULT_CONFIG',
    'ESTIMATORS',
    'get_estimator',
    'get_estimator_class',
    'list_estimators',
    'parse_method',
    'register_estimator',
]
