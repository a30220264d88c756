"""
densities.py — Density functions the shader can evaluate

This file contains ONLY:
- the DensityFunction interface (anything with evaluate(x) -> ndarray)
- CallableDensity: a user function bound to its parameters
- ScipyDensity: a scipy.stats continuous distribution bound to its parameters
- get_density(): resolve a name / callable / DensityFunction into one

Textbook names ("dnorm", "dt", "dchisq", ...) take textbook parameter names
(mean/sd, df, shape1/shape2, rate, ...) and are translated to scipy's
loc/scale conventions here. Any other scipy.stats continuous distribution is
accepted by its scipy name with scipy's own keyword arguments.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, Union, runtime_checkable

import numpy as np
from scipy import stats

from .errors import DensityEvaluationError, InvalidArgument
from .utils import setup_logger

logger = setup_logger(__name__)


@runtime_checkable
class DensityFunction(Protocol):
    def evaluate(self, x: Any) -> np.ndarray:
        ...


# ============================================================================
# BOUND DENSITIES
# ============================================================================

class CallableDensity:
    """
    A density given as a plain function, evaluated as func(x, **params).

    The function must be vectorised over x (a float ndarray). A scalar result
    is broadcast to the shape of x, which keeps constant densities
    (e.g. ``lambda x: 0.5``) usable.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        params: Optional[Mapping[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        if not callable(func):
            raise InvalidArgument(f"Density must be callable, got {type(func).__name__}")
        self.func = func
        self.params: Mapping[str, Any] = MappingProxyType(dict(params or {}))
        self.name = name or getattr(func, "__name__", type(func).__name__)

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.params.items())
        return f"{type(self).__name__}({self.name}({args}))"

    def evaluate(self, x: Any) -> np.ndarray:
        xs = np.asarray(x, dtype=float)
        try:
            with np.errstate(all="ignore"):
                raw = self.func(xs, **self.params)
            ys = np.asarray(raw, dtype=float)
        except DensityEvaluationError:
            raise
        except Exception as exc:
            raise DensityEvaluationError(f"Evaluating {self!r} failed: {exc}") from exc

        if ys.ndim == 0:
            ys = np.full_like(xs, float(ys))
        if ys.shape != xs.shape:
            raise DensityEvaluationError(
                f"{self!r} returned shape {ys.shape} for input of shape {xs.shape}"
            )

        bad = ~np.isfinite(ys)
        if bad.any():
            first = float(xs[bad].flat[0])
            raise DensityEvaluationError(
                f"{self!r} is not finite at {int(bad.sum())} point(s), first at x={first:.6g}"
            )
        return ys


class ScipyDensity(CallableDensity):
    """A scipy.stats continuous distribution, frozen lazily with its parameters."""

    def __init__(
        self,
        name: str,
        factory: Callable[..., Any],
        params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.factory = factory
        super().__init__(self._pdf, params, name=name)

    def _pdf(self, x: np.ndarray, **params: Any) -> np.ndarray:
        # Parameter errors (missing/unknown names) surface here, at evaluation time.
        return self.factory(**params).pdf(x)


# ============================================================================
# TEXTBOOK NAME -> SCIPY TRANSLATION
# ============================================================================

def _norm(mean=0.0, sd=1.0):
    return stats.norm(loc=mean, scale=sd)


def _t(df):
    return stats.t(df)


def _chisq(df):
    return stats.chi2(df)


def _beta(shape1, shape2):
    return stats.beta(shape1, shape2)


def _exp(rate=1.0):
    return stats.expon(scale=1.0 / rate)


def _gamma(shape, rate=1.0, scale=None):
    if scale is None:
        scale = 1.0 / rate
    return stats.gamma(shape, scale=scale)


def _unif(min=0.0, max=1.0):  # noqa: A002 - textbook parameter names
    return stats.uniform(loc=min, scale=max - min)


def _f(df1, df2):
    return stats.f(df1, df2)


def _lnorm(meanlog=0.0, sdlog=1.0):
    return stats.lognorm(sdlog, scale=math.exp(meanlog))


def _weibull(shape, scale=1.0):
    return stats.weibull_min(shape, scale=scale)


def _cauchy(location=0.0, scale=1.0):
    return stats.cauchy(loc=location, scale=scale)


def _logis(location=0.0, scale=1.0):
    return stats.logistic(loc=location, scale=scale)


DENSITY_ALIASES: Dict[str, Callable[..., Any]] = {
    "dnorm": _norm, "norm": _norm, "normal": _norm,
    "dt": _t, "t": _t,
    "dchisq": _chisq, "chisq": _chisq, "chi2": _chisq,
    "dbeta": _beta, "beta": _beta,
    "dexp": _exp, "exp": _exp, "exponential": _exp,
    "dgamma": _gamma, "gamma": _gamma,
    "dunif": _unif, "unif": _unif, "uniform": _unif,
    "df": _f, "f": _f,
    "dlnorm": _lnorm, "lnorm": _lnorm, "lognormal": _lnorm,
    "dweibull": _weibull, "weibull": _weibull,
    "dcauchy": _cauchy, "cauchy": _cauchy,
    "dlogis": _logis, "logis": _logis, "logistic": _logis,
}


def _scipy_factory(name: str) -> Callable[..., Any]:
    dist = getattr(stats, name, None)
    if isinstance(dist, stats.rv_discrete):
        raise InvalidArgument(f"'{name}' is a discrete distribution; only continuous densities can be shaded")
    if not isinstance(dist, stats.rv_continuous):
        raise InvalidArgument(f"Unknown distribution '{name}'")
    return dist


# ============================================================================
# RESOLUTION
# ============================================================================

DensityLike = Union[str, Callable[..., Any], DensityFunction]


def get_density(dist: DensityLike, params: Optional[Mapping[str, Any]] = None) -> DensityFunction:
    """
    Resolve ``dist`` into a DensityFunction bound to ``params``.

    - a DensityFunction is returned as-is (it already carries its parameters)
    - a string is a textbook alias or a scipy.stats continuous distribution name
    - any other callable is wrapped in CallableDensity
    """
    if isinstance(dist, str):
        key = dist.strip().lower()
        factory = DENSITY_ALIASES.get(key)
        if factory is None:
            factory = _scipy_factory(key)
        logger.debug("Resolved density '%s' with params %s", key, dict(params or {}))
        return ScipyDensity(key, factory, params)

    if isinstance(dist, DensityFunction):
        if params:
            raise InvalidArgument("params cannot be combined with an already-bound DensityFunction")
        return dist

    if callable(dist):
        return CallableDensity(dist, params)

    raise InvalidArgument(f"Cannot use {type(dist).__name__} as a density")
