import math
from typing import NamedTuple

import jax.numpy as jnp


class AmplificationCheck(NamedTuple):
    passed: bool
    ratio: float
    factor: float
    rtol: float
    baseline: float
    amplified: float


def riemann(y, h):
    """Integral of y sampled at a uniform step h."""
    return float(jnp.sum(y) * h)


def left_riemann(t, y):
    """Integral of y sampled at the (possibly non uniform) times t."""
    return float(jnp.sum(y[:-1] * jnp.diff(t)))


def isclose(a, b, rtol):
    return abs(a - b) <= rtol * max(abs(a), abs(b))


def check_amplification(baseline, amplified, factor=4.0, rtol=0.01):
    """
    Compares two time integrals. A mismatch is reported, never raised.
    Args:
        baseline (float): the integral of the unamplified response
        amplified (float): the integral of the amplified response
        factor (float): the expected amplification
        rtol (float): relative tolerance of the comparison
    Returns:
        (AmplificationCheck): the verdict, the measured ratio and the tolerance used
    """
    ratio = amplified / baseline if baseline != 0 else math.nan
    passed = isclose(amplified, factor * baseline, rtol)
    return AmplificationCheck(passed, ratio, factor, rtol, baseline, amplified)


def verdict(check):
    if check.passed:
        message = "Integrals are good, amplification OK"
    else:
        message = "Integrals are not good, amplification WRONG"
    return "{} (ratio {:.3f}, expected {:g} within {:g}%)".format(
        message, check.ratio, check.factor, check.rtol * 100
    )
