import logging
import math
from typing import Any, Callable, NamedTuple, Sequence, Tuple

import jax
import jax.numpy as jnp
from jax.experimental import ode

from . import stimulus
from .stimulus import Impulse


class Options(NamedTuple):
    dtmax: float = 0.001  # maximum solver step, and sampling step of the output
    rtol: float = 1e-3
    atol: float = 1e-6
    max_steps: int = 100000  # solver steps between two samples


class Solution(NamedTuple):
    t: jnp.ndarray
    x: Any  # pytree of arrays, one entry per time sample


class SolverError(RuntimeError):
    pass


def grid(t0, t1, h):
    """Uniform sampling times from t0 to t1, both included, with a step of at most h."""
    n = max(1, int(math.ceil((t1 - t0) / h - 1e-9)))
    return jnp.linspace(t0, t1, n + 1, dtype=jnp.result_type(float))


def _all_finite(x):
    return all(bool(jnp.all(jnp.isfinite(v))) for v in jax.tree_util.tree_leaves(x))


def rk45(f: Callable, x, times, *f_args: Any, options: Options = Options()):
    """Adaptive Dormand-Prince 5(4) solution of dx/dt = f(x, t, *f_args) sampled at times."""
    xs = ode.odeint(
        f,
        x,
        times,
        *f_args,
        rtol=options.rtol,
        atol=options.atol,
        mxstep=options.max_steps,
        hmax=options.dtmax
    )
    if not _all_finite(xs):
        raise SolverError(
            "Non-finite state between t={} and t={}, or more than {} steps between samples".format(
                float(times[0]), float(times[-1]), options.max_steps
            )
        )
    return xs


def odeint(
    f: Callable,
    x0: Any,
    tspan: Tuple[float, float],
    *f_args: Any,
    impulses: Sequence[Impulse] = (),
    options: Options = Options()
) -> Solution:
    """
    Solves dx/dt = f(x, t, *f_args) over tspan, sampled every options.dtmax.
    The time span is split at the impulse times, so that the samples land on them exactly:
    at each of them the impulses are applied to the state, and the post-impulse state
    replaces the sample recorded at that time.
    Args:
        f (Callable): the vector field, a pure function of a pytree state
        x0 (Any): the initial state at tspan[0]
        tspan (Tuple[float, float]): initial and final time
        f_args (Any): extra arguments for f, e.g. the physical parameters
        impulses (Sequence[Impulse]): one-shot state kicks delivered during the integration
        options (Options): maximum step, tolerances and step budget
    Returns:
        (Solution): strictly increasing sample times and the state at each of them
    """
    t0, t1 = float(tspan[0]), float(tspan[1])
    if not t1 > t0:
        raise ValueError("The time span must be increasing, got {}".format(tspan))
    stops = stimulus.tstops(impulses, (t0, t1))
    if len(stops) < len(set(s.time for s in impulses)):
        logging.warning("Ignoring impulses outside of the time span {}".format(tspan))

    dtype = jnp.result_type(float)
    x = jax.tree_util.tree_map(lambda v: jnp.asarray(v, dtype=dtype), x0)
    t = t0

    ts = [jnp.asarray([t0], dtype=dtype)]
    xs = [jax.tree_util.tree_map(lambda v: v[None], x)]
    for t_stop in sorted(set(stops) | {t1}):
        if t_stop > t:
            logging.debug("Solving from t={:.3f} to t={:.3f}".format(t, t_stop))
            times = grid(t, t_stop, options.dtmax)
            segment = rk45(f, x, times, *f_args, options=options)
            # the first sample is the initial state, already recorded
            ts.append(times[1:])
            xs.append(jax.tree_util.tree_map(lambda v: v[1:], segment))
            x = jax.tree_util.tree_map(lambda v: v[-1], segment)
            t = t_stop

        kicks = stimulus.at(impulses, t_stop)
        if kicks:
            logging.debug("Applying {} impulse(s) at t={}".format(len(kicks), t_stop))
            x = stimulus.apply(x, kicks)
            xs[-1] = jax.tree_util.tree_map(lambda b, v: b.at[-1].set(v), xs[-1], x)

    t = jnp.concatenate(ts)
    x = jax.tree_util.tree_map(lambda *chunks: jnp.concatenate(chunks), *xs)
    return Solution(t, x)
