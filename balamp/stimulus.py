from typing import Any, NamedTuple, Sequence, Tuple

import jax


class Impulse(NamedTuple):
    time: float
    increment: Any  # pytree with the same structure as the state


def impulse(time, increment):
    """
    Generates a one-shot impulse that kicks the state by a fixed amount.
    A dirac input cannot be sampled by the solver, so its effect is delivered
    as a jump of the state at the time it occurs.
    Args:
        time (float): the time at which the impulse is delivered
        increment (Any): the amount added to each state variable
    Returns:
        (Impulse): the impulse
    """
    return Impulse(float(time), increment)


def tstops(impulses: Sequence[Impulse], tspan: Tuple[float, float]):
    """Times the integrator must land on exactly, sorted and without duplicates."""
    t0, t1 = tspan
    return sorted(set(s.time for s in impulses if t0 <= s.time <= t1))


def at(impulses: Sequence[Impulse], time: float):
    return [s for s in impulses if s.time == time]


def apply(state, impulses: Sequence[Impulse]):
    if not impulses:
        return state
    increments = [s.increment for s in impulses]
    return jax.tree_util.tree_map(lambda x, *dx: x + sum(dx), state, *increments)
