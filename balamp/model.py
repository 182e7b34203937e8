from typing import NamedTuple

import jax.numpy as jnp

from .params import Params


class State(NamedTuple):
    r_e: jnp.ndarray
    r_i: jnp.ndarray


# state increment delivered by the impulse at t=0
IMPULSE = State(0.5, 0.5)


def init():
    return State(jnp.zeros(()), jnp.zeros(()))


def excitatory_input(t):
    # a sampled dirac delta: zero wherever the solver evaluates it
    return jnp.zeros_like(t)


def inhibitory_input(t):
    return jnp.zeros_like(t)


def step(state: State, t: float, params: Params) -> State:
    """Time derivative of the two-population linear rate model.
    The state is expressed in the basis where the inhibitory mode r_i
    feeds the excitatory mode r_e with weight w * (k_i + 1).
    Args:
        state (State): firing rates (r_e, r_i)
        t (float): time, in units of tau
        params (Params): synaptic weight, inhibition factor and time constant
    Returns:
        (State): the derivatives (dr_e/dt, dr_i/dt)
    """
    r_e, r_i = state
    w, k_i, tau = params
    i_e = excitatory_input(t)
    i_i = inhibitory_input(t)

    d_r_e = ((w - k_i * w - 1) * r_e + w * (k_i + 1) * r_i + (i_i + i_e) / 2) / tau
    d_r_i = (-r_i + (i_e - i_i) / 2) / tau
    return State(d_r_e, d_r_i)


def summed_rate(state: State) -> jnp.ndarray:
    return state.r_e + state.r_i
