"""
Closed form amplification by recurrent excitation ("Hebbian" amplification).

A single excitatory mode with self coupling g < 1 integrates a step input that
is switched off at t_switch. Its response rises towards 1 / (1 - g) with rate
(1 - g), then decays with the same rate. With g = 0.75 the response is four
times larger, and four times slower, than the uncoupled one (g = 0).
"""
import jax.numpy as jnp

from . import metrics

GAIN = 0.75


def rise_and_decay(gain, t_switch=15.0, t_end=30.0, h=0.001):
    """
    Args:
        gain (float): recurrent self coupling, must be smaller than 1
        t_switch (float): time at which the input is switched off
        t_end (float): final time
        h (float): sampling step
    Returns:
        (Tuple[jnp.ndarray, jnp.ndarray]): the sampling times and the response.
        Both segments are sampled at t_switch.
    """
    if not gain < 1:
        raise ValueError("The gain must be smaller than 1, got {}".format(gain))
    leak = 1.0 - gain
    rise_times = jnp.linspace(0.0, t_switch, int(round(t_switch / h)) + 1)
    decay_times = jnp.linspace(0.0, t_end - t_switch, int(round((t_end - t_switch) / h)) + 1)

    rise = (1.0 - jnp.exp(-leak * rise_times)) / leak
    decay = rise[-1] * jnp.exp(-leak * decay_times)

    times = jnp.concatenate([rise_times, decay_times + t_switch])
    return times, jnp.concatenate([rise, decay])


def trajectories(gain=GAIN, t_switch=15.0, t_end=30.0, h=0.001):
    times, baseline = rise_and_decay(0.0, t_switch, t_end, h)
    _, amplified = rise_and_decay(gain, t_switch, t_end, h)
    return times, baseline, amplified


def check(baseline, amplified, factor=4.0, rtol=0.1, h=0.001):
    """Compares the Riemann sums of two responses sampled h apart."""
    return metrics.check_amplification(
        metrics.riemann(baseline, h),
        metrics.riemann(amplified, h),
        factor=factor,
        rtol=rtol,
    )


def compare(gain=GAIN, factor=4.0, rtol=0.1, h=0.001):
    _, baseline, amplified = trajectories(gain, h=h)
    return check(baseline, amplified, factor=factor, rtol=rtol, h=h)
