import numpy as np
import matplotlib.pyplot as plt
from matplotlib.ticker import MultipleLocator

from . import model


def plot_trajectories(baseline, amplified, **kwargs):
    """Summed rate r_e + r_i of the unamplified and the amplified network."""
    fig, ax = plt.subplots(1, 1, figsize=(kwargs.pop("figsize", None) or (8, 5)))
    linewidth = kwargs.pop("linewidth", 5)
    xlim = kwargs.pop("xlim", (-1, 10))
    ylim = kwargs.pop("ylim", (0, 2))

    ax.plot(
        np.asarray(amplified.t),
        np.asarray(model.summed_rate(amplified.x)),
        color="red",
        linewidth=linewidth,
        label="Amplification: 4x",
        **kwargs
    )
    ax.plot(
        np.asarray(baseline.t),
        np.asarray(model.summed_rate(baseline.x)),
        color="blue",
        linewidth=linewidth,
        label="Amplification: 1x",
        **kwargs
    )
    ax.set_xlim(*xlim)
    ax.set_ylim(*ylim)
    ax.xaxis.set_major_locator(MultipleLocator(1))
    ax.set_xlabel("Time [τ]")
    ax.set_ylabel("rₑ")
    ax.legend(loc="upper right")
    return fig, ax


def plot_hebbian(times, baseline, amplified, **kwargs):
    fig, ax = plt.subplots(1, 1, figsize=(kwargs.pop("figsize", None) or (8, 5)))
    linewidth = kwargs.pop("linewidth", 5)
    ylim = kwargs.pop("ylim", (0, 5))

    times = np.asarray(times)
    ax.plot(
        times,
        np.asarray(baseline),
        color="blue",
        linewidth=linewidth,
        label="Amplification: 1x",
        **kwargs
    )
    ax.plot(
        times,
        np.asarray(amplified),
        color="red",
        linewidth=linewidth,
        label="Amplification: 4x",
        **kwargs
    )
    ax.set_xlim(times[0], times[-1])
    ax.set_ylim(*ylim)
    ax.xaxis.set_major_locator(MultipleLocator(5))
    ax.legend(loc="upper right")
    return fig, ax
