from typing import NamedTuple


class Params(NamedTuple):
    w: float
    k_i: float
    tau: float

    @staticmethod
    def from_flags(flags):
        return Params(w=flags.w, k_i=flags.k_i, tau=flags.tau)


# feedforward weight at which the E/I pair amplifies an impulse 4x
W_BALANCED = 4 + 2 / 7

# slider ranges of the original figures, w widened to include W_BALANCED
W_RANGE = (0.0, W_BALANCED)
K_I_RANGE = (1.1, 10.0)
TAU_RANGE = (1.0, 10.0)

DEFAULT = Params(w=W_BALANCED, k_i=1.1, tau=1.0)


def validate(params):
    """Raises a ValueError if the parameter set cannot be integrated.
    Args:
        params (Params): synaptic weight, inhibition factor and time constant
    Returns:
        (Params): the same parameter set, unchanged
    """
    if not params.tau > 0:
        raise ValueError(
            "The time constant tau must be strictly positive, got {}".format(params.tau)
        )
    if not params.w >= 0:
        raise ValueError(
            "The synaptic weight w must be non-negative, got {}".format(params.w)
        )
    if not params.k_i >= 1:
        raise ValueError(
            "The inhibition factor k_i must be at least 1, got {}".format(params.k_i)
        )
    return params


def unamplified(params):
    return params._replace(w=0.0)


def amplified(params, w=W_BALANCED):
    return params._replace(w=w)
