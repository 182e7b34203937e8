import logging
from typing import Sequence, Tuple

from . import integrate, metrics, model, params, stimulus
from .integrate import Options, Solution
from .params import Params
from .stimulus import Impulse

TSPAN = (-1.0, 10.0)
# sampling step of the solutions
H = Options().dtmax


def forward(
    parameters: Params,
    tspan: Tuple[float, float] = TSPAN,
    impulses: Sequence[Impulse] = None,
    options: Options = Options(),
) -> Solution:
    """
    Integrates the rate model from rest under an impulsive input.
    Args:
        parameters (Params): synaptic weight, inhibition factor and time constant
        tspan (Tuple[float, float]): initial and final time, in units of tau
        impulses (Sequence[Impulse]): the impulses to deliver. Defaults to a single
                                      kick of (0.5, 0.5) at t=0
        options (Options): solver options
    Returns:
        (Solution): the trajectory of (r_e, r_i)
    """
    params.validate(parameters)
    if impulses is None:
        impulses = [stimulus.impulse(0.0, model.IMPULSE)]
    logging.info("Solving the rate model with {}".format(parameters))
    return integrate.odeint(
        model.step,
        model.init(),
        tspan,
        parameters,
        impulses=impulses,
        options=options,
    )


def compare(
    parameters: Params,
    w: float = params.W_BALANCED,
    tspan: Tuple[float, float] = TSPAN,
    options: Options = Options(),
) -> Tuple[Solution, Solution]:
    """Solves the unamplified (w=0) and the amplified (w) networks, sharing k_i and tau."""
    baseline = forward(params.unamplified(parameters), tspan, options=options)
    amplified = forward(params.amplified(parameters, w), tspan, options=options)
    return baseline, amplified


def verify(
    baseline: Solution,
    amplified: Solution,
    factor: float = 4.0,
    h: float = H,
    rtol: float = 0.01,
) -> metrics.AmplificationCheck:
    """
    Checks that the time integral of r_e + r_i of the amplified network is
    `factor` times the one of the unamplified network.
    With h set, the integrals are uniform Riemann sums over samples spaced h
    apart. With h=None they follow the sample times of the solutions.
    """

    def integral(solution):
        y = model.summed_rate(solution.x)
        if h is None:
            return metrics.left_riemann(solution.t, y)
        return metrics.riemann(y, h)

    check = metrics.check_amplification(
        integral(baseline), integral(amplified), factor=factor, rtol=rtol
    )
    logging.info(
        "Integrals: {:.4f} (1x), {:.4f} (amplified), ratio {:.4f}".format(
            check.baseline, check.amplified, check.ratio
        )
    )
    return check
