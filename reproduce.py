from absl import app
from absl import flags
from absl import logging
import matplotlib.pyplot as plt
from termcolor import colored

import balamp
from balamp import params


flags.DEFINE_float(
    "w",
    params.W_BALANCED,
    "Synaptic weight of the amplified network",
    lower_bound=params.W_RANGE[0],
    upper_bound=params.W_RANGE[1],
)
flags.DEFINE_float(
    "k_i",
    params.DEFAULT.k_i,
    "Inhibition factor",
    lower_bound=params.K_I_RANGE[0],
    upper_bound=params.K_I_RANGE[1],
)
flags.DEFINE_float(
    "tau",
    params.DEFAULT.tau,
    "Time constant",
    lower_bound=params.TAU_RANGE[0],
    upper_bound=params.TAU_RANGE[1],
)
flags.DEFINE_bool("plot", True, "Show the figures")
FLAGS = flags.FLAGS


def show(check):
    print(colored(balamp.metrics.verdict(check), "green" if check.passed else "red"))


def main(argv):
    parameters = params.Params.from_flags(FLAGS)
    logging.info("Parameters: {}".format(parameters))

    # balanced amplification
    baseline, amplified = balamp.solve.compare(parameters, w=parameters.w)
    show(balamp.solve.verify(baseline, amplified))

    # hebbian amplification
    times, hebbian_baseline, hebbian_amplified = balamp.hebbian.trajectories()
    show(balamp.hebbian.check(hebbian_baseline, hebbian_amplified))

    if FLAGS.plot:
        balamp.plot.plot_trajectories(baseline, amplified)
        balamp.plot.plot_hebbian(times, hebbian_baseline, hebbian_amplified)
        plt.show()


if __name__ == "__main__":
    app.run(main)
