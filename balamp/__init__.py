import jax

# the integrator accumulates ~1e4 steps per trajectory
jax.config.update("jax_enable_x64", True)

from . import params
from . import model
from . import stimulus
from . import integrate
from . import metrics
from . import solve
from . import hebbian
from . import plot

__version__ = "0.1"
