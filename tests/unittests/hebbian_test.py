import jax.numpy as jnp
import pytest

from balamp import hebbian


def test_rise_and_decay_baseline():
    times, y = hebbian.rise_and_decay(0.0)
    assert times.shape == y.shape
    assert float(times[0]) == 0.0
    assert abs(float(times[-1]) - 30.0) < 1e-9

    rise = times <= 15.0
    assert jnp.allclose(y[: 15001], 1.0 - jnp.exp(-times[: 15001]))
    assert bool(jnp.all(y[rise] <= 1.0))
    assert abs(float(y[-1])) < 1e-6


def test_rise_and_decay_is_continuous():
    for gain in (0.0, 0.5, hebbian.GAIN):
        times, y = hebbian.rise_and_decay(gain)
        # both segments are sampled at the switch time
        (index,) = jnp.where(jnp.abs(times - 15.0) < 1e-9)
        assert len(index) == 2
        assert float(y[index[0]]) == float(y[index[1]])


def test_amplified_shape():
    times, y = hebbian.rise_and_decay(hebbian.GAIN, h=0.01)
    g = hebbian.GAIN
    rise = times[: 1501]
    expected = (jnp.exp((g - 1) * rise) - 1) / (g - 1)
    assert jnp.allclose(y[: 1501], expected)
    # approaches 1 / (1 - g) = 4
    assert 3.8 < float(jnp.max(y)) < 4.0


def test_invalid_gain():
    with pytest.raises(ValueError):
        hebbian.rise_and_decay(1.0)
    with pytest.raises(ValueError):
        hebbian.rise_and_decay(1.5)


def test_compare():
    check = hebbian.compare()
    assert check.passed, "Ratio is {}".format(check.ratio)
    assert abs(check.ratio - 4.0) < 0.4
    assert check.rtol == 0.1

    # half the coupling only doubles the response
    check = hebbian.compare(gain=0.5)
    assert not check.passed
    assert abs(check.ratio - 2.0) < 0.2


def test_check():
    times, baseline, amplified = hebbian.trajectories()
    check = hebbian.check(baseline, amplified)
    assert check == hebbian.compare()
    assert check.passed, "Ratio is {}".format(check.ratio)
    # swapped responses give the inverse ratio
    assert not hebbian.check(amplified, baseline).passed


if __name__ == "__main__":
    test_rise_and_decay_baseline()
    test_rise_and_decay_is_continuous()
    test_amplified_shape()
    test_invalid_gain()
    test_compare()
    test_check()
