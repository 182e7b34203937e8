from balamp import model, stimulus


def test_tstops():
    increment = model.State(0.5, 0.5)
    impulses = [
        stimulus.impulse(1.0, increment),
        stimulus.impulse(0.0, increment),
        stimulus.impulse(1.0, increment),
        stimulus.impulse(20.0, increment),
        stimulus.impulse(-3.0, increment),
    ]
    assert stimulus.tstops(impulses, (-1.0, 10.0)) == [0.0, 1.0]
    # the span bounds are included
    assert stimulus.tstops(impulses, (0.0, 1.0)) == [0.0, 1.0]
    assert stimulus.tstops([], (-1.0, 10.0)) == []


def test_at():
    a = stimulus.impulse(0, model.State(0.5, 0.5))
    b = stimulus.impulse(2, model.State(1.0, 0.0))
    assert stimulus.at([a, b], 0.0) == [a]
    assert stimulus.at([a, b], 1.0) == []


def test_apply():
    state = model.State(1.0, 2.0)
    kicks = [
        stimulus.impulse(0.0, model.State(0.5, 0.5)),
        stimulus.impulse(0.0, model.State(0.5, 0.5)),
    ]
    kicked = stimulus.apply(state, kicks)
    assert float(kicked.r_e) == 2.0
    assert float(kicked.r_i) == 3.0
    assert stimulus.apply(state, []) == state


if __name__ == "__main__":
    test_tstops()
    test_at()
    test_apply()
