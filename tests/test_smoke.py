from neuronlab import GateTrainer, SpikingSimulator


def test_both_cores_run():
    trainer = GateTrainer("AND")
    trainer.advance_manual_trial()
    sim = SpikingSimulator()
    points = sim.run(3)
    assert len(points) == 3
    assert trainer.last_trace is not None
