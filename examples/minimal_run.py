from neuronlab import SpikingSimulator, SimulatorConfig


def main() -> None:
    sim = SpikingSimulator(SimulatorConfig(base_current=10.0))
    points = sim.run(200)
    print("spikes:", sim.spike_count)
    print("last v:", [round(p.v, 1) for p in points[-5:]])


if __name__ == "__main__":
    main()
