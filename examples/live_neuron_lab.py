#!/usr/bin/env python3
"""
Simulateur de neurone à impulsions en temps réel (fenêtre OpenCV).

Affiche le potentiel de membrane, les courants injectés et l'état des
canaux ioniques. Un tick de simulation par image.

Contrôles:
- 'q' ou ESC: Quitter
- Espace: Lecture / pause
- 'n': Un pas (met en pause)
- 'r': Reset
- '1' / '2': Déclencher l'entrée 1 / l'entrée 2
- 'b': Déclenchement combiné (entrée 2 retardée)
- 't': Type de neurone suivant
"""

from __future__ import annotations

import logging

import cv2
import numpy as np

from neuronlab import (
    NeuronType,
    NumericOverflow,
    SimulatorConfig,
    SpikingSimulator,
    TickLoop,
    visualize_channels,
    visualize_trace,
)

logger = logging.getLogger(__name__)

WINDOW_NAME = "NeuronLab - Spiking Neuron"


class LiveSimulator:
    """Boucle d'affichage autour d'un SpikingSimulator."""

    def __init__(self, config: SimulatorConfig):
        self.sim = SpikingSimulator(config)
        self.loop = TickLoop(self.sim.tick, interval_ms=16, playing=True)
        self._types = list(NeuronType)

    def next_neuron_type(self):
        idx = (self._types.index(self.sim.neuron_type) + 1) % len(self._types)
        self.sim.set_neuron_type(self._types[idx])
        print(f"🧠 {self.sim.neuron_type.value}")

    def handle_key(self, key: int) -> bool:
        """Applique une touche; retourne False pour quitter."""
        if key in (ord('q'), 27):
            return False
        if key == ord(' '):
            self.loop.toggle()
        elif key == ord('n'):
            self.loop.step()
        elif key == ord('r'):
            self.sim.reset()
        elif key == ord('1'):
            self.sim.trigger_input1()
        elif key == ord('2'):
            self.sim.trigger_input2()
        elif key == ord('b'):
            self.sim.trigger_combined()
        elif key == ord('t'):
            self.next_neuron_type()
        return True

    def render(self) -> np.ndarray:
        trace = visualize_trace(self.sim.history.to_list())
        channels = visualize_channels(self.sim.channels, self.sim.phase)
        return np.vstack([trace, channels])

    def run(self):
        cv2.namedWindow(WINDOW_NAME)
        try:
            while True:
                try:
                    self.loop.on_frame()
                except NumericOverflow as e:
                    logger.warning("Simulation paused: %s", e)
                cv2.imshow(WINDOW_NAME, self.render())
                key = cv2.waitKey(self.loop.interval_ms) & 0xFF
                if key != 255 and not self.handle_key(key):
                    break
        finally:
            cv2.destroyAllWindows()
            print(f"Spikes: {self.sim.spike_count}  Ticks: {self.sim.tick_count}")


def main():
    """Point d'entrée principal."""
    import argparse

    parser = argparse.ArgumentParser(description="Simulateur de neurone d'Izhikevich")
    parser.add_argument(
        "-t", "--type",
        choices=[t.name.lower() for t in NeuronType],
        default="regular_spiking",
        help="Type de neurone (défaut: regular_spiking)"
    )
    parser.add_argument(
        "-i", "--base-current",
        type=float,
        default=0.0,
        help="Courant de base (défaut: 0)"
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    config = SimulatorConfig(
        neuron_type=NeuronType[args.type.upper()],
        base_current=args.base_current,
    )
    LiveSimulator(config).run()


if __name__ == "__main__":
    main()
