"""A simple recurrent neural network that can be updated step by step."""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum

from nmode.errors import NMODEError


class TransferFunction(Enum):
    TANH = 1
    SIGM = 2
    ID = 3


def _sigmoid(x: float) -> float:
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


class Neuron:
    """A neuron summing its bias and weighted inputs."""

    def __init__(self, bias: float = 0.0, transferfunction: TransferFunction | int | None = None) -> None:
        self.activity = 0.0
        self.output = 0.0
        self.bias = bias
        self.synapses: list[Synapse] = []
        self._transferfunction: TransferFunction | None = None
        if transferfunction is not None:
            self.transferfunction = transferfunction

    @property
    def transferfunction(self) -> TransferFunction | None:
        return self._transferfunction

    @transferfunction.setter
    def transferfunction(self, value: TransferFunction | int) -> None:
        try:
            self._transferfunction = TransferFunction(value)
        except ValueError:
            raise NMODEError("Neuron::setTransferfunction: unknown transferfunction") from None

    def update_activity(self) -> None:
        self.activity = self.bias + sum(s.value() for s in self.synapses)

    def update_output(self) -> None:
        function = self._transferfunction
        if function is TransferFunction.ID:
            self.output = self.activity
        elif function is TransferFunction.SIGM:
            self.output = _sigmoid(self.activity)
        elif function is TransferFunction.TANH:
            self.output = math.tanh(self.activity)
        else:
            raise NMODEError("Neuron::updateOutput: unknown transferfunction")

    def add_synapse(self, synapse: Synapse) -> None:
        self.synapses.append(synapse)

    def nr_of_synapses(self) -> int:
        return len(self.synapses)


class Synapse:
    """A weighted connection from a source neuron."""

    def __init__(self, source: Neuron, weight: float = 0.0) -> None:
        self.source = source
        self.weight = weight

    def value(self) -> float:
        return self.weight * self.source.output


class RNN:
    """Sensor, hidden and actuator neurons updated synchronously."""

    def __init__(self) -> None:
        self.neurons: list[Neuron] = []
        self.sensors: list[Neuron] = []
        self.actuators: list[Neuron] = []
        self.hidden: list[Neuron] = []

    def update(self) -> None:
        """Compute all activities from the previous outputs, then all outputs."""
        for group in (self.sensors, self.hidden, self.actuators):
            for neuron in group:
                neuron.update_activity()
        for neuron in self.neurons:
            neuron.update_output()

    def set_inputs(self, inputs: Iterable[float]) -> None:
        """Set sensor biases; surplus values or sensors are left alone."""
        for sensor, value in zip(self.sensors, inputs):
            sensor.bias = float(value)

    def outputs(self) -> list[float]:
        return [neuron.output for neuron in self.actuators]

    def add_input_neuron(self, neuron: Neuron) -> None:
        self.sensors.append(neuron)
        self.neurons.append(neuron)

    def add_output_neuron(self, neuron: Neuron) -> None:
        self.actuators.append(neuron)
        self.neurons.append(neuron)

    def add_hidden_neuron(self, neuron: Neuron) -> None:
        self.hidden.append(neuron)
        self.neurons.append(neuron)

    def nr_of_synapses(self) -> int:
        return sum(neuron.nr_of_synapses() for neuron in self.neurons)