from enum import Enum
from typing import NamedTuple

import numpy as np
import torch


_EXHAUSTED = object()


class Activation(Enum):
    RELU = "relu"
    SIGMOID = "sigmoid"
    SOFTMAX = "softmax"
    IDENTITY = "identity"

    def apply(self, x):
        """Apply the activation to a whole layer output tensor"""
        if self is Activation.RELU:
            return torch.relu(x)
        if self is Activation.SIGMOID:
            return torch.sigmoid(x)
        if self is Activation.SOFTMAX:
            # Plain exp-then-normalise, large sums are allowed to overflow
            exps = torch.exp(x)
            return exps / exps.sum()
        return x


class LayerTopology(NamedTuple):
    neurons: int
    activation: Activation = Activation.IDENTITY


def _to_tensor(values):
    return torch.from_numpy(np.array(values, dtype=np.float32).reshape(-1))


def _next_weight(weights):
    value = next(weights, _EXHAUSTED)
    if value is _EXHAUSTED:
        raise ValueError("Not enough weights")
    return value


class Neuron:
    def __init__(self, weights, bias):
        self.weights = np.array(weights, dtype=np.float32).reshape(-1)
        self.bias = float(np.float32(bias))

    def __repr__(self):
        return f"Neuron(weights={self.weights.tolist()}, bias={self.bias})"

    @classmethod
    def random(cls, rng, input_size):
        weights = rng.uniform(-1.0, 1.0, size=input_size)
        bias = rng.uniform(-1.0, 1.0)
        return cls(weights, bias)

    @classmethod
    def from_weights(cls, input_size, weights):
        # Stream order is bias first, then one weight per input
        weights = iter(weights)
        bias = _next_weight(weights)
        neuron_weights = [_next_weight(weights) for _ in range(input_size)]
        return cls(neuron_weights, bias)

    def propagate(self, inputs):
        """Weighted sum of the inputs plus bias, without activation"""
        inputs = np.asarray(inputs, dtype=np.float32)
        return float(np.dot(inputs, self.weights) + np.float32(self.bias))


class Layer:
    def __init__(self, neurons, activation=Activation.IDENTITY):
        if not neurons:
            raise ValueError("A layer needs at least one neuron")

        input_size = len(neurons[0].weights)
        for neuron in neurons:
            if len(neuron.weights) != input_size:
                raise ValueError(
                    f"Neuron has {len(neuron.weights)} weights, layer expects {input_size}"
                )

        self.neurons = list(neurons)
        self.activation = activation

        # Stacked parameters used by torch during inference
        self._weights = torch.from_numpy(np.stack([n.weights for n in self.neurons]))
        self._biases = torch.tensor([n.bias for n in self.neurons], dtype=torch.float32)

    @property
    def input_size(self):
        return self._weights.shape[1]

    @property
    def output_size(self):
        return len(self.neurons)

    @classmethod
    def random(cls, rng, input_size, output_size, activation=Activation.IDENTITY):
        neurons = [Neuron.random(rng, input_size) for _ in range(output_size)]
        return cls(neurons, activation)

    @classmethod
    def from_weights(cls, input_size, output_size, weights, activation=Activation.IDENTITY):
        weights = iter(weights)
        neurons = [Neuron.from_weights(input_size, weights) for _ in range(output_size)]
        return cls(neurons, activation)

    def forward(self, x):
        return self.activation.apply(torch.mv(self._weights, x) + self._biases)

    def propagate(self, inputs):
        with torch.no_grad():
            return self.forward(_to_tensor(inputs)).numpy()


class Network:
    """Feed-forward network addressable as a flat weight vector"""

    def __init__(self, layers):
        if not layers:
            raise ValueError("A network needs at least one layer")

        for previous, layer in zip(layers, layers[1:]):
            if previous.output_size != layer.input_size:
                raise ValueError(
                    f"Layer outputs {previous.output_size} values but the next layer "
                    f"expects {layer.input_size}"
                )

        self.layers = list(layers)

    @staticmethod
    def _check_topology(topology):
        if len(topology) < 2:
            raise ValueError("Topology needs at least an input and an output layer")

    @classmethod
    def random(cls, rng, topology):
        """Network with every weight and bias drawn uniformly from [-1, 1]"""
        cls._check_topology(topology)
        layers = [
            Layer.random(rng, inputs.neurons, outputs.neurons, outputs.activation)
            for inputs, outputs in zip(topology, topology[1:])
        ]
        return cls(layers)

    @classmethod
    def from_weights(cls, topology, weights):
        """Rebuild a network from the flat stream produced by weights()"""
        cls._check_topology(topology)
        weights = iter(weights)
        layers = [
            Layer.from_weights(inputs.neurons, outputs.neurons, weights, outputs.activation)
            for inputs, outputs in zip(topology, topology[1:])
        ]

        if next(weights, _EXHAUSTED) is not _EXHAUSTED:
            raise ValueError("Too many weights")

        return cls(layers)

    @property
    def input_size(self):
        return self.layers[0].input_size

    @property
    def output_size(self):
        return self.layers[-1].output_size

    def topology(self):
        topology = [LayerTopology(self.input_size)]
        topology.extend(LayerTopology(layer.output_size, layer.activation) for layer in self.layers)
        return topology

    def weights(self):
        """All biases and weights as one flat array, layer by layer, neuron by neuron"""
        parts = []
        for layer in self.layers:
            for neuron in layer.neurons:
                parts.append([neuron.bias])
                parts.append(neuron.weights)
        return np.concatenate(parts).astype(np.float32)

    def propagate(self, inputs):
        x = _to_tensor(inputs)
        if x.shape[0] != self.input_size:
            raise ValueError(f"Network expects {self.input_size} inputs, got {x.shape[0]}")

        with torch.no_grad():
            for layer in self.layers:
                x = layer.forward(x)
        return x.numpy()

    def act(self, inputs):
        """Index of the strongest output"""
        return int(np.argmax(self.propagate(inputs)))
