from ..ai import Activation, Chromosome, LayerTopology, Network


VISION_INPUTS = 24
HIDDEN_NEURONS = 18
OUTPUT_NEURONS = 4  # one per movement direction


class Brain:
    def __init__(self, nn):
        self.nn = nn

    @staticmethod
    def topology(inputs=VISION_INPUTS):
        return [
            LayerTopology(inputs),
            LayerTopology(HIDDEN_NEURONS, Activation.RELU),
            LayerTopology(HIDDEN_NEURONS, Activation.RELU),
            LayerTopology(OUTPUT_NEURONS, Activation.SOFTMAX),
        ]

    @classmethod
    def random(cls, rng, inputs=VISION_INPUTS):
        return cls(Network.random(rng, cls.topology(inputs)))

    @classmethod
    def from_chromosome(cls, chromosome, inputs=VISION_INPUTS):
        return cls(Network.from_weights(cls.topology(inputs), chromosome))

    def as_chromosome(self):
        return Chromosome(self.nn.weights())

    def act(self, readings):
        return self.nn.act(readings)
