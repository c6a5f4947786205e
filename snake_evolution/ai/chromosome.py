import numpy as np


class Chromosome:
    """Fixed-length vector of genes shared by the genetic algorithm and the network weights"""

    def __init__(self, genes=()):
        if not isinstance(genes, np.ndarray):
            genes = list(genes)
        self.genes = np.array(genes, dtype=np.float32).reshape(-1)

    def __len__(self):
        return len(self.genes)

    def __getitem__(self, index):
        return self.genes[index]

    def __iter__(self):
        return iter(self.genes.tolist())

    def __eq__(self, other):
        if not isinstance(other, Chromosome):
            return NotImplemented
        if len(self) != len(other):
            return False
        # Genes come out of float arithmetic, compare with tolerance
        return bool(np.allclose(self.genes, other.genes, rtol=1e-5, atol=1e-6))

    __hash__ = None

    def __repr__(self):
        return f"Chromosome({self.genes.tolist()})"

    def split_at(self, index):
        """Split into two contiguous chromosomes at the given gene index"""
        return Chromosome(self.genes[:index]), Chromosome(self.genes[index:])

    def copy(self):
        return Chromosome(self.genes.copy())
