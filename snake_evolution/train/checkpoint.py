# Checkpoints for Snake Evolution
# A full state file rebuilds the whole evolution for resuming training,
# a brain file holds the best snake's network for replays.

from pathlib import Path

import torch

from ..ai import Activation, Chromosome, LayerTopology, Network
from ..evolution import Brain, Evolution, Snake
from ..game import Direction, vision_size


FORMAT_VERSION = 1


def _encode_topology(topology):
    return [(layer.neurons, layer.activation.value) for layer in topology]


def _decode_topology(data):
    return [LayerTopology(neurons, Activation(activation)) for neurons, activation in data]


def _check_version(state, filepath):
    version = state.get('format_version') if isinstance(state, dict) else None
    if version != FORMAT_VERSION:
        raise ValueError(f"Unsupported checkpoint format in {filepath}: {version!r}")


def _directions(evolution):
    return evolution.directions or Direction.vision_order()


def save_state(evolution, filepath):
    # Save the complete evolution state for resuming training
    directions = _directions(evolution)
    state = {
        'format_version': FORMAT_VERSION,
        'generation': evolution.generation,
        'grid_size': evolution.grid_size,
        'generation_length': evolution.generation_length,
        'mutation_rate': evolution.mutation_rate,
        'mutation_strength': evolution.mutation_strength,
        'food_seed': evolution.food_seed,
        'directions': [direction.name for direction in directions],
        'topology': _encode_topology(Brain.topology(vision_size(directions))),
        'population': [snake.as_chromosome().genes for snake in evolution.population],
        'best_fitness_history': evolution.best_fitness_history,
        'avg_fitness_history': evolution.avg_fitness_history,
        'best_score_history': evolution.best_score_history,
        'avg_score_history': evolution.avg_score_history,
    }
    Path(filepath).parent.mkdir(parents=True, exist_ok=True)
    torch.save(state, filepath)


def load_state(filepath, num_threads=1):
    # Load the complete evolution state from a saved checkpoint
    state = torch.load(filepath, weights_only=False)
    _check_version(state, filepath)

    directions = [Direction[name] for name in state['directions']]
    topology = _decode_topology(state['topology'])
    if topology != Brain.topology(vision_size(directions)):
        raise ValueError(f"Checkpoint {filepath} was saved with a different brain topology")

    grid_size = state['grid_size']
    seed = state['food_seed'] + state['generation']
    population = [
        Snake.from_chromosome(Chromosome(genes), grid_size, seed, directions)
        for genes in state['population']
    ]

    evolution = Evolution(
        population,
        grid_size=grid_size,
        generation_length=state['generation_length'],
        mutation_rate=state['mutation_rate'],
        mutation_strength=state['mutation_strength'],
        num_threads=num_threads,
        food_seed=state['food_seed'],
        generation=state['generation'],
        directions=directions,
    )
    evolution.best_fitness_history = list(state['best_fitness_history'])
    evolution.avg_fitness_history = list(state['avg_fitness_history'])
    evolution.best_score_history = list(state['best_score_history'])
    evolution.avg_score_history = list(state['avg_score_history'])
    return evolution


def save_best(evolution, filepath):
    """Save the network of the best snake of the last evaluated generation"""
    best = evolution.best_individual(last_generation=bool(evolution.last_generation))
    state = {
        'format_version': FORMAT_VERSION,
        'generation': evolution.generation,
        'topology': _encode_topology(best.brain.nn.topology()),
        'weights': best.brain.nn.weights(),
        'fitness': best.fitness(),
        'score': best.game.score,
    }
    Path(filepath).parent.mkdir(parents=True, exist_ok=True)
    torch.save(state, filepath)
    return best


def load_brain(filepath):
    state = torch.load(filepath, weights_only=False)
    _check_version(state, filepath)
    return Brain(Network.from_weights(_decode_topology(state['topology']), state['weights']))
