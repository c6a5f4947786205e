# Training Script for Snake Evolution
# Evolves a population of snakes generation by generation and lets the
# operator continue, save, replay the best or worst snake, plot or quit
# between generations.

import argparse
import sys
import time
from enum import Enum
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from ..evolution import Evolution
from ..evolution.evolution import (
    GAME_GRID_SIZE,
    GENERATION_LENGTH,
    MUTATION_RATE,
    MUTATION_STRENGTH,
    POPULATION_SIZE,
)
from ..game import render_text
from .checkpoint import load_state, save_best, save_state


CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"

MENU = ("Options:\n"
        "\t'c' -> Continue\n"
        "\t's' -> Save\n"
        "\t'b' -> Replay best\n"
        "\t'w' -> Replay worst\n"
        "\t'p' -> Plot progress\n"
        "\t'q' -> Quit\n")


class Command(Enum):
    CONTINUE = 'c'
    SAVE = 's'
    REPLAY_BEST = 'b'
    REPLAY_WORST = 'w'
    PLOT = 'p'
    QUIT = 'q'


def parse_command(text):
    """Map operator input to a command; anything unrecognised quits"""
    text = text.strip().lower()[:1]
    for command in Command:
        if command.value == text:
            return command
    return Command.QUIT


def best_score_percentage(evolution, snake):
    # Share of the cells the snake could fill by eating
    return snake.game.score / (evolution.grid_size ** 2 - 2) * 100.0


def print_generation_summary(evolution, gen_time=None):
    best = evolution.best_individual(last_generation=True)
    summary = (f"Generation {evolution.generation} complete. "
               f"Best fitness: {best.fitness():.2f} "
               f"(Score: {best_score_percentage(evolution, best):.2f}%)")
    if gen_time is not None:
        summary += f" ({gen_time:.1f}s)"
    print(summary)


def train_evolution(evolution, rng, generations=1, verbose=True, quiet=False):
    # Train the evolution for a number of generations
    # Args:
    #   evolution: Evolution to advance
    #   rng: numpy Generator driving the genetic algorithm
    #   generations: Number of generations to evolve
    #   verbose: Print a summary after each generation
    #   quiet: Minimal output mode, only a progress counter
    for _ in range(generations):
        gen_start = time.time()
        gen = evolution.generation

        if quiet:
            def progress_callback(completed, total):
                if completed % max(1, total // 4) == 0:
                    print(f"Gen {gen}: {completed}/{total}", end='\r')
        else:
            progress_callback = None

        evolution.train(rng, progress_callback=progress_callback)

        gen_time = time.time() - gen_start
        if verbose:
            print_generation_summary(evolution, gen_time)

    return evolution


def replay(snake, gui=False, delay=0.1):
    """Show every recorded frame of a snake's game in order"""
    frames = snake.replay()

    if gui:
        from ..game.renderer import PygameRenderer

        fps = round(1 / delay) if delay else 0
        renderer = PygameRenderer(snake.game.size, render_delay=fps)
        try:
            for frame in frames:
                if not renderer.draw(frame):
                    break
        finally:
            renderer.close()
        return

    for frame in frames:
        print(CLEAR_SCREEN, end='')
        print(render_text(frame))
        if delay:
            time.sleep(delay)


def evaluated_generation(evolution):
    """Snakes of the last evaluated generation and its number

    Before the first evolution step this is the current population.
    """
    if evolution.last_generation:
        return evolution.last_generation, evolution.generation - 1
    return evolution.population, evolution.generation


def plot_evolution_progress(evolution, filepath=None):
    # Plot the evolution progress over generations
    plt.figure(figsize=(15, 10))

    # Plot fitness evolution
    plt.subplot(2, 2, 1)
    plt.plot(evolution.best_fitness_history, label='Best Fitness', color='red', linewidth=2)
    plt.plot(evolution.avg_fitness_history, label='Average Fitness', color='blue', linewidth=2)
    plt.title('Fitness Evolution')
    plt.xlabel('Generation')
    plt.ylabel('Fitness')
    plt.legend()
    plt.grid(True, alpha=0.3)

    # Plot score evolution
    plt.subplot(2, 2, 2)
    plt.plot(evolution.best_score_history, label='Best Score', color='green', linewidth=2)
    plt.plot(evolution.avg_score_history, label='Average Score', color='orange', linewidth=2)
    plt.title('Score Evolution')
    plt.xlabel('Generation')
    plt.ylabel('Score')
    plt.legend()
    plt.grid(True, alpha=0.3)

    last_generation, shown_generation = evaluated_generation(evolution)

    # Plot fitness distribution for last generation
    plt.subplot(2, 2, 3)
    plt.hist([snake.fitness() for snake in last_generation], bins=20, alpha=0.7, color='purple')
    plt.title(f'Fitness Distribution - Generation {shown_generation}')
    plt.xlabel('Fitness')
    plt.ylabel('Count')
    plt.grid(True, alpha=0.3)

    # Plot score distribution for last generation
    plt.subplot(2, 2, 4)
    plt.hist([snake.game.score for snake in last_generation], bins=20, alpha=0.7, color='cyan')
    plt.title(f'Score Distribution - Generation {shown_generation}')
    plt.xlabel('Score')
    plt.ylabel('Count')
    plt.grid(True, alpha=0.3)

    plt.tight_layout()
    if filepath is None:
        plt.show()
    else:
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(filepath)
        plt.close()


def run_command(evolution, command, save_dir, gui=False, delay=0.1):
    """Carry out a menu command that does not leave the menu"""
    save_dir = Path(save_dir)

    if command is Command.SAVE:
        state_path = save_dir / f'snake_evolution_gen_{evolution.generation}.state.pth'
        best_path = save_dir / f'snake_evolution_gen_{evolution.generation}.pth'
        save_state(evolution, state_path)
        save_best(evolution, best_path)
        print(f"Saved '{state_path}' and '{best_path}'")
    elif command is Command.REPLAY_BEST:
        replay(evolution.best_individual(last_generation=True), gui=gui, delay=delay)
    elif command is Command.REPLAY_WORST:
        replay(evolution.worst_individual(last_generation=True), gui=gui, delay=delay)
    elif command is Command.PLOT:
        plot_path = save_dir / f'snake_evolution_gen_{evolution.generation}.png'
        plot_evolution_progress(evolution, plot_path)
        print(f"Progress plot saved as '{plot_path}'")


def operator_menu(evolution, save_dir, gui=False, delay=0.1, read=None):
    """Ask for commands until the operator continues (True) or quits (False)"""
    read = read or input
    while True:
        command = parse_command(read(MENU))
        if command is Command.CONTINUE:
            return True
        if command is Command.QUIT:
            return False
        run_command(evolution, command, save_dir, gui=gui, delay=delay)


def build_parser():
    parser = argparse.ArgumentParser(description="Evolve Snake players with a genetic algorithm")
    parser.add_argument('--grid-size', type=int, default=GAME_GRID_SIZE)
    parser.add_argument('--population', type=int, default=POPULATION_SIZE)
    parser.add_argument('--generation-length', type=int, default=GENERATION_LENGTH,
                        help="tick budget of one generation")
    parser.add_argument('--mutation-rate', type=float, default=MUTATION_RATE)
    parser.add_argument('--mutation-strength', type=float, default=MUTATION_STRENGTH)
    parser.add_argument('--seed', type=int, default=None, help="seed of the random source")
    parser.add_argument('--threads', type=int, default=1, help="threads used to advance the games")
    parser.add_argument('--resume', type=str, default=None, help="state checkpoint to resume from")
    parser.add_argument('--save-dir', type=str, default='saved')
    parser.add_argument('--delay', type=float, default=0.1, help="seconds between replay frames")
    parser.add_argument('--gui', action='store_true', help="replay in a pygame window")
    parser.add_argument('--quiet', action='store_true')
    return parser


def build_evolution(args, rng):
    """Resume from a state checkpoint or start a random population"""
    if args.resume:
        evolution = load_state(args.resume, num_threads=args.threads)
        print(f"Resuming from generation {evolution.generation}")
        return evolution

    return Evolution.random(
        rng,
        grid_size=args.grid_size,
        population_size=args.population,
        generation_length=args.generation_length,
        mutation_rate=args.mutation_rate,
        mutation_strength=args.mutation_strength,
        num_threads=args.threads,
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    rng = np.random.default_rng(args.seed)

    try:
        evolution = build_evolution(args, rng)

        if not args.quiet:
            print("Training Snake Evolution...")
            print(f"Population: {evolution.population_size}, Grid: {evolution.grid_size}, "
                  f"Threads: {evolution.num_threads}")
            print("=" * 50)

        while True:
            train_evolution(evolution, rng, generations=1, quiet=args.quiet)
            if not operator_menu(evolution, args.save_dir, gui=args.gui, delay=args.delay):
                break
    except KeyboardInterrupt:
        print("\n\nTraining interrupted by user.")
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
