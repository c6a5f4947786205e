#!/usr/bin/env python3
# Snake Evolution Training Entry Point
# Interactive training loop for the genetic algorithm.

from snake_evolution.train.train_evolution import main

if __name__ == "__main__":
    main()
