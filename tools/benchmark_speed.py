"""
Performance Benchmark
=====================

Measures simulation throughput: raw driver ticks and Gymnasium env steps.

Usage:
    python -m tools.benchmark_speed [--steps S] [--seed SEED]
"""

from __future__ import annotations

import argparse
import sys
import time

import numpy as np

from flappy_dragon.dragon_core.config_loader import load_config
from flappy_dragon.dragon_core.game import CoreGame
from flappy_dragon.dragon_core.env_gym import FlappyDragonEnv
from flappy_dragon.dragon_core.rules import KeyEvent


def benchmark_driver(num_steps: int = 10000, seed: int = 42) -> dict:
    """
    Benchmark CoreGame.tick with one logical frame per call.

    Args:
        num_steps: Number of driver calls.
        seed: Random seed.

    Returns:
        Dict with timing results.
    """
    config = load_config()
    game = CoreGame(config=config, seed=seed)
    rng = np.random.default_rng(seed)
    elapsed_ms = config.timing.frame_duration_ms + 1.0

    game.tick(0.0, KeyEvent.FLAP)
    start = time.perf_counter()

    for _ in range(num_steps):
        key = KeyEvent.FLAP if rng.random() < 0.1 else None
        game.tick(elapsed_ms, key)

    elapsed = time.perf_counter() - start

    return {
        "mode": "driver",
        "num_steps": num_steps,
        "elapsed_seconds": elapsed,
        "steps_per_second": num_steps / elapsed,
        "ms_per_step": (elapsed * 1000) / num_steps
    }


def benchmark_env(num_steps: int = 10000, seed: int = 42) -> dict:
    """
    Benchmark FlappyDragonEnv with random flaps.

    Args:
        num_steps: Number of steps to run.
        seed: Random seed.

    Returns:
        Dict with timing results.
    """
    env = FlappyDragonEnv()
    rng = np.random.default_rng(seed)

    obs, _ = env.reset(seed=seed)
    episodes = 1
    start = time.perf_counter()

    for _ in range(num_steps):
        action = int(rng.random() < 0.1)
        obs, _, terminated, truncated, _ = env.step(action)
        if terminated or truncated:
            obs, _ = env.reset()
            episodes += 1

    elapsed = time.perf_counter() - start

    return {
        "mode": "env",
        "num_steps": num_steps,
        "episodes": episodes,
        "elapsed_seconds": elapsed,
        "steps_per_second": num_steps / elapsed,
        "ms_per_step": (elapsed * 1000) / num_steps
    }


def print_results(results: dict) -> None:
    """Pretty print benchmark results."""
    print(f"\n{results['mode'].upper()}:")
    print(f"  Steps: {results['num_steps']}")
    if "episodes" in results:
        print(f"  Episodes: {results['episodes']}")
    print(f"  Time: {results['elapsed_seconds']:.3f}s")
    print(f"  Throughput: {results['steps_per_second']:.0f} steps/sec")
    print(f"  Latency: {results['ms_per_step']:.4f} ms/step")


def main():
    parser = argparse.ArgumentParser(description="Benchmark Flappy Dragon simulation speed")
    parser.add_argument("--steps", type=int, default=10000, help="Steps per benchmark")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")

    args = parser.parse_args()

    print("=" * 50)
    print("FLAPPY DRAGON PERFORMANCE BENCHMARK")
    print("=" * 50)

    print_results(benchmark_driver(args.steps, args.seed))
    print_results(benchmark_env(args.steps, args.seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())
