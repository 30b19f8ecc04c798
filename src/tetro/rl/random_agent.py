from __future__ import annotations

import argparse
import logging
import random

import gymnasium as gym

import tetro.env  # noqa: F401


logger = logging.getLogger(__name__)


def run_random(episodes: int = 20, seed: int | None = None) -> dict:
    env = gym.make("Tetro-10x12-v0")
    rng = random.Random(seed)
    results = {"win": 0, "loss": 0, "truncated": 0}
    obs, info = env.reset(seed=seed)
    for episode in range(episodes):
        while True:
            action = rng.randrange(env.action_space.n)
            obs, reward, terminated, truncated, info = env.step(action)
            if terminated or truncated:
                key = info["outcome"] if terminated else "truncated"
                results[key] += 1
                logger.debug("episode %d finished: %s, cleared rows %d", episode, key, info["cleared_rows"])
                obs, info = env.reset()
                break
    env.close()
    return results


def main() -> None:
    p = argparse.ArgumentParser(description="Roll out random policies against Tetro")
    p.add_argument("--episodes", type=int, default=20)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-level", default="WARNING")
    args = p.parse_args()
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))
    results = run_random(args.episodes, args.seed)
    print(f"Random agent over {args.episodes} episodes: "
          f"{results['win']} wins, {results['loss']} losses, {results['truncated']} truncated")


if __name__ == "__main__":  # pragma: no cover
    main()
