#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ENGINE TIMING STUDY

Measures how long the normalization pipeline takes on random relations:
1. time against the number of attributes (FD count fixed)
2. time against the number of functional dependencies (attribute count fixed)

USAGE:
    python benchmark.py

    # or from code:
    from benchmark import run_benchmark, plot_benchmark
    results = run_benchmark()
    plot_benchmark(results)
"""

import random
import string
import time
from typing import Dict, List, Optional

import matplotlib.pyplot as plt
import numpy as np

from models import FunctionalDependency
from normalizer import normalize_parsed


BENCHMARK_SETTINGS = {
    "ATTRIBUTE_COUNTS": [4, 6, 8, 10, 12, 14],
    "FIXED_FD_COUNT": 6,
    "FD_COUNTS": [2, 4, 6, 8, 10, 12],
    "FIXED_ATTRIBUTE_COUNT": 8,
    "MAX_DETERMINANT_SIZE": 2,
    "REPEATS": 5,
    "SEED": 42,
}


def random_fds(attributes: List[str], num_fds: int, rng: random.Random,
               max_determinant: int = 2) -> List[FunctionalDependency]:
    """Random non-trivial dependencies over single-letter attributes"""
    if len(attributes) < 2:
        raise ValueError("Random dependencies need at least two attributes")
    fds = []
    for _ in range(num_fds):
        det_size = rng.randint(1, min(max_determinant, len(attributes) - 1))
        determinant = rng.sample(attributes, det_size)
        rest = [attr for attr in attributes if attr not in determinant]
        dependent = rng.sample(rest, rng.randint(1, min(2, len(rest))))
        fds.append(FunctionalDependency(tuple(determinant), tuple(dependent)))
    return fds


def time_normalization(num_attributes: int, num_fds: int, repeats: int,
                       rng: random.Random, max_determinant: int = 2) -> float:
    """Mean wall time in seconds over `repeats` random relations of A..Z attributes"""
    if not 2 <= num_attributes <= len(string.ascii_uppercase):
        raise ValueError(f"num_attributes must be between 2 and {len(string.ascii_uppercase)}, "
                         f"got {num_attributes}")
    attributes = list(string.ascii_uppercase[:num_attributes])
    timings = []
    for _ in range(repeats):
        fds = random_fds(attributes, num_fds, rng, max_determinant)
        start = time.perf_counter()
        normalize_parsed(attributes, fds)
        timings.append(time.perf_counter() - start)
    return float(np.mean(timings))


def run_benchmark(settings: Optional[Dict] = None) -> Dict[str, np.ndarray]:
    """
    Time the pipeline for every configured size

    Returns:
        numpy arrays keyed n_values, time_vs_n, m_values, time_vs_m
    """
    settings = {**BENCHMARK_SETTINGS, **(settings or {})}
    rng = random.Random(settings["SEED"])
    repeats = settings["REPEATS"]
    max_det = settings["MAX_DETERMINANT_SIZE"]

    n_values = np.array(settings["ATTRIBUTE_COUNTS"])
    time_vs_n = np.array([
        time_normalization(int(n), settings["FIXED_FD_COUNT"], repeats, rng, max_det)
        for n in n_values
    ])
    print(f"[INFO] Timed {len(n_values)} attribute counts")

    m_values = np.array(settings["FD_COUNTS"])
    time_vs_m = np.array([
        time_normalization(settings["FIXED_ATTRIBUTE_COUNT"], int(m), repeats, rng, max_det)
        for m in m_values
    ])
    print(f"[INFO] Timed {len(m_values)} dependency counts")

    return {
        "n_values": n_values,
        "time_vs_n": time_vs_n,
        "m_values": m_values,
        "time_vs_m": time_vs_m,
    }


def plot_benchmark(results: Dict[str, np.ndarray]):
    """Two line charts, times shown in milliseconds"""
    plt.style.use('seaborn-v0_8-whitegrid')

    fig, (ax_n, ax_m) = plt.subplots(1, 2, figsize=(14, 6))

    ax_n.plot(results["n_values"], results["time_vs_n"] * 1000, marker='o', linestyle='-',
              color='dodgerblue', label='Normalization time')
    ax_n.set_title('Time vs number of attributes (N)', fontsize=14)
    ax_n.set_xlabel('Number of attributes (N)', fontsize=12)
    ax_n.set_ylabel('Time (ms)', fontsize=12)
    ax_n.set_xticks(results["n_values"])
    ax_n.legend()
    ax_n.grid(True, which="both", ls="--", linewidth=0.5)

    ax_m.plot(results["m_values"], results["time_vs_m"] * 1000, marker='s', linestyle='--',
              color='orangered', label='Normalization time')
    ax_m.set_title('Time vs number of functional dependencies (M)', fontsize=14)
    ax_m.set_xlabel('Number of functional dependencies (M)', fontsize=12)
    ax_m.set_ylabel('Time (ms)', fontsize=12)
    ax_m.set_xticks(results["m_values"])
    ax_m.legend()
    ax_m.grid(True, which="both", ls="--", linewidth=0.5)

    plt.tight_layout()
    plt.show()
    return fig


if __name__ == "__main__":
    plot_benchmark(run_benchmark())
