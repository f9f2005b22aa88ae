"""Quickstart example: Haldane kinetics shared by a population of agents.

This example demonstrates the two ways a factor can hold its parameters:
1. One factor with instance parameters, shared by every agent
2. One factor evaluated against a per-agent parameter table
3. Rate and derivative agree between the two for identical values

Run: python examples/00_quickstart.py
"""

from __future__ import annotations

import numpy as np

from kinetic_factors import HaldaneFactor, setup_logging

np.random.seed(42)


def main() -> None:
    """Run quickstart example."""
    setup_logging(level="INFO")

    print("=" * 60)
    print("kinetic-factors Quickstart Example")
    print("=" * 60)

    # 1. Global rate law
    print("\n1. Haldane factor with instance parameters (Ks=2, Ki=50)...")
    factor = HaldaneFactor.from_config({"Ks": 2.0, "Ki": 50.0})
    for solute in [0.5, 5.0, 10.0, 50.0]:
        print(f"   S={solute:6.1f}  rate={factor.rate(solute):.4f}  d/dS={factor.derivative(solute):+.5f}")

    # 2. Per-agent parameters
    n_agents = 5
    n_slots = HaldaneFactor.declare_parameter_count()
    print(f"\n2. Packing {n_agents} agents x {n_slots} slots into one table...")
    table = np.zeros(n_agents * n_slots)
    shared = HaldaneFactor()
    for agent in range(n_agents):
        config = {"Ks": 2.0 * np.random.uniform(0.8, 1.2), "Ki": 50.0 * np.random.uniform(0.8, 1.2)}
        shared.init_into_array(config, table, agent * n_slots)

    for agent in range(n_agents):
        index = agent * n_slots
        print(f"   agent {agent}: Ks={table[index]:.3f} Ki={table[index + 1]:.3f} "
              f"rate(5)={shared.rate(5.0, table, index):.4f}")

    # 3. Both storage modes agree
    print("\n3. Checking storage-mode agreement...")
    table[:n_slots] = [2.0, 50.0]
    assert shared.rate(5.0, table, 0) == factor.rate(5.0)
    assert shared.derivative(5.0, table, 0) == factor.derivative(5.0)
    print("   rate and derivative identical")


if __name__ == "__main__":
    main()
