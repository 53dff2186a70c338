"""
Configuration for the key generator.
"""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from typing import Mapping, Optional

SEED_SOURCES = ("system", "quantum")


@dataclass
class RandKeyConfig:
    # Default chunk size. Larger values mean fewer, bigger worker tasks.
    unit: int = 4096

    # Upper bound on worker threads; None lets the executor decide.
    max_workers: Optional[int] = None

    # Fixed seed for reproducible keys (tests, debugging).
    # Takes precedence over seed_source.
    seed: Optional[int] = None

    # "system": OS entropy. "quantum": seed from a simulated qubit measurement.
    seed_source: str = "system"

    # Quantum seeding only.
    num_qubits: int = 16
    entropy_rounds: int = 2

    def __post_init__(self) -> None:
        if self.unit <= 0:
            raise ValueError(f"unit must be positive, got {self.unit}")
        if self.max_workers is not None and self.max_workers <= 0:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")
        if self.seed_source not in SEED_SOURCES:
            raise ValueError(
                f"seed_source must be one of {SEED_SOURCES}, got {self.seed_source!r}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RandKeyConfig":
        """
        Build a config from RANDKEY_* environment variables.

        Unset variables keep their defaults; malformed ones raise ValueError.
        """
        env = os.environ if environ is None else environ
        kwargs: dict = {}

        int_fields = {
            "RANDKEY_UNIT": "unit",
            "RANDKEY_MAX_WORKERS": "max_workers",
            "RANDKEY_SEED": "seed",
            "RANDKEY_NUM_QUBITS": "num_qubits",
            "RANDKEY_ENTROPY_ROUNDS": "entropy_rounds",
        }
        for var, name in int_fields.items():
            raw = env.get(var)
            if raw is None or raw == "":
                continue
            try:
                kwargs[name] = int(raw)
            except ValueError:
                raise ValueError(f"{var} must be an integer, got {raw!r}") from None

        source = env.get("RANDKEY_SEED_SOURCE")
        if source:
            kwargs["seed_source"] = source.lower()

        return cls(**kwargs)


def make_rng(config: RandKeyConfig) -> random.Random:
    """Create the engine's PRNG according to the config."""
    if config.seed is not None:
        return random.Random(config.seed)
    if config.seed_source == "quantum":
        # Imported lazily: building the simulator is only needed here.
        from .quantum_engine import QuantumSeeder

        seeder = QuantumSeeder(config.num_qubits, config.entropy_rounds)
        return random.Random(seeder.seed())
    return random.Random()


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = RandKeyConfig()
