"""
Quantum seed source: measures qubits prepared in superposition on the Aer
simulator and turns the outcome into a seed for the key generator's PRNG.
"""

from __future__ import annotations

import logging

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .entropy import bits_to_seed

logger = logging.getLogger(__name__)

# Local statevector simulation gets expensive quickly past this.
MAX_QUBITS = 29


class QuantumSeeder:
    """
    Produce PRNG seeds from single-shot qubit measurements.
    """

    def __init__(self, num_qubits: int = 16, entropy_rounds: int = 2) -> None:
        if not 1 <= num_qubits <= MAX_QUBITS:
            raise ValueError(
                f"num_qubits={num_qubits} is outside the supported range 1..{MAX_QUBITS}"
            )
        self.num_qubits = num_qubits
        self.entropy_rounds = entropy_rounds
        self.backend = AerSimulator()

        # Kept for callers that want to inspect the last measurement.
        self.last_bits: list[int] | None = None
        self.last_basis: list[str] | None = None

    def build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        Hadamard every qubit, then measure even qubits in the Z basis and
        odd qubits in the X basis (extra H before measurement).
        """
        n = self.num_qubits
        qc = QuantumCircuit(n, n)
        basis: list[str] = []

        for i in range(n):
            qc.h(i)

        for i in range(n):
            if i % 2:
                qc.h(i)
                basis.append("X")
            else:
                basis.append("Z")
            qc.measure(i, i)

        return qc, basis

    def measure(self) -> list[int]:
        """Run the circuit once and return the measured bits, qubit 0 first."""
        qc, basis = self.build_circuit()
        tqc = transpile(qc, self.backend)
        counts = self.backend.run(tqc, shots=1).result().get_counts()

        # Single shot: exactly one bitstring, ordered q_(n-1) ... q_0.
        bitstring = next(iter(counts))[::-1]
        bits = [int(b) for b in bitstring]

        self.last_bits = bits
        self.last_basis = basis
        return bits

    def seed(self) -> int:
        """Measure once and hash the result into an integer seed."""
        bits = self.measure()
        logger.debug("Measured %d qubits for seeding", len(bits))
        return bits_to_seed(bits, self.entropy_rounds)
