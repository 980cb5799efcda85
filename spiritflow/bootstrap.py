"""Bootstrap estimates of a mean or of a mean azimuthal direction."""

from __future__ import annotations

import math
import random
import statistics
from collections.abc import Iterable, Sequence

from .geometry import Vector2, phi_mpi_pi

DEFAULT_NBOOT_DOUBLE = 100
DEFAULT_NBOOT_VECTOR = 1000


def _std_dev(values: Sequence[float]) -> float:
    return statistics.stdev(values) if len(values) > 1 else 0.0


class BootStrap:
    """Resample scalar values or 2D vectors and collect the bootstrap statistics."""

    def __init__(
        self,
        nboot: int = 1,
        samples: Iterable[float | Vector2] = (),
        seed: int | None = None,
    ) -> None:
        self.nboot = nboot
        self.ordinary_mean = -99.0
        self._rng = random.Random(seed)
        self.clear()
        for sample in samples:
            self.add(sample)

    def clear(self) -> None:
        """Drop all samples and results."""
        self.elements: list[float] = []
        self.vectors: list[Vector2] = []
        self.replace: list[float] = []
        self.res_mean: list[float] = []
        self.res_std_dev: list[float] = []
        self.mean = 0.0
        self.std_dev = 0.0
        self.std_dev2 = 0.0
        self.cos_mean = 0.0
        self.mod = 0.0
        self.ordinary_sum = Vector2()
        self.r_sum = 0.0
        self.ordinary_std_dev = 0.0
        self.cl_low = 0.0
        self.cl_up = 0.0
        self.error = 0.0

    def add(self, sample: float | Vector2) -> None:
        """Add a scalar sample or a 2D vector sample."""
        if isinstance(sample, Vector2):
            self.vectors.append(sample)
            self.ordinary_sum = self.ordinary_sum + sample.unit()
        else:
            value = float(sample)
            self.elements.append(value)
            self.r_sum += value

    @property
    def n_elements(self) -> int:
        """Number of scalar samples."""
        return len(self.elements)

    def bootstrapping(self, nbt: int = 0) -> None:
        """Bootstrap the scalar samples if there are any, otherwise the vectors."""
        if self.elements:
            self.bootstrapping_double(nbt)
        elif self.vectors:
            self.bootstrapping_vector(nbt)
        else:
            raise ValueError("no samples to bootstrap")

    def bootstrapping_double(self, nbt: int = 0) -> None:
        """Bootstrap the mean of the scalar samples ``nbt`` times (100 when 0)."""
        if not self.elements:
            raise ValueError("no scalar samples to bootstrap")
        self.nboot = nbt if nbt > 0 else DEFAULT_NBOOT_DOUBLE
        self.ordinary_mean = statistics.fmean(self.elements)
        self.ordinary_std_dev = _std_dev(self.elements)

        self.replace = []
        for _ in range(self.nboot):
            resampled = [self.elements[i] for i in self.resampling(len(self.elements))]
            self.replace.append(statistics.fmean(resampled))
            self.mean = statistics.fmean(self.replace)
            self.std_dev = _std_dev(self.replace)
            self.res_mean.append(self.mean)
            self.res_std_dev.append(self.std_dev)

        self.store_confidence_level()

    def bootstrapping_vector(self, nbt: int = 0) -> None:
        """Bootstrap the mean direction of the vector samples ``nbt`` times (1000 when 0)."""
        if not self.vectors:
            raise ValueError("no vector samples to bootstrap")
        self.nboot = nbt if nbt > 0 else DEFAULT_NBOOT_VECTOR
        reference = self.ordinary_sum.phi()
        self.ordinary_mean = phi_mpi_pi(reference)
        deviations = [phi_mpi_pi(v.delta_phi(self.ordinary_sum)) for v in self.vectors]
        self.ordinary_std_dev = _std_dev(deviations)

        self.replace = []
        for _ in range(self.nboot):
            total = Vector2()
            for i in self.resampling(len(self.vectors)):
                total = total + self.vectors[i].rotate(-reference).unit()
            self.replace.append(phi_mpi_pi(total.phi()))

            self.mean = phi_mpi_pi(statistics.fmean(self.replace))
            self.std_dev = _std_dev(self.replace)
            self.res_mean.append(self.mean)
            self.res_std_dev.append(self.std_dev)
            self.mean += reference
            self.mod = self.ordinary_sum.mod()

        self.store_confidence_level()

    def resampling(self, n: int) -> list[int]:
        """Draw ``n`` indices in ``[0, n)`` with replacement."""
        return [self._rng.randrange(n) for _ in range(n)]

    def store_confidence_level(self) -> None:
        """Sort the replicas and store the central 95 % interval and the error."""
        if not self.replace:
            raise ValueError("no bootstrap replicas")
        self.replace.sort()
        n = len(self.replace)
        low = int(n * 0.025)
        up = max(int(n * 0.975) - 1, 0)
        self.cl_low = self.replace[low]
        self.cl_up = self.replace[up]
        self.error = (self.cl_up - self.cl_low) * self.std_dev

    def get_replace(self, index: int) -> float:
        return self._at(self.replace, index)

    def get_residual_mean(self, index: int) -> float:
        return self._at(self.res_mean, index)

    def get_residual_std_dev(self, index: int) -> float:
        return self._at(self.res_std_dev, index)

    @staticmethod
    def _at(values: Sequence[float], index: int) -> float:
        if not 0 <= index < len(values):
            raise IndexError(f"index {index} out of range for {len(values)} entries")
        return values[index]

    def std_dev_error(self) -> float:
        """Error on the bootstrap standard deviation."""
        return self.std_dev / math.sqrt(1.0)