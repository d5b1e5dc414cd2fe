"""Vehicle cost calculations with per-type tax rules."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Vehicle(ABC):
    """A vehicle with a base price and a tax rate."""

    def __init__(self, base_rate: float, tax_rate: float) -> None:
        self.base_rate = base_rate
        self.tax_rate = tax_rate

    @abstractmethod
    def taxes(self) -> float:
        """Return the tax owed on this vehicle."""

    def total_cost(self) -> float:
        """Return the base price plus taxes."""
        return self.base_rate + self.taxes()


class NormalCar(Vehicle):
    """A standard car taxed at 15%."""

    TAX_RATE = 0.15

    def __init__(self, base_rate: float) -> None:
        super().__init__(base_rate, self.TAX_RATE)

    def taxes(self) -> float:
        return self.tax_rate * self.base_rate


class LuxuryCar(Vehicle):
    """A luxury car taxed at 20% plus a fixed extra duty."""

    TAX_RATE = 0.20
    EXTRA_DUTY = 30000.0

    def __init__(self, base_rate: float) -> None:
        super().__init__(base_rate, self.TAX_RATE)
        self.duty = self.EXTRA_DUTY

    def taxes(self) -> float:
        return self.tax_rate * self.base_rate + self.duty