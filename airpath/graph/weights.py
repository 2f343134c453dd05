"""
weights.py — Edge-Weight Policy
===============================
Turns a route's distance, delay and frequency into the single scalar the
searches consume.  Pure: same inputs, same weight, no graph access.

    time          = distance_km / avg_speed_kmh * 60
    high_freq     = frequency_per_day > high_frequency_threshold
    delay_penalty = delay_minutes * (1 if high_freq else 2000)
    bonus         = -5000 if high_freq else 0
    effective     = time + delay_penalty + bonus
    discount      = min(frequency_per_day * 0.2, 0.75)
    weight        = max(1, effective * (1 - discount))

With the 2000× delay multiplier and the -5000 bonus a delayed,
rarely-served route loses to almost any alternative.  Both are fields on
WeightPolicy.

Because of the floor at `min_weight` a weight is never zero or negative,
which keeps Graph.add_edge happy.
"""

from dataclasses import dataclass, asdict

from airpath.graph.route import validate_delay, validate_distance, validate_frequency


@dataclass(frozen=True)
class WeightBreakdown:
    flight_minutes:  float
    high_frequency:  bool
    delay_penalty:   float
    frequency_bonus: float
    effective:       float
    discount:        float
    weight:          float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class WeightPolicy:
    avg_speed_kmh:                  float = 800.0
    high_frequency_threshold:       int   = 2
    high_frequency_delay_multiplier: float = 1.0
    low_frequency_delay_multiplier: float = 2000.0
    high_frequency_bonus:           float = -5000.0
    discount_per_flight:            float = 0.2
    max_discount:                   float = 0.75
    min_weight:                     float = 1.0

    def is_high_frequency(self, frequency_per_day: int) -> bool:
        return frequency_per_day > self.high_frequency_threshold

    def breakdown(
        self,
        distance_km: float,
        delay_minutes: float = 0.0,
        frequency_per_day: int = 1,
    ) -> WeightBreakdown:
        """Every intermediate value of the policy, for tooltips and tests."""
        validate_distance(distance_km)
        validate_delay(delay_minutes)
        validate_frequency(frequency_per_day)

        flight_minutes = distance_km / self.avg_speed_kmh * 60
        high = self.is_high_frequency(frequency_per_day)

        multiplier = (
            self.high_frequency_delay_multiplier if high
            else self.low_frequency_delay_multiplier
        )
        delay_penalty = delay_minutes * multiplier if delay_minutes > 0 else 0.0
        bonus         = self.high_frequency_bonus if high else 0.0
        effective     = flight_minutes + delay_penalty + bonus
        discount      = min(frequency_per_day * self.discount_per_flight, self.max_discount)
        weight        = max(self.min_weight, effective * (1 - discount))

        return WeightBreakdown(
            flight_minutes=flight_minutes,
            high_frequency=high,
            delay_penalty=delay_penalty,
            frequency_bonus=bonus,
            effective=effective,
            discount=discount,
            weight=weight,
        )

    def weight(
        self,
        distance_km: float,
        delay_minutes: float = 0.0,
        frequency_per_day: int = 1,
    ) -> float:
        return self.breakdown(distance_km, delay_minutes, frequency_per_day).weight


DEFAULT_POLICY = WeightPolicy()


def edge_weight(distance_km: float, delay_minutes: float = 0.0, frequency_per_day: int = 1) -> float:
    """Weight under the default policy."""
    return DEFAULT_POLICY.weight(distance_km, delay_minutes, frequency_per_day)
