"""harvest-resource - Bounded gauges and drain rates for the harvest engine."""
from harvest_resource.drain import Consumption, DrainRates, classify, make_drain_system
from harvest_resource.gauge import Gauge, GaugeHelper

__all__ = [
    "Consumption",
    "DrainRates",
    "Gauge",
    "GaugeHelper",
    "classify",
    "make_drain_system",
]
