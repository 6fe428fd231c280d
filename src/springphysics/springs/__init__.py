"""
Composite springs built on the per-axis core: scalar, vector and color
springs, their events and step-response sampling.
"""
from .spring import Spring
from .shapes import SpringFloat, SpringVector, SpringVector2, SpringVector3, SpringVector4, SpringColor
from .events import SpringEvents
from .response import DampingRegime, damping_ratio, classify_damping, sample_response, peak_overshoot, settle_time

__all__ = [
    "Spring",
    "SpringFloat",
    "SpringVector",
    "SpringVector2",
    "SpringVector3",
    "SpringVector4",
    "SpringColor",
    "SpringEvents",
    "DampingRegime",
    "damping_ratio",
    "classify_damping",
    "sample_response",
    "peak_overshoot",
    "settle_time",
]
