"""Materials module for surface appearance.

Components:
    material: Phong material parameters and the lighting function
    patterns: Stripe, gradient, ring and checker color patterns
    light: Point light source
"""

from .light import PointLight
from .material import Material, lighting
from .patterns import CheckerPattern, GradientPattern, Pattern, RingPattern, StripePattern

__all__ = [
    "Material",
    "lighting",
    "Pattern",
    "StripePattern",
    "GradientPattern",
    "RingPattern",
    "CheckerPattern",
    "PointLight",
]
