"""Entity package: Slider."""

from .repository import SliderRepository
from .table import SliderTable

__all__ = ["SliderRepository", "SliderTable"]
