"""snake_cube.viz"""

from .plot import plot_survey

__all__ = ["plot_survey"]
