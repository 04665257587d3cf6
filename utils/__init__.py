"""
Utility modules
"""

from .input_parser import InputParser
from .visualization import Visualizer

__all__ = ['InputParser', 'Visualizer']
