"""
Constrained multiset password generation.
"""

from .core import PasswordGenerator, generate, generate_password
from .normalizer import merge_exclusions, normalize
from .validator import validate

__all__ = [
    'PasswordGenerator',
    'generate',
    'generate_password',
    'merge_exclusions',
    'normalize',
    'validate',
]
