"""
Passmint - constrained password generator.
"""

from .generator import PasswordGenerator, generate, generate_password
from .models import ClassSettings, GenerationRequest

__version__ = "0.1.0"

__all__ = ['PasswordGenerator', 'generate', 'generate_password',
           'ClassSettings', 'GenerationRequest']
