"""Feature modules."""

from .identifier_synthesizer import IdentifierSynthesizer
from .collision_detector import CollisionDetector, DuplicateIdentifierError

__all__ = [
    'IdentifierSynthesizer',
    'CollisionDetector',
    'DuplicateIdentifierError',
]
