"""
Contract Validation Module

Модуль для валидации JSON контрактов на границе с адаптером отрисовки.
"""

from .validators import (
    ContractValidator,
    GenerationInputValidator,
    RayFormationValidator,
    SchemaLoader,
    validate_generation_input,
    validate_ray_formation,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "GenerationInputValidator",
    "RayFormationValidator",
    # Functions
    "validate_generation_input",
    "validate_ray_formation",
]
