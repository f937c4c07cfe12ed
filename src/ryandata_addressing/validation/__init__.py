"""Address validation against per-country reference data.

Validators are built on abstract_validation_base and composed into a
pipeline by create_default_validators().
"""

from __future__ import annotations

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from ryandata_addressing.validation.validators import (
    CountryValidator,
    PostalCodeValidator,
    RequiredFieldsValidator,
    SubdivisionValidator,
    create_default_validators,
)

__all__ = [
    "BaseValidator",
    "CompositeValidator",
    "ValidationResult",
    "ValidatorPipelineBuilder",
    "CountryValidator",
    "PostalCodeValidator",
    "RequiredFieldsValidator",
    "SubdivisionValidator",
    "create_default_validators",
]
