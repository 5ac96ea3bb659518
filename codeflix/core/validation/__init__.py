"""
Validation - error accumulation protocol

- Error: single validation failure
- ValidationHandler: collection/propagation contract
- Notification: accumulating handler
- ThrowsValidationHandler: fail-fast handler
- Validator: base for aggregate validators
- self_validate / validated_mutation: aggregate self-validation
"""

from codeflix.core.validation.error import Error
from codeflix.core.validation.handler import ValidationHandler
from codeflix.core.validation.notification import Notification
from codeflix.core.validation.throws_validation_handler import ThrowsValidationHandler
from codeflix.core.validation.validator import Validator
from codeflix.core.validation.self_validation import self_validate, validated_mutation

__all__ = [
    "Error",
    "ValidationHandler",
    "Notification",
    "ThrowsValidationHandler",
    "Validator",
    "self_validate",
    "validated_mutation",
]
