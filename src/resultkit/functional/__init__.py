"""함수형 래퍼와 Result 변환"""
from resultkit.functional.types import (
    Some, Nothing, NOTHING, Option, option_of,
    Left, Right, Either, Unit, UNIT,
    Valid, Invalid, Validation, validate_all,
    Returned, Raised, Exceptional, exceptional_of,
)
from resultkit.functional.conversions import (
    to_option, option_to_result,
    to_either, to_unit_either, either_to_result,
    to_validation, validation_to_result,
    to_exceptional, exceptional_to_result,
)

__all__ = [
    # Types
    "Some", "Nothing", "NOTHING", "Option", "option_of",
    "Left", "Right", "Either", "Unit", "UNIT",
    "Valid", "Invalid", "Validation", "validate_all",
    "Returned", "Raised", "Exceptional", "exceptional_of",
    # Conversions
    "to_option", "option_to_result",
    "to_either", "to_unit_either", "either_to_result",
    "to_validation", "validation_to_result",
    "to_exceptional", "exceptional_to_result",
]
