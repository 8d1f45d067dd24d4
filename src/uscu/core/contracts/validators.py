"""
JSON Schema Contract Validators

Валидация сериализованной длины ({"whole_inches", "numerator16"}) по
контракту schema/length.json (package data).

"integer" понимается строго: JSON Schema по умолчанию принимает 1.0 как
целое, а Length требует int.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

from jsonschema import Draft202012Validator
from jsonschema.validators import extend

LENGTH_SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "length.json"


def _is_strict_integer(checker: Any, instance: Any) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


StrictIntegerValidator = extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


def _load_length_validator() -> Draft202012Validator:
    with open(LENGTH_SCHEMA_PATH, "r", encoding="utf-8") as f:
        schema = json.load(f)

    # Meta-validation самой схемы
    StrictIntegerValidator.check_schema(schema)
    return StrictIntegerValidator(schema)


_LENGTH_VALIDATOR = _load_length_validator()


def validate_length(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованной длины.

    Args:
        data: Данные для валидации ({"whole_inches": ..., "numerator16": ...})

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    _LENGTH_VALIDATOR.validate(data)
