"""
Keyword validator package initialization.

KEYWORD_VALIDATORS maps each supported keyword to the one validator that
handles it.
"""

from typing import Dict

from .base import KeywordValidator, TypedKeywordValidator
from .types import TypeValidator
from .enums import EnumValidator
from .consts import ConstValidator
from .numbers import (
    MinimumValidator,
    MaximumValidator,
    ExclusiveMinimumValidator,
    ExclusiveMaximumValidator,
    MultipleOfValidator
)
from .strings import MinLengthValidator, MaxLengthValidator, PatternValidator
from .formats import FormatValidator
from .arrays import (
    ItemsValidator,
    AdditionalItemsValidator,
    MinItemsValidator,
    MaxItemsValidator,
    UniqueItemsValidator,
    ContainsValidator
)
from .objects import (
    PropertiesValidator,
    PatternPropertiesValidator,
    AdditionalPropertiesValidator,
    RequiredValidator,
    MinPropertiesValidator,
    MaxPropertiesValidator,
    DependenciesValidator,
    PropertyNamesValidator
)
from .logical import (
    AllOfValidator,
    AnyOfValidator,
    OneOfValidator,
    NotValidator,
    IfThenElseValidator
)

KEYWORD_VALIDATORS: Dict[str, KeywordValidator] = {
    validator.keyword: validator
    for validator in (
        TypeValidator(),
        EnumValidator(),
        ConstValidator(),
        MinimumValidator(),
        MaximumValidator(),
        ExclusiveMinimumValidator(),
        ExclusiveMaximumValidator(),
        MultipleOfValidator(),
        MinLengthValidator(),
        MaxLengthValidator(),
        PatternValidator(),
        FormatValidator(),
        ItemsValidator(),
        AdditionalItemsValidator(),
        MinItemsValidator(),
        MaxItemsValidator(),
        UniqueItemsValidator(),
        ContainsValidator(),
        PropertiesValidator(),
        PatternPropertiesValidator(),
        AdditionalPropertiesValidator(),
        RequiredValidator(),
        MinPropertiesValidator(),
        MaxPropertiesValidator(),
        DependenciesValidator(),
        PropertyNamesValidator(),
        AllOfValidator(),
        AnyOfValidator(),
        OneOfValidator(),
        NotValidator(),
        IfThenElseValidator(),
    )
}

__all__ = [
    "KEYWORD_VALIDATORS",
    "KeywordValidator",
    "TypedKeywordValidator",
    "TypeValidator",
    "EnumValidator",
    "ConstValidator",
    "MinimumValidator",
    "MaximumValidator",
    "ExclusiveMinimumValidator",
    "ExclusiveMaximumValidator",
    "MultipleOfValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "PatternValidator",
    "FormatValidator",
    "ItemsValidator",
    "AdditionalItemsValidator",
    "MinItemsValidator",
    "MaxItemsValidator",
    "UniqueItemsValidator",
    "ContainsValidator",
    "PropertiesValidator",
    "PatternPropertiesValidator",
    "AdditionalPropertiesValidator",
    "RequiredValidator",
    "MinPropertiesValidator",
    "MaxPropertiesValidator",
    "DependenciesValidator",
    "PropertyNamesValidator",
    "AllOfValidator",
    "AnyOfValidator",
    "OneOfValidator",
    "NotValidator",
    "IfThenElseValidator"
]
