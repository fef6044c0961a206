#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Base Contract Classes

Defines the foundation for the value objects exchanged between the
layout engine, the renderers and the image encoder.
Contracts are immutable where possible, serializable, and validatable.

Version: 1.0.0
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
import json

from converter.exceptions import ConverterError


class ContractError(ConverterError):
    """Base error for contract violations"""
    pass


class ContractValidationError(ContractError):
    """Raised when contract validation fails"""
    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Contract validation failed: {errors}")


class BaseContract(ABC):
    """
    Abstract base class for contracts.

    All contracts must:
    1. Be serializable to a plain dictionary
    2. Be validatable
    """

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert contract to dictionary"""
        pass

    def to_json(self, indent: int = 2) -> str:
        """Convert contract to JSON string"""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def validate(self) -> List[str]:
        """
        Validate contract.
        Returns list of validation errors (empty if valid).
        """
        return []

    def is_valid(self) -> bool:
        """Check if contract is valid"""
        return len(self.validate()) == 0

    def assert_valid(self) -> None:
        """Raise error if contract is invalid"""
        errors = self.validate()
        if errors:
            raise ContractValidationError(errors)
