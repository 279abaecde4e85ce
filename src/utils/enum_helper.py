"""Enum conversion utilities"""

from enum import Enum
from typing import TypeVar, Type, Optional, List, Any

# Generic type for any Enum subclass
E = TypeVar("E", bound=Enum)

class EnumHelper:
    """
    Utility class for working with Enums:
    - Convert enum members to strings (with case options)
    - Parse strings back to enum members by name or by value
    - List all member names
    """

    @staticmethod
    def to_string(enum_value: E, lowercase: bool = False) -> str:
        """
        Convert Enum member to string (its name).

        Args:
            enum_value: Enum member
            lowercase: Return lowercase string (for config or tags)

        Returns:
            Enum member name as string
        """
        if not isinstance(enum_value, Enum):
            raise TypeError(f"Expected Enum, got {type(enum_value).__name__}")
        name = enum_value.name
        return name.lower() if lowercase else name

    @staticmethod
    def from_string(enum_class: Type[E], name: str, case_insensitive: bool = True,
                    default: Optional[E] = None) -> Optional[E]:
        """
        Parse string to Enum member by member name.

        Args:
            enum_class: Enum class to parse into
            name: String name (case-insensitive by default)
            case_insensitive: If True, matches ignoring case
            default: Return value if not found (None = raise)

        Returns:
            Enum member or default if provided
        """
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        if case_insensitive:
            name = name.upper()

        for member in enum_class:
            if (member.name.upper() if case_insensitive else member.name) == name:
                return member

        if default is not None:
            return default
        raise ValueError(f"Invalid {enum_class.__name__}: {name}")

    @staticmethod
    def from_value(enum_class: Type[E], value: Any, default: Optional[E] = None) -> Optional[E]:
        """
        Parse a raw value to Enum member (exact match on member value).

        Args:
            enum_class: Enum class to parse into
            value: Raw value, e.g. "rectangle"
            default: Return value if not found (None = raise)

        Returns:
            Enum member or default if provided
        """
        try:
            return enum_class(value)
        except ValueError:
            if default is not None:
                return default
            raise

    @staticmethod
    def values(enum_class: Type[E]) -> List[Any]:
        """List all raw member values (e.g. tokens accepted in a description line)"""
        return [member.value for member in enum_class]
