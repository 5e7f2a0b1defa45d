# Standard library imports
from typing import Any, Dict, Type, TypeVar, Union

TypeVarType = TypeVar('TypeVarType')


class BaseContainer:
    """Base dependency injection container with core functionality"""

    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}

    def register_singleton(self, key: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[key] = instance

    def get(self, key: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get the registered instance for a type or string key"""
        if key not in self.instances:
            raise LookupError(f"No registration found for {key}")
        return self.instances[key]
