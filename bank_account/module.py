"""
Host Runtime Export Module

Describes which account types, constructors, methods and properties are
visible to a host runtime that works with objects by name. The export
table is built once at import time and never mutated.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .account import BankAccount


@dataclass(frozen=True)
class ClassExport:
    """
    One exposed class with its constructors, methods and read-only properties
    """
    name: str
    cls: type
    constructor_arities: Tuple[int, ...] = (0,)
    methods: Tuple[str, ...] = ()
    # (exported name, attribute read on the instance)
    properties: Tuple[Tuple[str, str], ...] = ()
    
    def __post_init__(self):
        for attr in self.methods + tuple(attr for _, attr in self.properties):
            if not hasattr(self.cls, attr):
                raise ValueError(f"{self.cls.__name__} has no attribute '{attr}' to export")
    
    def new(self, *args: Any) -> Any:
        """
        Construct an instance through one of the exposed constructors
        
        Raises:
            TypeError: If no constructor takes len(args) arguments
        """
        if len(args) not in self.constructor_arities:
            raise TypeError(
                f"{self.name} has no constructor taking {len(args)} argument(s); "
                f"available: {list(self.constructor_arities)}"
            )
        return self.cls(*args)
    
    def call(self, instance: Any, method: str, *args: Any) -> Any:
        """Invoke an exposed method on instance by name"""
        if method not in self.methods:
            raise AttributeError(f"{self.name} does not expose method '{method}'")
        return getattr(instance, method)(*args)
    
    def get(self, instance: Any, prop: str) -> Any:
        """Read an exposed property on instance by name"""
        attrs = dict(self.properties)
        if prop not in attrs:
            raise AttributeError(f"{self.name} does not expose property '{prop}'")
        return getattr(instance, attrs[prop])
    
    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "constructors": list(self.constructor_arities),
            "methods": list(self.methods),
            "properties": [name for name, _ in self.properties],
        }


@dataclass(frozen=True)
class ModuleExport:
    """Named collection of exposed classes"""
    name: str
    classes: Tuple[ClassExport, ...] = ()
    
    def get_class(self, name: str) -> ClassExport:
        """
        Look up an exposed class by its exported name
        
        Raises:
            LookupError: If no class is exported under name
        """
        export = self.find_class(name)
        if export is None:
            raise LookupError(f"Module {self.name} does not export class '{name}'")
        return export
    
    def find_class(self, name: str) -> Optional[ClassExport]:
        for export in self.classes:
            if export.name == name:
                return export
        return None
    
    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "classes": [export.describe() for export in self.classes],
        }


EXPORTS = ModuleExport(
    name="bank_account",
    classes=(
        ClassExport(
            name="BankAccount",
            cls=BankAccount,
            constructor_arities=(0, 1),
            methods=("deposit", "withdraw"),
            properties=(
                ("current_balance", "current_balance"),
                ("get_current_balance", "current_balance"),
            ),
        ),
    ),
)
