"""Types, symbols and scopes used by semantic analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union


@dataclass(frozen=True)
class BuiltinType:
    """A type built into the language; only ``int`` exists today."""

    name: str

    def __str__(self) -> str:
        return self.name


_BUILTIN_TYPES = (BuiltinType("int"),)


@dataclass(eq=False)
class Symbol:
    """A named entity with a type."""

    name: str
    type: Optional[BuiltinType] = None


@dataclass(eq=False)
class VariableSymbol(Symbol):
    """A local variable or a function parameter."""

    variable: Optional[Any] = None


@dataclass(eq=False)
class FunctionSymbol(Symbol):
    """A function; it is a symbol and also the scope of its body."""

    params: List[VariableSymbol] = field(default_factory=list)
    is_declaration: bool = False
    var_table: Dict[str, VariableSymbol] = field(default_factory=dict)
    node: Optional[Any] = None
    enclosing_scope: Optional[Scope] = None

    def resolve_function(
        self, name: str, param_types: Optional[Sequence[BuiltinType]] = None
    ) -> Optional[FunctionSymbol]:
        """Look the function up in the enclosing scope."""
        if self.enclosing_scope is None:
            return None
        return self.enclosing_scope.resolve_function(name, param_types)

    def resolve_variable(self, name: str) -> Optional[VariableSymbol]:
        """Find a local, then a parameter, then ask the enclosing scope."""
        local = self.var_table.get(name)
        if local is not None:
            return local
        for param in self.params:
            if param.name == name:
                return param
        if self.enclosing_scope is None:
            return None
        return self.enclosing_scope.resolve_variable(name)

    def add_variable(self, symbol: VariableSymbol) -> bool:
        """Define a local variable, replacing one of the same name."""
        self.var_table[symbol.name] = symbol
        return True


@dataclass(eq=False)
class GlobalScope:
    """The outermost scope, holding every function."""

    func_table: List[FunctionSymbol] = field(default_factory=list)
    ast: Optional[Any] = None
    enclosing_scope: Optional[Scope] = None

    def resolve_function(
        self, name: str, param_types: Optional[Sequence[BuiltinType]] = None
    ) -> Optional[FunctionSymbol]:
        """Find a function by name and, when types are given, by arity."""
        for func in self.func_table:
            if func.name != name:
                continue
            if param_types is None or len(param_types) == len(func.params):
                return func
        return None

    def resolve_variable(self, name: str) -> Optional[VariableSymbol]:
        """There are no global variables."""
        return None

    def add_function(self, function: FunctionSymbol) -> None:
        self.func_table.append(function)

    @staticmethod
    def get_builtin_type(name: str) -> Optional[BuiltinType]:
        """Return the builtin type called ``name``, if there is one."""
        return next((t for t in _BUILTIN_TYPES if t.name == name), None)


Scope = Union[GlobalScope, FunctionSymbol]


@dataclass
class SymbolTable:
    """The result of semantic analysis: the root of the scope tree."""

    root: GlobalScope