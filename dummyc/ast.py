"""Syntax tree of the DummyC language."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


@dataclass
class SourceLocation:
    """A line and column in the source text."""

    line: int = 0
    col: int = 0


def _location() -> Any:
    return field(default_factory=SourceLocation, kw_only=True, compare=False, repr=False)


def _link() -> Any:
    return field(default=None, kw_only=True, compare=False, repr=False)


@dataclass
class Node:
    """Base of every syntax tree node; carries its source span."""

    start: SourceLocation = _location()
    end: SourceLocation = _location()

    def __str__(self) -> str:
        return f"start_pos : {self.start.line} {type(self).__name__}"


@dataclass
class NumberLiteral(Node):
    """An integer constant."""

    value: int

    def __str__(self) -> str:
        return f"start_pos : {self.start.line}nunmber_literal : {self.value}"


@dataclass
class Identifier(Node):
    """A name; ``symbol`` is filled in by semantic analysis."""

    value: str
    symbol: Optional[Any] = _link()

    def __str__(self) -> str:
        return f"start_pos : {self.start.line}:{self.start.col} identifier : {self.value}"


@dataclass
class JumpStatement(Node):
    """A ``return`` statement."""

    ret_expr: Expression

    def __str__(self) -> str:
        return f" start_pos : {self.start.line} jump_statement"


@dataclass
class CallExpression(Node):
    """A call of a named function with a list of arguments."""

    func_name: Identifier
    arguments: List[Expression] = field(default_factory=list)
    symbol: Optional[Any] = _link()

    def __str__(self) -> str:
        return f"start_pos : {self.start.line} call_expression"


@dataclass
class BinaryExpression(Node):
    """An infix operation: one of ``=``, ``+``, ``-``, ``*`` or ``/``."""

    operator: str
    lhs: Expression
    rhs: Expression

    def __str__(self) -> str:
        return f"start_pos : {self.start.line}binary_expression"


@dataclass
class VariableDeclaration(Node):
    """A local variable declaration such as ``int i;``."""

    type_name: str
    name: Identifier
    symbol: Optional[Any] = _link()

    def __str__(self) -> str:
        return f"start_pos : {self.start.line}variable_declaration"


@dataclass
class FunctionStatement(Node):
    """The body of a function: declarations first, then statements."""

    var_decls: List[Statement] = field(default_factory=list)
    statements: List[Statement] = field(default_factory=list)

    def __str__(self) -> str:
        return f"start_pos : {self.start.line}function_statement"


@dataclass
class Parameter(Node):
    """A function parameter such as ``int i``."""

    type_name: str
    param_name: Identifier
    symbol: Optional[Any] = _link()

    def __str__(self) -> str:
        return f"start_pos : {self.start.line}parameter"


@dataclass
class Prototype(Node):
    """A function signature: return type, name and parameters."""

    type_name: str
    func_name: Identifier
    params: List[Parameter] = field(default_factory=list)

    def __str__(self) -> str:
        return f" start_pos : {self.start.line}prototype : {self.type_name} {self.func_name.value}"


@dataclass
class FunctionDefinition(Node):
    """A function with a body."""

    signature: Prototype
    body: FunctionStatement
    scope: Optional[Any] = _link()

    def __str__(self) -> str:
        return f"start_pos : {self.start.line}function_definition : {self.signature}"


@dataclass
class FunctionDeclaration(Node):
    """A function prototype followed by ``;``."""

    signature: Prototype
    scope: Optional[Any] = _link()

    def __str__(self) -> str:
        return f"start_pos : {self.start.line}function_declaration{self.signature}"


@dataclass
class TranslationUnit(Node):
    """All declarations and definitions of one source file."""

    func_decls: List[FunctionDeclaration] = field(default_factory=list)
    functions: List[FunctionDefinition] = field(default_factory=list)
    scope: Optional[Any] = _link()

    def __str__(self) -> str:
        return f"start_pos : {self.start.line}translation_unit"


@dataclass
class Module:
    """A parsed translation unit together with its name."""

    unit: TranslationUnit
    name: str


Expression = Union[Identifier, NumberLiteral, Parameter, BinaryExpression, CallExpression]
Statement = Union[VariableDeclaration, JumpStatement, Expression]