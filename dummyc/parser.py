"""Recursive-descent parser for DummyC source text."""

from __future__ import annotations

import re
from bisect import bisect_right
from typing import Callable, List, Optional, TypeVar

from dummyc.ast import (
    BinaryExpression,
    CallExpression,
    Expression,
    FunctionDeclaration,
    FunctionDefinition,
    FunctionStatement,
    Identifier,
    JumpStatement,
    Module,
    Node,
    NumberLiteral,
    Parameter,
    Prototype,
    SourceLocation,
    Statement,
    TranslationUnit,
    VariableDeclaration,
)

_T = TypeVar("_T")
_N = TypeVar("_N", bound=Node)

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_LINE_COMMENT = re.compile(r"//[^\r\n]*")
_SPACES = frozenset(" \t\n\v\f\r")
_RESERVED_WORDS = ("return", "int")
_TYPE_NAME = "int"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_TAB_WIDTH = 4


class ParseError(Exception):
    """The source text does not follow the DummyC grammar."""

    def __init__(self, message: str, line: int = 0, col: int = 0) -> None:
        super().__init__(f"{line}:{col}: {message}")
        self.message = message
        self.line = line
        self.col = col


class Parser:
    """Parses one DummyC source text into a syntax tree.

    Whitespace, ``//`` comments and ``/* */`` comments are skipped between
    tokens. Inside a block comment the first ``*`` must be the start of the
    closing ``*/``.
    """

    def __init__(self, code: str) -> None:
        self.code = code
        self._pos = 0
        self._line_starts = [0, *(m.end() for m in _LINE_BREAK.finditer(code))]

    # -- entry point -------------------------------------------------------

    def parse_translation_unit(self) -> TranslationUnit:
        """Parse the whole text: function declarations and definitions."""
        self._pos = 0
        self._skip()
        start = self._pos
        decls: List[FunctionDeclaration] = []
        functions: List[FunctionDefinition] = []
        while True:
            decl = self._function_declaration()
            if decl is not None:
                decls.append(decl)
                continue
            func = self._function_definition()
            if func is not None:
                functions.append(func)
                continue
            break
        self._skip()
        if self._pos != len(self.code):
            raise self._error("expected a function declaration or definition")
        return self._locate(TranslationUnit(decls, functions), start)

    # -- locations and errors ----------------------------------------------

    def _location(self, pos: int) -> SourceLocation:
        line = bisect_right(self._line_starts, pos)
        col = 1
        for ch in self.code[self._line_starts[line - 1]:pos]:
            col += _TAB_WIDTH - (col - 1) % _TAB_WIDTH if ch == "\t" else 1
        return SourceLocation(line, col)

    def _locate(self, node: _N, start: int) -> _N:
        node.start = self._location(start)
        node.end = self._location(self._pos)
        return node

    def _error(self, message: str, pos: Optional[int] = None) -> ParseError:
        where = self._location(self._pos if pos is None else pos)
        return ParseError(message, where.line, where.col)

    # -- lexical helpers ---------------------------------------------------

    def _skip(self) -> None:
        text = self.code
        while self._pos < len(text):
            if text[self._pos] in _SPACES:
                self._pos += 1
            elif text.startswith("//", self._pos):
                self._pos = _LINE_COMMENT.match(text, self._pos).end()
            elif text.startswith("/*", self._pos):
                star = text.find("*", self._pos + 2)
                if star < 0:
                    return
                if not text.startswith("*/", star):
                    raise self._error("expected '/' after '*' in comment", star + 1)
                self._pos = star + 2
            else:
                return

    def _literal(self, word: str) -> bool:
        saved = self._pos
        self._skip()
        if self.code.startswith(word, self._pos):
            self._pos += len(word)
            return True
        self._pos = saved
        return False

    def _one_of(self, *words: str) -> Optional[str]:
        for word in words:
            if self._literal(word):
                return word
        return None

    def _expect_literal(self, word: str) -> None:
        if not self._literal(word):
            self._skip()
            raise self._error(f"expected {word!r}")

    def _expect(self, node: Optional[_T], what: str) -> _T:
        if node is None:
            self._skip()
            raise self._error(f"expected {what}")
        return node

    def _comma_list(self, item: Callable[[], Optional[_T]]) -> List[_T]:
        first = item()
        if first is None:
            return []
        items = [first]
        while True:
            saved = self._pos
            if not self._literal(","):
                return items
            following = item()
            if following is None:
                self._pos = saved
                return items
            items.append(following)

    # -- expressions -------------------------------------------------------

    def _identifier(self) -> Optional[Identifier]:
        self._skip()
        match = _IDENTIFIER.match(self.code, self._pos)
        if match is None:
            return None
        start = self._pos
        self._pos = match.end()
        return self._locate(Identifier(match.group()), start)

    def _number_literal(self) -> Optional[NumberLiteral]:
        self._skip()
        match = _INTEGER.match(self.code, self._pos)
        if match is None:
            return None
        value = int(match.group())
        if not _INT_MIN <= value <= _INT_MAX:
            return None
        self._pos = match.end()
        return NumberLiteral(value)

    def _primary_expression(self) -> Optional[Expression]:
        self._skip()
        start = self._pos
        if not self.code.startswith(_RESERVED_WORDS, start):
            name = self._identifier()
            if name is not None:
                return self._locate(name, start)
        number = self._number_literal()
        if number is not None:
            return self._locate(number, start)
        if self._literal("("):
            inner = self._expect(self._assignment_expression(), "an expression")
            self._expect_literal(")")
            return self._locate(inner, start)
        return None

    def _postfix_expression(self) -> Optional[Expression]:
        saved = self._pos
        name = self._identifier()
        if name is not None and self._literal("("):
            arguments = self._comma_list(self._assignment_expression)
            if self._literal(")"):
                return CallExpression(name, arguments)
        self._pos = saved
        return self._primary_expression()

    def _binary_chain(
        self, operand: Callable[[], Optional[Expression]], operators: tuple
    ) -> Optional[Expression]:
        node = operand()
        if node is None:
            return None
        while (op := self._one_of(*operators)) is not None:
            rhs = self._expect(operand(), f"an operand after {op!r}")
            node = BinaryExpression(op, node, rhs)
        return node

    def _multiplicative_expression(self) -> Optional[Expression]:
        return self._binary_chain(self._postfix_expression, ("*", "/"))

    def _additive_expression(self) -> Optional[Expression]:
        return self._binary_chain(self._multiplicative_expression, ("+", "-"))

    def _assignment_expression(self) -> Optional[Expression]:
        self._skip()
        start = self._pos
        target = self._identifier()
        node: Optional[Expression]
        if target is not None and self._literal("="):
            value = self._expect(self._additive_expression(), "an expression after '='")
            node = BinaryExpression("=", target, value)
        else:
            self._pos = start
            node = self._additive_expression()
            if node is None:
                self._pos = start
                return None
        return self._locate(node, start)

    # -- statements --------------------------------------------------------

    def _expression_statement(self) -> Optional[Expression]:
        expr = self._assignment_expression()
        if expr is None:
            return None
        self._expect_literal(";")
        return expr

    def _jump_statement(self) -> Optional[JumpStatement]:
        self._skip()
        start = self._pos
        if not self._literal("return"):
            return None
        value = self._expect(self._assignment_expression(), "an expression after 'return'")
        node = JumpStatement(value)
        self._expect_literal(";")
        return self._locate(node, start)

    def _statement(self) -> Optional[Statement]:
        expr = self._expression_statement()
        if expr is not None:
            return expr
        return self._jump_statement()

    def _variable_declaration(self) -> Optional[VariableDeclaration]:
        self._skip()
        start = self._pos
        if self._literal(_TYPE_NAME):
            name = self._identifier()
            if name is not None and self._literal(";"):
                return self._locate(VariableDeclaration(_TYPE_NAME, name), start)
        self._pos = start
        return None

    def _function_statement(self) -> Optional[FunctionStatement]:
        saved = self._pos
        if not self._literal("{"):
            return None
        decls: List[Statement] = []
        while (decl := self._variable_declaration()) is not None:
            decls.append(decl)
        statements: List[Statement] = []
        while (stmt := self._statement()) is not None:
            statements.append(stmt)
        if not self._literal("}"):
            self._pos = saved
            return None
        return FunctionStatement(decls, statements)

    # -- top level ---------------------------------------------------------

    def _parameter(self) -> Optional[Parameter]:
        if not self._literal(_TYPE_NAME):
            return None
        name = self._expect(self._identifier(), "a parameter name")
        return Parameter(_TYPE_NAME, name)

    def _prototype(self) -> Optional[Prototype]:
        saved = self._pos
        if self._literal(_TYPE_NAME):
            name = self._identifier()
            if name is not None and self._literal("("):
                params = self._comma_list(self._parameter)
                if self._literal(")"):
                    return Prototype(_TYPE_NAME, name, params)
        self._pos = saved
        return None

    def _function_declaration(self) -> Optional[FunctionDeclaration]:
        saved = self._pos
        signature = self._prototype()
        if signature is not None and self._literal(";"):
            return FunctionDeclaration(signature)
        self._pos = saved
        return None

    def _function_definition(self) -> Optional[FunctionDefinition]:
        saved = self._pos
        self._skip()
        start = self._pos
        signature = self._prototype()
        if signature is not None:
            body = self._function_statement()
            if body is not None:
                return self._locate(FunctionDefinition(signature, body), start)
        self._pos = saved
        return None


def parse(code: str, name: str) -> Module:
    """Parse ``code`` into a module called ``name``.

    Raises ParseError if the text is empty or does not follow the grammar.
    """
    if not code:
        raise ParseError("empty source", 1, 1)
    return Module(Parser(code).parse_translation_unit(), name)