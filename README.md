# dummyc

The front end of a compiler for DummyC, a minimal C-like language in which
every value is an `int`. It parses source text into a syntax tree and
provides the types, symbols and scopes that name resolution works with.

## The language

A DummyC program is a sequence of function declarations and definitions:

```c
int foo(int i);

int foo(int i) {
    return i;
}

int main() {
    int i;          // variables are declared at the top of a function
    i = 0;
    i = i + 1;
    foo(i);
    /* multi-line comments are allowed too */
    return (i - 10 / 5) * 2;
}
```

The grammar covers:

- `int` as the only type
- function declarations (prototypes ending in `;`) and function definitions
- local variable declarations at the start of a function body
- assignment, `+`, `-`, `*`, `/` and parentheses
- function calls and `return`
- integer literals in the 32-bit signed range
- `//` and `/* ... */` comments; inside a block comment the first `*` must
  begin the closing `*/`

## Parsing

```python
from dummyc.parser import parse, ParseError

module = parse(source_text, "program")
unit = module.unit
for func in unit.functions:
    print(func.signature.func_name.value, len(func.signature.params))
```

`parse(code, name)` returns a `dummyc.ast.Module` holding a
`TranslationUnit` and the given name. `Parser(code).parse_translation_unit()`
does the same work and returns the `TranslationUnit` alone.

Syntax errors, and empty input, raise `dummyc.parser.ParseError`. Its
`message`, `line` and `col` attributes say what was expected and where;
`str()` of the error reads `line:col: message`.

## The syntax tree

`dummyc.ast` holds one dataclass per kind of node: `TranslationUnit`,
`FunctionDeclaration`, `FunctionDefinition`, `Prototype`, `Parameter`,
`FunctionStatement`, `VariableDeclaration`, `JumpStatement`,
`BinaryExpression`, `CallExpression`, `Identifier` and `NumberLiteral`, all
derived from `Node`. Every node has `start` and `end` `SourceLocation`s
(1-based line and column, tabs expanded to a width of 4) for the nodes the
parser locates; they are left out of equality comparisons, so two trees built
from the same program compare equal regardless of layout.

`BinaryExpression.operator` is one of `=`, `+`, `-`, `*` and `/`; chains of
the same precedence group to the left.

Nodes also carry `symbol` or `scope` fields meant for the results of name
resolution; the parser leaves them as `None`.

## Symbols and scopes

`dummyc.symbols` provides:

- `BuiltinType` — a type built into the language; `GlobalScope.get_builtin_type("int")`
  returns the only one, any other name gives `None`.
- `VariableSymbol` — a local variable or parameter.
- `FunctionSymbol` — a function, which is also the scope of its body.
  `add_variable` defines a local (replacing one of the same name);
  `resolve_variable` looks in the locals, then the parameters, then the
  enclosing scope; `resolve_function` asks the enclosing scope.
- `GlobalScope` — the outermost scope holding every function.
  `resolve_function(name, param_types=None)` finds a function by name and, when
  argument types are given, by number of parameters. There are no global
  variables, so `resolve_variable` always gives `None`.
- `SymbolTable` — wraps the root `GlobalScope`.

```python
from dummyc.symbols import FunctionSymbol, GlobalScope, VariableSymbol

root = GlobalScope()
int_type = GlobalScope.get_builtin_type("int")
foo = FunctionSymbol("foo", int_type, params=[VariableSymbol("i", int_type)],
                     enclosing_scope=root)
root.add_function(foo)

assert root.resolve_function("foo", [int_type]) is foo
assert root.resolve_function("foo", []) is None
assert foo.resolve_variable("i").name == "i"
```

## What this package does not do

It stops at parsing and the symbol data structures. There is no pass that
walks a parsed tree to build scopes and report undeclared variables or
functions, no code generation, and no command-line program; a caller who needs
those builds them on top of `dummyc.parser` and `dummyc.symbols`.

## Running the tests

```
pip install -e ".[test]"
pytest
```