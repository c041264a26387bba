import pytest

from dummyc.ast import (
    BinaryExpression,
    CallExpression,
    FunctionStatement,
    Identifier,
    JumpStatement,
    NumberLiteral,
    Parameter,
    SourceLocation,
    TranslationUnit,
    VariableDeclaration,
)
from dummyc.parser import ParseError, Parser, parse


def _body(code, index=-1):
    return parse(code, "test").unit.functions[index].body


def _assign(name, value):
    return BinaryExpression("=", Identifier(name), value)


def _bin(op, lhs, rhs):
    return BinaryExpression(op, lhs, rhs)


def test_normal():
    code = """
      int main()
      {
        int i;
        i = 0;
        i=i+1;
        return 0;
      }
  """
    module = parse(code, "normal")
    assert module.name == "normal"
    assert module.unit.func_decls == []
    [func] = module.unit.functions
    assert func.signature.func_name.value == "main"
    assert func.signature.type_name == "int"
    assert func.signature.params == []
    assert func.body == FunctionStatement(
        [VariableDeclaration("int", Identifier("i"))],
        [
            _assign("i", NumberLiteral(0)),
            _assign("i", _bin("+", Identifier("i"), NumberLiteral(1))),
            JumpStatement(NumberLiteral(0)),
        ],
    )


@pytest.mark.parametrize("name", ["call_test 1", "call_test2"])
def test_call_expr(name):
    code = """
      int hoge()
      {
        return 1;
      }
      int main()
      {
        hoge();
        return 0;
      }
  """
    module = parse(code, name)
    assert module.name == name
    names = [f.signature.func_name.value for f in module.unit.functions]
    assert names == ["hoge", "main"]
    assert module.unit.functions[0].body.statements == [JumpStatement(NumberLiteral(1))]
    assert module.unit.functions[1].body.statements == [
        CallExpression(Identifier("hoge"), []),
        JumpStatement(NumberLiteral(0)),
    ]


def test_bin_expr_addition():
    body = _body("""
      int main()
      {
        int i;
        i = 0;
        i = i + 1;
        i = i + 1 + 1;
        return 0;
      }
  """)
    assert body.statements[2] == _assign(
        "i", _bin("+", _bin("+", Identifier("i"), NumberLiteral(1)), NumberLiteral(1))
    )


def test_bin_expr_subtraction():
    body = _body("""
      int main()
      {
        int i;
        i = 10;
        i = i - 1;
        i = i - 1 - 1;
        return 0;
      }
  """)
    assert body.statements[0] == _assign("i", NumberLiteral(10))
    assert body.statements[1] == _assign("i", _bin("-", Identifier("i"), NumberLiteral(1)))
    assert body.statements[2] == _assign(
        "i", _bin("-", _bin("-", Identifier("i"), NumberLiteral(1)), NumberLiteral(1))
    )


def test_bin_expr_multiplication():
    body = _body("""
      int main()
      {
        int i;
        i = 1;
        i = i * 1;
        i = i * 10 * 2;
        return 0;
      }
  """)
    assert body.statements[2] == _assign(
        "i", _bin("*", _bin("*", Identifier("i"), NumberLiteral(10)), NumberLiteral(2))
    )


def test_bin_expr_division():
    body = _body("""
      int main()
      {
        int i;
        i = 100;
        i = i / 10 / 2;
        return 0;
      }
      """)
    assert body.statements[1] == _assign(
        "i", _bin("/", _bin("/", Identifier("i"), NumberLiteral(10)), NumberLiteral(2))
    )


def test_bin_expr_parentheses():
    body = _body("""
      int main()
      {
        int i;
        i = 100;
        i = i / 10 / 2;
        i = (i - 10 / 5) + ( 10 / 2 + 5);
        return 0;
      }
  """)
    left = _bin("-", Identifier("i"), _bin("/", NumberLiteral(10), NumberLiteral(5)))
    right = _bin("+", _bin("/", NumberLiteral(10), NumberLiteral(2)), NumberLiteral(5))
    assert body.statements[2] == _assign("i", _bin("+", left, right))


def test_comment():
    body = _body("""
      int main()
      {
        // this is single line comment
        i = i * 1;
        
        /*
        this is multi line comment
        */
        i = i * 10;
        return 0;
      }
  """)
    assert body.var_decls == []
    assert body.statements == [
        _assign("i", _bin("*", Identifier("i"), NumberLiteral(1))),
        _assign("i", _bin("*", Identifier("i"), NumberLiteral(10))),
        JumpStatement(NumberLiteral(0)),
    ]


def test_multiplication_binds_tighter_than_addition():
    body = _body("int main() { return 1 + 2 * 3; }")
    assert body.statements == [
        JumpStatement(_bin("+", NumberLiteral(1), _bin("*", NumberLiteral(2), NumberLiteral(3))))
    ]


def test_signed_literals():
    body = _body("int main() { int i; i = -5; return +7; }")
    assert body.statements == [
        _assign("i", NumberLiteral(-5)),
        JumpStatement(NumberLiteral(7)),
    ]


def test_call_with_arguments():
    body = _body("int main() { foo(i, 1 + 2); return foo(3); }")
    assert body.statements == [
        CallExpression(Identifier("foo"), [Identifier("i"), _bin("+", NumberLiteral(1), NumberLiteral(2))]),
        JumpStatement(CallExpression(Identifier("foo"), [NumberLiteral(3)])),
    ]


def test_function_declaration_with_parameters():
    unit = parse("int add(int a, int b);\nint main() { return add(1, 2); }", "decl").unit
    [decl] = unit.func_decls
    assert decl.signature.func_name.value == "add"
    assert decl.signature.params == [
        Parameter("int", Identifier("a")),
        Parameter("int", Identifier("b")),
    ]
    assert [f.signature.func_name.value for f in unit.functions] == ["main"]


def test_parser_class_returns_translation_unit():
    unit = Parser("int f(int x) { return x; }").parse_translation_unit()
    assert isinstance(unit, TranslationUnit)
    assert unit.functions[0].signature.params == [Parameter("int", Identifier("x"))]
    assert unit.functions[0].body.statements == [JumpStatement(Identifier("x"))]


def test_whitespace_only_source_is_empty_unit():
    unit = parse("  \n // nothing here\n", "blank").unit
    assert unit.func_decls == []
    assert unit.functions == []


def test_locations():
    unit = parse("int main()\n{\n  return 0;\n}\n", "loc").unit
    func = unit.functions[0]
    assert func.start == SourceLocation(1, 1)
    assert func.end == SourceLocation(4, 2)
    assert func.signature.func_name.start == SourceLocation(1, 5)
    jump = func.body.statements[0]
    assert jump.start == SourceLocation(3, 3)
    assert jump.end == SourceLocation(3, 12)
    assert jump.ret_expr.start == SourceLocation(3, 10)


def test_tab_expands_column():
    unit = parse("int main()\n{\n\treturn 0;\n}", "tab").unit
    assert unit.functions[0].body.statements[0].start == SourceLocation(3, 5)


def test_empty_source_is_error():
    with pytest.raises(ParseError):
        parse("", "empty")


@pytest.mark.parametrize(
    "code",
    [
        "int main() { i = 1 }",
        "int main() { int i; i = 0; int j; return 0; }",
        "int f(int);",
        "int main() { return 2147483648; }",
        "int main() { return (1 + 2; }",
        "int main() { i = ; }",
        "int main() { return 0; } /* never closed",
        "int main() { return 0; } /* a * b */",
        "int main() { int integer; return integer; }",
        "main() { return 0; }",
    ],
)
def test_invalid_source_raises(code):
    with pytest.raises(ParseError):
        parse(code, "bad")


def test_int_limits_accepted():
    body = _body("int main() { int i; i = -2147483648; return 2147483647; }")
    assert body.statements == [
        _assign("i", NumberLiteral(-2147483648)),
        JumpStatement(NumberLiteral(2147483647)),
    ]


def test_error_position():
    with pytest.raises(ParseError) as info:
        parse("int main() {\n  return 0\n}", "pos")
    assert (info.value.line, info.value.col) == (3, 1)