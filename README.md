# prawn

A parser and interpreter for Prawn, a very small scripting language. A Prawn
program is a list of variable declarations and `write` calls:

```
var myVar = "Hola Mundo";
var myInt = 200;
var total = 200 + 200;
write(myInt);
write(myVar);
write("Hola");
```

## Installation

```
pip install .
```

To install the test tools as well, use `pip install .[test]`.

## Modules

- `prawn.tokenspec` holds the token definitions. It has the `TokenType`
  enumeration and the `Token` record, which has the fields `type`, `literal`,
  `position` and `line`. It also has the tables `SYMBOL_TOKENS`,
  `SYMBOLS_ARITHMETIC` and `KEYWORDS`, plus two functions,
  `new_token(token_type, literal, position, line)` and `lookup_ident(ident)`.
  `lookup_ident` returns `TokenType.VAR` for `var` and `TokenType.WRITE` for
  `write`. It returns `TokenType.IDENT` for any other word.
- `prawn.review` holds the character checks `is_letter`, `is_digit`,
  `is_symbol` and `is_arithmetic_symbol`.
  - `is_letter` accepts an ASCII letter or `_`.
  - `is_digit` accepts an ASCII digit.
  - `is_symbol` accepts a single character that is a key of `SYMBOL_TOKENS`.
  - `is_arithmetic_symbol` accepts one of `+ - * / %`.
- `prawn.errors` builds error messages:
  - `create_error_expected(line, column, expected, found)` gives
    `Expected '<expected>' but found '<found>' in <line>:<column>`.
  - `create_error_unrecognizable_token(line, column, token_literal)`.
- `prawn.parser` turns tokens into a program tree.
  - The expression nodes are `NumberExpr`, `StringExpr`, `VarExpr` and
    `BinaryExpr`.
  - The statements are `VarDeclare` and `WriteDecl`. Each has a `payload()`
    method that returns the statement's dictionary.
  - `atoi(text)` parses a signed decimal integer. It returns 0 for malformed
    text and clamps the result to the 64-bit range.
- `prawn.interpreter` runs a parsed program:
  - `run(program, out)` goes through the statements in order. For a
    declaration it prints `Declaracion de variable: ` followed by the
    declaration's payload. For a `write` it renders the value.
  - `render_value(node, program, out)` writes one expression:
    - a string is written with no trailing newline;
    - a number is written followed by a newline;
    - a variable is rendered once for every declaration of that name in
      `program`;
    - a binary expression is printed as its structure and is not evaluated.

  In both functions `out` defaults to standard output.

## Usage

```python
import io

from prawn.interpreter import run
from prawn.parser import Parser
from prawn.tokenspec import TokenType, new_token

tokens = [
    new_token(TokenType.VAR, "var", 0, 1),
    new_token(TokenType.IDENT, "myInt", 4, 1),
    new_token(TokenType.ASSIGN, "=", 10, 1),
    new_token(TokenType.INT, "200", 12, 1),
    new_token(TokenType.SEMICOLON, ";", 15, 1),
    new_token(TokenType.WRITE, "write", 0, 2),
    new_token(TokenType.LPAREN, "(", 5, 2),
    new_token(TokenType.IDENT, "myInt", 6, 2),
    new_token(TokenType.RPAREN, ")", 11, 2),
    new_token(TokenType.SEMICOLON, ";", 12, 2),
]

ast, errors = Parser(tokens).parse()
out = io.StringIO()
run(ast["Program"], out)
print(out.getvalue())
# Declaracion de variable:  {'Ident': 'myInt', 'Value': NumberExpr(value=200)}
# 200
print(errors)
# ["Token ';' no reconocido position '9'"]
```

### How the parser behaves

- **Input.** The parser reads tokens until the iterable ends or until it meets
  an `EOF` token, whichever comes first.
- **Errors.** It does not stop at the first error. `parse()` returns the
  program as `{"Program": [...]}` together with a list of the error messages
  it collected. Each statement is a dictionary of the form
  `{"VarDeclare": payload}` or `{"Write": payload}`.
- **Semicolon after `write`.** A `write` statement leaves the parser on its
  closing semicolon. The next pass reports that semicolon as an unrecognised
  token, so every `write` adds one such message to the errors. The example
  above shows this.
- **Running out of input.** If the tokens run out in the middle of a
  statement, the parser raises `IndexError`.

## What this package does not do

- **No lexer.** Nothing in the package turns program text into tokens. You
  must build the token list yourself, for example with `new_token`.
- **No command-line program.** The package installs no command.
- **No arithmetic.** The interpreter does not evaluate arithmetic. It prints
  binary expressions as they are.