"""A collection of frequently used regular expressions for lexers.

All values are pattern sources, ready for Lexer.add_rule() and friends:

    lexer.add_discard(patterns.WHITESPACE)
    lexer.add_discard(patterns.SLASH_STAR_COMMENT)
    lexer.add_token(patterns.DOUBLE_QUOTED_STRING, "STRING")
"""

# Comments and whitespace
SLASH_STAR_COMMENT = r"/\*(?:.|\n)*?\*/"  # C-style block comment, may span lines
SLASH_SLASH_COMMENT = r"//.*"  # C++-style comment up to the end of the line
WHITESPACE = r"\s+"

# Literals
DOUBLE_QUOTED_STRING = r'"(?:[^"\\\n]|\\.)*"'  # with backslash escapes
SINGLE_QUOTED_STRING = r"'(?:[^'\\\n]|\\.)*'"
IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"
INTEGER = r"[0-9]+"

# Delimiters
L_BRACE = r"\{"
R_BRACE = r"\}"
L_BRACKET = r"\["
R_BRACKET = r"\]"
L_PAREN = r"\("
R_PAREN = r"\)"

# Punctuation
SEMICOLON = r";"
COLON = r":"
COMMA = r","

# Comparison
EQ = r"="
LT = r"<"
GT = r">"
LE = r"<="
GE = r">="

# Bitwise
AND = r"&"
OR = r"\|"
XOR = r"\^"

# Arithmetic
PLUS = r"\+"
MINUS = r"-"
TIMES = r"\*"
DIV = r"/"
