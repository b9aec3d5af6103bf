from lark import Lark

"""
compact text form of an input document, e.g for the command line:
    k=3 1:4/10 2:111/2 3:12/10 6:213/4

language:
start S
nonterminals S, R, E
productions:
S ->  R
    | R E
    | R E ... E

R ->  k = NUM
E ->  NUM : DIGITS / NUM      (x : encoded value / base)

whitespace, ',' and ';' between items are ignored
"""

parser = Lark(r"""
    start: required share*

    required: "k" "=" INT
    share: INT ":" VALUE "/" INT

    VALUE: /[0-9A-Za-z]+/
    SEPARATOR: /[,;]/

    %import common.INT
    %import common.WS
    %ignore WS
    %ignore SEPARATOR
    """, start='start')
