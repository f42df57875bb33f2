'''
Elo Physics/Math RPN Language.

A small RPN calculator: arithmetic, a handful of trigonometric functions, and
the physical constants you keep having to look up. Not intended to be
Turing-complete!

One line is one program, evaluated on its own fresh stack:

    5 3 +                   # 8
    pi 2 / cos              # 0, give or take
    1500 25 2 ^ * 0.5 *     # kinetic energy, 468750

No variables, no functions of your own, no control flow. Names other than pi
and e are looked up as constants when they're evaluated, not when they're
lexed.
'''

from .cli import CLI
from .lexer import Lexer, Token
from .machine import Machine
from .util import EloError


__all__ = 'Machine', 'Lexer', 'Token', 'CLI', 'EloError'
