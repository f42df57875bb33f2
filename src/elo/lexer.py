from collections import namedtuple
from functools import reduce
import operator
import math

import regex


Token = namedtuple('Token', ['kind', 'text', 'value'])


class Lexer:
    '''
    Lexer for the Elo *regular* grammar.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    # 1, 12, 1.5, but not .5 or 1. ASCII digits only, \d is Unicode.
    NUMBER = r'''
              [0-9]+
              (?:
                  \.
                  [0-9]+
              )?
              '''
    OPERATOR = r'[+\-*/^]'
    FUNCTION = r'sin|cos|tan|sqrt'
    KEYWORD = r'print'
    # Resolved right here, unlike every other name. Order matters: pi before e.
    CONSTANT = r'pi|e'
    IDENTIFIER = r'[a-zA-Z_]+'

    # All possible lexemes. First alternative wins, not the longest one, so
    # sinh is sin then h.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<function>' + FUNCTION + r')|' \
             r'(?<keyword>' + KEYWORD + r')|' \
             r'(?<constant>' + CONSTANT + r')|' \
             r'(?<identifier>' + IDENTIFIER + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    CONSTANTS = {
        'pi': math.pi,
        'e': math.e,
    }

    def lex(self, line):
        '''
        Take a line and yield all tokens.

        Anything not part of the grammar is skipped.
        '''
        for match in regex.finditer(type(self).LEXEME, line,
                                    flags=type(self).FLAGS):
            yield self.totoken(match)

    def tokenize(self, line):
        '''
        Eager lex.
        '''
        return list(self.lex(line))

    def totoken(self, match):
        '''
        Convert a lexeme match into a Token.
        '''
        kind, text = self.matchedgroup(match)
        if kind == 'number':
            value = float(text)
        elif kind == 'constant':
            value = type(self).CONSTANTS[text]
        else:
            value = text
        return Token(kind, text, value)

    def matchedgroup(self, match):
        '''
        Return the (only) group name and text the lexeme matched.
        '''
        return next((key, value)
                    for key, value
                    in match.groupdict().items()
                    if value is not None)
