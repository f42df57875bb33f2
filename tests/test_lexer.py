'''
Elo lexer tests
'''

import math

from elo.lexer import Lexer, Token


def kinds(tokens):
    return [t.kind for t in tokens]


def test_numbers(lexer):
    tokens = lexer.tokenize('5 3.25 007')
    assert kinds(tokens) == ['number'] * 3
    assert [t.value for t in tokens] == [5.0, 3.25, 7.0]


def test_trailing_dot_is_not_part_of_number(lexer):
    # The dot matches nothing and is dropped.
    assert lexer.tokenize('1.') == [Token('number', '1', 1.0)]
    assert lexer.tokenize('.5') == [Token('number', '5', 5.0)]


def test_operators(lexer):
    tokens = lexer.tokenize('+ - * / ^')
    assert kinds(tokens) == ['operator'] * 5
    assert [t.value for t in tokens] == ['+', '-', '*', '/', '^']


def test_no_whitespace_needed(lexer):
    tokens = lexer.tokenize('5 3+2*')
    assert [t.text for t in tokens] == ['5', '3', '+', '2', '*']


def test_functions_and_keyword(lexer):
    tokens = lexer.tokenize('sin cos tan sqrt print')
    assert kinds(tokens) == ['function'] * 4 + ['keyword']


def test_constants_resolved_when_lexed(lexer):
    assert lexer.tokenize('pi e') == [Token('constant', 'pi', math.pi),
                                      Token('constant', 'e', math.e)]


def test_other_names_are_identifiers(lexer):
    tokens = lexer.tokenize('c g G PI foo_bar')
    assert kinds(tokens) == ['identifier'] * 5
    assert [t.value for t in tokens] == ['c', 'g', 'G', 'PI', 'foo_bar']


def test_first_alternative_wins(lexer):
    assert [t.text for t in lexer.tokenize('sinh')] == ['sin', 'h']
    assert [t.text for t in lexer.tokenize('pie')] == ['pi', 'e']
    assert [t.text for t in lexer.tokenize('exp')] == ['e', 'xp']
    assert kinds(lexer.tokenize('printer')) == ['keyword', 'constant',
                                              'identifier']


def test_unknown_characters_skipped(lexer):
    tokens = lexer.tokenize('(5, 3) % + # !')
    assert [t.text for t in tokens] == ['5', '3', '+']


def test_empty(lexer):
    assert lexer.tokenize('') == []
    assert lexer.tokenize('  \t ') == []


def test_lex_is_lazy_and_restartable():
    l = Lexer()
    first = l.lex('1 2 +')
    assert next(first) == Token('number', '1', 1.0)
    assert l.tokenize('1 2 +') == l.tokenize('1 2 +')


def test_only_ascii_digits(lexer):
    # ARABIC-INDIC DIGIT THREE is a digit to \d, not to us.
    tokens = lexer.tokenize('\N{ARABIC-INDIC DIGIT THREE} 2 +')
    assert [t.text for t in tokens] == ['2', '+']
