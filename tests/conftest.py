from pytest import Item, fixture

from elo.lexer import Lexer
from elo.machine import Machine


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def machine() -> Machine:
    return Machine()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, e.g. to check float tolerances after a run.

    Use with pytest -rP and enable_assertion_pass_hook = true.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
