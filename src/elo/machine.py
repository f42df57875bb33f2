from collections import deque
import operator
import math

from .util import wrap_user_errors, ieee_divide, ieee_power, ieee_unary
from .lexer import Lexer


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Takes tokens and runs them. Each call to evaluate gets its own stack, so
    nothing carries over from one line to the next.
    '''

    # Binary operators on the two topmost items. Left operand is the deeper
    # one.
    OPERATORS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': ieee_divide,
        '^': ieee_power,
    }

    # Unary functions on the topmost item, radians.
    FUNCTIONS = {
        'sin': ieee_unary(math.sin),
        'cos': ieee_unary(math.cos),
        'tan': ieee_unary(math.tan),
        'sqrt': ieee_unary(math.sqrt),
    }

    # Names looked up when evaluating identifiers. Exact case first, then
    # lowercase, so G and g differ but PI is still pi.
    CONSTANTS = {
        'pi': math.pi,
        'e': math.e,
        'c': 299792458.0,  # speed of light, m/s
        'g': 9.80665,  # standard gravity, m/s²
        'G': 6.67430e-11,  # gravitational constant, m³/(kg s²)
    }

    def __init__(self, debug=False):
        '''
        Create stack machine.

        :param debug: Trace tokens and the stack after every token.
        '''
        self.lexer = Lexer()
        self.debug = debug
        self.keywords = {
            'print': self.printtop,
        }

    def evaluate(self, line):
        '''
        Run a line on a fresh stack and return its top, or None if empty.
        '''
        tokens = self.lexer.tokenize(line)
        if self.debug:
            print('Tokens:')
            for token in tokens:
                print('  {}: {}'.format(token.kind, token.value))
        stack = deque()
        for token in tokens:
            self.feed(stack, token)
            if self.debug:
                print('Stack: {}'.format(list(stack)))
        result = stack[-1] if stack else None
        stack.clear()
        return result

    @wrap_user_errors('Cannot evaluate {2.text!r}')
    def feed(self, stack, token):
        '''
        Apply one token to stack.
        '''
        if token.kind in ('number', 'constant'):
            stack.append(token.value)
        elif token.kind == 'operator':
            self.binary(stack, type(self).OPERATORS[token.value])
        elif token.kind == 'function':
            self.unary(stack, type(self).FUNCTIONS[token.value])
        elif token.kind == 'keyword':
            self.keywords[token.value](stack)
        elif token.kind == 'identifier':
            self.load(stack, token.value)

    def binary(self, stack, f):
        '''
        Pop two, push f(deeper, topmost). Nothing if there aren't two.
        '''
        if len(stack) < 2:
            return
        right = stack.pop()
        left = stack.pop()
        stack.append(f(left, right))

    def unary(self, stack, f):
        if not stack:
            return
        stack.append(f(stack.pop()))

    def printtop(self, stack):
        '''
        Print the element on the top of the stack, leaving it there.
        '''
        if not stack:
            return
        top = stack.pop()
        print(top)
        stack.append(top)

    def lookup(self, name):
        '''
        Return constant value for name, or None.
        '''
        constants = type(self).CONSTANTS
        if name in constants:
            return constants[name]
        return constants.get(name.lower())

    def load(self, stack, name):
        '''
        Push named constant, or warn.
        '''
        value = self.lookup(name)
        if value is None:
            self.warn("Unknown identifier '{}'".format(name))
        else:
            stack.append(value)

    def warn(self, message):
        print('Warning:', message)
