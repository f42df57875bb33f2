from os import isatty, path
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .machine import Machine
from .lexer import Lexer


WELCOME = '''\
{rule}
Elo Physics/Math RPN Language REPL
{rule}
Type expressions in RPN (Reverse Polish Notation)
Examples:
  5 3 +        # 5 + 3 = 8
  2 3 *        # 2 * 3 = 6
  pi sin       # sin(π) = 0
  g print      # print gravity constant
  quit         # Exit
'''.format(rule='=' * 80)

HELP = '''\
Elo RPN Language Help:

RPN Syntax:
  5 3 +           # 5 + 3 = 8
  5 3 2 * +       # 5 + (3 * 2) = 11

Operators:
  + - * / ^

Functions:
  sin, cos, tan, sqrt

Constants:
  pi, e, c (speed of light), g (gravity), G (gravitational constant)

Keywords:
  print - Print top of stack

Examples:
  5 3 + print     # Print 8
  pi 2 / cos      # cos(π/2) = 0
  16 sqrt         # √16 = 4
'''


class BestEffortHistory(FileHistory):
    '''
    FileHistory that never fails: unreadable or unwritable history file just
    means no history.
    '''

    def load_history_strings(self):
        try:
            yield from super().load_history_strings()
        except OSError:
            return

    def store_string(self, string):
        try:
            super().store_string(string)
        except OSError:
            pass


class InteractiveInput:
    def __init__(self, prompt, history_file=None):
        self.prompt = prompt
        self.history_file = history_file

    def _history(self):
        if self.history_file is None:
            return None
        return BestEffortHistory(path.expanduser(self.history_file))

    def __iter__(self):
        session = PromptSession(message=self.prompt,
                                enable_suspend=True,
                                # Persistent
                                history=self._history(),
                                prompt_continuation=' ' * len(self.prompt),
                                # Certainly not! But be explicit.
                                erase_when_done=False)
        while True:
            try:
                line = session.prompt()
            except KeyboardInterrupt:
                print("Use 'quit' to exit")
                continue
            except EOFError:
                return
            yield line


class CLI:
    '''
    Command line interface to Elo.
    '''

    DEFAULT_PROMPT = 'elo> '
    HISTORY_FILE = '~/.elo_history'
    QUIT_COMMAND = 'quit'
    HELP_COMMAND = 'help'
    UNKNOWN_OPTION = 'Unknown option. Use --help for usage.'

    def dumper(self):
        '''
        Dump all tokens: kind, lexeme, and value.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(lexeme)>\t<value>')
        for line in self.args.expressions:
            for token in lexer.lex(line):
                print(token.kind, repr(token.text), token.value, sep='\t')

    def execute(self, machine, line, echo=True):
        '''
        Evaluate one line. Never raises.

        :param echo: Print the result, if any, after evaluating.
        '''
        try:
            result = machine.evaluate(line)
        except Exception as e:
            # EloErrors carry the wrapped exception as their second arg.
            print('Error:', ': '.join(map(str, e.args)) or repr(e))
            if self.args.verbose:
                traceback.print_exc(file=stderr)
            return None
        if echo and result is not None:
            print('=> {}'.format(result))
        return result

    def executor(self):
        '''
        Run each -e expression. Only print shows anything.
        '''
        machine = Machine(debug=self.args.debug)
        for line in self.args.expressions:
            self.execute(machine, line, echo=False)

    def scripted(self):
        '''
        Run lines piped on stdin, skipping blanks and # comments.
        '''
        machine = Machine(debug=self.args.debug)
        for line in self.args.expressions:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            self.execute(machine, line)

    def repl(self):
        '''
        Read, evaluate, print, until quit or end of input.
        '''
        machine = Machine(debug=self.args.debug)
        if self._interactive():
            print(WELCOME)
        for line in self.args.expressions:
            line = line.strip()
            if line.lower() == self.QUIT_COMMAND:
                break
            elif not line:
                continue
            elif line.lower() == self.HELP_COMMAND:
                print(HELP)
            else:
                self.execute(machine, line)
        print('\nGoodbye!')

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return interactive input...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history_file=self.args.history)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            prog='elo',
            description='Elo Physics/Math RPN Language')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show tracebacks on errors')
        self.argument_parser.add_argument('-d', '--debug',
                                          action='store_true',
                                          help='trace tokens and stack')
        self.argument_parser.add_argument('--history',
                                          default=self.HISTORY_FILE,
                                          help='history file')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions',
                                       help='evaluate expression(s) and exit')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT,
                                       help='force interactive prompt')
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=None,
                                          expressions=None)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args, unknown = self.argument_parser.parse_known_args(args)
        if unknown:
            print(self.UNKNOWN_OPTION, file=stderr)
            exit(2)
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
            if self.args.action is None:
                self.args.action = self.repl if self._interactive() \
                                   else self.scripted
        if self.args.action is None:
            self.args.action = self.executor
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
