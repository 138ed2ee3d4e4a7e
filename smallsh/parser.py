import shlex
from dataclasses import dataclass
from typing import Optional

from smallsh.errors import CommandSyntaxError

BACKGROUND = "&"
REDIRECT_IN = "<"
REDIRECT_OUT = ">"


@dataclass
class CommandRequest:
    argv: list
    background: bool = False
    input_path: Optional[str] = None
    output_path: Optional[str] = None


def tokenize(line):
    """
    Split a line into words.
    Whitespace collapses, quotes group words, '#' is kept as an ordinary
    character so the dispatcher can see comment lines.
    """
    lex = shlex.shlex(line, posix=True)
    lex.whitespace_split = True
    lex.commenters = ""
    try:
        return list(lex)
    except ValueError as e:
        raise CommandSyntaxError(str(e).lower())


def build_request(tokens):
    """
    Strip control tokens from a word list.
    Returns: CommandRequest
    """
    tokens = list(tokens)
    background = bool(tokens) and tokens[-1] == BACKGROUND
    if background:
        tokens.pop()

    argv = None
    input_path = output_path = None
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok in (REDIRECT_IN, REDIRECT_OUT):
            if i + 1 >= len(tokens):
                raise CommandSyntaxError(f"missing file name after '{tok}'")
            if argv is None:
                argv = tokens[:i]
            if tok == REDIRECT_IN:
                input_path = tokens[i + 1]
            else:
                output_path = tokens[i + 1]
            i += 2
        else:
            i += 1

    if argv is None:
        argv = tokens
    if not argv:
        raise CommandSyntaxError("missing command")

    return CommandRequest(argv, background, input_path, output_path)
