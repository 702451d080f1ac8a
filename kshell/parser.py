import shlex


def tokenize(line):
    """
    Split a command line into tokens.
    Only trailing whitespace is trimmed and the split is on single spaces,
    so "a  b" gives ['a', '', 'b']. No quoting or escaping is applied.
    Returns: list of tokens, token 0 being the command name
    """
    return line.rstrip().split(" ")


def join_arguments(tokens):
    """Re-join argument tokens into the argument string passed to a child."""
    return " ".join(tokens)


def split_arguments(argument_string):
    """
    Turn an argument string into argv entries.
    Empty tokens disappear and quotes group words, like a process start does.
    """
    lex = shlex.shlex(argument_string, posix=True)
    lex.whitespace_split = True
    lex.commenters = ""
    return list(lex)
