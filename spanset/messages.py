from termcolor import colored

###############################################################################
# Output prefixes
###############################################################################

_MARKS = {
    'success': ("✓", "green"),
    'error':   ("✗", "red"),
    'warning': ("?", "yellow"),
    'info':    ("i", "blue"),
}

_use_color = True


def set_color(enabled: bool) -> None:
    global _use_color
    _use_color = enabled


def _mark(kind: str) -> str:
    symbol, color = _MARKS[kind]
    if _use_color:
        return '[' + colored(symbol, color) + ']'
    return f"[{symbol}]"


def _message(kind: str, *args):
    msg = '\n'.join(str(arg) for arg in args)
    prefix = _mark(kind)
    # Continuation lines line up with the uncoloured width of the mark.
    indent = ' ' * len(f"[{_MARKS[kind][0]}]")
    first = True
    for line in msg.split('\n'):
        if first: print(f"{prefix} {line}")
        else:     print(f"{indent} {line}")
        first = False

def error(*msg): _message('error', *msg)

def warning(*msg): _message('warning', *msg)

def info(*msg): _message('info', *msg)

def success(*msg): _message('success', *msg)
