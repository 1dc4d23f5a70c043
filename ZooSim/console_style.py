# ZooSim/console_style.py
_RESET = "\033[0m"


def _wrap(code: str, text: str) -> str:
    return f"\033[{code}m{text}{_RESET}"


def bold(text: str) -> str:
    return _wrap("1", text)


def cyan(text: str) -> str:
    return _wrap("96", text)


def green(text: str) -> str:
    return _wrap("92", text)


def red(text: str) -> str:
    return _wrap("91", text)


def yellow(text: str) -> str:
    return _wrap("93", text)


def signed(amount: int, text: str) -> str:
    """Vert si le montant est positif ou nul, rouge sinon."""
    return green(text) if amount >= 0 else red(text)
