def error_message(expression: str, location: int, message: str) -> str:
    messages = [f"{expression}\n", f"{' ' * location}^ {message}\n"]
    return "".join(messages)


def display_char(char: str) -> str:
    if char.isprintable():
        return char
    return repr(char)[1:-1]
