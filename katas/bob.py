"""Bob, the lackadaisical teenager."""


def _is_yelling(message: str) -> bool:
    start = 0
    end = len(message)
    while start < end and not message[start].isalpha():
        start += 1
    while end > start and not message[end - 1].isalpha():
        end -= 1
    core = message[start:end]
    return bool(core) and core.upper() == core


def reply(message: str) -> str:
    """Return Bob's answer to message."""
    text = message.strip()
    if not text:
        return "Fine. Be that way!"
    yelling = _is_yelling(text)
    question = text.endswith("?")
    if yelling and question:
        return "Calm down, I know what I'm doing!"
    if yelling:
        return "Whoa, chill out!"
    if question:
        return "Sure."
    return "Whatever."