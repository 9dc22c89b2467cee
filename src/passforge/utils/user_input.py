import re


def get_int(prompt: str, default=None, low=None, high=None):
    """
    Prompt the user until a valid positive integer is entered.

    Allows the user to press Enter to accept a default value if provided.
    Rejects any input containing non-digit characters, and values outside
    [low, high] when bounds are given.

    Args:
        prompt: Text displayed to the user.
        default: Value returned if the user submits empty input. If None,
            the prompt repeats until a valid integer is entered.
        low: Optional inclusive lower bound.
        high: Optional inclusive upper bound.

    Returns:
        An integer parsed from user input, the default value if accepted,
        or None if the user enters 'q' to quit.
    """
    while True:
        val = input(prompt).strip()

        # User hit enter for default value
        if not val and default is not None:
            return default
        # Allow quitting with "q"
        if val == 'q':
            return None
        if re.fullmatch(r"[0-9]+", val):
            num = int(val)
            if (low is None or num >= low) and (high is None or num <= high):
                return num
            print(f"   Out of range ({low}-{high})  (q) to quit")
            continue

        print("   Invalid - numbers only  (q) to quit")


def get_yes_no(prompt: str, default: bool) -> bool:
    """Ask a y/n question. Enter keeps the default."""
    hint = "Y/n" if default else "y/N"
    val = input(f"{prompt} ({hint}): ").strip().lower()
    if not val:
        return default
    return val == "y"


def get_choice(prompt: str, options, default: str) -> str | None:
    """
    Prompt until one of `options` is entered.

    Returns:
        The chosen option, the default on Enter, or None on 'q'.
    """
    shown = " / ".join(repr(o) for o in options)
    while True:
        val = input(f"{prompt} [{shown}] (Enter for {default!r}): ")
        if val == "":
            return default
        if val.strip() == "q":
            return None
        if val in options:
            return val
        # words for separators that are hard to type
        if val.strip() == "space" and " " in options:
            return " "
        if val.strip() == "none" and "" in options:
            return ""
        print("   Invalid choice  (q) to quit")
