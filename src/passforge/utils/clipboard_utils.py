import pyperclip
import time
import threading

from passforge.config.config_passforge import CLIPBOARD_TIMEOUT


def copy_to_clipboard(text: str,
                      timeout: int = CLIPBOARD_TIMEOUT,
                      prompt=True) -> bool:
    """
    Copy a secret to the system clipboard with optional auto-clear.

    Optionally prompts the user before copying. If a timeout is
    specified, a background daemon thread clears the clipboard after
    the delay, but only if the clipboard still holds the copied secret.

    Args:
        text: Text to copy to the clipboard.
        timeout: Number of seconds before the clipboard is cleared.
            A value of 0 or less disables auto-clear.
        prompt: If True, prompt the user before copying. If False,
            copy immediately.

    Returns:
        True if the text was copied.

    Side Effects:
        Copies data to the system clipboard.
        Spawns a background daemon thread if auto-clear is enabled.
    """
    if not text:
        print(" Nothing to copy.")
        return False

    if prompt and input(" Copy to clipboard? (y/n): ").strip().lower() != "y":
        return False

    pyperclip.copy(text)

    msg = " Copied!" + (f" (auto-clears in {timeout}s)" if timeout > 0 else "")
    print(msg, flush=True)

    if timeout <= 0:
        return True

    def auto_clear():
        time.sleep(timeout)
        try:
            if pyperclip.paste() == text:
                pyperclip.copy("")
        except Exception:
            # prevent clipboard errors from crashing program
            pass

    threading.Thread(target=auto_clear, daemon=True).start()

    return True
