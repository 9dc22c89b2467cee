"""
PassForge - offline password and passphrase generator
"""
# ==============================================================
# Standard imports
# ==============================================================
import os
import sys
import time
import logging

# ==============================================================
# Other imports
# ==============================================================

try:
    import pendulum
    from passforge.config.config_passforge import *
    from passforge.config.logging_config import setup_logging
    from passforge.errors import InvalidPolicy, RngUnavailable
    from passforge.utils.charsets import CharsetPolicy, char_counts
    from passforge.utils.password_generator import generate_password, shuffle_password, mask
    from passforge.utils.passphrase_generator import PassphrasePolicy, generate_passphrase
    from passforge.utils.batch_generator import generate_many
    from passforge.utils.password_utils import analyze, pattern_feedback
    from passforge.utils.history_store import HistoryStore
    from passforge.utils.storage import KeyValueStore
    from passforge.utils.templates import TEMPLATES, policy_from_template
    from passforge.utils.wordlists import list_ids
    from passforge.utils.user_input import get_int, get_yes_no, get_choice
    from passforge.utils.clipboard_utils import copy_to_clipboard
    from passforge.utils.qr_code import show_secret_qr
    from passforge.utils.import_export import (
        batch_to_text, export_batch_csv, export_batch_json, export_history_json,
    )

except ImportError as e:
    missing_package = e.name if hasattr(e, "name") else "unknown package"
    print("Missing required dependency!")
    print(f"  {missing_package} is not installed")
    logging.error(f"  {missing_package} is not installed. See pyproject.toml")
    print("\nInstall with:")
    print("  pip install .")
    sys.exit(1)

logger = logging.getLogger(__name__)

# ==============================================================
# Functions
# ==============================================================

def display_strength(value: str, show_details=False) -> None:
    """
    Print the strength report of a secret.

    Args:
        value: Secret to analyze.
        show_details: Also print class breakdown and zxcvbn feedback.
    """
    report = analyze(value)
    bar = "#" * report.score + "." * (4 - report.score)
    print(f"  Strength: [{bar}] {report.label}")
    print(f"  Entropy:  {round(report.entropy_bits)} bits")
    print(f"  Time to crack: {report.crack_time}")

    if not show_details or not value:
        return

    counts = char_counts(value)
    print(SEP_SM)
    print(f"  Length {counts['total']}   Unique {report.unique_chars}")
    print(f"  Lower {counts['lowercase']}   Upper {counts['uppercase']}   "
          f"Numbers {counts['numbers']}   Symbols {counts['symbols']}")

    feedback = pattern_feedback(value)
    if feedback["warning"]:
        print(f"\n  Warning: {feedback['warning']}")
    if feedback["suggestions"]:
        print("\n  Suggestions:")
        for suggestion in feedback["suggestions"]:
            print(f"   {suggestion}")


def secret_actions(value: str) -> None:
    """
    Offer copy / QR actions for a generated secret.

    Side Effects:
        May copy the secret to the clipboard or print a QR code.
    """
    while True:
        choice = input("\n (C) Copy  (QR) Show QR code  (Enter) Back\n > ").strip().lower()
        if choice == "c":
            copy_to_clipboard(value, prompt=False)
        elif choice == "qr":
            show_secret_qr(value)
        elif choice in {"", "q"}:
            return
        else:
            print("   Invalid Choice")


def generated(value: str, history: HistoryStore) -> None:
    """Show a freshly generated secret, archive it, and offer actions."""
    history.archive(value)
    print(f"\n Generated: {value}\n")
    display_strength(value)
    secret_actions(value)


def ask_charset_policy() -> CharsetPolicy | None:
    """
    Prompt for length and character classes.

    Returns:
        A valid policy, or None if the user quits.
    """
    while True:
        length = get_int(
            f"\n  Length ({MIN_LENGTH}-{MAX_LENGTH}, Enter for {PASS_DEFAULTS['length']}): ",
            default=PASS_DEFAULTS["length"], low=MIN_LENGTH, high=MAX_LENGTH,
        )
        if length is None:
            return None
        try:
            return CharsetPolicy(
                include_lower=get_yes_no("  Lowercase (a-z)", PASS_DEFAULTS["lowercase"]),
                include_upper=get_yes_no("  Uppercase (A-Z)", PASS_DEFAULTS["uppercase"]),
                include_digits=get_yes_no("  Numbers (0-9)", PASS_DEFAULTS["numbers"]),
                include_symbols=get_yes_no("  Symbols (!@#$%)", PASS_DEFAULTS["symbols"]),
                length=length,
            )
        except InvalidPolicy as e:
            print(f"\n  {e}")


def ask_passphrase_policy() -> PassphrasePolicy | None:
    """Prompt for passphrase options. Returns None if the user quits."""
    word_count = get_int(
        f"\n  Words ({MIN_WORDS}-{MAX_WORDS}, Enter for {PHRASE_DEFAULTS['word_count']}): ",
        default=PHRASE_DEFAULTS["word_count"], low=MIN_WORDS, high=MAX_WORDS,
    )
    if word_count is None:
        return None
    list_id = get_choice("  Word list", list_ids(), PHRASE_DEFAULTS["list_id"])
    if list_id is None:
        return None
    separator = get_choice("  Separator", SEPARATORS, PHRASE_DEFAULTS["separator"])
    if separator is None:
        return None
    placement = get_choice("  Numbers", NUMBER_PLACEMENTS, PHRASE_DEFAULTS["number_placement"])
    if placement is None:
        return None
    capitalize = get_yes_no("  Capitalize words", PHRASE_DEFAULTS["capitalize"])

    return PassphrasePolicy(
        word_count=word_count,
        list_id=list_id,
        separator=separator,
        capitalize=capitalize,
        number_placement=placement,
    )


def template_menu(history: HistoryStore) -> None:
    """Pick a preset and generate a password from it."""
    print("\n--- Quick Templates ---")
    for i, template in enumerate(TEMPLATES, start=1):
        print(f"  {i}) {template.name:15} {template.length:3} chars  {template.description}")

    selection = get_int("\n Select template: ", low=1, high=len(TEMPLATES))
    if selection is None:
        return
    policy = policy_from_template(TEMPLATES[selection - 1])
    generated(generate_password(policy).value, history)


def batch_menu() -> None:
    """
    Generate many passwords at once, then optionally export or copy them.

    Batch rows are not archived to history.
    """
    count = get_int(
        f"\n  How many ({MIN_BATCH}-{MAX_BATCH}, Enter for {BATCH_DEFAULT}): ",
        default=BATCH_DEFAULT, low=MIN_BATCH, high=MAX_BATCH,
    )
    if count is None:
        return
    policy = ask_charset_policy()
    if policy is None:
        return

    items = generate_many(policy, count)
    print()
    print(SEP_LG)
    for item in items:
        print(f" {item.id:3}. {item.value}  ({item.strength.label})")
    print(SEP_LG)

    choice = input("\n Export or copy? (csv / json / c to copy all / Enter to skip): ").strip().lower()
    if choice == "c":
        copy_to_clipboard(batch_to_text(items), prompt=False)
        return
    try:
        if choice == "csv":
            print(f" Exported to {export_batch_csv(items)}")
        elif choice == "json":
            print(f" Exported to {export_batch_json(items)}")
    except OSError as e:
        msg = f"Could not export batch. {e}"
        print(msg)
        logger.error(f"[{pendulum.now().to_iso8601_string()}] {msg}\n")


def manual_menu(history: HistoryStore) -> None:
    """
    Analyze a typed password, with optional shuffle and archival.

    Typed and shuffled values are archived only on request.
    """
    value = input("\n Enter password to analyze: ")
    if not value:
        display_strength(value)
        return

    while True:
        print()
        display_strength(value, show_details=True)
        choice = input(
            "\n (S) Shuffle  (A) Save to history  (C) Copy  (Enter) Back\n > "
        ).strip().lower()
        if choice == "s":
            value = shuffle_password(value)
            print(f"\n Shuffled: {value}")
        elif choice == "a":
            history.archive(value)
            print(" Saved to history")
        elif choice == "c":
            copy_to_clipboard(value, prompt=False)
        elif choice in {"", "q"}:
            return
        else:
            print("   Invalid Choice")


def history_menu(history: HistoryStore) -> None:
    """List, copy, remove, clear and export archived secrets."""
    show = False
    while True:
        entries = history.list()
        print(f"\n--- History ({len(entries)} of {history.capacity} stored locally) ---")
        if not entries:
            print("  No password history yet")
            return

        for i, entry in enumerate(entries, start=1):
            when = entry.created.in_timezone("local").format(DT_FORMAT)
            shown = entry.value if show else mask(entry.value)
            print(f" {i:3}. {shown}  ({entry.length} chars, {when})")

        choice = input(
            "\n (S) Show/Hide  (C) Copy  (D) Delete  (X) Clear all  "
            "(E) Export  (Enter) Back\n > "
        ).strip().lower()

        if choice == "s":
            show = not show
        elif choice in {"c", "d"}:
            selection = get_int(" Select entry: ", low=1, high=len(entries))
            if selection is None:
                continue
            entry = entries[selection - 1]
            if choice == "c":
                copy_to_clipboard(entry.value, prompt=False)
            else:
                history.remove(entry.id)
                print(" Password removed from history")
        elif choice == "x":
            confirm = input(
                f"\n Delete all {len(entries)} passwords? (type 'clear' to confirm): "
            ).strip().lower()
            if confirm == "clear":
                history.clear()
                print(" History cleared")
                return
        elif choice == "e":
            try:
                print(f" Exported to {export_history_json(history)}")
            except OSError as e:
                msg = f"Could not export history. {e}"
                print(msg)
                logger.error(f"[{pendulum.now().to_iso8601_string()}] {msg}\n")
        elif choice in {"", "q"}:
            return
        else:
            print("   Invalid Choice")


def wipe_terminal(force=False):
    """
    Clears the terminal screen if CLEAR_SCREEN set to True.

    Args:
        force: Clear even if CLEAR_SCREEN is False.
    """
    if CLEAR_SCREEN or force:
        os.system('cls' if os.name == 'nt' else 'clear')


# ==============================================================
# MAIN
# ==============================================================
def main():
    setup_logging()
    print(f"- PassForge {VERSION} -\n")

    history = HistoryStore(KeyValueStore(BASE_DIR))
    first = True

    while True:
        if not first:
            time.sleep(.3)
            wipe_terminal()
        first = False

        print("\n--- Main Menu ---")
        print("\n 1) Password     2) Passphrase    3) Template")
        print(" 4) Batch        5) Analyze       6) History")
        print(" 7) Quit")
        choice = input(" > ").strip()
        print()

        try:
            # == PASSWORD =======================================
            if choice == "1":
                policy = ask_charset_policy()
                if policy is not None:
                    generated(generate_password(policy).value, history)

            # == PASSPHRASE =====================================
            elif choice == "2":
                policy = ask_passphrase_policy()
                if policy is not None:
                    generated(generate_passphrase(policy).value, history)

            elif choice == "3":
                template_menu(history)

            elif choice == "4":
                batch_menu()

            elif choice == "5":
                manual_menu(history)

            elif choice == "6":
                history_menu(history)

            # == QUIT ===========================================
            elif choice in {"7", "q"}:
                print("Goodbye!")
                sys.exit(0)

            else:
                print("Invalid Choice")

        except InvalidPolicy as e:
            print(f"\n  {e}")

        except RngUnavailable as e:
            print(f"\n  {e}")
            logger.error(f"[{pendulum.now().to_iso8601_string()}] {e}\n")


if __name__ == "__main__":
    main()
