import argparse
import json
import sys
import pyperclip
from inpututil import get_input, choose_option
from settings_handler import get_settings, change_settings, reset_settings
from reconstruct import ReconstructionError, InputFormatError, reconstruct, share_input_from_document
from reconstruct.converter import parse_share_text


"""
command line front end: reads the shares (json file or compact text), runs the reconstruction
and reports the secret and the coefficients.
this is the only place that prints or decides the exit status, the reconstruct package only raises.
"""


def load_document(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise InputFormatError(f"could not read {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise InputFormatError(f"{path} is not valid json: {e}") from e


def load_share_input(args):
    if args.shares is not None:
        return parse_share_text(args.shares)

    path = args.path or get_input("Enter the path to the json file\n> ")
    return share_input_from_document(load_document(path))


# given a setting that is either trueVal, falseVal or "ask", returns True for trueVal, False for falseVal and asks user if "ask"
def get_setting_bool(settings, setting_name, prompt, trueVal="yes", falseVal="no", trueChar="y"):
    setting_value = settings.get(setting_name, "ask")
    if setting_value == trueVal:
        return True
    elif setting_value == falseVal:
        return False
    elif setting_value == "ask":
        return (choose_option(prompt) == trueChar)
    else:
        raise ValueError(f"Invalid setting value for {setting_name}: {setting_value}. Expected '{trueVal}', '{falseVal}' or 'ask'.")


def copy_to_clipboard(text):
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        print(f"Clipboard not available ({e}), printing instead.")
        return False
    print("Secret copied to clipboard.")
    return True


def print_results(result, share_input, settings):
    if share_input.declared_count is not None and share_input.declared_count != len(share_input.entries):
        print(f"Warning: keys.n is {share_input.declared_count} but {len(share_input.entries)} entries were found.")

    for sample in result.inconsistent:
        print(f"Warning: sample x = {sample.x}, y = {sample.y} does not lie on the reconstructed polynomial.")

    print('--- Calculation Results ---')

    if get_setting_bool(settings, "printOrCopySecret", {
        "p": "Print secret",
        "c": "Copy secret to clipboard",
    }, trueVal="print", falseVal="copy", trueChar="p") or not copy_to_clipboard(str(result.secret)):
        print(f"Secret C: {result.secret}")

    print('Polynomial Coefficients:')
    print(list(result.coefficients))


def settings_menu():
    while True:
        match choose_option({
            "s": "Change settings",
            "r": "Reset settings",
            "q": "Quit"
        }):
            case "s":
                change_settings()
            case "r":
                reset_settings()
            case "q":
                return


def build_arg_parser():
    parser = argparse.ArgumentParser(prog="reconstruct-secret",
                                     description="Reconstruct a polynomial and its secret (value at x = 0) from encoded shares")
    parser.add_argument("path", nargs="?", help="json file with the shares, or 'settings' to change settings")
    parser.add_argument("--shares", help="shares as text instead of a file, e.g 'k=2 1:4/10 2:111/2'")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    if args.path == "settings" and args.shares is None:
        try:
            settings_menu()
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        share_input = load_share_input(args)
        result = reconstruct(share_input,
                             drop_zero_values=settings["dropZeroValues"] == "yes",
                             duplicate_x=settings["duplicateX"],
                             secret_basis=settings["secretBasis"],
                             check_consistency=settings["checkConsistency"] == "yes")
    except ReconstructionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_results(result, share_input, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
