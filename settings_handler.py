import json
import os
from inpututil import get_input

# the settings file can be moved with this environment variable (e.g for tests)
SETTINGS_ENV_VAR = "RECONSTRUCT_SETTINGS"
DEFAULT_SETTINGS_FILE = "settings.json"

DEFAULT_SETTINGS = {
    "dropZeroValues": "yes",
    "duplicateX": "reject",
    "secretBasis": "all",
    "checkConsistency": "yes",
    "printOrCopySecret": "print",
}

# allowed values for each setting
ALLOWED_VALUES = {
    "dropZeroValues": ("yes", "no"),
    "duplicateX": ("reject", "last"),
    "secretBasis": ("all", "k"),
    "checkConsistency": ("yes", "no"),
    "printOrCopySecret": ("print", "copy", "ask"),
}


def settings_file():
    return os.environ.get(SETTINGS_ENV_VAR) or DEFAULT_SETTINGS_FILE


def get_settings():
    """
    Read the settings file. A missing file, or a missing key, falls back to the defaults.
    Raises ValueError if a stored value is not allowed.
    """
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(settings_file(), "r") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings

    if not isinstance(stored, dict):
        raise ValueError(f"Settings file {settings_file()} must contain a json object")

    for key, value in stored.items():
        if key not in ALLOWED_VALUES:
            continue
        if value not in ALLOWED_VALUES[key]:
            raise ValueError(f"Invalid setting value for {key}: {value!r}. Expected one of {ALLOWED_VALUES[key]}.")
        settings[key] = value

    return settings


def save_settings(settings):
    with open(settings_file(), "w") as f:
        json.dump(settings, f, indent=4)


def change_settings():
    settings = get_settings()

    keys = list(settings.keys())

    # print settings
    print("Settings:")
    for idx, key in enumerate(keys):
        print(f"[{idx}] {key}: {settings[key]}")

    choice = get_input("Select a setting to change (number)\n> ", int, range(len(settings)))

    key = keys[choice]
    allowed_values = ALLOWED_VALUES[key]

    print(f"Current value: {settings[key]}")
    print(f"Allowed values: {allowed_values}")
    settings[key] = get_input(f"Enter new value for '{key}'\n> ", str, allowed_values)

    save_settings(settings)
    print("Settings updated.")


def reset_settings():
    save_settings(dict(DEFAULT_SETTINGS))
    print("Settings reset to default values.")
