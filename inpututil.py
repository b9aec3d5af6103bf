def get_input(prompt, target_type = str, allowed_range = None, strip_whitespace=True):
    """
    variation of input() with type casting and validation. keeps asking until the input is valid.
        target_type: The type to which the input should be cast (e.g., int, str, bool)
        allowed_range: An optional collection of valid values. Should be an object that supports membership testing (e.g., range, tuple, set)
    """
    if not isinstance(target_type, type):
        raise TypeError("target_type must be a type like int, str, or bool")

    # note bool("False") returns True, needs separate handling
    if target_type is bool:
        inp = get_input(prompt, str, ("true", "false", "1", "0"))
        return inp in ("true", "1")

    if allowed_range is not None and not hasattr(allowed_range, '__contains__'):
        raise TypeError("allowed_range must support membership testing (e.g., tuple, range). Currently: " + str(type(allowed_range)))

    while True:
        inp = input(prompt)
        if strip_whitespace:
            inp = inp.strip()
        try:
            casted_input = target_type(inp)
        except ValueError as e:
            print(f"Input must be of type {target_type.__name__}. Error: {e}")
            continue

        if allowed_range is not None and casted_input not in allowed_range:
            print(f"Input must be one of {allowed_range}")
        else:
            return casted_input


def choose_option(options: dict, text1="Select an option", inp_type=str):
    """
    print a menu of options and return the key the user picked
        options: maps the key the user types to a description, e.g {"p": "Print secret", "c": "Copy secret"}
    """
    print(text1)
    for key, description in options.items():
        print(f"[{key}] {description}")

    return get_input("> ", inp_type, tuple(options.keys()))
