import sys


def pytest_make_parametrize_id(config, val, argname):
    # Huge ints can't be str()-ed past the interpreter's digit limit; give them a short id.
    if isinstance(val, int) and not isinstance(val, bool):
        limit = sys.get_int_max_str_digits()
        if limit and val.bit_length() > limit * 3:
            return f"{argname}-bigint"
    return None
