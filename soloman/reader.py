from .errors import InvalidCharacter


def fetch_code(filename):
    print(f"Reading code from: {filename}")
    try:
        with open(filename, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise InvalidCharacter(f'Unexpected byte {e.object[e.start]:#04x} at offset {e.start}') from e
