def read_text(filename):
    """Reads the whole file into memory. Missing or undecodable files raise (OSError, UnicodeDecodeError)."""
    with open(filename, 'r', encoding='utf-8') as f:
        return f.read()
