class Environment(dict):
    """
    The key/value store methods read and write while a tag is parsed.

    Values are opaque to the parser. Copies are shallow: a copy holds the same value objects, but adding or
    removing keys on one never affects the other.
    """

    def put(self, key: str, value):
        self[key] = value
        return self

    def copy(self) -> "Environment":
        return Environment(self)

    def __repr__(self):
        return f"<Environment {dict.__repr__(self)}>"
