"""
ABOUTME: Custom exception classes for typed environment variable access
ABOUTME: Provides the configuration error base and the recorded parse failure type
"""


class ConfigError(Exception):
    """Configuration validation error."""

    def __init__(self, message: str = "", errors: tuple = ()):
        super().__init__(message)
        self.errors = tuple(errors)


class ParseError(ConfigError):
    """An environment variable was set but could not be parsed as its type."""

    def __init__(self, name: str, type_label: str, value: str):
        """
        Record a failed parse of an environment variable.

        Parameters:
            name (str): Name of the environment variable.
            type_label (str): Label of the expected type, e.g. 'int64' or 'time.Duration'.
            value (str): The raw text that failed to parse.
        """
        message = (
            f"env variable, '{name}' should be of type '{type_label}' but is '{value}'"
        )
        super().__init__(message)
        object.__setattr__(self, "_fields", (name, type_label, value))

    @property
    def name(self) -> str:
        return self._fields[0]

    @property
    def type_label(self) -> str:
        return self._fields[1]

    @property
    def value(self) -> str:
        return self._fields[2]

    def __setattr__(self, key, value):
        if key in ("name", "type_label", "value", "_fields"):
            raise AttributeError(f"ParseError.{key} is read-only")
        super().__setattr__(key, value)

    def __eq__(self, other):
        if not isinstance(other, ParseError):
            return NotImplemented
        return self._fields == other._fields

    def __hash__(self):
        return hash(self._fields)

    def __repr__(self) -> str:
        return f"ParseError(name={self.name!r}, type_label={self.type_label!r}, value={self.value!r})"

    def __reduce__(self):
        return (self.__class__, self._fields)
