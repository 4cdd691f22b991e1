class ValidationError(Exception):
    """A content document failed metadata validation.

    ``field`` names the offending frontmatter key (dotted for nested keys,
    e.g. ``image.src``) and ``reason`` is a human-readable explanation.
    """

    def __init__(self, field: str, reason: str):
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason

    def __eq__(self, other):
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (self.field, self.reason) == (other.field, other.reason)

    def __hash__(self):
        return hash((self.field, self.reason))
