class InvalidInputError(ValueError):
    """
    Raised when a raw disclosure value is outside its declared domain.
    `field` is the wire (camelCase) name of the offending input.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")

    def to_dict(self) -> dict:
        return {"field": self.field, "reason": self.reason}


class MethodologyError(ValueError):
    """Raised when a scoring methodology table is inconsistent."""
