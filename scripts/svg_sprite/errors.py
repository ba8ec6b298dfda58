"""Whole-batch error conditions raised by the sprite compiler."""


class SpriteError(Exception):
    """Base class for conditions that stop a whole compilation.

    Attributes:
        message: Short text suitable for showing directly to a user
    """

    default_message = "Sprite compilation failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyBatchError(SpriteError):
    """No fragments were supplied at all."""

    default_message = "No fragments were selected."


class NoUsableContentError(SpriteError):
    """Fragments were supplied but every one degraded to a placeholder."""

    default_message = (
        "Failed to extract content from any of the selected fragments. "
        "Try exporting them as vector shapes."
    )

    def __init__(self, message: str | None = None, diagnostics: list[str] | None = None):
        super().__init__(message)
        self.diagnostics = list(diagnostics or [])
