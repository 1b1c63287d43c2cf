"""Exceptions raised at the boundary between the core and its host."""


class SlideGenerationError(Exception):
    """Base class for every error raised by textslides."""


class ConfigError(SlideGenerationError, ValueError):
    """Raised when layout options contain a key that is not recognised."""

    def __init__(self, unknown_keys):
        self.unknown_keys = sorted(unknown_keys)
        super().__init__(f"Unknown layout option(s): {', '.join(self.unknown_keys)}")


class GenerationSkipped(SlideGenerationError):
    """Generation was not attempted because the input cannot produce a deck."""

    default_reason = "Generation skipped."

    def __init__(self, reason: str = None):
        self.reason = reason or self.default_reason
        super().__init__(self.reason)


class EmptyInputError(GenerationSkipped):
    """The input text is empty or only whitespace."""

    default_reason = "Please enter some text."


class NoSlideDataError(GenerationSkipped):
    """The input parsed to zero slides."""

    default_reason = "No valid slide data. Check the markup syntax."


class RenderError(SlideGenerationError, ValueError):
    """The laid-out deck cannot be written as a PPTX (e.g. slide size out of range)."""
