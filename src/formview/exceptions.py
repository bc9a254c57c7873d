"""Exception hierarchy for formview.

Tag-level failures (missing required attributes, unknown validation targets)
abort the call. Message lookup failures are recovered by the resolver and never
reach callers.
"""


class FormViewError(Exception):
    """Base class for all formview errors."""
    pass


class TagError(FormViewError):
    """A render call could not complete and must be reported to the template."""

    def __init__(self, tag: str, message: str):
        super().__init__(f"Tag [{tag}] {message}")
        self.tag = tag


class MissingRequiredAttribute(TagError):
    """A required input was not supplied."""

    def __init__(self, tag: str, attribute: str):
        super().__init__(tag, f"is missing required attribute [{attribute}]")
        self.attribute = attribute


class ValidationTargetNotFound(TagError):
    """No constraint metadata exists for the referenced domain type."""

    def __init__(self, tag: str, type_name: str):
        super().__init__(
            tag,
            f"could not find a domain class to validate against for name [{type_name}]",
        )
        self.type_name = type_name


class NoSuchMessage(FormViewError):
    """The message catalog has no entry for any of the requested codes."""

    def __init__(self, codes: list[str] | tuple[str, ...], locale: str):
        joined = ", ".join(codes) if codes else "<none>"
        super().__init__(f"No message found under code(s) [{joined}] for locale '{locale}'")
        self.codes = tuple(codes)
        self.locale = locale


class UnknownCodec(FormViewError):
    """An encoding transform was requested by a name nobody registered."""

    def __init__(self, name: str, available: list[str]):
        super().__init__(
            f"Codec '{name}' is not registered. Available codecs: {', '.join(available)}"
        )
        self.name = name


class MetadataError(FormViewError):
    """A catalog or constraint metadata file is malformed."""
    pass
