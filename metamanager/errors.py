class MetaManagerError(Exception):
    """Base error for the meta manager."""


class UnknownTagError(MetaManagerError):
    """A configured logical tag name has no register_* handler."""

    def __init__(self, tag: str, message: str = None):
        self.tag = tag
        super().__init__(message or f"The '{tag}' meta tag is unknown!")


class UnknownAttributeError(UnknownTagError):
    """A configured extractor names an attribute the model does not have."""

    def __init__(self, tag: str, attribute: str, model):
        self.attribute = attribute
        self.model_class = type(model).__name__
        super().__init__(
            tag,
            f"The '{tag}' meta tag refers to '{attribute}', "
            f"which is not defined on {self.model_class}!",
        )
