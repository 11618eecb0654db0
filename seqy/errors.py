from typing import Any, Optional


class SeqyError(Exception):
    """base class for every error raised by seqy."""
    pass


class InvalidArgumentError(SeqyError, ValueError):
    """an argument was rejected at call time."""

    def __init__(self, argument: str, message: Optional[str] = None):
        self.argument = argument
        super().__init__(message or f"{argument} is not valid.")


class ArgumentNoneError(InvalidArgumentError):
    """a required argument was None."""

    def __init__(self, argument: str):
        super().__init__(argument, f"{argument} cannot be None.")


class InvalidCastError(SeqyError, TypeError):
    """an element could not be narrowed to the requested type."""

    def __init__(self, value: Any, target_type: Any, index: int):
        self.value = value
        self.target_type = target_type
        self.index = index
        super().__init__(
            f"element at index {index} of type '{type(value).__name__}' "
            f"cannot be cast to {_type_name(target_type)}"
        )


def _type_name(target_type: Any) -> str:
    if isinstance(target_type, tuple):
        return "(" + ", ".join(_type_name(t) for t in target_type) + ")"
    return f"'{getattr(target_type, '__name__', repr(target_type))}'"
