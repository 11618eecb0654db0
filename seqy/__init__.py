"""
'    ______ ____  ____  __ __
'   / ___// __/ / __ \/ // /
'   \__ \/ _/  / /_/ /\_, /
'  /___ /___/  \___\_\/___/
"""
import logging

# expose the main classes
from .enumerable import Enumerable

# expose the operators
from .operators import (
    filter,
    transform,
    sort_by,
    sort_by_descending,
    cast_to,
    for_all,
    get_range
)

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    empty,
    seqy,
    S
)

# expose comparison strategies
from .comparers import (
    Comparer,
    DefaultComparer,
    FunctionComparer,
    ReverseComparer,
    DEFAULT
)

# expose errors
from .errors import (
    SeqyError,
    InvalidArgumentError,
    ArgumentNoneError,
    InvalidCastError
)

# expose settings
from .config import Settings, get_settings, configure, settings_override

# library code never configures logging for the application
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    # "filter" is left out so star imports keep the builtin
    "transform",
    "sort_by",
    "sort_by_descending",
    "cast_to",
    "for_all",
    "get_range",
    "from_iterable",
    "from_range",
    "empty",
    "seqy",
    "S",
    "Comparer",
    "DefaultComparer",
    "FunctionComparer",
    "ReverseComparer",
    "DEFAULT",
    "SeqyError",
    "InvalidArgumentError",
    "ArgumentNoneError",
    "InvalidCastError",
    "Settings",
    "get_settings",
    "configure",
    "settings_override"
]
