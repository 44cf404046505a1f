from .errors import OptionalError, InvalidArgument, IllegalState
from .optional import (
    Optional,
    Present,
    Empty,
    EMPTY,
    of,
    of_non_null,
    of_nullable,
    empty,
)
