"""Branch on a yes/no answer and settle with a fixed message."""

from __future__ import annotations

from .._errors import WrongParameterError
from .._types import Interp
from ..lift.up import rejected, resolved

YES = 'Hooray!!! She said "Yes"!'
NO = 'Oh no, she said "No".'


def propose(answer: bool | None = None) -> Interp[str, WrongParameterError]:
    """
    Settle according to answer.

    - True  -> Ok(YES)
    - False -> Ok(NO)
    - anything else, including no argument -> Error(WrongParameterError())

    Example:
        await propose(True)   # Ok('Hooray!!! She said "Yes"!')
        await propose()       # Error(WrongParameterError(...))
    """
    if not isinstance(answer, bool):
        return rejected(WrongParameterError())
    return resolved(YES if answer else NO)


__all__ = ("NO", "YES", "propose")
