"""ResFilter Core - Shared constants and validation.

Import specific names from submodules:
    from resfilter.core import constants
    from resfilter.core import validators
    from resfilter.core.validators import ValidationError
"""

from resfilter.core import constants, validators

__all__ = [
    "constants",
    "validators",
]
