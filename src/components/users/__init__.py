"""
Users component - User record creation and in-place item updates.
"""

from .component import (
    create_user,
    run,
    run_create,
    run_update,
    update_user,
)
from .models import (
    CreateUserInput,
    UpdateUserInput,
    UpdateUserOutput,
    UserOutput,
)
from .ports import TimePort

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_update",
    # Functions
    "create_user",
    "update_user",
    # Input models
    "CreateUserInput",
    "UpdateUserInput",
    # Output models
    "UserOutput",
    "UpdateUserOutput",
    # Ports
    "TimePort",
]
