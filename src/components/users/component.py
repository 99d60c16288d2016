from __future__ import annotations

import logging

from src.domain.entities import User

from .models import CreateUserInput, UpdateUserInput, UpdateUserOutput, UserOutput
from .ports import TimePort

logger = logging.getLogger(__name__)


def create_user(user_id: int, item: str, time: TimePort) -> User:
    return User(id=user_id, created_at=time.now_utc(), item=item)


def update_user(user: User, item: str | None) -> None:
    """Replace the user's item in place. Empty or missing items are ignored."""
    if item:
        user.item = item


def run_create(inp: CreateUserInput, time: TimePort) -> UserOutput:
    user = create_user(inp.user_id, inp.item, time)
    return UserOutput(user=user, success=True)


def run_update(inp: UpdateUserInput) -> UpdateUserOutput:
    before = inp.user.item
    update_user(inp.user, inp.item)
    changed = bool(inp.item)

    if changed:
        logger.debug("User %s item: %r -> %r", inp.user.id, before, inp.user.item)
    else:
        logger.debug("User %s item left as %r (empty update)", inp.user.id, before)

    return UpdateUserOutput(user=inp.user, changed=changed)


def run(
    inp: CreateUserInput | UpdateUserInput,
    *,
    time: TimePort | None = None,  # Only needed for create
) -> UserOutput | UpdateUserOutput:
    if isinstance(inp, CreateUserInput):
        assert time
        return run_create(inp, time)

    elif isinstance(inp, UpdateUserInput):
        return run_update(inp)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
