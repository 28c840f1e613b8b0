"""User lifecycle flows.

Persistence is owned by the caller. These functions run the lifecycle hooks
in their required order and validate the result, so a caller only has to store
the record once they return.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from userfields.domain.errors import FieldValidationError

if TYPE_CHECKING:
    from userfields.bootstrap import AppContainer
    from userfields.domain.user import User

logger = logging.getLogger(__name__)


def prepare_new_user(user: User, app: AppContainer) -> User:
    """Populate defaults on a new user and validate it.

    Raises:
        FieldValidationError: If the populated record is invalid.
    """
    user.pre_save(app.id_generator, app.password_hasher, rules=app.rules)
    _validate(user, app)
    logger.debug("Prepared new user %s (%s)", user.id, user.username)
    return user


def prepare_user_update(user: User, app: AppContainer) -> User:
    """Refresh an existing user before it is stored again and validate it.

    Raises:
        FieldValidationError: If the refreshed record is invalid.
    """
    user.pre_update(rules=app.rules)
    _validate(user, app)
    logger.debug("Prepared update of user %s", user.id)
    return user


def change_username(user: User, new_username: str, app: AppContainer) -> User:
    """Rename a user, keeping the mention keys in sync with the new name.

    The rename is applied to a copy first, so `user` is only changed once the
    renamed record has passed validation.

    Raises:
        FieldValidationError: If the renamed record is invalid.
    """
    old_username = user.username
    renamed = replace(
        user, username=new_username, notify_props=dict(user.notify_props)
    )
    renamed.update_mention_keys_from_username(old_username)
    prepare_user_update(renamed, app)
    vars(user).update(vars(renamed))
    logger.info("Renamed user %s from %s to %s", user.id, old_username, user.username)
    return user


def _validate(user: User, app: AppContainer) -> None:
    try:
        user.validate(app.rules)
    except FieldValidationError as e:
        logger.debug("User %s failed validation on %s: %s", user.id, e.field, e.reason)
        raise
