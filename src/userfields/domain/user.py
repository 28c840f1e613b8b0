"""The user record and its field rules.

`User` is a plain mutable record. It is validated with `User.validate` before
persistence and mutated only by the explicit lifecycle hooks:

* `User.pre_save` once, before the record is first stored;
* `User.pre_update` before every later store.

Validation never mutates the record.
"""

from __future__ import annotations

import json
from dataclasses import MISSING, asdict, dataclass, field, fields
from typing import IO, TYPE_CHECKING, Any

from userfields import __version__

from .errors import FieldValidationError, UserDecodeError
from .notify_props import (
    MENTION_KEYS,
    clean_mention_keys,
    default_notify_props,
    update_mention_keys,
)
from .roles import is_in_role, is_valid_user_roles
from .rules import DEFAULT_RULES, ValidationRules
from .theme import sanitize_theme_props
from .username import is_valid_id, is_valid_username
from .utils import dict_to_dataclass, get_millis
from .value_objects import Role

if TYPE_CHECKING:
    from userfields.interfaces.id_generator import IdGenerator
    from userfields.interfaces.password_hasher import PasswordHasher

# pylint: disable=too-many-instance-attributes

DEFAULT_LOCALE = "en"

# Serialized only when non-empty.
SECRET_FIELDS = ("password", "auth_data")


@dataclass
class User:
    """A user of the collaboration application.

    Conventions:
      - Timestamps are integer milliseconds since the epoch; 0 means unset.
      - `roles` is a space-separated string of `Role` values.
      - `notify_props` and `theme_props` are flat string mappings.
    """

    id: str = ""
    create_at: int = 0
    update_at: int = 0
    delete_at: int = 0
    username: str = ""
    password: str = ""
    auth_data: str = ""
    auth_service: str = ""
    email: str = ""
    email_verified: bool = False
    nickname: str = ""
    first_name: str = ""
    last_name: str = ""
    roles: str = ""
    last_activity_at: int = 0
    last_ping_at: int = 0
    allow_marketing: bool = False
    notify_props: dict[str, str] = field(default_factory=dict)
    theme_props: dict[str, str] = field(default_factory=dict)
    last_password_update: int = 0
    last_picture_update: int = 0
    failed_attempts: int = 0
    locale: str = ""

    # --- Validation ---

    def validate(self, rules: ValidationRules = DEFAULT_RULES) -> None:
        """Check every field of the record, stopping at the first violation.

        Args:
            rules: Bounds and tables to validate against.

        Raises:
            FieldValidationError: Naming the first field that is invalid.
        """
        if not is_valid_id(self.id):
            raise FieldValidationError("id", "must be a 26 character identifier")
        if self.create_at == 0:
            raise FieldValidationError("create_at", "must be set")
        if self.update_at == 0:
            raise FieldValidationError("update_at", "must be set")
        if not is_valid_username(self.username, rules):
            raise FieldValidationError(
                "username",
                f"must be 1 to {rules.max_username_length} lowercase letters, "
                "digits, '.', '-' or '_' and not a reserved word",
            )
        for name, limit in (
            ("email", rules.max_email_length),
            ("nickname", rules.max_nickname_length),
            ("first_name", rules.max_first_name_length),
            ("last_name", rules.max_last_name_length),
            ("password", rules.max_password_length),
            ("auth_data", rules.max_auth_data_length),
            ("locale", rules.max_locale_length),
        ):
            if len(getattr(self, name)) > limit:
                raise FieldValidationError(name, f"must be at most {limit} characters")
        if not is_valid_user_roles(self.roles, rules):
            raise FieldValidationError("roles", f"unrecognized roles {self.roles!r}")

    def is_valid(self, rules: ValidationRules = DEFAULT_RULES) -> bool:
        """Return True if `validate` passes."""
        try:
            self.validate(rules)
        except FieldValidationError:
            return False
        return True

    # --- Lifecycle hooks ---

    def pre_save(
        self,
        id_generator: IdGenerator,
        password_hasher: PasswordHasher,
        now: int | None = None,
        rules: ValidationRules = DEFAULT_RULES,
    ) -> User:
        """Populate defaults before the record is first persisted.

        Assigns an id (and a generated username if none was given), lowercases
        the case-insensitive fields, stamps all creation timestamps, fills in
        default notification props and locale, repairs theme colors and hashes
        the password.

        Returns:
            The same record, for chaining.

        Raises:
            FieldValidationError: If the plaintext password is too long. The
                record is left untouched.
        """
        if len(self.password) > rules.max_password_length:
            raise FieldValidationError(
                "password", f"must be at most {rules.max_password_length} characters"
            )
        if not self.id:
            self.id = id_generator.new_id()
        if not self.username:
            self.username = id_generator.new_id()
        self._lowercase_fields()

        self.create_at = get_millis() if now is None else now
        self.update_at = self.create_at
        self.last_password_update = self.create_at

        if not self.locale:
            self.locale = DEFAULT_LOCALE
        if not self.notify_props:
            self.set_default_notifications()
        self.theme_props = sanitize_theme_props(self.theme_props, rules)
        if self.password:
            self.password = password_hasher.hash_password(self.password)
        return self

    def pre_update(
        self, now: int | None = None, rules: ValidationRules = DEFAULT_RULES
    ) -> User:
        """Refresh the record before a subsequent persist.

        Returns:
            The same record, for chaining.
        """
        self._lowercase_fields()
        self.update_at = get_millis() if now is None else now

        if not self.notify_props:
            self.set_default_notifications()
        elif MENTION_KEYS in self.notify_props:
            self.notify_props[MENTION_KEYS] = clean_mention_keys(
                self.notify_props[MENTION_KEYS]
            )
        self.theme_props = sanitize_theme_props(self.theme_props, rules)
        return self

    def _lowercase_fields(self) -> None:
        self.username = self.username.lower()
        self.email = self.email.lower()
        self.locale = self.locale.lower()

    # --- Notifications ---

    def set_default_notifications(self) -> None:
        """Reset notification props to the defaults for the current username."""
        self.notify_props = default_notify_props(self.username)

    def update_mention_keys_from_username(self, old_username: str) -> None:
        """Re-derive the leading mention keys after a username change.

        Extra keys the user added are kept in their original order.
        """
        self.notify_props[MENTION_KEYS] = update_mention_keys(
            self.notify_props.get(MENTION_KEYS, ""), old_username, self.username
        )

    # --- Display ---

    @property
    def full_name(self) -> str:
        """First and last name joined by a space, skipping empty parts."""
        return " ".join(name for name in (self.first_name, self.last_name) if name)

    @property
    def display_name(self) -> str:
        """The nickname, else the full name when both parts are set, else the username."""
        if self.nickname:
            return self.nickname
        if self.first_name and self.last_name:
            return self.full_name
        return self.username

    # --- Roles ---

    def is_in_role(self, role: Role | str) -> bool:
        """Return True if the user holds `role`."""
        return is_in_role(self.roles, role)

    def is_system_admin(self) -> bool:
        """Return True if the user is a system administrator."""
        return self.is_in_role(Role.SYSTEM_ADMIN)

    # --- Serialization ---

    def etag(self, show_full_name: bool, show_email: bool) -> str:
        """Return a cache tag that changes whenever the visible user changes."""
        parts = (
            __version__,
            self.id,
            self.update_at,
            str(show_full_name).lower(),
            str(show_email).lower(),
        )
        return ".".join(str(part) for part in parts)

    def sanitize(
        self, *, email: bool = True, full_name: bool = True, password_update: bool = True
    ) -> User:
        """Strip secrets (and optionally private fields) before sending to a client.

        Args:
            email: Keep the email address.
            full_name: Keep the first and last names.
            password_update: Keep the last password update timestamp.

        Returns:
            The same record, for chaining.
        """
        self.password = ""
        self.auth_data = ""
        if not email:
            self.email = ""
        if not full_name:
            self.first_name = ""
            self.last_name = ""
        if not password_update:
            self.last_password_update = 0
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of the user."""
        data = asdict(self)
        for name in SECRET_FIELDS:
            if not data[name]:
                del data[name]
        return data

    def to_json(self) -> str:
        """Serialize the user to a JSON document."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, values: dict[str, Any]) -> User:
        """Build a user from its wire representation, ignoring unknown keys.

        Raises:
            UserDecodeError: If a known key holds a value of the wrong type, or a
                props mapping holds anything other than strings.
        """
        for item in fields(cls):
            value = values.get(item.name)
            if value is None:
                continue
            expected = dict if item.default is MISSING else type(item.default)
            # bool is an int subclass; JSON true/false must not pass as a number
            if not isinstance(value, expected) or (
                expected is int and isinstance(value, bool)
            ):
                raise UserDecodeError(
                    f"field '{item.name}' must be of type {expected.__name__}"
                )
            if expected is dict and not all(
                isinstance(k, str) and isinstance(v, str) for k, v in value.items()
            ):
                raise UserDecodeError(f"field '{item.name}' must map strings to strings")
        return dict_to_dataclass(cls, values)


def user_from_json(data: str | bytes | IO[str]) -> User:
    """Decode a user from a JSON document or a readable text stream.

    Raises:
        UserDecodeError: If the input is not a JSON object.
    """
    try:
        values = json.load(data) if hasattr(data, "read") else json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise UserDecodeError(str(e)) from e
    if not isinstance(values, dict):
        raise UserDecodeError(f"expected a JSON object, got {type(values).__name__}")
    return User.from_dict(values)
