from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from flask import current_app, request

EMAIL_REGEX = r'^[^\s@]+@[^\s@]+\.[^\s@]{2,}$'


@dataclass(frozen=True)
class Field:
    name: str
    label: str
    type: str = "text"  # text | password | email
    required: bool = True
    min_length: Optional[int] = None
    same_as: Optional[str] = None
    mismatch_message: str = "Values must match"


class Form:
    """A submitted (or blank) HTML form with field-level validation.

    ``formdata`` is None when the request did not submit the form (GET);
    such a form is never valid and renders empty.
    """

    def __init__(self, fields: Iterable[Field], formdata: Optional[Mapping[str, str]] = None, submit_label: str = "Submit"):
        self.fields: List[Field] = list(fields)
        self.submit_label = submit_label
        self.submitted = formdata is not None
        self.data: Dict[str, str] = {}
        self.errors: Dict[str, List[str]] = {}

        formdata = formdata or {}
        for f in self.fields:
            raw = formdata.get(f.name) or ""
            # passwords are taken verbatim
            self.data[f.name] = raw if f.type == "password" else raw.strip()

    def validate(self) -> bool:
        self.errors = {}
        for f in self.fields:
            for message in field_errors(f, self.data[f.name], self.data):
                self.errors.setdefault(f.name, []).append(message)
        return not self.errors

    def is_valid(self) -> bool:
        return self.submitted and self.validate()

    def value(self, name: str) -> str:
        """Value to echo back into the rendered input (never a password)."""
        field = next(f for f in self.fields if f.name == name)
        return "" if field.type == "password" else self.data.get(name, "")


def field_errors(field: Field, value: str, data: Mapping[str, str]) -> List[str]:
    errors = []

    if field.required and not value.strip():
        errors.append("This value should not be blank.")
        return errors

    if field.min_length is not None and len(value) < field.min_length:
        errors.append(f"This value is too short. It should have {field.min_length} characters or more.")

    if field.type == "email" and value and not re.match(EMAIL_REGEX, value):
        errors.append("This value is not a valid email address.")

    if field.same_as is not None and value != data.get(field.same_as, ""):
        errors.append(field.mismatch_message)

    return errors


def _submitted_data() -> Optional[Mapping[str, str]]:
    return request.form if request.method == "POST" else None


def login_form() -> Form:
    return Form(
        [
            Field("uname", "User Name"),
            Field("password", "Password", type="password"),
        ],
        _submitted_data(),
        submit_label="Login",
    )


def register_form() -> Form:
    min_user = current_app.config["MIN_USERNAME_LENGTH"]
    min_pass = current_app.config["MIN_PASSWORD_LENGTH"]
    return Form(
        [
            Field("uname", "User Name", min_length=min_user),
            Field("password", "Password", type="password", min_length=min_pass),
            Field(
                "password_confirm",
                "Verify Password",
                type="password",
                same_as="password",
                mismatch_message="Password and Verify Password must match",
            ),
            Field("cname", "Name"),
            Field("email", "Email", type="email"),
        ],
        _submitted_data(),
        submit_label="Register",
    )


def search_form(label: str) -> Form:
    return Form([Field("search", label)], _submitted_data(), submit_label=label)
