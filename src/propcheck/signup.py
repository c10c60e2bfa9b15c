# src/propcheck/signup.py
"""
A web sign-up form validator and generators for its inputs.

``validate_signup`` is a pure, total function: every rule is checked and
every broken rule contributes one message, so a form with a bad e-mail and
a short password reports both. Properties drive it through
:func:`~propcheck.validated.for_all_validated`.
"""

from __future__ import annotations

import string
from typing import Final

from pydantic import BaseModel, ConfigDict

from propcheck.gen import Gen, choose_int, list_of_n, map2, one_of, sequence
from propcheck.result import collect_results
from propcheck.validated import Validated, invalid, map2 as validated_map2, valid


__all__: list[str] = [
    "Account",
    "SignupForm",
    "any_signup_forms",
    "valid_signup_forms",
    "validate_signup",
]

MIN_AGE: Final[int] = 13
MAX_AGE: Final[int] = 130
MAX_NAME_LENGTH: Final[int] = 50
MIN_PASSWORD_LENGTH: Final[int] = 8


class SignupForm(BaseModel):
    """Raw, unvalidated form fields as submitted."""

    name: str
    email: str
    age: int
    password: str

    model_config = ConfigDict(frozen=True, extra="forbid")


class Account(BaseModel):
    """The validated output of a sign-up."""

    name: str
    email: str
    age: int

    model_config = ConfigDict(frozen=True, extra="forbid")


# --------------------------------------------------------------------------- #
# Field rules                                                                 #
# --------------------------------------------------------------------------- #


def _name(raw: str) -> Validated[str]:
    name = raw.strip()
    if not name:
        return invalid("name must not be blank")
    if len(name) > MAX_NAME_LENGTH:
        return invalid(f"name must be at most {MAX_NAME_LENGTH} characters")
    return valid(name)


def _email(raw: str) -> Validated[str]:
    local, at, domain = raw.partition("@")
    if not at or "@" in domain:
        return invalid("email must contain exactly one '@'")
    if not local:
        return invalid("email must have a local part")
    if "." not in domain.strip(".") or any(not label for label in domain.split(".")):
        return invalid("email domain must be dotted, like example.com")
    return valid(raw.lower())


def _age(age: int) -> Validated[int]:
    if not MIN_AGE <= age <= MAX_AGE:
        return invalid(f"age must be between {MIN_AGE} and {MAX_AGE}")
    return valid(age)


def _password(raw: str) -> Validated[str]:
    problems: list[str] = []
    if len(raw) < MIN_PASSWORD_LENGTH:
        problems.append(f"password must be at least {MIN_PASSWORD_LENGTH} characters")
    if not any(ch.isdigit() for ch in raw):
        problems.append("password must contain a digit")
    if not any(ch.isalpha() for ch in raw):
        problems.append("password must contain a letter")
    return invalid(*problems) if problems else valid(raw)


def validate_signup(form: SignupForm) -> Validated[Account]:
    """Validate every field, accumulating all rule violations in field order."""
    identity = validated_map2(_name(form.name), _email(form.email), lambda n, e: (n, e))
    profile = validated_map2(identity, _age(form.age), lambda ne, a: (*ne, a))
    return validated_map2(
        profile,
        _password(form.password),
        lambda nea, _pw: Account(name=nea[0], email=nea[1], age=nea[2]),
    )


# --------------------------------------------------------------------------- #
# Generators                                                                  #
# --------------------------------------------------------------------------- #

_FIRST_NAMES: Final[tuple[str, ...]] = ("Ada", "Grace", "Alan", "Edsger", "Barbara", "Ken")
_DOMAINS: Final[tuple[str, ...]] = ("example.com", "mail.org", "uni.edu")
_LOWER: Final[str] = string.ascii_lowercase
_ALNUM: Final[str] = string.ascii_letters + string.digits
_NOISE: Final[tuple[str, ...]] = ("", " ", "@", "@@", "a@b", "x" * 60, "no-at-sign.com", "p@ss")


def _text(alphabet: str, length: int) -> Gen[str]:
    chars = one_of(alphabet).unwrap()
    return list_of_n(length, chars).unwrap().map("".join)


def _text_between(alphabet: str, lo: int, hi: int) -> Gen[str]:
    return choose_int(lo, hi).unwrap().flat_map(lambda n: _text(alphabet, n))


def _forms(
    names: Gen[str], emails: Gen[str], ages: Gen[int], passwords: Gen[str]
) -> Gen[SignupForm]:
    return map2(
        names.zip(emails),
        ages.zip(passwords),
        lambda ne, ap: SignupForm(name=ne[0], email=ne[1], age=ap[0], password=ap[1]),
    )


def valid_signup_forms() -> Gen[SignupForm]:
    """Forms that satisfy every rule."""
    names = one_of(_FIRST_NAMES).unwrap()
    domains = one_of(_DOMAINS).unwrap()
    emails = map2(_text_between(_LOWER, 1, 10), domains, lambda local, d: f"{local}@{d}")
    ages = choose_int(MIN_AGE, MAX_AGE).unwrap()
    digits = one_of(string.digits).unwrap()
    letters = one_of(string.ascii_letters).unwrap()
    passwords = sequence(
        [_text_between(_ALNUM, MIN_PASSWORD_LENGTH - 2, 20), digits, letters]
    ).map("".join)
    return _forms(names, emails, ages, passwords)


def any_signup_forms() -> Gen[SignupForm]:
    """Forms mixing well-formed and malformed values in every field."""
    names, emails, passwords = collect_results(
        [
            one_of(_FIRST_NAMES + _NOISE),
            one_of(("ada@example.com", "grace@mail.org") + _NOISE),
            one_of(_NOISE + ("secret123", "hunter2hunter2", "12345678")),
        ]
    ).unwrap()
    return _forms(names, emails, choose_int(-5, 200).unwrap(), passwords)
