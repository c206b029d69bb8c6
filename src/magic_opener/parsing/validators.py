"""Naming rules for hostnames, organizations and repository names."""

from magic_opener.parsing.tokens import span

DOTGIT = ".git"

MAX_HOSTNAME_LENGTH = 253
MAX_LABEL_LENGTH = 63

# RFC 3986 userinfo; percent signs are not checked for two trailing hex digits
USERINFO_SPECIALS = "-._~!$&'()*+,;=%:"


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_userinfo_char(char: str) -> bool:
    return _is_ascii_alnum(char) or char in USERINFO_SPECIALS


def is_hostname_char(char: str) -> bool:
    return _is_ascii_alnum(char) or char in "-."


def is_org_char(char: str) -> bool:
    return _is_ascii_alnum(char) or char in "-_"


def is_name_char(char: str) -> bool:
    return _is_ascii_alnum(char) or char in "-_."


def is_valid_hostname(hostname: str) -> bool:
    """Check that `hostname` is a syntactically valid DNS name.

    Every dot-separated label must be 1-63 alphanumeric-or-hyphen
    characters and cannot start or end with a hyphen. No resolution
    is attempted.
    """
    if not hostname or len(hostname) > MAX_HOSTNAME_LENGTH:
        return False

    for label in hostname.split("."):
        if not label or len(label) > MAX_LABEL_LENGTH:
            return False
        if label.startswith("-") or label.endswith("-"):
            return False
        if not all(_is_ascii_alnum(c) or c == "-" for c in label):
            return False

    return True


def is_valid_org(org: str) -> bool:
    if not org or org.lower() == "none":
        return False
    return all(is_org_char(c) for c in org)


def is_valid_name(name: str) -> bool:
    if not name or name in (".", ".."):
        return False
    return all(is_name_char(c) for c in name)


def split_org(text: str) -> tuple[str, str] | None:
    """Split a leading organization off `text`."""
    org, rest = span(text, is_org_char)
    if not is_valid_org(org):
        return None
    return org, rest


def split_name(text: str) -> tuple[str, str] | None:
    """Split a leading repository name off `text`.

    A trailing `.git` (exact case) is left in the remainder rather
    than kept as part of the name.
    """
    name, rest = span(text, is_name_char)
    if name.endswith(DOTGIT):
        cut = len(name) - len(DOTGIT)
        name, rest = text[:cut], text[cut:]
    if not is_valid_name(name):
        return None
    return name, rest


def split_org_name(text: str) -> tuple[str, str, str] | None:
    """Split a leading `ORG/NAME` off `text`, returning org, name and the remainder."""
    parsed = split_org(text)
    if parsed is None:
        return None
    org, rest = parsed
    if not rest.startswith("/"):
        return None
    parsed = split_name(rest[1:])
    if parsed is None:
        return None
    name, rest = parsed
    return org, name, rest
