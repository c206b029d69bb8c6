"""State-machine parser for Git remote URLs.

The following remote URL dialects are recognized:

- `[http[s]://[<username>[:<password>]@]]<host>/<org>/<name>[.git][/]`
- `[http[s]://]api.<host>/repos/<org>/<name>`
- `git://<host>/<org>/<name>[.git]`
- `git@<host>:<org>/<name>[.git]`
- `ssh://git@<host>/<org>/<name>[.git]`
- `[www.]<host>/<org>/<name>[.git][/]`, as typed by hand

Schemes and hostnames compare ignoring ASCII case, as RFC 3986 allows.
The `repos` segment of API URLs, the `git` SSH username and the `.git`
suffix are matched exactly: hosting services reject other spellings.
"""

from enum import Enum

import structlog

from magic_opener.core.models.repository import RemoteDescriptor
from magic_opener.parsing.tokens import Cursor, Token, span
from magic_opener.parsing.validators import (
    DOTGIT,
    is_hostname_char,
    is_userinfo_char,
    is_valid_hostname,
    split_org_name,
)

logger = structlog.get_logger(__name__)

SLASH = Token.literal("/")
COLON = Token.literal(":")
API_REPOS = Token.literal("/repos/")
GIT_SUFFIX = Token.literal(DOTGIT)
WWW = Token.fold("www.")


class ParserState(str, Enum):
    """Parser position between the scheme and the end of input."""

    START = "start"
    HTTP = "http"
    WEB = "web"
    ORG_NAME = "org_name"
    ORG_NAME_GIT = "org_name_git"
    END = "end"


# Checked in order; the first full match picks the next state
START_PATTERNS: tuple[tuple[tuple[Token, ...], ParserState], ...] = (
    ((Token.fold("https://"),), ParserState.HTTP),
    ((Token.fold("http://"),), ParserState.HTTP),
    ((Token.fold("git://"),), ParserState.ORG_NAME_GIT),
    ((Token.literal("git@"),), ParserState.ORG_NAME_GIT),
    ((Token.fold("ssh://"), Token.literal("git@")), ParserState.ORG_NAME_GIT),
)


class _RemoteURLParser:
    """Accumulates host and org/name while walking a Cursor."""

    def __init__(self, url: str) -> None:
        self._cursor = Cursor(url)
        self.host: str | None = None
        self.org_name: tuple[str, str] | None = None

    def step(self, state: ParserState) -> ParserState | None:
        """Run one transition. None rejects the input."""
        cursor = self._cursor

        if state is ParserState.START:
            for tokens, transition in START_PATTERNS:
                if cursor.consume_seq(tokens):
                    return transition
            return ParserState.WEB

        if state is ParserState.HTTP:
            self._maybe_consume_userinfo()
            if not self._consume_host():
                return None
            if cursor.consume(API_REPOS) or cursor.consume(SLASH):
                return ParserState.ORG_NAME
            return None

        if state is ParserState.WEB:
            cursor.maybe_consume(WWW)
            if not self._consume_host() or not cursor.consume(SLASH):
                return None
            if not self._consume_org_name():
                return None
            cursor.maybe_consume(GIT_SUFFIX)
            cursor.maybe_consume(SLASH)
            return ParserState.END

        if state is ParserState.ORG_NAME:
            if not self._consume_org_name():
                return None
            cursor.maybe_consume(GIT_SUFFIX)
            cursor.maybe_consume(SLASH)
            return ParserState.END

        if state is ParserState.ORG_NAME_GIT:
            if not self._consume_host():
                return None
            if not (cursor.consume(COLON) or cursor.consume(SLASH)):
                return None
            if not self._consume_org_name():
                return None
            cursor.maybe_consume(GIT_SUFFIX)
            return ParserState.END

        raise ValueError(f"No transition out of parser state: {state}")

    def finish(self) -> RemoteDescriptor | None:
        if not self._cursor.at_end or self.host is None or self.org_name is None:
            return None
        org, name = self.org_name
        return RemoteDescriptor(host=self.host, org=org, name=name)

    def _consume_host(self) -> bool:
        host, rest = span(self._cursor.remaining, is_hostname_char)
        if not is_valid_hostname(host):
            return False
        self.host = host
        self._cursor.advance_to(rest)
        return True

    def _consume_org_name(self) -> bool:
        parsed = split_org_name(self._cursor.remaining)
        if parsed is None:
            return False
        org, name, rest = parsed
        self.org_name = (org, name)
        self._cursor.advance_to(rest)
        return True

    def _maybe_consume_userinfo(self) -> None:
        userinfo, sep, rest = self._cursor.remaining.partition("@")
        if sep and all(is_userinfo_char(c) for c in userinfo):
            self._cursor.advance_to(rest)


def parse_git_url(url: str) -> RemoteDescriptor | None:
    """Decompose a Git remote URL into host, org and name.

    Returns None when `url` matches none of the recognized dialects.
    """
    parser = _RemoteURLParser(url)
    state: ParserState | None = ParserState.START

    while state is not None and state is not ParserState.END:
        state = parser.step(state)

    if state is None:
        logger.debug("Remote URL matched no dialect", length=len(url))
        return None

    return parser.finish()
