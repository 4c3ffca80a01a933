"""Scope names understood by the host container."""

from enum import Enum

__all__ = [
    "SCOPE_SINGLETON",
    "SCOPE_PROTOTYPE",
    "SCOPE_REQUEST",
    "SCOPE_SESSION",
    "SCOPE_APPLICATION",
    "ScopedProxyMode",
]

SCOPE_SINGLETON = "singleton"
SCOPE_PROTOTYPE = "prototype"
SCOPE_REQUEST = "request"
SCOPE_SESSION = "session"
SCOPE_APPLICATION = "application"


class ScopedProxyMode(Enum):
    """How the host should proxy a scoped bean.

    ``DEFAULT`` means "whatever the resolver is configured with" and never
    appears on a resolved :class:`~scopebridge.domain.ScopeMetadata`.
    """

    DEFAULT = "default"
    NO = "no"
    INTERFACES = "interfaces"
    TARGET_CLASS = "target_class"
