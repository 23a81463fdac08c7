# apps/accounts/domain/invites.py
"""
Kody zaproszeń: ROLA-KOHORTA-SUFIKS, np. ADMIN-Alpha-X7K2QD.

To zwykłe parsowanie tekstu - bez podpisu, bez daty ważności.
Nie traktować jako zabezpieczenia.
"""
import string
from typing import Optional, Tuple

from django.conf import settings
from django.utils.crypto import get_random_string

from apps.accounts.domain.entities import Role

DEFAULT_COHORT = 'Alpha'
SUFFIX_LENGTH = 6
SUFFIX_CHARS = string.digits + string.ascii_uppercase


def invite_prefix() -> str:
    return getattr(settings, 'BEYOND_INVITE_PREFIX', 'beyond://invite/')


def strip_invite_link(invite: Optional[str]) -> str:
    code = invite or ""
    prefix = invite_prefix()
    if code.lower().startswith(prefix.lower()):
        code = code[len(prefix):]
    return code


def parse_invite(invite: Optional[str]) -> Tuple[Role, str]:
    """Zwraca (rola, kohorta). Przyjmuje sam kod albo pełny link."""
    code = strip_invite_link(invite)
    role = Role.ADMIN if code.upper().startswith('ADMIN-') else Role.MEMBER
    parts = code.split('-')
    cohort = parts[1] if len(parts) >= 2 else DEFAULT_COHORT
    return role, cohort


def create_invite(role: Role, cohort: str) -> str:
    suffix = get_random_string(SUFFIX_LENGTH, allowed_chars=SUFFIX_CHARS)
    return f"{invite_prefix()}{Role(role).value.upper()}-{cohort}-{suffix}"
