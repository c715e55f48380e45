"""Name variants for generated identifiers.

Case rules are purely lexical: ASCII case-folding, first character
upper-cased for the capitalized form, and a static ``"s"`` suffix for the
plural forms used in comments and messages.  No language-aware
pluralization is attempted.
"""

from __future__ import annotations

import re

from .errors import InvalidNameError
from .models import NameVariants

PATH_SEPARATORS = ("/", "\\")

# The model file declares `const <Name>` next to these mongoose imports.
RESERVED_MODEL_NAMES = frozenset({"Document", "Schema"})

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def ascii_lower(value: str) -> str:
    """Lowercase ``A``-``Z`` only, leaving every other code point untouched."""
    return value.translate(_ASCII_LOWER)


def capitalize(value: str) -> str:
    """Upper-case the first character, keep the rest as is.

    Unlike ``str.capitalize`` the remainder is not lowercased.
    """
    if not value:
        return value
    return value[0].upper() + value[1:]


def derive_variants(raw: str) -> NameVariants:
    """Derive the identifier variants for a single resource name.

    Raises:
        InvalidNameError: if the trimmed name is empty, contains a path
            separator, is not usable as an identifier in generated code, or
            capitalizes to a name the generated model already imports.
    """
    name = raw.strip()
    if not name:
        raise InvalidNameError(raw, "name is empty")
    if any(sep in name for sep in PATH_SEPARATORS):
        raise InvalidNameError(raw, "name must not contain a path separator")
    if not _IDENTIFIER_RE.match(name):
        raise InvalidNameError(
            raw, "use letters, digits, '_' or '$', not starting with a digit"
        )

    lower = ascii_lower(name)
    capitalized = capitalize(lower)
    if capitalized in RESERVED_MODEL_NAMES:
        raise InvalidNameError(
            raw, f"{capitalized!r} clashes with a mongoose import in the generated model"
        )
    plural = f"{lower}s"
    return NameVariants(
        lower=lower,
        capitalized=capitalized,
        plural=plural,
    )
