"""KeyNormalizer: fold locale key paths to comparable lowercase words.

Translation keys drift between naming styles when files are edited by hand
("signIn" in one locale, "sign_in" in another).  Normalizing each path
segment lets the rename-hint matcher see through those differences:

- camelCase / PascalCase   "signInButton"   -> "sign in button"
- snake_case / kebab-case  "sign_in-button" -> "sign in button"
- acronyms                 "OAuthURL"       -> "o auth url"
- digit boundaries         "step2Title"     -> "step 2 title"
"""

from __future__ import annotations

import re

__all__ = ["KeyNormalizer"]

# Underscore and hyphen runs
_SEP = re.compile(r"[_\-]+")

# lowercase -> uppercase boundary
_UPPER_LOWER = re.compile(r"([a-z])([A-Z])")

# Uppercase run ending where a capitalized word starts ("URLParser")
_UPPER_RUN = re.compile(r"([A-Z]+)([A-Z][a-z])")

# NOTE: applied twice; a match consumes both characters, so the boundary on
# the far side of a single digit ("v2Config") only shows up on the second pass.
_DIGIT_BOUNDARY = re.compile(r"([a-zA-Z])(\d)|(\d)([a-zA-Z])")


class KeyNormalizer:
    """Normalizes key segments and whole key paths.

    Example usage:
        normalizer = KeyNormalizer()
        normalizer.normalize("signInButton")               # "sign in button"
        normalizer.normalize_path("auth.signIn", ".")      # "auth / sign in"
    """

    def normalize(self, key: str) -> str:
        """Normalize one key segment to lowercase space-separated words."""
        s = _SEP.sub(" ", key)
        s = _UPPER_LOWER.sub(r"\1 \2", s)
        s = _UPPER_RUN.sub(r"\1 \2", s)
        s = _DIGIT_BOUNDARY.sub(r"\1\3 \2\4", s)
        s = _DIGIT_BOUNDARY.sub(r"\1\3 \2\4", s)
        return " ".join(s.lower().split())

    def normalize_path(self, path: str, separator: str = ".") -> str:
        """Normalize every segment of a joined path, joined by ``" / "``."""
        return " / ".join(self.normalize(segment) for segment in path.split(separator))
