"""Integrations subpackage for glottis.

Contains the pytest plugin (auto-discovered via the pytest11 entry point)
providing the ``assert_locales_in_sync`` fixture.
"""

from __future__ import annotations

__all__: list[str] = []
