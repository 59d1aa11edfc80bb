"""Release resolution: the trigger/tag model, the resolver and the run service."""

from __future__ import annotations
