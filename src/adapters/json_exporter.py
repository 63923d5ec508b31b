"""JSON export of lookup results.

Why JSON:
- Interoperability with scripts (`jq`, other tools) without scraping tables.
"""

from __future__ import annotations

import json
from typing import Iterable

from pydantic import BaseModel


def results_to_json(results: Iterable[BaseModel]) -> str:
    """Serialize results to a JSON array with stable formatting."""

    payload = [r.model_dump(mode="json") for r in results]
    return json.dumps(payload, ensure_ascii=False, indent=2)
