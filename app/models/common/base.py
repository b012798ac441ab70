"""Base class for report records returned by services."""

import json
from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class BaseEntity:
    """Dataclass record that serializes to JSON-ready data for reports and the CLI."""

    def to_dict(self, drop_none: bool = False) -> dict[str, Any]:
        data = asdict(self)
        if drop_none:
            data = {k: v for k, v in data.items() if v is not None}
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(drop_none=True), ensure_ascii=False, sort_keys=True)
