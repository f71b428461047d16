"""JSON output wrapper for machine-readable CLI results."""

from __future__ import annotations

import json
from typing import Any

from verificile.utils.schema import build_schema_stamp


def json_response(
    schema_id: str,
    schema_version: int,
    **data: Any,
) -> str:
    """Create schema-wrapped JSON response for CLI output.

    Args:
        schema_id: Identifier for the output type (e.g., "scan_summary").
        schema_version: Integer version for backward compatibility.
        **data: Payload data to include in the response.

    Returns:
        JSON string with schema metadata and payload.

    Example:
        >>> json_response("scan_summary", 1, anomalies_remaining=0)
        {
          "schema_id": "scan_summary",
          "schema_version": 1,
          "producer": "verificile-1.0.0",
          "produced_at": "2025-05-15T21:31:37+00:00",
          "anomalies_remaining": 0
        }
    """
    stamp = build_schema_stamp(schema_id=schema_id, schema_version=schema_version)
    wrapped = {
        "schema_id": stamp.schema_id,
        "schema_version": stamp.schema_version,
        "producer": stamp.producer,
        "produced_at": stamp.produced_at,
        **data,
    }
    return json.dumps(wrapped, indent=2, default=str)
