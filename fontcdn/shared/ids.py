"""ID generation."""

import uuid


def generate_request_id() -> str:
    """Generate a request id for tracing (``req_`` + 16 hex chars)."""
    return f"req_{uuid.uuid4().hex[:16]}"
