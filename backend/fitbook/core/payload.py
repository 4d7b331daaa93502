from typing import Any, Dict

from fastapi import Request


async def read_payload(request: Request) -> Dict[str, Any]:
    """Request body as a plain dict, whether it was posted as JSON or as a form."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
    form = await request.form()
    return dict(form)
