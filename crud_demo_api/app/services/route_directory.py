"""
Directory of the public endpoints.

Returned in the body of every 404 so a caller who mistyped a URL can
see what the demo server offers.
"""

from typing import Any, Dict, List

ENDPOINTS: List[Dict[str, str]] = [
    {"method": "GET", "path": "/greet", "usage": "/greet?name=YourName&lang=en"},
    {"method": "POST", "path": "/math/average", "usage": 'POST JSON: { "numbers": [1, 2, 3] }'},
    {"method": "PUT", "path": "/shout/:word", "usage": "/shout/hello"},
    {"method": "DELETE", "path": "/secure/resource", "usage": "Header: x-role: admin"},
]


def not_found_payload() -> Dict[str, Any]:
    return {
        "error": "Route not found.",
        "message": "This is a demo server. Available endpoints:",
        "endpoints": [dict(endpoint) for endpoint in ENDPOINTS],
    }
