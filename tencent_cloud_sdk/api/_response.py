from typing import Any, Dict, Mapping


def select(response: Mapping[str, Any], *fields: str) -> Dict[str, Any]:
    """Pick the documented fields of a ``Response`` object, plus ``RequestId``."""
    picked = {name: response.get(name) for name in fields}
    picked['RequestId'] = response.get('RequestId')
    return picked
