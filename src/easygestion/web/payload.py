from __future__ import annotations

from flask import request

from ..core.exceptions import ValidationError


def request_data() -> dict:
    """JSON body, or form fields for multipart submissions."""
    if request.is_json:
        data = request.get_json(silent=True)
        if data is None:
            raise ValidationError("Malformed JSON body")
        if not isinstance(data, dict):
            raise ValidationError("JSON body must be an object")
        return data
    return request.form.to_dict()
