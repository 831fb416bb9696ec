"""
Validation utilities for route handlers.

Loads form submissions into Pydantic models and checks that multipart
bodies are complete.
"""

import logging
from typing import Any, Dict, List, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError
from werkzeug.sansio.multipart import Epilogue, MultipartDecoder, NeedData

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# Bytes handed to the multipart decoder at a time
MULTIPART_CHUNK_SIZE = 64 * 1024


def format_validation_errors(error: ValidationError) -> List[Dict[str, Any]]:
    """
    Flatten Pydantic errors into ``{"field", "message", "type"}`` dicts.

    Field names use the submitted (alias) names, e.g. ``basePath``.
    """
    errors = []
    for err in error.errors():
        field = " -> ".join(str(loc) for loc in err["loc"])
        errors.append({"field": field, "message": err["msg"], "type": err["type"]})
    return errors


def load_form(model: Type[T], form: Mapping[str, Any]) -> T:
    """
    Validate submitted form fields against a Pydantic model.

    Only the first value of repeated fields is used.

    Raises:
        ValidationError: If the fields do not satisfy the model
    """
    if hasattr(form, "to_dict"):
        data = form.to_dict()
    else:
        data = dict(form)
    return model.model_validate(data)


def check_multipart_complete(body: bytes, boundary: bytes) -> None:
    """
    Decode a multipart body up to its closing boundary.

    Quart's form parser stops at the end of the data it was given, so a body
    cut off mid-part parses as a shorter, valid-looking form. Feeding the
    decoder an explicit end of input makes that case fail instead.

    Raises:
        ValueError: If the body ends before the closing boundary or a part is malformed
    """
    decoder = MultipartDecoder(boundary)
    view = memoryview(body)
    for start in range(0, len(view), MULTIPART_CHUNK_SIZE):
        decoder.receive_data(bytes(view[start:start + MULTIPART_CHUNK_SIZE]))
        while not isinstance(decoder.next_event(), NeedData):
            pass

    decoder.receive_data(None)
    while not isinstance(decoder.next_event(), Epilogue):
        pass
