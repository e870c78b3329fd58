"""Deserialize raw JMA payloads into typed documents."""

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from weatherrelay.errors import EmptyDocumentArray, ParseError
from weatherrelay.models.forecast import ForecastDocument, OverviewDocument

logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=BaseModel)


def parse_forecast(raw: bytes | str) -> ForecastDocument:
    """Parse a forecast payload.

    The forecast endpoint returns an array of documents (short-term first,
    then weekly); element 0 is used and the rest ignored. A bare object is
    accepted as well.
    """
    return _parse(raw, ForecastDocument)


def parse_overview(raw: bytes | str) -> OverviewDocument:
    return _parse(raw, OverviewDocument)


def _parse(raw: bytes | str, model: type[DocumentT]) -> DocumentT:
    try:
        value: Any = json.loads(raw)
    except ValueError as e:
        logger.error("Malformed JSON payload: %s", e)
        raise ParseError(f"malformed JSON: {e}") from e

    if isinstance(value, list):
        if not value:
            raise EmptyDocumentArray("upstream returned an empty document array")
        value = value[0]

    if not isinstance(value, dict):
        logger.error("Unexpected top-level JSON type: %s", type(value).__name__)
        raise ParseError(
            f"expected a JSON object or array, got {type(value).__name__}"
        )

    try:
        return model.model_validate(value)
    except ValidationError as e:
        logger.error("%s schema mismatch: %s", model.__name__, e)
        raise ParseError(f"{model.__name__} schema mismatch: {e}") from e
