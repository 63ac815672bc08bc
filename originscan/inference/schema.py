"""Structured response contract for the inference oracle."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from originscan.exceptions import InferenceError

from .result import Confidence, InferenceGuess

# Fenced ```json blocks some local models emit despite format constraints
_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)

RESPONSE_FIELDS = (
    "productName",
    "countryOfOrigin",
    "isoCode",
    "confidence",
    "description",
    "isProduct",
)

# Plain JSON Schema (used by Ollama's ``format`` option)
RESPONSE_JSON_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "productName": {"type": "string"},
        "countryOfOrigin": {"type": "string"},
        "isoCode": {
            "type": "string",
            "description": "ISO 3166-1 alpha-2 code, e.g. US, JP, CN",
        },
        "confidence": {"type": "string", "enum": [c.value for c in Confidence]},
        "description": {"type": "string"},
        "isProduct": {"type": "boolean"},
    },
    "required": list(RESPONSE_FIELDS),
    "additionalProperties": False,
}


class OracleResponse(BaseModel):
    """Exact shape the oracle must answer with. Anything else is rejected."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    product_name: str = Field(alias="productName")
    country_of_origin: str = Field(alias="countryOfOrigin")
    iso_code: str = Field(alias="isoCode", pattern=r"^[A-Za-z]{2}$")
    confidence: Confidence
    description: str
    is_product: StrictBool = Field(alias="isProduct")

    @field_validator("iso_code")
    @classmethod
    def _upper_iso_code(cls, v: str) -> str:
        return v.upper()

    def to_guess(self) -> InferenceGuess:
        return InferenceGuess(
            product_name=self.product_name,
            country_name=self.country_of_origin,
            iso_code=self.iso_code,
            confidence=self.confidence,
            description=self.description,
            is_product=self.is_product,
        )


def parse_response(text: str | None) -> InferenceGuess:
    """Validate a raw response body and convert it into a guess.

    Raises
    ------
    InferenceError
        If the body is empty.
    pydantic.ValidationError
        If the body is not JSON or does not match the schema.
    """
    if not text or not text.strip():
        msg = "Empty response from inference service"
        raise InferenceError(msg)

    body = text.strip()
    fenced = _CODE_FENCE.match(body)
    if fenced:
        body = fenced.group(1)

    return OracleResponse.model_validate_json(body).to_guess()
