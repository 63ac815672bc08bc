"""Prompt construction for the inference oracle."""

import json

PROMPT_TEMPLATE = """I scanned a code. The content is: {payload}. The format is: {symbology}.

1. If it's a barcode (EAN, UPC), identify the likely product name, brand, and origin based on standard databases or general knowledge.
2. If it's a URL or text (QR), analyze the content to determine if it refers to a product, company, or entity and infer the country of origin.
3. Determine the confidence level of the origin (high, medium or low).
4. Provide a short description (max 20 words).

Respond with ONLY a JSON object with exactly these keys:
- productName: product or entity name
- countryOfOrigin: country name
- isoCode: ISO 3166-1 alpha-2 code, e.g. US, JP, CN
- confidence: "high", "medium" or "low"
- description: short description, max 20 words
- isProduct: true if the code identifies a product
"""  # NOQA: E501


def build_prompt(payload: str, symbology: str) -> str:
    # JSON quoting keeps quotes and newlines in QR payloads from breaking the prompt
    return PROMPT_TEMPLATE.format(
        payload=json.dumps(payload, ensure_ascii=False),
        symbology=json.dumps(symbology or "UNKNOWN"),
    )
