"""Parser for the structured payload embedded in narrative responses.

Providers are asked for bare JSON but often wrap it in markdown fences or
prose. The parser locates the JSON object, decodes it and validates it
against the payload schema. Any failure raises NarrativeParseError; choosing
a fallback is the caller's job.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from crewsynergy.narrative.schemas import DuoNarrative, TeamNarrative

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class NarrativeParseError(Exception):
    """Raised when a response holds no valid narrative payload."""

    pass


class NarrativeParser:
    """Extracts and validates narrative payloads from raw provider text.

    Handles:
    - Raw JSON
    - JSON wrapped in markdown code blocks (```json ... ```)
    - JSON with surrounding text

    Example:
        >>> parser = NarrativeParser()
        >>> parser.parse_duo('Sure! {"synergy_reason": "...", "mission": "..."}').mission
        '...'
    """

    def parse_team(self, text: str) -> TeamNarrative:
        """Parse a team narrative.

        Raises:
            NarrativeParseError: If no valid payload is found.
        """
        return self._parse(text, TeamNarrative)

    def parse_duo(self, text: str) -> DuoNarrative:
        """Parse a duo narrative.

        Raises:
            NarrativeParseError: If no valid payload is found.
        """
        return self._parse(text, DuoNarrative)

    def _parse(self, text: str, model: type[M]) -> M:
        if not text or not text.strip():
            raise NarrativeParseError("Empty response")

        data = self.decode(text)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.debug("Payload failed %s validation: %s", model.__name__, e)
            msg = f"Invalid {model.__name__} payload: {e.error_count()} validation error(s)"
            raise NarrativeParseError(msg) from e

    def decode(self, text: str) -> dict[str, Any]:
        """Decode the JSON object embedded in text.

        Raises:
            NarrativeParseError: If no JSON object can be decoded.
        """
        json_text = self._extract_json(text)
        try:
            data = json.loads(json_text)
        except json.JSONDecodeError as e:
            msg = f"Invalid JSON: {e}"
            raise NarrativeParseError(msg) from e

        if not isinstance(data, dict):
            msg = f"Expected JSON object, got {type(data).__name__}"
            raise NarrativeParseError(msg)
        return data

    def _extract_json(self, text: str) -> str:
        """Extract JSON from potentially wrapped text."""
        if "```json" in text:
            match = re.search(r"```json\s*(.*?)\s*```", text, re.DOTALL)
            if match:
                return match.group(1).strip()

        if "```" in text:
            match = re.search(r"```\s*(.*?)\s*```", text, re.DOTALL)
            if match:
                extracted = match.group(1).strip()
                if extracted.startswith("{"):
                    return extracted

        json_str = self._find_balanced_object(text)
        if json_str:
            return json_str

        # Let json.loads report the error
        return text.strip()

    def _find_balanced_object(self, text: str) -> str | None:
        """Find the first balanced {...} span, ignoring braces inside strings."""
        start = text.find("{")
        if start == -1:
            return None

        depth = 0
        in_string = False
        escape = False

        for i, char in enumerate(text[start:], start):
            if escape:
                escape = False
                continue

            if char == "\\":
                escape = True
                continue

            if char == '"':
                in_string = not in_string
                continue

            if in_string:
                continue

            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return text[start : i + 1]

        return None
