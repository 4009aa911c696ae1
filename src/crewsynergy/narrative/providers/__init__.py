"""Narrative provider implementations."""

from crewsynergy.narrative.providers.openai import OpenAINarrativeClient

__all__ = ["OpenAINarrativeClient"]
