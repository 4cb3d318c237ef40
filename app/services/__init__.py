"""Service-layer helpers for the aerodex backend."""

from .composer import build_generation_prompt, compose_response
from .flight_resolver import FlightResolver, ResolutionResult
from .generation import FlightTextGenerator, extract_json_object
from .openai_client import OpenAITextClient
from .response_shaper import shape_response
from .route_search import RouteSearcher
from .suggestions import build_available_flights

__all__ = [
    "FlightResolver",
    "FlightTextGenerator",
    "OpenAITextClient",
    "ResolutionResult",
    "RouteSearcher",
    "build_available_flights",
    "build_generation_prompt",
    "compose_response",
    "extract_json_object",
    "shape_response",
]
