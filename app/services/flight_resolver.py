"""Merge and fallback policy: resolve one flight query into a response.

Every identifier-mode adapter runs concurrently and is isolated: a timeout or
exception in one provider only removes that provider's record. The pipeline
always ends in a composed response, a route search response, or a not-found
response with suggestions.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Mapping, Optional, TypeVar, Union

from app.config import Settings
from app.domain.callsigns import broadened_patterns
from app.domain.sources import SourceTag
from app.ingestors import (
    JAPAN_BBOX,
    AviationStackIngestor,
    FlightLabsIngestor,
    FlightRadarIngestor,
    FlightSourceIngestor,
    OpenSkyIngestor,
    SerpApiIngestor,
)
from app.models.flight import FlightQuery, NormalizedFlightRecord
from app.models.responses import (
    ComposedFlightResponse,
    FlightNotFoundResponse,
    RouteSearchResponse,
)
from app.services.composer import build_generation_prompt, compose_response
from app.services.generation import FlightTextGenerator
from app.services.openai_client import OpenAITextClient
from app.services.response_shaper import shape_response
from app.services.route_search import RouteSearcher
from app.services.suggestions import SEARCH_TIPS, build_available_flights

logger = logging.getLogger("aerodex.resolver")

T = TypeVar("T")

ResolutionResult = Union[ComposedFlightResponse, RouteSearchResponse, FlightNotFoundResponse]

POSITION_SOURCE = SourceTag.OPENSKY


class FlightResolver:
    """Fan out to the configured providers and merge what comes back."""

    def __init__(
        self,
        *,
        ingestors: Mapping[SourceTag, FlightSourceIngestor],
        position: Optional[OpenSkyIngestor] = None,
        generator: Optional[FlightTextGenerator] = None,
        route_searcher: Optional[RouteSearcher] = None,
        deadline: float = 15.0,
    ) -> None:
        self.ingestors = dict(ingestors)
        self.position = position
        if self.position is None and isinstance(self.ingestors.get(POSITION_SOURCE), OpenSkyIngestor):
            self.position = self.ingestors[POSITION_SOURCE]  # type: ignore[assignment]
        self.generator = generator
        self.route_searcher = route_searcher
        if self.route_searcher is None and self.position is not None:
            self.route_searcher = RouteSearcher(self.position)
        self.deadline = deadline

    @classmethod
    def from_settings(cls, settings: Settings) -> "FlightResolver":
        """Register every provider whose credentials are configured."""

        opensky = OpenSkyIngestor(
            base_url=settings.opensky_base_url, timeout=settings.provider_timeout
        )
        ingestors: dict[SourceTag, FlightSourceIngestor] = {SourceTag.OPENSKY: opensky}

        if settings.aviationstack_api_key:
            ingestors[SourceTag.AVIATIONSTACK] = AviationStackIngestor(
                api_key=settings.aviationstack_api_key,
                base_url=settings.aviationstack_base_url,
                timeout=settings.provider_timeout,
            )
        if settings.flightlabs_api_key:
            ingestors[SourceTag.FLIGHTLABS] = FlightLabsIngestor(
                api_key=settings.flightlabs_api_key,
                base_url=settings.flightlabs_base_url,
                timeout=settings.provider_timeout,
            )
        if settings.fr24_api_key:
            ingestors[SourceTag.FLIGHTRADAR24] = FlightRadarIngestor(
                api_key=settings.fr24_api_key,
                base_url=settings.fr24_base_url,
                timeout=settings.provider_timeout,
            )
        if settings.serpapi_api_key:
            ingestors[SourceTag.SERPAPI] = SerpApiIngestor(
                api_key=settings.serpapi_api_key,
                base_url=settings.serpapi_base_url,
                fallback_url=settings.search_fallback_url,
                timeout=settings.provider_timeout,
            )

        generator = None
        if settings.openai_api_key:
            generator = FlightTextGenerator(
                OpenAITextClient(
                    api_key=settings.openai_api_key,
                    model=settings.openai_model,
                    timeout=settings.openai_timeout,
                )
            )

        logger.info(
            "Flight resolver providers: %s (text generation %s)",
            ", ".join(tag.value for tag in ingestors),
            "enabled" if generator else "disabled",
        )
        return cls(
            ingestors=ingestors,
            position=opensky,
            generator=generator,
            deadline=settings.provider_deadline,
        )

    @property
    def provider_tags(self) -> list[str]:
        return [tag.value for tag in self.ingestors]

    async def resolve(self, query: FlightQuery) -> ResolutionResult:
        if query.mode == "route":
            return await self.search_route(query.departure or "", query.arrival or "")
        if query.mode != "flight":
            raise ValueError(query.input_error() or "Invalid flight query")
        return await self.resolve_flight(query)

    async def search_route(self, origin: str, destination: str) -> RouteSearchResponse:
        if self.route_searcher is None:
            raise RuntimeError("Route search requires the position feed")
        return await self.route_searcher.search(origin, destination)

    async def resolve_flight(self, query: FlightQuery) -> ResolutionResult:
        identifier = query.flight_number or ""
        tags = list(self.ingestors)
        results = await asyncio.gather(
            *(self._safe_fetch(self.ingestors[tag], identifier) for tag in tags)
        )
        found: dict[SourceTag, NormalizedFlightRecord] = {
            tag: record for tag, record in zip(tags, results) if record is not None
        }

        if POSITION_SOURCE in self.ingestors and POSITION_SOURCE not in found:
            broadened = await self._broadened_position_lookup(identifier)
            if broadened is not None:
                found[POSITION_SOURCE] = broadened

        if not found:
            logger.info("No provider returned data for %s", identifier)
            return await self._not_found(identifier)

        records = list(found.values())
        composed = compose_response(query, records)
        if self.generator is None:
            return composed

        prompt = build_generation_prompt(query, records, composed)
        generated = await self._guard(self.generator.generate(prompt), "text generation")
        return shape_response(generated, composed)

    async def _broadened_position_lookup(self, identifier: str) -> Optional[NormalizedFlightRecord]:
        position = self.ingestors[POSITION_SOURCE]
        for variant in broadened_patterns(identifier):
            logger.info("Retrying position feed for %s with broadened pattern %s", identifier, variant)
            record = await self._safe_fetch(position, variant)
            if record is not None:
                return record
        return None

    async def _not_found(self, identifier: str) -> FlightNotFoundResponse:
        available = []
        if self.position is not None:
            states = await self._guard(self.position.get_states(JAPAN_BBOX), "regional feed")
            available = build_available_flights(states or [])

        return FlightNotFoundResponse(
            error=f"No flight information found for {identifier.upper()}.",
            suggestion=(
                "Check the flight number, or pick one of the flights currently in the air below."
            ),
            available_flights=available,
            search_tips=list(SEARCH_TIPS),
        )

    async def _safe_fetch(
        self, ingestor: FlightSourceIngestor, identifier: str
    ) -> Optional[NormalizedFlightRecord]:
        return await self._guard(ingestor.fetch(identifier), ingestor.source.value)

    async def _guard(self, call: Awaitable[Optional[T]], label: str) -> Optional[T]:
        try:
            return await asyncio.wait_for(call, timeout=self.deadline)
        except asyncio.TimeoutError:
            logger.warning("%s exceeded the %.1fs deadline", label, self.deadline)
        except Exception as exc:
            logger.warning("%s failed: %s", label, exc)
        return None


__all__ = ["FlightResolver", "ResolutionResult"]
