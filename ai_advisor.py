"""
AI Zoning Advisor for the Kigali Zoning Assistant
Answers location-specific zoning questions with GROQ LLM, grounded in the resolved regulations
"""

import time
import asyncio
import logging
from typing import Dict, Optional, Any
from dataclasses import dataclass, field

from groq import Groq

from config import Config
from models.spatial import LocationSpatialData
from backend.errors import CollaboratorError
from backend.zoning_service import ZoningService
from utils.cache_manager import ResponseCache, FingerprintInputs
from utils.formatters import RegulationFormatter, ResponseFormatter, get_language
from utils.validators import sanitize_string

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an authoritative zoning assistant for Kigali, Rwanda.

YOUR CORE PRINCIPLES:
1. AUTHORITATIVE: Every answer cites specific Articles, Tables, and numbers from the Kigali City Zoning Regulations (August 2020)
2. ACTIONABLE: Citizens should not need to visit government offices after reading your response
3. SPECIFIC: Never say "check with authorities" when you have the regulation in context
4. MULTILINGUAL: Respond fluently in English, Kinyarwanda, or French as requested

You have been provided with the authoritative zoning regulations for the user's location. Use them to give definitive answers."""

RESPONSE_REQUIREMENTS = """RESPONSE REQUIREMENTS:
1. Start with YES, NO, or CONDITIONAL in the first sentence
2. Reference specific Articles and Tables and quote exact numbers (FAR, coverage %, floor limits)
3. If PERMITTED list the documents needed for a permit application; if CONDITIONAL explain what OSC will evaluate; if PROHIBITED suggest alternatives
4. Maximum 250 words, no markdown, simple bullet points (•)
5. End with the legal source citation"""


@dataclass
class AdvisorResponse:
    """Answer to a zoning question plus the context it was based on"""
    response: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    cached: bool = False
    context: Optional[LocationSpatialData] = None


class ZoningAdvisor:
    """Question answering over the regulatory context of a location"""

    def __init__(self, service: ZoningService, cache: Optional[ResponseCache] = None,
                 client: Optional[Groq] = None, api_key: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.service = service
        self.cache = cache if cache is not None else service.cache
        self.timeout = timeout if timeout is not None else Config.REQUEST_TIMEOUT

        api_key = api_key or Config.GROQ_API_KEY
        if client is None and api_key:
            client = Groq(api_key=api_key, timeout=self.timeout)
        self.client = client
        if self.client is None:
            logger.warning("GROQ API key not configured, answers will use regulatory fallbacks")

        self.model = Config.LLM_MODEL
        self.max_tokens = Config.LLM_MAX_TOKENS
        self.temperature = Config.LLM_TEMPERATURE
        self.top_p = 0.9

    def build_prompt(self, question: str, context: LocationSpatialData, language: str) -> str:
        lang = get_language(language)
        location = context.location
        return "\n\n".join([
            RegulationFormatter.format_context(context),
            f"LOCATION: {ResponseFormatter.format_coordinates(location.lat, location.lng)}",
            f"LANGUAGE: {lang.instruction}",
            RESPONSE_REQUIREMENTS,
            f"CITIZEN'S QUESTION: {question}"
        ])

    def _complete(self, prompt: str) -> str:
        """Call the GROQ chat completion API, raising CollaboratorError on any failure"""
        if self.client is None:
            raise CollaboratorError("GROQ client not configured")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt}
                ],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                top_p=self.top_p,
                stream=False,
                timeout=self.timeout
            )
            content = response.choices[0].message.content
        except Exception as e:
            raise CollaboratorError(f"GROQ request failed: {e}") from e

        if not content:
            raise CollaboratorError("GROQ returned an empty response")
        return content

    def _no_coverage(self, context: LocationSpatialData) -> AdvisorResponse:
        location = context.location
        return AdvisorResponse(
            response=ResponseFormatter.no_coverage_notice(location.lat, location.lng),
            metadata={
                'fallback': True,
                'error': 'location_outside_zones',
                'coordinates': {'lat': location.lat, 'lng': location.lng}
            },
            cached=False,
            context=context
        )

    def _fallback(self, question: str, context: LocationSpatialData, language: str,
                  error: Exception) -> AdvisorResponse:
        logger.error(f"Answer generation failed, returning regulatory fallback: {error}")
        return AdvisorResponse(
            response=ResponseFormatter.fallback_answer(question, context, language),
            metadata={'fallback': True, 'error': str(error), 'language': language,
                      'zone_code': context.zone_code},
            cached=False,
            context=context
        )

    def _finish(self, answer: str, context: LocationSpatialData, language: str,
                started: float) -> AdvisorResponse:
        response = answer + "\n" + ResponseFormatter.footer(context, language)
        metadata = {
            'model': self.model,
            'language': language,
            'zone_code': context.zone_code,
            'zone_name': context.zone_data.zone_label,
            'authoritative': context.has_regulation,
            'processing_time': round(time.time() - started, 3)
        }
        return AdvisorResponse(response=response, metadata=metadata, cached=False, context=context)

    def _prepare(self, question: str, lat: float, lng: float, language: Optional[str],
                 context: LocationSpatialData):
        language = get_language(language).code
        inputs = FingerprintInputs(question=question, lat=lat, lng=lng,
                                   zone_label=context.zone_data.zone_label, language=language)
        return sanitize_string(question, Config.MAX_QUESTION_LENGTH), language, inputs

    def ask(self, question: str, lat: float, lng: float, language: str = 'en') -> AdvisorResponse:
        """
        Answer a zoning question for a coordinate

        Args:
            question: Free-text question
            lat: Latitude
            lng: Longitude
            language: en, rw or fr; anything else falls back to English

        Returns:
            AdvisorResponse; collaborator failures produce a fallback answer, store failures propagate
        """
        started = time.time()
        context = self.service.resolve_location(lat, lng)
        if not context.has_coverage:
            return self._no_coverage(context)

        question, language, inputs = self._prepare(question, lat, lng, language, context)

        if self.cache is not None:
            entry = self.cache.get(inputs)
            if entry is not None:
                return AdvisorResponse(response=entry.response, metadata=entry.metadata, cached=True,
                                       context=context)

        try:
            answer = self._complete(self.build_prompt(question, context, language))
        except CollaboratorError as e:
            return self._fallback(question, context, language, e)

        result = self._finish(answer, context, language, started)
        if self.cache is not None:
            self.cache.put(inputs, result.response, result.metadata)
        logger.info(f"Answered question for zone {context.zone_code or context.zone_data.zone_label}")
        return result

    async def aask(self, question: str, lat: float, lng: float, language: str = 'en',
                   timeout: Optional[float] = None) -> AdvisorResponse:
        """Async variant of ask; each external call is bounded by its own timeout"""
        started = time.time()
        context = await self.service.aresolve_location(lat, lng, timeout=timeout)
        if not context.has_coverage:
            return self._no_coverage(context)

        question, language, inputs = self._prepare(question, lat, lng, language, context)

        if self.cache is not None:
            entry = await self.cache.aget(inputs)
            if entry is not None:
                return AdvisorResponse(response=entry.response, metadata=entry.metadata, cached=True,
                                       context=context)

        prompt = self.build_prompt(question, context, language)
        llm_timeout = self.timeout
        try:
            answer = await asyncio.wait_for(asyncio.to_thread(self._complete, prompt), llm_timeout)
        except asyncio.TimeoutError:
            return self._fallback(question, context, language,
                                  CollaboratorError(f"GROQ request timed out after {llm_timeout}s"))
        except CollaboratorError as e:
            return self._fallback(question, context, language, e)

        result = self._finish(answer, context, language, started)
        if self.cache is not None:
            await self.cache.aput(inputs, result.response, result.metadata)
        return result
