"""
Knowledge Base for the Kigali Zoning Assistant
Structured zoning regulations from the Kigali City Zoning Regulations (2020)
"""

import re
import copy
import logging
from typing import Dict, List, Any, Optional, Tuple

from models.zoning import (
    ZoneCode, UnknownZone, UseStatus, ConditionalUse, ZoneRegulation,
    DevelopmentParams, UseClassification
)
from backend.zone_normalizer import ZoneCodeNormalizer
from utils.constants import (
    ZONE_REGULATIONS, GENERAL_PROVISIONS, PARKING_REQUIREMENTS, CONTACTS,
    REGULATION_METADATA, APPROVAL_AUTHORITY
)

logger = logging.getLogger(__name__)

_PARENTHETICAL = re.compile(r'\(([^()]*)\)\s*$')


def _split_conditional(entry: str) -> Tuple[str, Optional[str]]:
    """Pull the approval condition out of a conditional use entry"""
    lowered = entry.lower()
    idx = lowered.find(' when ')
    if idx != -1:
        return entry, entry[idx + 1:].strip()

    match = _PARENTHETICAL.search(entry)
    if match:
        return entry, match.group(1).strip()
    return entry, None


class KigaliKnowledgeBase:
    """Read-only lookup over the Kigali zone regulations

    Every entry is validated once when the knowledge base is built. Lookups accept a
    canonical ZoneCode, an UnknownZone, or a raw zone label, which is normalized first.
    """

    def __init__(self, zone_data: Optional[Dict[str, Dict[str, Any]]] = None):
        raw = ZONE_REGULATIONS if zone_data is None else zone_data
        self._regulations: Dict[ZoneCode, ZoneRegulation] = {}

        for key, entry in raw.items():
            code = ZoneCode(key)
            self._regulations[code] = self._build_regulation(code, entry)

        missing = [code.value for code in ZoneCode if code not in self._regulations]
        if missing:
            logger.warning(f"Knowledge base has no regulations for: {', '.join(missing)}")

        self._normalizer = ZoneCodeNormalizer(known_codes=[code.value for code in self._regulations])
        logger.info(f"Loaded regulations for {len(self._regulations)} zones")

    @staticmethod
    def _build_regulation(code: ZoneCode, entry: Dict[str, Any]) -> ZoneRegulation:
        data = copy.deepcopy(entry)
        data['code'] = code
        data.setdefault('display_code', code.value)

        uses = data.get('uses')
        if uses and uses.get('conditional'):
            conditional = []
            for item in uses['conditional']:
                if isinstance(item, str):
                    name, conditions = _split_conditional(item)
                    item = ConditionalUse(name=name, authority=APPROVAL_AUTHORITY, conditions=conditions)
                conditional.append(item)
            uses['conditional'] = conditional

        return ZoneRegulation(**data)

    def _resolve(self, code) -> Optional[ZoneCode]:
        identity = self._normalizer.normalize(code)
        if isinstance(identity, UnknownZone):
            return None
        return identity

    def lookup(self, code) -> Optional[ZoneRegulation]:
        """Get the full regulation for a zone, or None for unknown zones"""
        resolved = self._resolve(code)
        if resolved is None:
            return None
        return self._regulations.get(resolved)

    def development_params(self, code) -> Optional[DevelopmentParams]:
        """Get the development envelope of a zone"""
        regulation = self.lookup(code)
        if regulation is None:
            return None

        return DevelopmentParams(
            zone_name=regulation.full_name,
            code=regulation.display_code,
            article=regulation.article,
            table=regulation.table,
            lot_size=regulation.lot_size,
            max_building_coverage=regulation.max_building_coverage,
            min_landscaping_coverage=regulation.min_landscaping_coverage,
            max_floor_area_ratio=regulation.max_floor_area_ratio,
            density=regulation.density,
            max_floors=regulation.max_floors,
            building_forms=list(regulation.building_forms),
            setbacks=regulation.setbacks
        )

    def classify_use(self, code, use_query: str) -> UseClassification:
        """Classify a use against a zone's permission lists

        Matching is a case-insensitive substring test of the query against each entry.
        Lists are checked in a fixed order and the first hit wins:
        permitted, then conditional, then prohibited. No hit means unspecified.
        """
        regulation = self.lookup(code)
        if regulation is None:
            label = code.value if isinstance(code, ZoneCode) else str(code or "")
            return UseClassification(status=UseStatus.UNKNOWN_ZONE, zone_code=label)

        base = {
            'zone_code': regulation.code.value,
            'zone_name': regulation.full_name,
            'article': regulation.article
        }

        query = (use_query or "").strip().lower()
        uses = regulation.uses
        if not query or uses is None:
            return UseClassification(status=UseStatus.UNSPECIFIED, **base)

        for entry in uses.permitted:
            if query in entry.lower():
                return UseClassification(status=UseStatus.PERMITTED, matched_entry=entry, **base)

        for conditional in uses.conditional:
            if query in conditional.name.lower():
                return UseClassification(
                    status=UseStatus.CONDITIONAL,
                    matched_entry=conditional.name,
                    authority=conditional.authority,
                    conditions=conditional.conditions,
                    **base
                )

        for entry in uses.prohibited:
            if query in entry.lower():
                return UseClassification(status=UseStatus.PROHIBITED, matched_entry=entry, **base)

        return UseClassification(status=UseStatus.UNSPECIFIED, **base)

    def codes(self) -> List[ZoneCode]:
        """Zone codes with regulations, in table order"""
        return list(self._regulations.keys())

    def general_provisions(self) -> Dict[str, Dict[str, Any]]:
        """Provisions applying across all zones (Article 4)"""
        return copy.deepcopy(GENERAL_PROVISIONS)

    def parking_requirements(self) -> Dict[str, Any]:
        return copy.deepcopy(PARKING_REQUIREMENTS)

    def contacts(self) -> Dict[str, Any]:
        return copy.deepcopy(CONTACTS)

    @property
    def metadata(self) -> Dict[str, str]:
        return dict(REGULATION_METADATA)


_global_knowledge_base: Optional[KigaliKnowledgeBase] = None


def get_knowledge_base() -> KigaliKnowledgeBase:
    """Get or create the shared knowledge base built from the bundled regulations"""
    global _global_knowledge_base
    if _global_knowledge_base is None:
        _global_knowledge_base = KigaliKnowledgeBase()
    return _global_knowledge_base
