"""
Zone label normalization
Maps the heterogeneous labels found in zoning GeoJSON to canonical zone codes
"""

import re
import logging
from typing import Optional, Dict, Iterable

from models.zoning import ZoneCode, UnknownZone, ZoneIdentity
from utils.constants import ZONE_LABEL_VARIANTS

logger = logging.getLogger(__name__)

_CODE_PREFIX = re.compile(r'^([A-Z]+[0-9]*[A-Z]?)')


class ZoneCodeNormalizer:
    """Total function from raw zone labels to canonical codes

    Resolution order:
    1. exact match against the known label variants
    2. leading code prefix (e.g. "R1A" in "R1A-Low density ...") if it is a known code
    3. UnknownZone carrying the raw label
    """

    def __init__(self, label_variants: Optional[Dict[str, str]] = None,
                 known_codes: Optional[Iterable[str]] = None):
        variants = ZONE_LABEL_VARIANTS if label_variants is None else label_variants
        self._variants = {label: ZoneCode(code) for label, code in variants.items()}
        codes = known_codes if known_codes is not None else [code.value for code in ZoneCode]
        self._known_codes = frozenset(getattr(code, 'value', code) for code in codes) & {code.value for code in ZoneCode}

    def normalize(self, raw_label) -> ZoneIdentity:
        if isinstance(raw_label, ZoneCode):
            return raw_label
        if isinstance(raw_label, UnknownZone):
            return raw_label
        if not raw_label:
            return UnknownZone(raw_label="")

        label = str(raw_label)
        if label in self._variants:
            return self._variants[label]

        match = _CODE_PREFIX.match(label)
        if match and match.group(1) in self._known_codes:
            return ZoneCode(match.group(1))

        logger.debug(f"Unrecognised zone label: {label!r}")
        return UnknownZone(raw_label=label)


_default_normalizer = ZoneCodeNormalizer()


def normalize_zone_label(raw_label) -> ZoneIdentity:
    """Normalize a raw zone label with the default label table"""
    return _default_normalizer.normalize(raw_label)
