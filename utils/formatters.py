"""
Data formatting utilities
Text rendering of regulatory context, answer footers and fallback notices
"""

from typing import Optional, List
from dataclasses import dataclass

from config import Config
from models.spatial import LocationSpatialData
from models.zoning import ZoneRegulation, DevelopmentParams

RULE = "━" * 50


@dataclass(frozen=True)
class FooterLabels:
    location: str
    source: str
    contact: str
    more_info: str


@dataclass(frozen=True)
class LanguageConfig:
    """Per-language instruction and footer labels"""
    code: str
    name: str
    instruction: str
    footer: FooterLabels


LANGUAGES = {
    'en': LanguageConfig(
        code='en',
        name='English',
        instruction='Respond in English.',
        footer=FooterLabels(location='Location', source='Source', contact='City of Kigali Planning',
                            more_info='More info')
    ),
    'rw': LanguageConfig(
        code='rw',
        name='Kinyarwanda',
        instruction='Subiza mu Kinyarwanda gusa. Koresha amagambo yoroshye yumvikana.',
        footer=FooterLabels(location='Aho hantu', source='Ibyavuye', contact='Umujyi wa Kigali - Imiyoborere',
                            more_info='Amakuru yinyongera')
    ),
    'fr': LanguageConfig(
        code='fr',
        name='Français',
        instruction='Répondez entièrement en français.',
        footer=FooterLabels(location='Emplacement', source='Source', contact='Planification de la Ville de Kigali',
                            more_info="Plus d'infos")
    )
}


def get_language(code: Optional[str]) -> LanguageConfig:
    """Language settings for a code, English for anything unsupported"""
    return LANGUAGES.get(code or Config.DEFAULT_LANGUAGE, LANGUAGES['en'])


class PercentageFormatter:
    """Percentage formatting utilities"""

    @staticmethod
    def format_percentage(value: float, precision: int = 0,
                          include_symbol: bool = True, default: str = "Per regulations") -> str:
        """
        Format value as percentage

        Args:
            value: Decimal value (0.25 for 25%)
            precision: Number of decimal places
            include_symbol: Whether to include % symbol
            default: Text returned when the value is missing

        Returns:
            Formatted percentage string
        """
        if value is None:
            return default

        percentage = value * 100

        if precision == 0:
            formatted = f"{percentage:.0f}"
        else:
            formatted = f"{percentage:.{precision}f}"

        if include_symbol:
            return f"{formatted}%"

        return formatted


def _bullets(items: List[str], empty: str) -> str:
    if not items:
        return f"• {empty}"
    return "\n".join(f"• {item}" for item in items)


def _or_default(value, default: str = "Per regulations") -> str:
    return default if value is None or value == "" else str(value)


class RegulationFormatter:
    """Render regulations as plain text for prompts and fallback answers"""

    @staticmethod
    def format_development_params(params: DevelopmentParams) -> str:
        pct = PercentageFormatter.format_percentage
        density = params.density
        lines = [
            f"• Lot Size: {params.lot_size.describe() if params.lot_size else 'As per UPC'}",
            f"• Maximum Building Coverage: {pct(params.max_building_coverage)}",
            f"• Minimum Landscaping: {pct(params.min_landscaping_coverage)}",
            f"• Maximum FAR (Floor Area Ratio): {_or_default(params.max_floor_area_ratio)}",
            f"• Residential Density (Single Use): {_or_default(density.single_use if density else None)}",
            f"• Residential Density (Mixed Use): {_or_default(density.mixed_use if density else None)}",
            f"• Maximum Building Height: {_or_default(params.max_floors)}",
            f"• Allowed Building Forms: {', '.join(params.building_forms) or 'Per regulations'}"
        ]
        if params.setbacks:
            s = params.setbacks
            lines.append(
                f"• Setbacks (m): front {_or_default(s.front_principal, '-')}"
                f"/{_or_default(s.front_secondary, '-')}, rear {_or_default(s.rear, '-')}, "
                f"side {_or_default(s.side, '-')}"
            )
        return "\n".join(lines)

    @staticmethod
    def format_regulation(regulation: ZoneRegulation, params: Optional[DevelopmentParams]) -> str:
        uses = regulation.uses
        conditional = []
        if uses:
            for item in uses.conditional:
                conditional.append(item.name)

        sections = [
            f"AUTHORITATIVE ZONING REGULATIONS (Source: {Config.REGULATION_SOURCE})",
            RULE,
            f"ZONE: {regulation.full_name} ({regulation.display_code})",
            f"LEGAL REFERENCE: {_or_default(regulation.article, '')}, {_or_default(regulation.table, '')}",
            "",
            "OFFICIAL DESCRIPTION:",
            regulation.description or "Not available",
            "",
            "PERMITTED USES (No additional approval required):",
            _bullets(uses.permitted if uses else [], "Check with OSC"),
            "",
            "CONDITIONAL USES (Requires OSC approval):",
            _bullets(conditional, "None specified"),
            "",
            "PROHIBITED USES (Not allowed):",
            _bullets(uses.prohibited if uses else [], "None specified"),
            "",
            "DEVELOPMENT PARAMETERS:",
            RegulationFormatter.format_development_params(params) if params
            else "• Contact OSC for specific parameters"
        ]

        if regulation.development_strategy:
            sections += ["", "DEVELOPMENT STRATEGY OPTIONS:", _bullets(regulation.development_strategy, "")]
        if regulation.restrictions:
            sections += ["", f"RESTRICTIONS: {regulation.restrictions}"]
        return "\n".join(sections)

    @staticmethod
    def format_context(context: LocationSpatialData) -> str:
        """Regulatory context block for a resolved location"""
        zone_label = context.zone_data.zone_label if context.zone_data else "Unknown"
        if context.regulation is None:
            return (f"ZONE: {zone_label}\n"
                    "Note: Detailed regulations for this specific zone should be verified with City of Kigali OSC.")
        return RegulationFormatter.format_regulation(context.regulation, context.development_params)


class ResponseFormatter:
    """Footers and notices appended to or replacing generated answers"""

    @staticmethod
    def format_coordinates(lat: float, lng: float) -> str:
        return f"{lat:.4f}°, {lng:.4f}°"

    @staticmethod
    def footer(context: LocationSpatialData, language: str) -> str:
        labels = get_language(language).footer
        location = context.location
        reference = ""
        if context.regulation is not None:
            reference = f", {context.regulation.article}, {context.regulation.table}"

        return "\n".join([
            "",
            RULE,
            f"📍 {labels.location}: {ResponseFormatter.format_coordinates(location.lat, location.lng)}",
            f"📋 {labels.source}: {Config.REGULATION_SOURCE}{reference}",
            f"📞 {labels.contact}: {Config.OSC_PHONE}",
            f"🌐 Kubaka: {Config.PERMITS_WEBSITE} | CoK: {Config.OSC_WEBSITE}"
        ])

    @staticmethod
    def no_coverage_notice(lat: float, lng: float) -> str:
        return (
            "No zoning data found for this location.\n\n"
            "This coordinate appears to be outside the mapped zoning areas of Kigali. Zoning lookups currently "
            "cover official zoning designations within Kigali city boundaries.\n\n"
            "Please try:\n"
            "• Selecting a location within Kigali city center\n"
            "• Contacting City of Kigali directly for areas outside the master plan\n\n"
            f"📞 City of Kigali Planning: {Config.OSC_PHONE}\n"
            f"🌐 More info: {Config.OSC_WEBSITE}\n\n"
            f"📍 Searched Location: {ResponseFormatter.format_coordinates(lat, lng)}"
        )

    @staticmethod
    def fallback_answer(question: str, context: LocationSpatialData, language: str) -> str:
        """Answer used when the text-completion collaborator fails, built from the regulations alone"""
        zone_info = ""
        regulation = context.regulation
        params = context.development_params
        if regulation is not None and params is not None:
            pct = PercentageFormatter.format_percentage
            permitted = ", ".join(regulation.uses.permitted[:3]) if regulation.uses and regulation.uses.permitted \
                else "Contact OSC"
            zone_info = "\n".join([
                "",
                f"Zone: {regulation.full_name} ({regulation.display_code})",
                f"Reference: {regulation.article}, {regulation.table}",
                "",
                "Key Parameters:",
                f"• Max Building Coverage: {pct(params.max_building_coverage)}",
                f"• Max FAR: {_or_default(params.max_floor_area_ratio)}",
                f"• Max Floors: {_or_default(params.max_floors)}",
                f"• Min Landscaping: {pct(params.min_landscaping_coverage)}",
                "",
                f"Permitted Uses: {permitted}"
            ])

        code = get_language(language).code
        if code == 'rw':
            return (f"Ntibishobotse gusubiza neza ubu, ariko dore amakuru y'amategeko aho uri:\n{zone_info}\n\n"
                    f"Kubaza ku \"{question}\", hamagara:\n"
                    f"📞 Umujyi wa Kigali OSC: {Config.OSC_PHONE}\n"
                    f"🌐 Uruhushya kuri interineti: {Config.PERMITS_WEBSITE}")
        if code == 'fr':
            return (f"Impossible de générer une réponse détaillée pour le moment, mais voici les informations "
                    f"réglementaires pour votre emplacement:\n{zone_info}\n\n"
                    f"Pour votre question sur \"{question}\", contactez:\n"
                    f"📞 Ville de Kigali OSC: {Config.OSC_PHONE}\n"
                    f"🌐 Permis en ligne: {Config.PERMITS_WEBSITE}")
        return (f"A detailed response is temporarily unavailable, but here is the regulatory information for "
                f"your location:\n{zone_info}\n\n"
                f"For your specific question about \"{question}\", please contact:\n"
                f"📞 City of Kigali OSC: {Config.OSC_PHONE}\n"
                f"🌐 Online permits: {Config.PERMITS_WEBSITE}\n"
                f"📋 Source: {Config.REGULATION_SOURCE}")
