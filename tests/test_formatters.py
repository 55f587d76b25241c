from models.spatial import Location, LocationSpatialData, SpatialQueryResult
from utils.formatters import PercentageFormatter, RegulationFormatter, ResponseFormatter, get_language


def r4_context(knowledge_base):
    return LocationSpatialData(
        location=Location(lat=-1.9441, lng=30.0619),
        zone_data=SpatialQueryResult(zone_label="R4-High density residential zone"),
        zone_code="R4",
        regulation=knowledge_base.lookup("R4"),
        development_params=knowledge_base.development_params("R4")
    )


def test_percentage():
    assert PercentageFormatter.format_percentage(0.4) == "40%"
    assert PercentageFormatter.format_percentage(None) == "Per regulations"


def test_get_language():
    assert get_language('fr').name == 'Français'
    assert get_language('xx').code == 'en'
    assert get_language(None).code == 'en'


def test_regulation_context(knowledge_base):
    text = RegulationFormatter.format_context(r4_context(knowledge_base))
    assert "ZONE: High Density Residential Zone (R4)" in text
    assert "• Maximum Building Coverage: 50%" in text
    assert "• Residential Density (Single Use): 80-120 Du/Ha" in text
    assert "• Lot Size: Min 750 m²" in text
    assert "DEVELOPMENT STRATEGY OPTIONS:" in text


def test_footer_in_french(knowledge_base):
    footer = ResponseFormatter.footer(r4_context(knowledge_base), 'fr')
    assert "📍 Emplacement: -1.9441°, 30.0619°" in footer
    assert "Article 6.1, Table 6.6" in footer


def test_no_coverage_notice():
    assert "📍 Searched Location: 0.0000°, 0.0000°" in ResponseFormatter.no_coverage_notice(0.0, 0.0)
