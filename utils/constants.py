"""
Kigali zoning constants and regulation tables
Source: Kigali City Zoning Regulations (effective August 28, 2020)
"""

from typing import Dict, Any


REGULATION_METADATA: Dict[str, str] = {
    'document_title': "Kigali City Zoning Regulations",
    'effective_date': "August 28, 2020",
    'authority': "City of Kigali City Council",
    'legal_basis': "Rwanda Urban Planning Code",
    'source': "Consultancy Services for 2013 Kigali Master Plan Update (Project Ref: C-RW-000011)"
}

# Approval body for conditional uses
APPROVAL_AUTHORITY = "City of Kigali One Stop Centre (OSC)"

# Known label variants found in the zoning GeoJSON and older data sets
ZONE_LABEL_VARIANTS: Dict[str, str] = {
    # Residential
    'R1-Low density residential zone': 'R1',
    'Low Density Residential Zone': 'R1',
    'R1A-Low density residential densification zone': 'R1A',
    'Low Density Residential Densification Zone': 'R1A',
    'R1B-Rural residential zone': 'R1B',
    'Rural Residential Zone': 'R1B',
    'R2-Medium density residential - Improvement zone': 'R2',
    'Medium Density Residential - Improvement Zone': 'R2',
    'R3-Medium density residential - Expansion zone': 'R3',
    'Medium Density Residential - Expansion Zone': 'R3',
    'R4-High density residential zone': 'R4',
    'High Density Residential Zone': 'R4',

    # Commercial
    'C1-Mixed use zone': 'C1',
    'Mixed Use Zone': 'C1',
    'C3-City commercial zone': 'C3',
    'City Commercial Zone': 'C3',

    # Industrial
    'I1-Light industrial zone': 'I1',
    'Light Industrial Zone': 'I1',
    'I2-General industrial zone': 'I2',
    'General Industrial Zone': 'I2',
    'I3-Mining/ Extraction/Quarry': 'I3',

    # Public and nature
    'P1-Parks and open spaces zone': 'P1',
    'P2-Sport and Eco tourism zone': 'P2',
    'P3B-Forest zone': 'P3B',
    'P3-B': 'P3B',
    'P3C-Steep slopes (> 30%) zone': 'P3C',
    'P3-C': 'P3C',
    'PA-Public Administration zone': 'PA',
    'PF1-Education and research facilities': 'PF1',
    'PF2-Health facilities': 'PF2',
    'PF3-Religious facilities': 'PF3',
    'PF4-Cultural/ memorial sites': 'PF4',
    'PF5-Cemetery/ crematoria': 'PF5',

    # Agriculture
    'A1-Agriculture zone': 'A1',
    'Agriculture Zone': 'A1',
    'A': 'A1',

    # Transport and utility
    'T-Transportation zone': 'T',
    'Transportation Zone': 'T',
    'U-Utility zone': 'U',
    'Utility Zone': 'U',

    # Wetlands and water
    'W2 - Rehabilitation': 'W2',
    'W3 - Sustainable Exploitation': 'W3',
    'W4 - Conservation': 'W4',
    'W5 - Recreational': 'W5',
    'WR-Waterbody zone': 'WR',
    'WB': 'WR'
}

_ROOF_NO_METAL = "Roof pitch shall be less than 30%. No reflective metal roofing allowed."

_RESIDENTIAL_PROHIBITED = ["Industrial uses", "Major infrastructure"]

_RESIDENTIAL_ANCILLARY = ["Car parking garage", "Store and Service rooms", "Guard House"]

# One entry per canonical zone code
ZONE_REGULATIONS: Dict[str, Dict[str, Any]] = {

    # Residential zones (Article 6.1)
    'R1': {
        'display_code': 'R1',
        'full_name': "Low Density Residential Zone",
        'category': "Residential",
        'article': "Article 6.1",
        'table': "Table 6.1",
        'description': (
            "Intended for villa and bungalow typology and complementary public facilities. "
            "R1 Zones are limited in the City of Kigali to existing consolidated areas with the "
            "objective of limiting low-density urban development and encouraging compact development."
        ),
        'uses': {
            'permitted': ["Single family houses", "Home Occupation"],
            'conditional': [
                "Uses as per R1A regulations",
                "Apartments exceeding G+2",
                "Semi-Detached",
                "Multifamily Houses",
                "Restaurants, Guest houses, B&B, Hotels (including ancillary commercial uses)",
                "Public facilities when suggested by Public Facilities Overlay (Section 7.1)",
                "Commercial Retail Facilities when allowed by O-C2 Overlay (Section 6.2.2)",
                "Accessory Residential Units"
            ],
            'prohibited': _RESIDENTIAL_PROHIBITED,
            'ancillary': _RESIDENTIAL_ANCILLARY
        },
        'lot_size': {
            'max_sqm': 500,
            'note': ("As per Urban Planning Code (UPC). Plots less than 300 m² shall follow R1A regulations. "
                     "Existing developments on plots larger than 500 m² can retain their use.")
        },
        'max_building_coverage': 0.40,
        'min_landscaping_coverage': 0.20,
        'max_floor_area_ratio': 0.5,
        'density': {
            'single_use': {'minimum': 10, 'maximum': 15},
            'mixed_use': {'minimum': 7, 'maximum': 10,
                          'note': "when building is partially occupied by other uses as per O-C2 overlay"}
        },
        'max_floors': "G+1+P (Penthouse)",
        'ancillary_max_floors': "G",
        'setbacks': {'front_principal': 5, 'front_secondary': 3, 'rear': 3, 'side': 1.5},
        'building_forms': ["Detached", "Semi Detached"],
        'development_strategy': [
            "Individual plot development",
            "Land subdivision",
            "Estate (No gated estates allowed on developments of more than 1 ha)"
        ],
        'roof': _ROOF_NO_METAL + " Roof colours should blend with surrounding landscape.",
        'signage': {
            'permitted': "One sign located on the fencing wall along the front setback",
            'max_size': "35cm height x 35cm width",
            'restrictions': "Protrusion of signage must be contained within plot boundary"
        }
    },

    'R1A': {
        'display_code': 'R1A',
        'full_name': "Low Density Residential Densification Zone",
        'category': "Residential",
        'article': "Article 6.1",
        'table': "Table 6.2",
        'description': (
            "A residential zone for semidetached houses, single family townhouses, multifamily houses, "
            "and low-rise developments. Lot sizes are smaller than R1 to promote more efficient use of "
            "lands in prime areas."
        ),
        'uses': {
            'permitted': [
                "Single family houses (all types)",
                "Semi-detached houses",
                "Multifamily Houses",
                "Townhouses",
                "Row houses",
                "Home Occupation",
                "Accessory Residential Units"
            ],
            'conditional': [
                "Restaurants, Hotels, Guest houses, B&B",
                "Public facilities as per Public Facilities overlay (Section 7.1)",
                "Commercial retail, office facilities when allowed by O-C2 Overlay (Section 6.2.2)"
            ],
            'prohibited': ["Residential exceeding G+2"] + _RESIDENTIAL_PROHIBITED,
            'ancillary': _RESIDENTIAL_ANCILLARY
        },
        'lot_size': {'max_sqm': 300},
        'max_building_coverage': 0.50,
        'min_landscaping_coverage': 0.20,
        'max_floor_area_ratio': 1.0,
        'density': {
            'single_use': {'minimum': 20, 'maximum': 30},
            'mixed_use': {'minimum': 15, 'maximum': 20}
        },
        'max_floors': "G+2",
        'ancillary_max_floors': "G",
        'setbacks': {'front_principal': 5, 'front_secondary': 3, 'rear': 3, 'side': 1.5},
        'building_forms': ["Detached", "Semi Detached", "Attached"],
        'development_strategy': [
            "Individual plot development",
            "Land Pooling (see Land Assembly Overlay Plan Section 7.3)",
            "Land Subdivision",
            "Estate Development (No gated estates allowed on developments of more than 1 ha)"
        ],
        'roof': _ROOF_NO_METAL
    },

    'R1B': {
        'display_code': 'R1B',
        'full_name': "Rural Residential Zone",
        'category': "Residential",
        'article': "Article 6.1",
        'table': "Table 6.3",
        'description': (
            "A residential zone offering compact developments in rural areas, with low-rise, "
            "medium-density housing as part of the farming community, limiting encroachment towards "
            "fertile agricultural land."
        ),
        'uses': {
            'permitted': [
                "Single family Houses",
                "Row housing",
                "Multifamily residential (4 in 1, 8 in 1, etc as per IDP model Villages)",
                "Low-rise apartments",
                "Home Occupation",
                "Accessory Residential Units"
            ],
            'conditional': [
                "Restaurants",
                "Hotels/Guest houses",
                "Public facilities when allowed by Public Facilities Overlay",
                "Commercial retail when allowed by O-C2 Overlay",
                "Micro Enterprise"
            ],
            'prohibited': _RESIDENTIAL_PROHIBITED
        },
        'lot_size': {
            'max_sqm': 150,
            'note': ("Applies to single family houses. N/A for Multifamily houses or Apartment development "
                     "provided it meets minimum density requirement.")
        },
        'max_building_coverage': 0.60,
        'min_landscaping_coverage': 0.20,
        'max_floor_area_ratio': 1.0,
        'density': {
            'single_use': {'minimum': 40, 'maximum': 60},
            'mixed_use': {'minimum': 30, 'maximum': 50}
        },
        'max_floors': "G+2 (One extra floor may be allowed due to topographic conditions)",
        'ancillary_max_floors': "G",
        'setbacks': {'front_principal': 3, 'front_secondary': 2, 'rear': 2, 'side': 1},
        'building_forms': [
            "Attached for rowhouses",
            "Attached/semi-detached/detached Apartments and Multifamily houses"
        ]
    },

    'R2': {
        'display_code': 'R2',
        'full_name': "Medium Density Residential - Improvement Zone",
        'category': "Residential",
        'article': "Article 6.1",
        'table': "Table 6.4",
        'description': (
            "Established for urban improvement zones (existing informal settlements). Offers opportunities "
            "for multi-family rental development or mixed-use options without extensive relocation."
        ),
        'uses': {
            'permitted': [
                "Single family Residential",
                "Rowhouses",
                "Low-rise apartments",
                "Multifamily Houses",
                "Home Occupation",
                "Accessory Residential Units"
            ],
            'conditional': [
                "Restaurants",
                "Hotels/Guest houses (including ancillary uses)",
                "Public facilities when allowed by Public Facilities Overlay (Section 7.1)",
                "Commercial retail, office when allowed by O-C2 Overlay (Section 6.2.2)",
                "Micro Enterprise"
            ],
            'prohibited': _RESIDENTIAL_PROHIBITED
        },
        'lot_size': {
            'max_sqm': 100,
            'note': ("100 m² for incremental Single-Family Housing in new Subdivision Plans, 150 m² for Row "
                     "housing, N/A for multifamily provided minimum density is met.")
        },
        'max_building_coverage': 0.60,
        'min_landscaping_coverage': 0.20,
        'max_floor_area_ratio': 1.2,
        'density': {
            'single_use': {'minimum': 50, 'maximum': 90},
            'mixed_use': {'minimum': 40, 'maximum': 70}
        },
        'max_floors': ("G+2 (One extra floor may be allowed due to topographic conditions, to achieve "
                       "required density or technical/economic feasibility)"),
        'ancillary_max_floors': "G",
        'setbacks': {'front_principal': 3, 'front_secondary': 2, 'rear': 2, 'side': 1},
        'building_forms': [
            "Attached for rowhouses",
            "Attached/semi-detached/detached Apartments and Multifamily houses"
        ],
        'roof': _ROOF_NO_METAL
    },

    'R3': {
        'display_code': 'R3',
        'full_name': "Medium Density Residential - Expansion Zone",
        'category': "Residential",
        'article': "Article 6.1",
        'table': "Table 6.5",
        'description': (
            "Established to allow intensification and redevelopment of peri-urban and greenfield areas. "
            "Expected to stimulate development of low-cost incremental housing."
        ),
        'uses': {
            'permitted': [
                "Single family Residential",
                "Rowhouses",
                "Low-rise apartments",
                "Multifamily Houses",
                "Accessory Residential units",
                "Home Occupation"
            ],
            'conditional': [
                "Restaurants",
                "Hotels/Guest houses (including ancillary uses)",
                "Public facilities when allowed by Public Facilities Overlay (Section 7.1)",
                "Commercial retail, office when allowed by O-C2 Overlay (Section 6.2.2)",
                "Micro Enterprise"
            ],
            'prohibited': _RESIDENTIAL_PROHIBITED + [
                "Any development that does not meet affordability criteria suggested in these regulations"
            ]
        },
        'lot_size': {
            'max_sqm': 150,
            'note': ("Max 100 m² for incremental Single-Family Housing in new Subdivision Plans, max 150 m² "
                     "for Row housing, N/A for multifamily provided minimum density is met.")
        },
        'max_building_coverage': 0.60,
        'min_landscaping_coverage': 0.20,
        'max_floor_area_ratio': 1.2,
        'density': {
            'single_use': {'minimum': 50, 'maximum': 90},
            'mixed_use': {'minimum': 40, 'maximum': 70}
        },
        'max_floors': ("G+2 (One extra floor may be allowed due to topographic conditions, to achieve "
                       "required density or technical/economic feasibility)"),
        'ancillary_max_floors': "G",
        'setbacks': {'front_principal': 3, 'front_secondary': 2, 'rear': 2, 'side': 1},
        'building_forms': [
            "Attached for rowhouses",
            "Attached/semi-detached/detached Apartments and Multifamily houses"
        ],
        'development_strategy': [
            "Individual private development",
            "Land Pooling (see Land Assembly Overlay Plan Section 7.3)",
            "Sites and Services",
            ("Larger plots owned by individuals shall be developed following minimum required densities "
             "in an optic of incremental development")
        ]
    },

    'R4': {
        'display_code': 'R4',
        'full_name': "High Density Residential Zone",
        'category': "Residential",
        'article': "Article 6.1",
        'table': "Table 6.6",
        'description': (
            "Established to create well planned medium-rise housing and apartment complexes with "
            "integrated commercial and public facilities, open spaces."
        ),
        'uses': {
            'permitted': [
                "High density residential",
                "Home Occupation",
                "R2 typologies (in case plot size is less than 750 m²)"
            ],
            'conditional': [
                "Restaurants",
                "Hotels (including ancillary uses), Guest house, B&B",
                "Public facilities when allowed by Public Facilities Overlay (Section 7.1)",
                "Commercial retail, office, Micro-Enterprise when allowed by O-C2 Overlay (Section 6.2.2)",
                "Micro Enterprise"
            ],
            'prohibited': _RESIDENTIAL_PROHIBITED,
            'ancillary': ["Car parking garage", "Guard house", "Store and services rooms"]
        },
        'lot_size': {
            'min_sqm': 750,
            'note': ("Plots smaller than 750 m² can be developed following R2 regulations. Plots larger than "
                     "750 m² can be developed following R2 regulations if plot subdivision allows.")
        },
        'max_building_coverage': 0.50,
        'min_landscaping_coverage': 0.20,
        'max_floor_area_ratio': 1.8,
        'density': {
            'single_use': {'minimum': 80, 'maximum': 120},
            'mixed_use': {'minimum': 60, 'maximum': 80}
        },
        'max_floors': ("G+4 (One extra floor may be allowed due to topographic conditions, to achieve "
                       "required density or technical/economic feasibility)"),
        'ancillary_max_floors': "G",
        'floor_to_floor_height': "4m maximum",
        'setbacks': {'front_principal': 5, 'front_secondary': 3, 'rear': 3, 'side': 1.5},
        'building_forms': ["Attached Buildings", "Detached Buildings", "R2 typologies for plots less than 750 m²"],
        'development_strategy': [
            "Individual development (provided all parcels in the block have proper minimum accessibility)",
            "Land Pooling (see Land Assembly Overlay Plan Section 7.3)",
            "Plots smaller than 750 m² can be developed following R2 or R3 regulations",
            "Plots larger than 750 m² shall not be subdivided if result produces plots smaller than 750 m²"
        ]
    },

    # Commercial and mixed-use zones (Article 6.2)
    'C1': {
        'display_code': 'C1',
        'full_name': "Mixed Use Zone",
        'category': "Commercial",
        'article': "Article 6.2",
        'table': "Table 6.7",
        'description': (
            "Established to create high flexibility in the mix of uses and ensure continuity in ground level "
            "commercial activities as well as provide employment opportunities in other floors."
        ),
        'uses': {
            'permitted': [
                "Commercial / Retail",
                "Restaurants and Recreational activities",
                "Office use above the 1st floor",
                "Co-working spaces",
                "Residential",
                "Home Occupation"
            ],
            'conditional': [
                "Public Facilities (see Public Facilities overlay)",
                "Transportation Terminals",
                "Hotels",
                "Petrol stations",
                "Garages and Car Repair - Grade E as per RBS and CoK requirements",
                "Car Wash Services"
            ],
            'prohibited': [
                "Large scale commercial complex",
                "Industrial Uses",
                "Major Infrastructure Installations"
            ],
            'ancillary': ["Electrical substation (ESS)", "Refuse area"]
        },
        'lot_size': {
            'min_sqm': 500,
            'note': ("Plots with size below 500 m² in existing consolidated commercial nodes can implement "
                     "construction, renewal and refurbishment works provided size is not less than 200 m², "
                     "following OSC approval")
        },
        'max_building_coverage': 0.60,
        'min_landscaping_coverage': 0.10,
        'max_floor_area_ratio': 1.6,
        'max_floors': ("G+4 (Additional floors may be authorised by OSC along BRT, Wetland Front, and Green "
                       "Connectors as per UD Plan)"),
        'ancillary_max_floors': "G",
        'setbacks': {'front_principal': 3, 'front_secondary': 2, 'rear': 2, 'side': 1},
        'building_forms': ["Attached Buildings", "Detached Buildings"],
        'signage': {
            'building_identification': "One sign permitted on the tower",
            'wall': "15% of Building Face up to 9 m²",
            'window': "Transparent, 15% of Building Face up to 2.5 m²",
            'awning': "Min 2.5m clearance from ground, 25% of building face up to 2.5 m²",
            'prohibited': ["Roof mounted signs", "String lights, flashing, excessively bright lights",
                           "Offsite signage"]
        }
    },

    'C3': {
        'display_code': 'C3',
        'full_name': "City Commercial Zone",
        'category': "Commercial",
        'article': "Article 6.2",
        'table': "Table 6.9",
        'description': (
            "Established for high intensity commercial areas with offices, retail, and potentially mixed "
            "residential uses in the city center and along major corridors."
        ),
        'uses': {
            'permitted': [
                "Commercial / Retail",
                "Office",
                "Hotels",
                "Restaurants and Recreational activities",
                "Co-working spaces"
            ],
            'conditional': [
                "Residential (above 2nd floor)",
                "Public Facilities",
                "Transportation Terminals",
                "Petrol stations",
                "Garages and Car Repair"
            ],
            'prohibited': ["Industrial Uses", "Major Infrastructure Installations"]
        },
        'lot_size': {'min_sqm': 1000},
        'max_building_coverage': 0.60,
        'min_landscaping_coverage': 0.10,
        'max_floor_area_ratio': 2.5,
        'max_floors': "G+8 (Additional floors may be authorised along BRT corridors)",
        'setbacks': {'front_principal': 3, 'front_secondary': 2, 'rear': 2, 'side': 0},
        'building_forms': ["Attached Buildings", "Detached Buildings", "Semi-Detached Buildings"]
    },

    # Industrial zones (Article 6.5)
    'I1': {
        'display_code': 'I1',
        'full_name': "Light Industrial Zone",
        'category': "Industrial",
        'article': "Article 6.5",
        'table': "Table 6.16",
        'description': ("For light manufacturing, assembly, warehousing and distribution activities that have "
                        "minimal environmental impacts."),
        'uses': {
            'permitted': [
                "Light manufacturing",
                "Assembly operations",
                "Warehousing",
                "Distribution centers",
                "Research and development facilities"
            ],
            'conditional': ["Office use (accessory)", "Retail showrooms (accessory)", "Commercial services"],
            'prohibited': ["Residential uses", "Heavy industrial uses", "Polluting industries"]
        },
        'lot_size': {'min_sqm': 1000},
        'max_building_coverage': 0.60,
        'min_landscaping_coverage': 0.15,
        'max_floor_area_ratio': 1.2,
        'max_floors': "G+2",
        'setbacks': {'front_principal': 5, 'rear': 5, 'side': 3},
        'building_forms': ["Detached Buildings", "Attached Buildings"]
    },

    'I2': {
        'display_code': 'I2',
        'full_name': "General Industrial Zone",
        'category': "Industrial",
        'article': "Article 6.5",
        'table': "Table 6.17",
        'description': ("For general manufacturing and industrial activities that may have moderate "
                        "environmental impacts requiring buffering from residential areas."),
        'uses': {
            'permitted': [
                "General manufacturing",
                "Processing industries",
                "Heavy warehousing",
                "Industrial services"
            ],
            'conditional': ["Hazardous materials storage (with proper permits)", "Waste processing"],
            'prohibited': ["Residential uses", "Hotels", "Schools and hospitals"]
        },
        'lot_size': {'min_sqm': 2000},
        'max_building_coverage': 0.50,
        'min_landscaping_coverage': 0.20,
        'max_floor_area_ratio': 1.0,
        'max_floors': "G+2",
        'setbacks': {'front_principal': 10, 'rear': 10, 'side': 5}
    },

    'I3': {
        'display_code': 'I3',
        'full_name': "Mining and Quarrying Industrial Zone",
        'category': "Industrial",
        'article': "Article 6.5",
        'table': "Table 6.18",
        'description': "For mining, extraction and quarrying activities with strict environmental controls.",
        'uses': {
            'permitted': ["Mining operations", "Quarrying", "Extraction activities", "Related processing"],
            'prohibited': ["Residential uses", "Commercial retail", "Public facilities"]
        }
    },

    # Nature and open space zones (Article 6.6)
    'P1': {
        'display_code': 'P1',
        'full_name': "Parks and Open Spaces Zone",
        'category': "Parks and Open Spaces",
        'article': "Article 6.6",
        'table': "Table 6.19",
        'description': ("For parks, recreation areas and public open spaces to serve the community's "
                        "recreational needs."),
        'uses': {
            'permitted': ["Public parks", "Playgrounds", "Gardens", "Walking/cycling trails", "Outdoor recreation"],
            'conditional': ["Small kiosks/refreshment stands", "Sports facilities", "Community centers"],
            'prohibited': ["Residential uses", "Commercial development", "Industrial uses"]
        },
        'max_building_coverage': 0.05,
        'min_green_space': 0.80
    },

    'P2': {
        'display_code': 'P2',
        'full_name': "Sports and Eco-Tourism Zone",
        'category': "Parks and Open Spaces",
        'article': "Article 6.6",
        'table': "Table 6.20",
        'description': "For sports facilities, eco-tourism activities and related recreational uses."
    },

    'P3B': {
        'display_code': 'P3-B',
        'full_name': "Forest Zone",
        'category': "Parks and Open Spaces",
        'article': "Article 6.6",
        'table': "Table 6.22",
        'description': "Protected forest areas with strict development controls for conservation purposes.",
        'uses': {
            'permitted': ["Forest conservation", "Nature trails", "Environmental education"],
            'prohibited': ["Building construction", "Residential development", "Commercial activities"]
        }
    },

    'P3C': {
        'display_code': 'P3-C',
        'full_name': "Steep Slopes Zone (>30%)",
        'category': "Parks and Open Spaces",
        'article': "Article 6.6",
        'table': "Table 6.23",
        'description': ("Areas with slopes exceeding 30% where development is restricted for safety and "
                        "environmental reasons."),
        'uses': {
            'permitted': ["Reforestation", "Slope stabilization", "Nature conservation"],
            'prohibited': ["Building construction", "Any development that may destabilize slopes"]
        },
        'restrictions': "No construction allowed on slopes exceeding 30% due to geological and erosion risks."
    },

    # Agriculture zone
    'A1': {
        'display_code': 'A',
        'full_name': "Agriculture Zone",
        'category': "Agriculture",
        'article': "Article 6.6",
        'table': "Table 6.25",
        'description': ("For agricultural production, farming activities and rural land uses to preserve "
                        "productive agricultural land."),
        'uses': {
            'permitted': [
                "Crop farming",
                "Livestock raising",
                "Agricultural processing (small scale)",
                "Farm buildings and storage",
                "Rural housing for farm operators"
            ],
            'conditional': ["Agro-tourism", "Farm stays", "Agricultural research facilities"],
            'prohibited': ["Urban residential subdivisions", "Commercial development", "Industrial uses"]
        },
        'lot_size': {'min_sqm': 10000, 'note': "1 hectare for agricultural use"}
    },

    # Public facilities zones (Articles 6.3 and 6.4)
    'PA': {
        'display_code': 'PA',
        'full_name': "Public Administrative Zone",
        'category': "Public Facilities",
        'article': "Article 6.3",
        'table': "Table 6.10",
        'description': "For government administrative buildings, civic facilities and public services."
    },
    'PF1': {
        'display_code': 'PF1',
        'full_name': "Education and Research Facilities Zone",
        'category': "Public Facilities",
        'article': "Article 6.4",
        'table': "Table 6.11",
        'description': "For schools, universities, research centers and educational facilities."
    },
    'PF2': {
        'display_code': 'PF2',
        'full_name': "Health Facilities Zone",
        'category': "Public Facilities",
        'article': "Article 6.4",
        'table': "Table 6.12",
        'description': "For hospitals, clinics, health centers and medical facilities."
    },
    'PF3': {
        'display_code': 'PF3',
        'full_name': "Religious Facilities Zone",
        'category': "Public Facilities",
        'article': "Article 6.4",
        'table': "Table 6.13",
        'description': "For churches, mosques, temples and other religious facilities."
    },
    'PF4': {
        'display_code': 'PF4',
        'full_name': "Cultural/Memorial Sites Zone",
        'category': "Public Facilities",
        'article': "Article 6.4",
        'table': "Table 6.14",
        'description': "For museums, memorial sites, cultural centers and heritage sites."
    },
    'PF5': {
        'display_code': 'PF5',
        'full_name': "Cemetery/Crematoria Zone",
        'category': "Public Facilities",
        'article': "Article 6.4",
        'table': "Table 6.15",
        'description': "For cemeteries, burial grounds and crematoria."
    },

    # Utility and transport zones
    'T': {
        'display_code': 'T',
        'full_name': "Transportation Zone",
        'category': "Transportation",
        'article': "Article 6.6",
        'table': "Table 6.29",
        'description': "For roads, bus stations, terminals and transportation infrastructure."
    },
    'U': {
        'display_code': 'U',
        'full_name': "Utility Zone",
        'category': "Utility",
        'article': "Article 6.6",
        'table': "Table 6.30",
        'description': ("For utility installations including water treatment, power substations and "
                        "telecommunications.")
    },

    # Wetland and water zones
    'W2': {
        'display_code': 'W2',
        'full_name': "Wetland Rehabilitation Zone",
        'category': "Wetland",
        'article': "Article 6.6",
        'table': "Table 6.26",
        'description': "Wetland areas requiring rehabilitation and restoration."
    },
    'W3': {
        'display_code': 'W3',
        'full_name': "Wetland Sustainable Exploitation Zone",
        'category': "Wetland",
        'article': "Article 6.6",
        'table': "Table 6.26",
        'description': "Wetland areas where controlled, sustainable use is permitted."
    },
    'W4': {
        'display_code': 'W4',
        'full_name': "Wetland Conservation Zone",
        'category': "Wetland",
        'article': "Article 6.6",
        'table': "Table 6.26",
        'description': "Protected wetland areas with strict conservation requirements."
    },
    'W5': {
        'display_code': 'W5',
        'full_name': "Wetland Recreational Zone",
        'category': "Wetland",
        'article': "Article 6.6",
        'table': "Table 6.26",
        'description': "Wetland areas designated for recreational activities compatible with wetland conservation."
    },
    'WR': {
        'display_code': 'WB',
        'full_name': "Waterbody Zone",
        'category': "Waterbody",
        'article': "Article 6.6",
        'table': "Table 6.28",
        'description': "Lakes, rivers and water bodies with buffer requirements."
    }
}

# General provisions applying across zones (Article 4)
GENERAL_PROVISIONS: Dict[str, Dict[str, Any]] = {
    'incremental_development': {
        'article': "Article 4.6, Table 4.4",
        'description': ("Incremental development is allowed and encouraged to shape urban areas as per "
                        "priorities and reduce urban sprawl in favour of densification."),
        'requirements': [
            "Submit conceptual final design of building with expected GFA",
            "Show fulfilment of parking requirements and minimum density prescriptions",
            "Provide tentative Phasing Plan showing planned stages of construction and timeframe",
            "Intermediate building shall not appear incomplete or under construction"
        ]
    },
    'home_occupation': {
        'article': "Article 4.10, Table 4.6",
        'description': ("All Residential Zones allow residents to engage in uses other than residences so long "
                        "as principal use remains as dwelling."),
        'requirements': [
            "No exterior physical changes for business purposes",
            "Maximum 25% of total floor area for business use",
            "Maximum one non-resident worker allowed",
            "Additional off-street parking for every 100 m² of floor area used"
        ],
        'permitted_activities': [
            "General Medicine, Dentistry (if allowed by Ministry of Health)",
            "Offices for architecture, engineering, law",
            "Music studios (with sound proofing)",
            "IT consultancy, web design, data entry",
            "Accountancy services",
            "Teaching (not extending to classes or school-like establishments)"
        ],
        'prohibited': [
            "Contractors Business",
            "Car-Trading Business",
            "Commercial schools",
            "Employment Agency",
            "Businesses involving large gatherings",
            "Courier Businesses",
            "Funeral chapels or homes"
        ]
    },
    'micro_enterprise': {
        'article': "Article 4.9, Table 4.5",
        'description': ("Selected Residential zones allow residents to engage in business with no more than "
                        "five (5) non-resident employees."),
        'requirements': [
            "No exterior physical changes not residential in character",
            "Maximum 30% of total floor area for business use",
            "Ground floor only",
            "Additional off-street parking for every 200 m² used"
        ],
        'permitted_activities': [
            "Processing/preserving of fruit and vegetables",
            "Manufacture of bakery products",
            "Weaving/finishing of textiles",
            "Manufacture of wearing apparel",
            "Manufacture of footwear",
            "Printing services",
            "Manufacture of jewellery",
            "Manufacture of games and toys",
            "Creative, arts and entertainment activities"
        ]
    },
    'gated_communities': {
        'article': "Article 4.5, Table 4.3",
        'description': ("CoK shall not allow gated communities in any new development larger than 1 ha to "
                        "ensure clear linkages and social mix."),
        'requirements': [
            "Opaque walls shall not exceed 1.5m height",
            "Only transparent fencing allowed beyond wall height",
            "Existing gated developments larger than 1 ha shall remove barriers within 1 year"
        ]
    },
    'accessory_residential_units': {
        'article': "Article 4.11",
        'description': "Allowed in R1, R1A, R2 and R3 zones to further affordable housing goals.",
        'zones': ['R1', 'R1A', 'R2', 'R3'],
        'requirements': [
            "Maximum three (3) accessory units per permitted dwelling",
            "Minimum 9 m² for single occupancy, 15 m² for double occupancy",
            "Maximum 50% of gross liveable floor area",
            "Separate external door access required",
            "Separate kitchen, full bath and electric panel required"
        ]
    },
    'car_wash_auto_repair': {
        'article': "Article 4.12",
        'description': "Conditionally allowed in all Commercial and Mixed-Use Zones.",
        'requirements': [
            "Comply with RS 402 Garages Construction and RS 368 Waste Management guidelines",
            "Noise and air pollution must be limited/mitigated",
            "Hazardous waste must be safely contained in hermetic containers",
            "No activities on public road or sidewalks"
        ]
    }
}

# Parking requirements (Article 6.7)
PARKING_REQUIREMENTS: Dict[str, Any] = {
    'article': "Article 6.7, Tables 6.31-6.34",
    'residential': {
        "Single family": "1 space per unit",
        "Apartment (< 100 m²)": "1 space per unit",
        "Apartment (> 100 m²)": "1.5 spaces per unit",
        "Visitor": "0.25 spaces per unit"
    },
    'non_residential': {
        "Office": "1 space per 50 m² GFA",
        "Retail": "1 space per 30 m² GFA",
        "Restaurant": "1 space per 15 m² dining area",
        "Hotel": "1 space per 2 rooms",
        "Hospital": "1 space per 4 beds",
        "School": "1 space per classroom"
    },
    'permeable_paving': "Required for parking lots to manage stormwater",
    'derogations': "May be granted in congested areas with shared parking facilities"
}

CONTACTS: Dict[str, Any] = {
    'primary': {
        'name': "City of Kigali One Stop Centre (OSC)",
        'role': "Construction permits, zoning inquiries, variance requests",
        'phone': "+250 788 000 000",
        'website': "kigalicity.gov.rw"
    },
    'permits': {
        'name': "Irembo Platform",
        'role': "Online permit applications",
        'website': "irembo.gov.rw"
    },
    'districts': {
        'Gasabo': "Gasabo District OSC",
        'Nyarugenge': "Nyarugenge District OSC",
        'Kicukiro': "Kicukiro District OSC"
    }
}
