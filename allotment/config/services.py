"""
Services Configuration - Single source of truth for the budget catalog.

Amounts are in dollars against the default $500B budget. The catalog is
loaded into a validated registry by allotment.catalog.load_catalog().
"""

SERVICES = [
    {
        "id": "debt",
        "name": "Debt Servicing",
        "description": "Interest payments, bond obligations, and national debt management.",
        "min_allocation": 50_000_000_000,  # 10% of budget
        "max_allocation": 125_000_000_000,  # 25% of budget
        "tiers": [
            {
                "level": 1,
                "name": "Minimum Payments",
                "threshold": 0.25,
                "perk": "Credit Maintained",
                "benefit": "Interest payments covered. Credit rating stable. No default risk.",
            },
            {
                "level": 2,
                "name": "Principal Reduction",
                "threshold": 0.50,
                "perk": "Debt Declining",
                "benefit": "Actively paying down principal. Debt-to-GDP ratio improving.",
            },
            {
                "level": 3,
                "name": "Fiscal Discipline",
                "threshold": 0.75,
                "perk": "Budget Surplus",
                "benefit": "Running surplus budgets. Building sovereign wealth fund.",
            },
            {
                "level": 4,
                "name": "AAA Rated",
                "threshold": 1.00,
                "perk": "Fiscal Credibility",
                "benefit": "Highest credit rating. Lowest borrowing costs globally. Economic safe haven.",
            },
        ],
        "sub_services": [
            {"id": "interest", "name": "Interest Payments", "default_share": 0.50, "min_share": 0.30},
            {"id": "bonds", "name": "Bond Obligations", "default_share": 0.30, "min_share": 0.15},
            {"id": "management", "name": "Debt Management", "default_share": 0.20, "min_share": 0.10},
        ],
    },
    {
        "id": "health",
        "name": "Public Health & Well-being",
        "description": "Hospitals, Pharmaceuticals, Mental Health, and Pandemic Control.",
        "min_allocation": 56_250_000_000,  # 11.25% of budget
        "max_allocation": 225_000_000_000,  # 45% of budget
        "tiers": [
            {
                "level": 1,
                "name": "The Safety Net",
                "threshold": 0.25,
                "perk": "Emergency Access",
                "benefit": "No citizen dies from lack of urgent care. Ambulances are functional.",
            },
            {
                "level": 2,
                "name": "Standard Care",
                "threshold": 0.50,
                "perk": "Zero Wait Times",
                "benefit": "Elective surgeries in weeks, not months. Family doctors available same-day.",
            },
            {
                "level": 3,
                "name": "Total Coverage",
                "threshold": 0.75,
                "perk": "Dental & Vision Included",
                "benefit": "Teeth and eyes are fully covered. Mental health therapy is free.",
            },
            {
                "level": 4,
                "name": "Universal Prevention",
                "threshold": 1.00,
                "perk": "World-Class Outcomes",
                "benefit": "Free annual checkups for all. Comprehensive cancer screening. "
                "Top 5 global health outcomes.",
            },
        ],
        "sub_services": [
            {"id": "hospitals", "name": "Hospitals", "default_share": 0.40, "min_share": 0.20},
            {"id": "pharmaceuticals", "name": "Pharmaceuticals", "default_share": 0.25, "min_share": 0.10},
            {"id": "mental-health", "name": "Mental Health", "default_share": 0.20, "min_share": 0.10},
            {"id": "pandemic", "name": "Pandemic Control", "default_share": 0.15, "min_share": 0.05},
        ],
    },
    {
        "id": "infrastructure",
        "name": "Infrastructure & Transport",
        "description": "Roads, Rail, Water Systems, Internet, and Waste Management.",
        "min_allocation": 35_000_000_000,  # 7% of budget
        "max_allocation": 140_000_000_000,  # 28% of budget
        "tiers": [
            {
                "level": 1,
                "name": "Basic Connectivity",
                "threshold": 0.25,
                "perk": "Pothole Free",
                "benefit": "Major highways paved annually. Potable water in all taps.",
            },
            {
                "level": 2,
                "name": "Digital Nation",
                "threshold": 0.50,
                "perk": "Fiber Everywhere",
                "benefit": "High-speed fiber internet for every home, including rural farms.",
            },
            {
                "level": 3,
                "name": "High-Speed Network",
                "threshold": 0.75,
                "perk": "Bullet Trains",
                "benefit": "Connect major cities in under 2 hours. Domestic flights obsolete.",
            },
            {
                "level": 4,
                "name": "Mobility as a Right",
                "threshold": 1.00,
                "perk": "Zero-Fare Transport",
                "benefit": "All subways, buses, and trains are 100% free for everyone.",
            },
        ],
        "sub_services": [
            {"id": "roads", "name": "Roads", "default_share": 0.30, "min_share": 0.10},
            {"id": "rail", "name": "Rail", "default_share": 0.25, "min_share": 0.05},
            {"id": "water", "name": "Water Systems", "default_share": 0.20, "min_share": 0.10},
            {"id": "internet", "name": "Internet", "default_share": 0.15, "min_share": 0.05},
            {"id": "waste", "name": "Waste Management", "default_share": 0.10, "min_share": 0.05},
        ],
    },
    {
        "id": "defense",
        "name": "Safety & Defense",
        "description": "Military, Police, Fire Services, Cyber-Security, and Borders.",
        "min_allocation": 30_000_000_000,  # 6% of budget
        "max_allocation": 120_000_000_000,  # 24% of budget
        "tiers": [
            {
                "level": 1,
                "name": "Sovereignty",
                "threshold": 0.25,
                "perk": "Border Integrity",
                "benefit": "Borders are monitored. Basic police response times are stable.",
            },
            {
                "level": 2,
                "name": "Rapid Response",
                "threshold": 0.50,
                "perk": "Disaster Shield",
                "benefit": "Rescue teams deploy to any flood or fire zone within 4 hours.",
            },
            {
                "level": 3,
                "name": "Cyber Resilience",
                "threshold": 0.75,
                "perk": "Protected Infrastructure",
                "benefit": "Critical systems hardened against attacks. Rapid incident response teams. "
                "Public cybersecurity awareness.",
            },
            {
                "level": 4,
                "name": "Regional Security Leader",
                "threshold": 1.00,
                "perk": "Strategic Stability",
                "benefit": "Advanced defense capabilities. Active peacekeeping contributions. "
                "Strong mutual defense alliances.",
            },
        ],
        "sub_services": [
            {"id": "military", "name": "Military", "default_share": 0.35, "min_share": 0.10},
            {"id": "police", "name": "Police", "default_share": 0.25, "min_share": 0.15},
            {"id": "fire", "name": "Fire Services", "default_share": 0.15, "min_share": 0.10},
            {"id": "cyber", "name": "Cyber-Security", "default_share": 0.15, "min_share": 0.05},
            {"id": "borders", "name": "Border Security", "default_share": 0.10, "min_share": 0.05},
        ],
    },
    {
        "id": "education",
        "name": "Education & Innovation",
        "description": "Schools, Universities, R&D Grants, Space Agencies, and Arts.",
        "min_allocation": 37_500_000_000,  # 7.5% of budget
        "max_allocation": 150_000_000_000,  # 30% of budget
        "tiers": [
            {
                "level": 1,
                "name": "Literacy",
                "threshold": 0.25,
                "perk": "School for All",
                "benefit": "Every child guaranteed a desk, books, and a teacher up to age 18.",
            },
            {
                "level": 2,
                "name": "Skilled Workforce",
                "threshold": 0.50,
                "perk": "Trade Mastery",
                "benefit": "Free vocational training for plumbers, coders, and electricians.",
            },
            {
                "level": 3,
                "name": "Knowledge Economy",
                "threshold": 0.75,
                "perk": "Tuition-Free University",
                "benefit": "Higher education is free. Zero student debt society.",
            },
            {
                "level": 4,
                "name": "Innovation Nation",
                "threshold": 1.00,
                "perk": "Global R&D Hub",
                "benefit": "Top 10 global university rankings. R&D spending at 3%+ GDP. "
                "Thriving startup ecosystem.",
            },
        ],
        "sub_services": [
            {"id": "schools", "name": "Schools", "default_share": 0.35, "min_share": 0.20},
            {"id": "universities", "name": "Universities", "default_share": 0.30, "min_share": 0.10},
            {"id": "research", "name": "R&D Grants", "default_share": 0.20, "min_share": 0.05},
            {"id": "space", "name": "Space Agencies", "default_share": 0.10, "min_share": 0.02},
            {"id": "arts", "name": "Arts & Culture", "default_share": 0.05, "min_share": 0.02},
        ],
    },
    {
        "id": "environment",
        "name": "Environment & Resources",
        "description": "Parks, Pollution Control, Green Energy, and Agriculture.",
        "min_allocation": 25_000_000_000,  # 5% of budget
        "max_allocation": 100_000_000_000,  # 20% of budget
        "tiers": [
            {
                "level": 1,
                "name": "Clean Up",
                "threshold": 0.25,
                "perk": "Breathable Air",
                "benefit": "Smog eliminated from cities. Industrial waste sites cleaned.",
            },
            {
                "level": 2,
                "name": "Preservation",
                "threshold": 0.50,
                "perk": "Rewilding",
                "benefit": "20% of national land designated as protected nature reserves.",
            },
            {
                "level": 3,
                "name": "The Transition",
                "threshold": 0.75,
                "perk": "100% Renewables",
                "benefit": "Grid runs on Wind/Solar/Nuclear only. Fossil fuels banned.",
            },
            {
                "level": 4,
                "name": "Carbon Neutral",
                "threshold": 1.00,
                "perk": "Net-Zero Achieved",
                "benefit": "Net-zero emissions reached. Climate adaptation infrastructure complete. "
                "Global environmental leadership.",
            },
        ],
        "sub_services": [
            {"id": "parks", "name": "Parks & Conservation", "default_share": 0.20, "min_share": 0.05},
            {"id": "pollution", "name": "Pollution Control", "default_share": 0.25, "min_share": 0.10},
            {"id": "energy", "name": "Green Energy", "default_share": 0.35, "min_share": 0.10},
            {"id": "agriculture", "name": "Agriculture", "default_share": 0.20, "min_share": 0.10},
        ],
    },
    {
        "id": "social",
        "name": "Social Protection",
        "description": "Pensions, Unemployment, Housing, and Childcare.",
        "min_allocation": 68_750_000_000,  # 13.75% of budget
        "max_allocation": 275_000_000_000,  # 55% of budget
        "tiers": [
            {
                "level": 1,
                "name": "Dignity",
                "threshold": 0.25,
                "perk": "Food Security",
                "benefit": "Food banks and emergency shelters available for the desperate.",
            },
            {
                "level": 2,
                "name": "Safety Net",
                "threshold": 0.50,
                "perk": "Living Wages",
                "benefit": "Unemployment benefits cover 80% of lost salary for 6 months.",
            },
            {
                "level": 3,
                "name": "Family First",
                "threshold": 0.75,
                "perk": "Free Childcare",
                "benefit": "State-funded daycare and 1 year paid parental leave.",
            },
            {
                "level": 4,
                "name": "Post-Scarcity",
                "threshold": 1.00,
                "perk": "Universal Basic Income",
                "benefit": "Every citizen receives a monthly stipend to cover basic needs.",
            },
        ],
        "sub_services": [
            {"id": "pensions", "name": "Pensions", "default_share": 0.45, "min_share": 0.20},
            {"id": "unemployment", "name": "Unemployment", "default_share": 0.20, "min_share": 0.10},
            {"id": "housing", "name": "Housing", "default_share": 0.20, "min_share": 0.10},
            {"id": "childcare", "name": "Childcare", "default_share": 0.15, "min_share": 0.05},
        ],
    },
    {
        "id": "governance",
        "name": "Governance & Diplomacy",
        "description": "Administration, Tax Collection, Foreign Aid, and Justice.",
        "min_allocation": 27_500_000_000,  # 5.5% of budget
        "max_allocation": 110_000_000_000,  # 22% of budget
        "tiers": [
            {
                "level": 1,
                "name": "Functionality",
                "threshold": 0.25,
                "perk": "Tax & Census",
                "benefit": "The government can collect funds and count votes accurately.",
            },
            {
                "level": 2,
                "name": "Efficiency",
                "threshold": 0.50,
                "perk": "Digital Bureaucracy",
                "benefit": "No paper forms. All permits and licenses handled via app instantly.",
            },
            {
                "level": 3,
                "name": "Global Aid",
                "threshold": 0.75,
                "perk": "Soft Power",
                "benefit": "Massive foreign aid budget increases global influence and trade.",
            },
            {
                "level": 4,
                "name": "Transparent Democracy",
                "threshold": 1.00,
                "perk": "Highest Trust",
                "benefit": "Open data government. Independent anti-corruption courts. "
                "Top global trust and transparency rankings.",
            },
        ],
        "sub_services": [
            {"id": "admin", "name": "Administration", "default_share": 0.30, "min_share": 0.15},
            {"id": "tax", "name": "Tax Collection", "default_share": 0.25, "min_share": 0.15},
            {"id": "foreign-aid", "name": "Foreign Aid", "default_share": 0.20, "min_share": 0.05},
            {"id": "justice", "name": "Justice System", "default_share": 0.25, "min_share": 0.10},
        ],
    },
]
